"""Data models for the contracts client."""

from contracts_client.models.events import EventRecord, Finalized, FinalizedResult, Rejected
from contracts_client.models.payloads import CallInput, DeployInput, InstantiateInput, to_hex
from contracts_client.models.contract import AliveContract, ContractInfo, TombstoneContract
from contracts_client.models.config import ClientConfig, GasConfig

__all__ = [
    "EventRecord", "Finalized", "FinalizedResult", "Rejected",
    "CallInput", "DeployInput", "InstantiateInput", "to_hex",
    "AliveContract", "ContractInfo", "TombstoneContract",
    "ClientConfig", "GasConfig",
]
