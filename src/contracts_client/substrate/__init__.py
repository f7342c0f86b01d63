"""Substrate integration components."""

from contracts_client.substrate.chain import SubstrateChainClient
from contracts_client.substrate.connection import connect, load_signer
from contracts_client.substrate.submitter import SubstrateTransactionSubmitter

__all__ = ["SubstrateChainClient", "SubstrateTransactionSubmitter", "connect", "load_signer"]
