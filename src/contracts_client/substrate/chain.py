"""Chain client - call construction and contract state queries."""

from __future__ import annotations

import asyncio
import logging
from typing import Any

from substrateinterface import SubstrateInterface

from contracts_client.models.contract import AliveContract, ContractInfo, TombstoneContract

log = logging.getLogger(__name__)


def _to_bytes(value: Any) -> bytes:
    """Decode a trie id returned as hex string, int list or bytes."""
    if isinstance(value, (bytes, bytearray)):
        return bytes(value)
    if isinstance(value, str):
        return bytes.fromhex(value[2:] if value.startswith("0x") else value)
    if isinstance(value, (list, tuple)):
        if len(value) == 1 and isinstance(value[0], (list, tuple)):
            value = value[0]
        return bytes(value)
    raise TypeError(f"Unsupported trie_id encoding: {type(value).__name__}")


def parse_contract_info(value: Any) -> ContractInfo | None:
    """Decode ContractInfoOf into AliveContract / TombstoneContract.

    Handles both the enum layout ({"Alive": {...}} / {"Tombstone": h}) and
    the later plain struct that only exists for live contracts.
    """
    if not value:
        return None
    if "Tombstone" in value:
        return TombstoneContract(tombstone_hash=value["Tombstone"])
    alive = value.get("Alive", value)
    if "trie_id" not in alive:
        return None
    return AliveContract(
        trie_id=_to_bytes(alive["trie_id"]),
        code_hash=alive.get("code_hash"),
        storage_size=alive.get("storage_size"),
        rent_allowance=alive.get("rent_allowance"),
    )


class SubstrateChainClient:
    """Implements ChainClient on top of substrate-interface."""

    def __init__(self, substrate: SubstrateInterface) -> None:
        self._substrate = substrate

    async def compose_call(self, module: str, function: str, params: dict[str, Any]) -> Any:
        return await asyncio.to_thread(
            self._substrate.compose_call,
            call_module=module,
            call_function=function,
            call_params=params,
        )

    async def query_contract_info(self, address: str) -> ContractInfo | None:
        result = await asyncio.to_thread(
            self._substrate.query, "Contracts", "ContractInfoOf", [address],
        )
        value = result.value if result is not None else None
        info = parse_contract_info(value)
        log.debug("ContractInfoOf(%s) -> %s", address, type(info).__name__)
        return info

    async def get_child_storage(
        self,
        child_storage_key: str,
        child_info: str,
        child_type: int,
        key: str,
    ) -> str | None:
        response = await asyncio.to_thread(
            self._substrate.rpc_request,
            "state_getChildStorage",
            [child_storage_key, child_info, child_type, key],
        )
        return response.get("result") or None
