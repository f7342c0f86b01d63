"""ChainClient protocol - builds calls and queries state on a node."""

from __future__ import annotations

from typing import Any, Protocol

from contracts_client.models.contract import ContractInfo


class ChainClient(Protocol):
    """Transaction construction and state queries against a remote node."""

    async def compose_call(
        self, module: str, function: str, params: dict[str, Any],
    ) -> Any:
        """Build an unsigned call object for module.function(params)."""
        ...

    async def query_contract_info(self, address: str) -> ContractInfo | None:
        """Fetch ContractInfoOf(address); None if no contract is stored there."""
        ...

    async def get_child_storage(
        self,
        child_storage_key: str,
        child_info: str,
        child_type: int,
        key: str,
    ) -> str | None:
        """Read one raw value from a child trie; None if empty."""
        ...
