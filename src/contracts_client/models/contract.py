"""On-chain contract metadata as returned by ``Contracts.ContractInfoOf``."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class AliveContract:
    """A live contract with its own child trie."""

    trie_id: bytes
    code_hash: str | None = None
    storage_size: int | None = None
    rent_allowance: int | None = None


@dataclass(frozen=True)
class TombstoneContract:
    """An evicted contract; only a hash of its former state remains."""

    tombstone_hash: str | None = None


ContractInfo = Union[AliveContract, TombstoneContract]
