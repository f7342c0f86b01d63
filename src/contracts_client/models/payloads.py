"""Typed transaction payloads for the contracts pallet.

``code`` and ``data`` are opaque byte strings that must already be in the
chain's SCALE encoding (a compiled WASM blob, or a selector followed by
encoded arguments). They travel to the node as ``0x``-prefixed hex.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from contracts_client.errors import PayloadError


def to_hex(value: bytes | str) -> str:
    """Render bytes as 0x-prefixed hex; hex strings pass through normalised."""
    if isinstance(value, (bytes, bytearray)):
        return "0x" + bytes(value).hex()
    text = value.lower()
    if not text.startswith("0x"):
        text = "0x" + text
    try:
        bytes.fromhex(text[2:])
    except ValueError:
        raise PayloadError(f"not a hex string: {value}") from None
    return text


@dataclass(frozen=True)
class DeployInput:
    """Arguments for ``Contracts.put_code``."""

    code: bytes
    gas_limit: int

    def call_params(self) -> dict[str, Any]:
        return {"gas_limit": self.gas_limit, "code": to_hex(self.code)}


@dataclass(frozen=True)
class InstantiateInput:
    """Arguments for ``Contracts.instantiate``."""

    code_hash: str
    data: bytes
    endowment: int
    gas_limit: int

    def call_params(self) -> dict[str, Any]:
        return {
            "endowment": self.endowment,
            "gas_limit": self.gas_limit,
            "code_hash": to_hex(self.code_hash),
            "data": to_hex(self.data),
        }


@dataclass(frozen=True)
class CallInput:
    """Arguments for ``Contracts.call``."""

    dest: str  # SS58 address
    data: bytes
    gas_limit: int
    value: int = 0

    def call_params(self) -> dict[str, Any]:
        return {
            "dest": self.dest,
            "value": self.value,
            "gas_limit": self.gas_limit,
            "data": to_hex(self.data),
        }
