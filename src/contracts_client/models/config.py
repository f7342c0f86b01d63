"""Configuration models for the contracts client."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class GasConfig:
    """Default gas limits per contracts-pallet call."""

    put_code: int = 500_000_000_000
    instantiate: int = 500_000_000_000
    call: int = 200_000_000_000


@dataclass
class ClientConfig:
    """Complete client configuration."""

    # Node
    url: str = "ws://127.0.0.1:9944"
    ss58_format: int = 42
    type_registry_preset: str | None = None

    # Signer (one of the two; uri wins)
    signer_uri: str = ""  # e.g. //Alice, loaded from CONTRACTS_CLIENT_SIGNER_URI
    mnemonic: str = ""  # loaded from CONTRACTS_CLIENT_MNEMONIC

    # Gas
    gas: GasConfig = field(default_factory=GasConfig)

    # Deployments ledger
    deployments_path: str = "deployments.json"

    @property
    def has_signer(self) -> bool:
        return bool(self.signer_uri or self.mnemonic)
