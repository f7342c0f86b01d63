"""Node connection and signer construction from ClientConfig."""

from __future__ import annotations

import logging

from substrateinterface import Keypair, SubstrateInterface

from contracts_client.errors import ConfigError
from contracts_client.models.config import ClientConfig

log = logging.getLogger(__name__)


def connect(cfg: ClientConfig) -> SubstrateInterface:
    """Open a connection to the configured node."""
    log.info("Connecting to %s", cfg.url)
    return SubstrateInterface(
        url=cfg.url,
        ss58_format=cfg.ss58_format,
        type_registry_preset=cfg.type_registry_preset,
    )


def load_signer(cfg: ClientConfig) -> Keypair:
    """Build the signing keypair from a secret URI or a mnemonic."""
    if cfg.signer_uri:
        return Keypair.create_from_uri(cfg.signer_uri, ss58_format=cfg.ss58_format)
    if cfg.mnemonic:
        return Keypair.create_from_mnemonic(cfg.mnemonic, ss58_format=cfg.ss58_format)
    raise ConfigError("No signer configured (set signer_uri or mnemonic)")
