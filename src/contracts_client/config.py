"""Configuration loading: TOML file + environment variables."""

from __future__ import annotations

import os
from pathlib import Path

try:
    import tomllib  # Python 3.11+
except ModuleNotFoundError:
    import tomli as tomllib  # type: ignore[no-redef]

from contracts_client.errors import ConfigError
from contracts_client.models.config import ClientConfig, GasConfig


def load_config(
    config_path: str | Path | None = None,
    env_prefix: str = "CONTRACTS_CLIENT_",
) -> ClientConfig:
    """Load client configuration from a TOML file and env vars.

    Priority (highest wins):
        1. Environment variables (CONTRACTS_CLIENT_SIGNER_URI, etc.)
        2. TOML config file
        3. Defaults from ClientConfig
    """
    raw: dict = {}
    if config_path is not None:
        p = Path(config_path).expanduser()
        if p.exists():
            with open(p, "rb") as f:
                try:
                    raw = tomllib.load(f)
                except tomllib.TOMLDecodeError as exc:
                    raise ConfigError(f"Invalid config file {p}: {exc}") from exc

    cfg = ClientConfig()

    # ── Node section ───────────────────────────────────────
    node = raw.get("node", {})
    if v := node.get("url"):
        cfg.url = str(v)
    if (v := node.get("ss58_format")) is not None:
        cfg.ss58_format = int(v)
    if v := node.get("type_registry_preset"):
        cfg.type_registry_preset = str(v)

    # ── Signer section ─────────────────────────────────────
    signer = raw.get("signer", {})
    if v := signer.get("uri"):
        cfg.signer_uri = str(v)
    if v := signer.get("mnemonic"):
        cfg.mnemonic = str(v)

    # ── Gas section ────────────────────────────────────────
    gas = raw.get("gas", {})
    defaults = GasConfig()
    cfg.gas = GasConfig(
        put_code=int(gas.get("put_code", defaults.put_code)),
        instantiate=int(gas.get("instantiate", defaults.instantiate)),
        call=int(gas.get("call", defaults.call)),
    )

    # ── Deployments section ────────────────────────────────
    deployments = raw.get("deployments", {})
    if v := deployments.get("path"):
        cfg.deployments_path = str(v)

    # ── Environment variable overrides (highest priority) ──
    if url := os.environ.get(f"{env_prefix}URL"):
        cfg.url = url
    if uri := os.environ.get(f"{env_prefix}SIGNER_URI"):
        cfg.signer_uri = uri
    if mnemonic := os.environ.get(f"{env_prefix}MNEMONIC"):
        cfg.mnemonic = mnemonic
    if gas_env := os.environ.get(f"{env_prefix}GAS_LIMIT"):
        try:
            limit = int(gas_env)
        except ValueError as exc:
            raise ConfigError(f"{env_prefix}GAS_LIMIT must be an integer") from exc
        cfg.gas = GasConfig(put_code=limit, instantiate=limit, call=limit)
    if path := os.environ.get(f"{env_prefix}DEPLOYMENTS_PATH"):
        cfg.deployments_path = path

    # Expand ~ in paths
    cfg.deployments_path = str(Path(cfg.deployments_path).expanduser())

    return cfg
