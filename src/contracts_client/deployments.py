"""deployments.json ledger - code hashes and addresses by contract name."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from contracts_client.errors import ConfigError

log = logging.getLogger(__name__)


def load_deployments(path: str | Path) -> dict[str, dict[str, Any]]:
    """Read the ledger; a missing file is an empty ledger."""
    p = Path(path).expanduser()
    if not p.exists():
        return {}
    with open(p) as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as exc:
            raise ConfigError(f"Invalid deployments ledger {p}: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigError(f"Invalid deployments ledger {p}: expected a JSON object")
    return data


def record_deployment(path: str | Path, name: str, **fields: Any) -> dict[str, Any]:
    """Merge fields into the entry for name and write the ledger back."""
    p = Path(path).expanduser()
    data = load_deployments(p)
    entry = data.setdefault(name, {})
    entry.update({k: v for k, v in fields.items() if v is not None})

    p.parent.mkdir(parents=True, exist_ok=True)
    with open(p, "w") as f:
        json.dump(data, f, indent=2, sort_keys=True)
        f.write("\n")
    log.info("Recorded deployment %s in %s", name, p)
    return entry


def resolve(path: str | Path, ref: str, field: str) -> str:
    """Return ledger[ref][field] when ref names a deployment, else ref itself."""
    entry = load_deployments(path).get(ref)
    if entry and entry.get(field):
        return entry[field]
    return ref
