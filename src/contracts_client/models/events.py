"""Finalized transaction results and the event records they carry."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Union


@dataclass(frozen=True)
class EventRecord:
    """A single event emitted while executing an extrinsic.

    ``data`` holds the event's fields in declaration order, e.g.
    ``(code_hash,)`` for ``Contracts.CodeStored`` or
    ``(deployer, contract)`` for ``Contracts.Instantiated``.
    """

    module: str
    name: str
    data: tuple[Any, ...] = ()

    def matches(self, module: str, name: str) -> bool:
        # Pallet names come back capitalised from the SDK ("Contracts")
        return (
            self.module.lower() == module.lower()
            and self.name.lower() == name.lower()
        )

    def field(self, index: int) -> Any:
        return self.data[index]

    def to_dict(self) -> dict[str, Any]:
        return {"module": self.module, "name": self.name, "data": list(self.data)}


@dataclass(frozen=True)
class _ResultBase:
    events: tuple[EventRecord, ...] = ()
    block_hash: str | None = None
    extrinsic_hash: str | None = None

    def find_event(self, module: str, name: str) -> EventRecord | None:
        """Return the first event matching (module, name), or None."""
        for event in self.events:
            if event.matches(module, name):
                return event
        return None


@dataclass(frozen=True)
class Finalized(_ResultBase):
    """The extrinsic was included in a finalized block."""


@dataclass(frozen=True)
class Rejected(_ResultBase):
    """The extrinsic finalized but the runtime reported a dispatch error."""

    reason: str = ""


FinalizedResult = Union[Finalized, Rejected]
