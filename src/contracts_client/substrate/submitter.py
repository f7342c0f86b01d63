"""Extrinsic submitter - signs, submits and waits for finalization."""

from __future__ import annotations

import asyncio
import logging
from typing import Any

from substrateinterface import Keypair, SubstrateInterface
from substrateinterface.exceptions import SubstrateRequestException

from contracts_client.errors import SubmissionError
from contracts_client.models.events import EventRecord, Finalized, FinalizedResult, Rejected

log = logging.getLogger(__name__)


def _is_typed_field(value: Any) -> bool:
    return isinstance(value, dict) and set(value) >= {"type", "value"}


def _event_data(attributes: Any) -> tuple[Any, ...]:
    """Flatten decoded event attributes into positional fields."""
    if attributes is None:
        return ()
    if isinstance(attributes, dict):
        return tuple(attributes.values())
    if isinstance(attributes, tuple):
        # Several unnamed fields
        return attributes
    if isinstance(attributes, list) and attributes and all(map(_is_typed_field, attributes)):
        # Older metadata decodes each field as {"type": ..., "value": ...}
        return tuple(a["value"] for a in attributes)
    # A single field, which may itself be a list (e.g. Vec<AccountId>)
    return (attributes,)


def parse_event(raw: Any) -> EventRecord:
    """Convert one entry of ExtrinsicReceipt.triggered_events."""
    value = raw.value if hasattr(raw, "value") else raw
    event = value.get("event", value)
    return EventRecord(
        module=str(event.get("module_id", "")),
        name=str(event.get("event_id", "")),
        data=_event_data(event.get("attributes")),
    )


class SubstrateTransactionSubmitter:
    """Implements TransactionSubmitter on top of substrate-interface.

    The SDK is synchronous; each submission runs in a worker thread so
    callers suspend instead of blocking the loop.
    """

    def __init__(self, substrate: SubstrateInterface) -> None:
        self._substrate = substrate

    async def submit(self, signer: Keypair, call: Any) -> FinalizedResult:
        return await asyncio.to_thread(self._submit_sync, signer, call)

    def _submit_sync(self, signer: Keypair, call: Any) -> FinalizedResult:
        try:
            extrinsic = self._substrate.create_signed_extrinsic(call=call, keypair=signer)
            receipt = self._substrate.submit_extrinsic(
                extrinsic, wait_for_finalization=True,
            )
            events = tuple(parse_event(e) for e in receipt.triggered_events)
        except SubstrateRequestException as exc:
            log.error("Extrinsic submission failed: %s", exc)
            raise SubmissionError(str(exc)) from exc

        log.info(
            "Extrinsic %s finalized in block %s (%d events)",
            receipt.extrinsic_hash,
            receipt.block_hash,
            len(events),
        )

        if receipt.is_success:
            return Finalized(
                events=events,
                block_hash=receipt.block_hash,
                extrinsic_hash=receipt.extrinsic_hash,
            )

        reason = str(receipt.error_message) if receipt.error_message else "dispatch error"
        log.warning("Extrinsic %s failed: %s", receipt.extrinsic_hash, reason)
        return Rejected(
            events=events,
            block_hash=receipt.block_hash,
            extrinsic_hash=receipt.extrinsic_hash,
            reason=reason,
        )
