"""TransactionSubmitter protocol - signs, submits and awaits finalization."""

from __future__ import annotations

from typing import Any, Protocol

from contracts_client.models.events import FinalizedResult


class TransactionSubmitter(Protocol):
    """Signs a call, submits it and resolves once it is finalized."""

    async def submit(self, signer: Any, call: Any) -> FinalizedResult:
        """Submit and wait. Raises SubmissionError if the node rejects it."""
        ...
