"""Exceptions raised by contract operations."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from contracts_client.models.events import EventRecord, FinalizedResult


class ContractsClientError(Exception):
    """Base class for all contracts_client errors."""


class ConfigError(ContractsClientError):
    """Configuration is missing or invalid."""


class PayloadError(ContractsClientError, ValueError):
    """A payload field is not valid hex."""


class SubmissionError(ContractsClientError):
    """The node rejected the extrinsic or the SDK failed to submit it."""


class OperationFailedError(ContractsClientError):
    """A transaction finalized without its expected success event."""

    operation = "Operation"

    def __init__(
        self,
        result: FinalizedResult | None = None,
        failure: EventRecord | None = None,
        operation: str | None = None,
    ) -> None:
        if operation is not None:
            self.operation = operation
        self.result = result
        self.failure = failure
        super().__init__(f"{self.operation} failed.")


class DeploymentError(OperationFailedError):
    """``put_code`` finalized but no ``CodeStored`` event was emitted."""

    operation = "Deployment"


class InstantiationError(OperationFailedError):
    """``instantiate`` finalized but no ``Instantiated`` event was emitted."""

    operation = "Instantiation"


class ContractNotAliveError(ContractsClientError):
    """No alive contract exists at the given address."""

    def __init__(self, address: str, state: str = "absent") -> None:
        self.address = address
        self.state = state
        super().__init__(f"Contract {address} is not alive ({state})")
