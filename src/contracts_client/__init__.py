"""contracts_client - deploy, instantiate, call and inspect WASM contracts."""

from contracts_client.errors import (
    ConfigError,
    ContractNotAliveError,
    ContractsClientError,
    DeploymentError,
    InstantiationError,
    OperationFailedError,
    PayloadError,
    SubmissionError,
)
from contracts_client.operations import ContractOperations, report_failure

__version__ = "0.1.0"

__all__ = [
    "ContractOperations", "report_failure",
    "ContractsClientError", "ConfigError", "PayloadError", "SubmissionError",
    "OperationFailedError", "DeploymentError", "InstantiationError",
    "ContractNotAliveError",
]
