"""Protocol interfaces for the contracts client collaborators."""

from contracts_client.interfaces.chain import ChainClient
from contracts_client.interfaces.submitter import TransactionSubmitter

__all__ = ["ChainClient", "TransactionSubmitter"]
