"""Contract operations - store code, instantiate, call and read storage."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, NoReturn

from contracts_client.errors import (
    ContractNotAliveError,
    DeploymentError,
    InstantiationError,
    OperationFailedError,
)
from contracts_client.interfaces.chain import ChainClient
from contracts_client.interfaces.submitter import TransactionSubmitter
from contracts_client.models.contract import AliveContract
from contracts_client.models.events import FinalizedResult
from contracts_client.models.payloads import CallInput, DeployInput, InstantiateInput, to_hex
from contracts_client.storage_keys import (
    DEFAULT_CHILD_TYPE,
    child_info_from_trie_id,
    hash_storage_key,
)

log = logging.getLogger(__name__)

CONTRACTS_MODULE = "Contracts"

_FAILURE_ERRORS: dict[str, type[OperationFailedError]] = {
    "Deployment": DeploymentError,
    "Instantiation": InstantiationError,
}


def report_failure(operation: str, result: FinalizedResult) -> NoReturn:
    """Log the ExtrinsicFailed event if there is one, then raise.

    Raises regardless of whether ExtrinsicFailed was found: the missing
    success event is what makes the operation a failure.
    """
    failure = result.find_event("system", "ExtrinsicFailed")
    if failure is not None:
        log.error(
            "ExtrinsicFailed %s",
            json.dumps(failure.to_dict(), indent=2, default=str),
        )
    error_cls = _FAILURE_ERRORS.get(operation, OperationFailedError)
    raise error_cls(result=result, failure=failure, operation=operation)


class ContractOperations:
    """Stateless helpers over the contracts pallet.

    Every transaction goes through the shared TransactionSubmitter; the
    finalized event log decides success.
    """

    def __init__(self, chain: ChainClient, submitter: TransactionSubmitter) -> None:
        self._chain = chain
        self._submitter = submitter

    async def deploy_code(self, signer: Any, file_path: str | Path, gas_limit: int) -> str:
        """Upload a WASM blob and return its code hash."""
        code = Path(file_path).read_bytes()
        payload = DeployInput(code=code, gas_limit=gas_limit)
        log.info("Storing %d bytes of contract code from %s", len(code), file_path)

        call = await self._chain.compose_call(
            CONTRACTS_MODULE, "put_code", payload.call_params(),
        )
        result = await self._submitter.submit(signer, call)

        record = result.find_event("contracts", "CodeStored")
        if record is None:
            report_failure("Deployment", result)

        code_hash = record.field(0)
        log.info("Code stored (code_hash=%s)", code_hash)
        return code_hash

    async def instantiate(
        self,
        signer: Any,
        code_hash: str,
        input_data: bytes,
        endowment: int,
        gas_limit: int,
    ) -> str:
        """Create a contract from stored code and return its address."""
        payload = InstantiateInput(
            code_hash=code_hash,
            data=input_data,
            endowment=endowment,
            gas_limit=gas_limit,
        )
        log.info("Instantiating code %s (endowment=%d)", code_hash, endowment)

        call = await self._chain.compose_call(
            CONTRACTS_MODULE, "instantiate", payload.call_params(),
        )
        result = await self._submitter.submit(signer, call)

        record = result.find_event("contracts", "Instantiated")
        if record is None:
            report_failure("Instantiation", result)

        # Instantiated(deployer, contract)
        address = record.field(1)
        log.info("Contract instantiated at %s", address)
        return address

    async def call_contract(
        self,
        signer: Any,
        contract_address: str,
        input_data: bytes,
        gas_limit: int,
        endowment: int = 0,
    ) -> None:
        """Send a message to a contract and wait for finalization.

        Success is only what the submitter guarantees; the event log is
        not inspected.
        """
        payload = CallInput(
            dest=contract_address,
            data=input_data,
            gas_limit=gas_limit,
            value=endowment,
        )
        log.info("Calling contract %s (value=%d)", contract_address, endowment)

        call = await self._chain.compose_call(
            CONTRACTS_MODULE, "call", payload.call_params(),
        )
        await self._submitter.submit(signer, call)

    async def get_contract_storage(self, contract_address: str, storage_key: bytes) -> str | None:
        """Read the raw value stored under storage_key in a contract's child trie."""
        info = await self._chain.query_contract_info(contract_address)
        if info is None:
            raise ContractNotAliveError(contract_address, "absent")
        if not isinstance(info, AliveContract):
            raise ContractNotAliveError(contract_address, "tombstone")

        trie_id = info.trie_id
        child_info = child_info_from_trie_id(trie_id)
        hashed_key = hash_storage_key(storage_key)
        log.debug(
            "Reading child storage of %s (trie_id=%s, key=%s)",
            contract_address,
            trie_id.hex(),
            hashed_key,
        )

        return await self._chain.get_child_storage(
            to_hex(trie_id),
            to_hex(child_info),
            DEFAULT_CHILD_TYPE,
            hashed_key,
        )
