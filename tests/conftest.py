"""Shared fixtures for contracts_client tests."""

from __future__ import annotations

import pytest

from contracts_client.operations import ContractOperations

from tests.mocks import MockChainClient, MockSubmitter

SIGNER = object()


@pytest.fixture
def signer():
    """Opaque signer; the mocks never inspect it."""
    return SIGNER


@pytest.fixture
def mock_chain():
    return MockChainClient()


@pytest.fixture
def mock_submitter():
    return MockSubmitter()


@pytest.fixture
def ops(mock_chain, mock_submitter):
    """ContractOperations wired to mocked collaborators."""
    return ContractOperations(mock_chain, mock_submitter)


@pytest.fixture
def wasm_file(tmp_path):
    """A small fake WASM blob on disk."""
    p = tmp_path / "flipper.wasm"
    p.write_bytes(b"\x00asm\x01\x00\x00\x00")
    return p
