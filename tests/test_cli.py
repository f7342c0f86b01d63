"""CLI commands wired to mocked collaborators."""

from __future__ import annotations

import json

import pytest
from click.testing import CliRunner

from contracts_client import cli as cli_module
from contracts_client.operations import ContractOperations
from tests.factories import (
    CONTRACT,
    make_alive_contract,
    make_code_stored,
    make_finalized,
    make_instantiated,
)
from tests.mocks import MockChainClient, MockSubmitter

SIGNER = object()


@pytest.fixture
def ledger(tmp_path, monkeypatch):
    path = tmp_path / "deployments.json"
    monkeypatch.setenv("CONTRACTS_CLIENT_DEPLOYMENTS_PATH", str(path))
    monkeypatch.setenv("CONTRACTS_CLIENT_SIGNER_URI", "//Alice")
    monkeypatch.delenv("CONTRACTS_CLIENT_GAS_LIMIT", raising=False)
    return path


class FakeConnection:
    """Stands in for SubstrateInterface; only tracks close()."""

    def __init__(self) -> None:
        self.closed = False

    def close(self) -> None:
        self.closed = True


@pytest.fixture
def connections(monkeypatch):
    opened: list[FakeConnection] = []

    def _connect(cfg):
        conn = FakeConnection()
        opened.append(conn)
        return conn

    monkeypatch.setattr(cli_module, "connect", _connect)
    return opened


@pytest.fixture
def wired(monkeypatch, connections):
    """Route the CLI to mock collaborators instead of a live node."""
    chain = MockChainClient()
    submitter = MockSubmitter()
    monkeypatch.setattr(
        cli_module, "_operations", lambda substrate: ContractOperations(chain, submitter),
    )
    monkeypatch.setattr(cli_module, "load_signer", lambda cfg: SIGNER)
    return chain, submitter


def test_status_masks_signer(ledger):
    result = CliRunner().invoke(cli_module.cli, ["status"])

    assert result.exit_code == 0
    assert "***configured***" in result.output
    assert "//Alice" not in result.output


def test_deploy_records_code_hash(ledger, wired, wasm_file):
    _, submitter = wired
    submitter.result = make_finalized(make_code_stored("0xabcd"))

    result = CliRunner().invoke(cli_module.cli, ["deploy", str(wasm_file)])

    assert result.exit_code == 0, result.output
    assert "Code hash: 0xabcd" in result.output
    assert json.loads(ledger.read_text()) == {"flipper": {"code_hash": "0xabcd"}}


def test_deploy_failure_exits_nonzero(ledger, wired, wasm_file):
    result = CliRunner().invoke(cli_module.cli, ["deploy", str(wasm_file)])

    assert result.exit_code == 1
    assert "Deployment failed." in result.output
    assert not ledger.exists()


def test_deploy_requires_signer(ledger, wired, wasm_file, monkeypatch):
    monkeypatch.delenv("CONTRACTS_CLIENT_SIGNER_URI")
    monkeypatch.delenv("CONTRACTS_CLIENT_MNEMONIC", raising=False)

    result = CliRunner().invoke(cli_module.cli, ["deploy", str(wasm_file)])

    assert result.exit_code == 1
    assert "No signer configured" in result.output


def test_instantiate_by_ledger_name(ledger, wired):
    chain, submitter = wired
    ledger.write_text(json.dumps({"flipper": {"code_hash": "0xabcd"}}))
    submitter.result = make_finalized(make_instantiated(contract=CONTRACT))

    result = CliRunner().invoke(
        cli_module.cli, ["instantiate", "flipper", "--data", "0x9bae9d5e", "--endowment", "5"],
    )

    assert result.exit_code == 0, result.output
    assert f"Contract address: {CONTRACT}" in result.output
    params = chain.composed[0][2]
    assert params["code_hash"] == "0xabcd"
    assert params["data"] == "0x9bae9d5e"
    assert params["endowment"] == 5
    assert json.loads(ledger.read_text())["flipper"]["address"] == CONTRACT


def test_call_by_ledger_name(ledger, wired):
    chain, _ = wired
    ledger.write_text(json.dumps({"flipper": {"address": CONTRACT}}))

    result = CliRunner().invoke(cli_module.cli, ["call", "flipper", "--data", "633aa551", "--gas", "9"])

    assert result.exit_code == 0, result.output
    assert chain.composed[0][2] == {"dest": CONTRACT, "value": 0, "gas_limit": 9, "data": "0x633aa551"}


def test_call_rejects_bad_hex(ledger, wired):
    result = CliRunner().invoke(cli_module.cli, ["call", CONTRACT, "--data", "zz"])

    assert result.exit_code == 2
    assert "not a hex string" in result.output


def test_storage_prints_value(ledger, wired):
    chain, _ = wired
    chain.contract_info = make_alive_contract()
    chain.get_child_storage = _returning("0x01")

    result = CliRunner().invoke(cli_module.cli, ["storage", CONTRACT, "0x00"])

    assert result.exit_code == 0, result.output
    assert "0x01" in result.output


def test_storage_not_alive_exits_nonzero(ledger, wired):
    result = CliRunner().invoke(cli_module.cli, ["storage", CONTRACT, "0x00"])

    assert result.exit_code == 1
    assert "not alive" in result.output


def _returning(value):
    async def _get_child_storage(*args):
        return value
    return _get_child_storage


# ── Bad input and ledger errors ───────────────────────────────────


def test_instantiate_unknown_name_reports_error(ledger, wired, connections):
    """A name missing from the ledger is not hex: clean error, no connection."""
    chain, _ = wired

    result = CliRunner().invoke(cli_module.cli, ["instantiate", "flipper"])

    assert result.exit_code == 1
    assert "Error: unknown contract name or bad hex: flipper" in result.output
    assert not isinstance(result.exception, ValueError)
    assert connections == []
    assert chain.composed == []


@pytest.mark.parametrize("args", [
    ["instantiate", "flipper"],
    ["call", "flipper", "--data", "00"],
    ["storage", "flipper", "00"],
])
def test_corrupt_ledger_reports_error(ledger, wired, args):
    ledger.write_text("{not json")

    result = CliRunner().invoke(cli_module.cli, args)

    assert result.exit_code == 1
    assert "Error: Invalid deployments ledger" in result.output


def test_invalid_config_reports_error(ledger, wired, tmp_path):
    broken = tmp_path / "broken.toml"
    broken.write_text("[node\nurl = ")

    result = CliRunner().invoke(cli_module.cli, ["-c", str(broken), "status"])

    assert result.exit_code == 1
    assert "Error: Invalid config file" in result.output


# ── Connection lifecycle ──────────────────────────────────────────


def test_connection_closed_after_success(ledger, wired, connections):
    result = CliRunner().invoke(cli_module.cli, ["call", CONTRACT, "--data", "00"])

    assert result.exit_code == 0, result.output
    assert len(connections) == 1
    assert connections[0].closed


def test_connection_closed_after_failure(ledger, wired, connections):
    result = CliRunner().invoke(cli_module.cli, ["storage", CONTRACT, "0x00"])

    assert result.exit_code == 1
    assert len(connections) == 1
    assert connections[0].closed
