"""CLI entry point for contracts_client."""

from __future__ import annotations

import asyncio
import logging
import sys
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Awaitable, Callable

import click

from contracts_client.config import load_config
from contracts_client.deployments import record_deployment, resolve
from contracts_client.errors import ContractsClientError, PayloadError
from contracts_client.models.config import ClientConfig
from contracts_client.models.payloads import to_hex
from contracts_client.operations import ContractOperations
from contracts_client.substrate import (
    SubstrateChainClient,
    SubstrateTransactionSubmitter,
    connect,
    load_signer,
)


def _require_signer(cfg: ClientConfig) -> None:
    """Exit with error if no signer is configured."""
    if not cfg.has_signer:
        click.echo("Error: No signer configured.", err=True)
        click.echo("Set CONTRACTS_CLIENT_SIGNER_URI or [signer] uri in config.", err=True)
        sys.exit(1)


def _hex_bytes(value: str) -> bytes:
    text = value[2:] if value.startswith("0x") else value
    try:
        return bytes.fromhex(text)
    except ValueError:
        raise click.BadParameter(f"not a hex string: {value}")


def _operations(substrate: Any) -> ContractOperations:
    return ContractOperations(
        SubstrateChainClient(substrate),
        SubstrateTransactionSubmitter(substrate),
    )


def _require_code_hash(ref: str, resolved: str) -> str:
    """A code hash must be hex once ledger names are resolved."""
    try:
        return to_hex(resolved)
    except PayloadError:
        raise PayloadError(f"unknown contract name or bad hex: {ref}") from None


@contextmanager
def _client_errors():
    """Turn client errors into an Error: line and exit 1."""
    try:
        yield
    except ContractsClientError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)


def _load(ctx: click.Context) -> ClientConfig:
    with _client_errors():
        return load_config(ctx.obj["config_path"])


def _run(cfg: ClientConfig, action: Callable[[ContractOperations], Awaitable[Any]]) -> Any:
    """Connect, run one operation on a fresh event loop, always disconnect."""
    substrate = connect(cfg)
    try:
        return asyncio.run(action(_operations(substrate)))
    finally:
        substrate.close()


@click.group()
@click.option("-c", "--config", "config_path", default=None, help="Path to config TOML file")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, config_path: str | None, verbose: bool) -> None:
    """contracts-client - deploy and drive WASM contracts on a Substrate node."""
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config_path
    ctx.obj["verbose"] = verbose

    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


# ── Info ───────────────────────────────────────────────


@cli.command()
@click.pass_context
def status(ctx: click.Context) -> None:
    """Show client configuration."""
    cfg = _load(ctx)
    click.echo(f"Node URL:     {cfg.url}")
    click.echo(f"SS58 format:  {cfg.ss58_format}")
    click.echo(f"Registry:     {cfg.type_registry_preset or '(node metadata)'}")
    click.echo(f"Gas put_code: {cfg.gas.put_code}")
    click.echo(f"Gas instant.: {cfg.gas.instantiate}")
    click.echo(f"Gas call:     {cfg.gas.call}")
    click.echo(f"Deployments:  {cfg.deployments_path}")
    click.echo(f"Signer:       {'***configured***' if cfg.has_signer else '(not set)'}")


# ── Transactions ───────────────────────────────────────


@cli.command()
@click.argument("wasm", type=click.Path(exists=True, dir_okay=False))
@click.option("--name", default=None, help="Ledger name (defaults to the file stem)")
@click.option("--gas", type=int, default=None, help="Gas limit for put_code")
@click.pass_context
def deploy(ctx: click.Context, wasm: str, name: str | None, gas: int | None) -> None:
    """Upload contract code and print its code hash."""
    cfg = _load(ctx)
    _require_signer(cfg)

    with _client_errors():
        signer = load_signer(cfg)
        code_hash = _run(
            cfg, lambda ops: ops.deploy_code(signer, wasm, gas or cfg.gas.put_code),
        )
        record_deployment(cfg.deployments_path, name or Path(wasm).stem, code_hash=code_hash)
    click.echo(f"Code hash: {code_hash}")


@cli.command()
@click.argument("code_hash")
@click.option("--data", default="", help="Constructor input (hex, SCALE-encoded)")
@click.option("--endowment", type=int, default=0, help="Balance transferred to the contract")
@click.option("--gas", type=int, default=None, help="Gas limit for instantiate")
@click.option("--name", default=None, help="Ledger name to record the address under")
@click.pass_context
def instantiate(
    ctx: click.Context,
    code_hash: str,
    data: str,
    endowment: int,
    gas: int | None,
    name: str | None,
) -> None:
    """Instantiate stored code (by hash or ledger name) and print the address."""
    cfg = _load(ctx)
    _require_signer(cfg)
    input_data = _hex_bytes(data)

    with _client_errors():
        resolved = resolve(cfg.deployments_path, code_hash, "code_hash")
        _require_code_hash(code_hash, resolved)
        signer = load_signer(cfg)
        address = _run(cfg, lambda ops: ops.instantiate(
            signer, resolved, input_data, endowment, gas or cfg.gas.instantiate,
        ))
        ledger_name = name or (code_hash if code_hash != resolved else None)
        if ledger_name:
            record_deployment(
                cfg.deployments_path, ledger_name, code_hash=resolved, address=address,
            )
    click.echo(f"Contract address: {address}")


@cli.command()
@click.argument("address")
@click.option("--data", required=True, help="Message input (hex, SCALE-encoded)")
@click.option("--value", type=int, default=0, help="Balance transferred with the call")
@click.option("--gas", type=int, default=None, help="Gas limit for call")
@click.pass_context
def call(ctx: click.Context, address: str, data: str, value: int, gas: int | None) -> None:
    """Call a contract (by address or ledger name)."""
    cfg = _load(ctx)
    _require_signer(cfg)
    input_data = _hex_bytes(data)

    with _client_errors():
        resolved = resolve(cfg.deployments_path, address, "address")
        signer = load_signer(cfg)
        _run(cfg, lambda ops: ops.call_contract(
            signer, resolved, input_data, gas or cfg.gas.call, value,
        ))
    click.echo(f"Call to {resolved} finalized")


# ── Queries ────────────────────────────────────────────


@cli.command()
@click.argument("address")
@click.argument("key")
@click.pass_context
def storage(ctx: click.Context, address: str, key: str) -> None:
    """Read a raw storage value from a contract's child trie."""
    cfg = _load(ctx)
    storage_key = _hex_bytes(key)

    with _client_errors():
        resolved = resolve(cfg.deployments_path, address, "address")
        value = _run(cfg, lambda ops: ops.get_contract_storage(resolved, storage_key))
    click.echo(value if value is not None else "(empty)")


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
