"""Paw wallet settings CLI.

This module provides a command-line interface to inspect and edit the
persisted client settings record, list the server catalog and look up
staking accounts.
"""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Final, NoReturn

import typer
import yaml

from pawsettings.config import ClientConfig
from pawsettings.errors import ConfigError, InvalidSettingError, ServerNotResolvedError
from pawsettings.i18n.locale import SystemLocaleResolver
from pawsettings.servers.catalog import SERVER_OPTIONS
from pawsettings.settings.service import AppSettingsService
from pawsettings.staking.api import StakingClient
from pawsettings.staking.errors import StakingAPIError
from pawsettings.storage.file import JsonFileStore

# ── CLI setup ────────────────────────────────────────────────────────────────
app = typer.Typer(help="Paw wallet settings CLI", add_completion=False)
config_app = typer.Typer(help="Config helpers")
app.add_typer(config_app, name="config")

logger: Final = logging.getLogger(__name__)  # Will be "pawsettings.cli"

CONFIG_OPTION = typer.Option(None, "--config", "-c", dir_okay=False, help="Client config YAML")
DEBUG_OPTION = typer.Option(False, "--debug", help="Enable debug logging")
KEY_ARGUMENT = typer.Argument(..., help="Setting name, e.g. displayCurrency")
VALUE_ARGUMENT = typer.Argument(..., help="New value; 'null' clears the setting")

# Literal accepted by `set` to store a null value
NULL_LITERAL: Final = "null"


@dataclass
class CliState:
    """Objects shared between commands of one invocation."""

    config: ClientConfig
    service: AppSettingsService


def _fail(message: str) -> NoReturn:
    typer.secho(message, fg=typer.colors.RED, err=True)
    raise typer.Exit(code=1)


def _state(ctx: typer.Context) -> CliState:
    return ctx.obj


def build_service(config: ClientConfig) -> AppSettingsService:
    """Create a settings service wired to the configured store and locales."""
    resolver = SystemLocaleResolver(config.available_languages, config.default_language)
    return AppSettingsService(
        JsonFileStore(config.store_path), resolver, store_key=config.store_key
    )


@app.callback()
def main(
    ctx: typer.Context,
    config: Path | None = CONFIG_OPTION,
    debug: bool = DEBUG_OPTION,
) -> None:
    """Load configuration and reconcile the stored settings."""
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(message)s",
    )
    if ctx.invoked_subcommand == "config":
        return

    try:
        client_config = ClientConfig.load(config)
    except ConfigError as exc:
        _fail(str(exc))

    service = build_service(client_config)
    service.load()
    ctx.obj = CliState(config=client_config, service=service)


@app.command()
def show(ctx: typer.Context) -> None:
    """Print the reconciled settings record as YAML."""
    record = _state(ctx).service.settings.to_record()
    typer.echo(yaml.safe_dump(record, sort_keys=False, allow_unicode=True).rstrip())


@app.command()
def get(ctx: typer.Context, key: str = KEY_ARGUMENT) -> None:
    """Print one setting (unset and falsy values print 'null')."""
    value = _state(ctx).service.get(key)
    typer.echo(NULL_LITERAL if value is None else str(value))


@app.command("set")
def set_(ctx: typer.Context, key: str = KEY_ARGUMENT, value: str = VALUE_ARGUMENT) -> None:
    """Change one setting and save it."""
    new_value: Any = None if value == NULL_LITERAL else value
    try:
        _state(ctx).service.set(key, new_value)
    except InvalidSettingError as exc:
        _fail(str(exc))
    typer.secho(f"{key} updated", fg=typer.colors.GREEN)


@app.command()
def clear(
    ctx: typer.Context,
    yes: bool = typer.Option(False, "--yes", "-y", help="Do not ask for confirmation"),
) -> None:
    """Remove the stored settings and reset to defaults."""
    if not yes:
        typer.confirm("Reset all settings to defaults?", abort=True)
    _state(ctx).service.clear()
    typer.secho("Settings cleared", fg=typer.colors.GREEN)


@app.command()
def servers(ctx: typer.Context) -> None:
    """List the server catalog, marking the active selection."""
    current = _state(ctx).service.settings
    for option in SERVER_OPTIONS:
        marker = "*" if option.value == current.server_name else " "
        random_flag = " [random pool]" if option.should_random else ""
        typer.echo(f"{marker} {option.value:<8} {option.name:<18} {option.api or '-'}{random_flag}")
    if current.server_name in ("random", "custom"):
        typer.echo(f"Active endpoint: {current.server_api or '-'} / {current.server_ws or '-'}")


@app.command("base-url")
def base_url(ctx: typer.Context) -> None:
    """Print the origin of the resolved server API."""
    try:
        typer.echo(_state(ctx).service.base_url())
    except ServerNotResolvedError as exc:
        _fail(str(exc))


@app.command()
def staking(ctx: typer.Context, address: str = typer.Argument(..., help="Wallet address")) -> None:
    """List the staking accounts registered for an address."""
    config = _state(ctx).config
    client = StakingClient(config.staking_url, timeout=config.request_timeout)
    try:
        accounts = client.find_staking_addresses(address)
    except StakingAPIError as exc:
        _fail(f"Staking lookup failed: {exc}")

    if not accounts:
        typer.echo("No staking accounts")
    for account in accounts:
        typer.echo(account)


# ───────────────────────── config sub-commands ───────────────────────────────
@config_app.command("validate")
def validate_config(file: Path):
    """Validate a YAML config file against the schema."""
    try:
        ClientConfig.load(file)
        typer.echo("✅ Config valid")
    except ConfigError as exc:
        typer.secho(str(exc), fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1) from exc


# ───────────────────────── module entrypoint ────────────────────────────────
if __name__ == "__main__":
    try:
        app()
    except KeyboardInterrupt:
        sys.exit(0)
