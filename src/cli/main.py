"""deposit-callback CLI (Typer).

Commands:
- `simulate`: run the deposit callback locally against the configured endpoint.
- `encode`: show the uint256/int256 word for a value.
- `doctor`: diagnostics and interactive setup.
"""

from __future__ import annotations

import asyncio
import json
import logging
from pathlib import Path
from typing import List, Optional

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler

from adapters.http_client import HttpxRequester
from adapters.json_exporter import export_invocation_json
from cli import doctor
from cli.ui_components import build_outcome_table, print_banner
from core.config import AppSettings
from core.domain.encoding import encode_int256, encode_uint256
from core.domain.errors import DepositError, EncodingError
from core.services.deposit import execute_deposit

app = typer.Typer(no_args_is_help=True, help="Deposit mint callback: simulate and inspect.")
app.add_typer(doctor.app, name="doctor")

_console = Console()
_err_console = Console(stderr=True)


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(message)s",
        handlers=[RichHandler(console=_err_console, show_path=False)],
        force=True,
    )


@app.command()
def simulate(
    arguments: List[str] = typer.Argument(
        ...,
        metavar="CHAIN_ID INPUT_TOKEN INPUT_TOKEN_AMOUNT OUTPUT_CTF",
        help="Positional callback arguments (extra values are ignored).",
    ),
    url: Optional[str] = typer.Option(None, "--url", help="Override the deposit endpoint."),
    as_json: bool = typer.Option(False, "--json", help="Print the invocation record as JSON."),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Write the record to a JSON file."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging."),
) -> None:
    """Run the callback once and print the encoded mint amount."""

    try:
        settings = AppSettings(deposit_url=url) if url else AppSettings()
    except ValidationError as exc:
        raise typer.BadParameter(str(exc), param_hint="--url" if url else None) from exc
    _configure_logging("DEBUG" if verbose else settings.log_level)

    try:
        outcome = asyncio.run(
            execute_deposit(arguments, settings=settings, requester=HttpxRequester(settings))
        )
    except DepositError as exc:
        _err_console.print(f"[red]Error:[/red] {exc}")
        raise typer.Exit(code=1) from exc

    record = outcome.to_record()
    if output is not None:
        export_invocation_json(record=record, output_path=output)

    if as_json:
        typer.echo(json.dumps(record.model_dump(mode="json"), indent=2, sort_keys=True))
        return

    print_banner(_console)
    _console.print(build_outcome_table(outcome))
    if output is not None:
        _console.print(f"[green]Saved record to:[/green] {output}")


@app.command()
def encode(
    value: str = typer.Argument(..., help="Integer value (decimal or 0x-prefixed hex)."),
    signed: bool = typer.Option(False, "--signed", help="Encode as int256 instead of uint256."),
) -> None:
    """Print the 32-byte word for VALUE as hex."""

    try:
        number = int(value, 0)
    except ValueError as exc:
        raise typer.BadParameter(f"Not an integer: {value}") from exc

    try:
        word = encode_int256(number) if signed else encode_uint256(number)
    except EncodingError as exc:
        raise typer.BadParameter(str(exc)) from exc

    typer.echo("0x" + word.hex())


def run() -> None:
    app()
