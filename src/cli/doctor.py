"""Doctor command for environment diagnostics."""

from __future__ import annotations

import asyncio

import typer
from rich.console import Console
from rich.table import Table

from adapters.http_client import HttpxRequester
from core.config import AppSettings, get_user_env_file, write_user_env_vars
from core.services.deposit import build_deposit_request

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


async def _check_deposit_endpoint(settings: AppSettings) -> tuple[bool, str]:
    response = await HttpxRequester(settings).request(build_deposit_request(settings))
    if response.error:
        return False, response.message or response.code or "request failed"
    return True, f"HTTP {response.status}"


@app.command()
def run() -> None:
    """Run baseline diagnostics and show recommended fixes."""

    settings = AppSettings()

    table = Table(title="deposit-callback Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    table.add_row("Deposit URL", "OK", settings.deposit_url)
    table.add_row("Timeout", "OK", f"{settings.http_timeout_seconds:g}s (max {settings.http_max_timeout_seconds:g}s)")
    user_env = get_user_env_file()
    table.add_row("User config", "OK" if user_env.exists() else "OPTIONAL", str(user_env))

    # Connectivity: one POST, same as the callback sends.
    ok_http, detail_http = asyncio.run(_check_deposit_endpoint(settings))
    table.add_row("Deposit endpoint", "OK" if ok_http else "FAIL", detail_http)

    _console.print(table)

    if not ok_http:
        _console.print(
            "\n[yellow]Note:[/yellow] `simulate` will fail with 'Failed To deposit' until the endpoint responds."
        )


@app.command(name="setup")
def setup() -> None:
    """Interactive setup (stores config in the user config .env)."""

    settings = AppSettings()
    url = typer.prompt("Deposit URL", default=settings.deposit_url, show_default=True).strip()
    timeout = typer.prompt(
        f"Request timeout (seconds, max {settings.http_max_timeout_seconds:g})",
        default=settings.http_timeout_seconds,
        type=float,
        show_default=True,
    )

    if not url.startswith(("http://", "https://")):
        raise typer.BadParameter("Deposit URL must start with http:// or https://")
    if timeout <= 0:
        raise typer.BadParameter("Timeout must be positive")
    if timeout > settings.http_max_timeout_seconds:
        raise typer.BadParameter(f"Timeout cannot exceed {settings.http_max_timeout_seconds:g}s")

    env_path = write_user_env_vars(
        {
            "DEPOSIT_CB_DEPOSIT_URL": url,
            "DEPOSIT_CB_HTTP_TIMEOUT_SECONDS": f"{timeout:g}",
        }
    )

    _console.print(f"[green]Saved config to:[/green] {env_path}")
