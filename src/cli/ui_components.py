"""CLI UI components (Rich).

Why separate components:
- Keeps command logic apart from visual details.
"""

from __future__ import annotations

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.domain.encoding import decode_uint256
from core.services.deposit import DepositOutcome


def print_banner(console: Console) -> None:
    """Print the welcome banner (skipped in --json mode)."""

    title = Text("deposit-callback", style="bold cyan")
    subtitle = Text("Deposit • Mint • uint256", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def build_outcome_table(outcome: DepositOutcome) -> Table:
    table = Table(title="Deposit Callback")
    table.add_column("Field", style="cyan", no_wrap=True)
    table.add_column("Value", style="white", overflow="fold")

    args = outcome.arguments
    table.add_row("chainId", args.chain_id)
    table.add_row("inputToken", args.input_token)
    table.add_row("inputTokenAmount", args.input_token_amount)
    table.add_row("outputCTF", args.output_ctf)
    table.add_row("Request", f"{outcome.request.method} {outcome.request.url}")
    table.add_row("HTTP status", str(outcome.response.status))
    table.add_row("Mint amount", str(outcome.mint_amount))
    table.add_row("Encoded", "0x" + outcome.encoded.hex())
    table.add_row("Decoded", str(decode_uint256(outcome.encoded)))
    return table
