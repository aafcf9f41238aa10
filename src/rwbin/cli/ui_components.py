"""CLI UI components (Rich).

Why separate components:
- Keeps command handling apart from visual details.
- The same tables serve the write trace and the read dump.
"""

from __future__ import annotations

from rich.console import Console
from rich.table import Table
from rich.text import Text

from rwbin.core.codec import render
from rwbin.core.domain.formats import DumpFormat
from rwbin.core.domain.models import ByteDump, WriteResult


def build_trace_table(result: WriteResult) -> Table:
    """Intermediate steps of one encoding, from token to bytes."""

    table = Table(title="Encoding trace", show_header=False)
    table.add_column("Step", style="cyan", no_wrap=True)
    table.add_column("Value", style="white")

    literal = result.literal
    table.add_row("Token", literal.token)
    table.add_row("Format", literal.format.value)
    table.add_row("Payload", literal.payload)
    table.add_row("Bits", result.bits or "(none)")
    table.add_row("Padding", str(result.padding))
    table.add_row("Padded bits", result.padded_bits)
    table.add_row("Bytes", render(result.data, DumpFormat.HEX))
    return table


def build_bytes_table(dump: ByteDump) -> Table:
    """One row per byte: offset, hex, binary and decimal."""

    table = Table(title=Text(str(dump.path)))
    table.add_column("Offset", style="dim", justify="right", no_wrap=True)
    table.add_column("Hex", style="cyan")
    table.add_column("Binary", style="magenta")
    table.add_column("Decimal", style="white", justify="right")
    for offset, byte in enumerate(dump.data):
        table.add_row(f"{offset:04x}", f"{byte:02x}", f"{byte:08b}", str(byte))
    return table


def print_error(console: Console, message: str) -> None:
    console.print(Text.assemble(("Error: ", "bold red"), message), highlight=False)
