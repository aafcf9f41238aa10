"""rwbin command line.

Flag parsing and printing only; the write/read flow lives in
`rwbin.core.services.conversion`.
"""

from __future__ import annotations

import json

import click
import typer
from rich.console import Console
from typer.core import TyperCommand

from rwbin import __version__
from rwbin.cli.ui_components import build_bytes_table, build_trace_table, print_error
from rwbin.core.codec import render
from rwbin.core.config import load_settings
from rwbin.core.domain.errors import InvalidInvocation, RwbinError
from rwbin.core.domain.formats import DumpFormat, DumpSeparator
from rwbin.core.domain.models import ByteDump, WriteResult
from rwbin.core.services.conversion import read_file, write_literal

EPILOG = """\
Examples:

  rwbin -h                   shows this help page\n
  rwbin -r dec.bin           reads a file and prints its contents\n
  rwbin -w 255 dec.bin       writes decimal 255 as binary to 'dec.bin'\n
  rwbin 255 dec.bin          same as above; without a flag, write is assumed\n
  rwbin 0xFAB0 hex.bin       writes hex 0xFAB0 to 'hex.bin'\n
  rwbin b'01101010 byte.bin  writes the bits 01101010 to 'byte.bin'\n
  rwbin h'00FF hex.bin       writes hex 00FF to 'hex.bin'\n
  rwbin d'10 dec             writes decimal 10 to 'dec.bin' (.bin is added)
"""

app = typer.Typer(
    add_completion=False,
    help="Write a decimal, hexadecimal or binary literal to a raw binary file, or read one back.",
    epilog=EPILOG,
    context_settings={
        "help_option_names": ["-h", "--help"],
        # Tokens such as `-5` must reach the classifier instead of failing as options.
        "ignore_unknown_options": True,
        "token_normalize_func": str.lower,
    },
)


class RwbinCommand(TyperCommand):
    """Reports click usage errors (missing option values, bad choices) with exit code 1."""

    def parse_args(self, ctx: click.Context, args: list[str]) -> list[str]:
        try:
            return super().parse_args(ctx, args)
        except click.UsageError as exc:
            exc.exit_code = 1
            raise


_console = Console(soft_wrap=True)
_err_console = Console(stderr=True, soft_wrap=True)


def _version_callback(value: bool) -> None:
    if value:
        _console.print(f"rwbin {__version__}", highlight=False)
        raise typer.Exit()


def _fail(ctx: typer.Context, exc: RwbinError) -> None:
    print_error(_err_console, exc.message)
    if exc.show_help:
        # Rich-formatted help prints itself and returns an empty string.
        help_text = ctx.get_help()
        if help_text:
            typer.echo(help_text)
    raise typer.Exit(code=exc.exit_code)


def _print_write(result: WriteResult, *, verbose: bool) -> None:
    if verbose:
        _console.print(build_trace_table(result))
    size = len(result.data)
    _console.print(
        f"Wrote {size} byte{'s' if size != 1 else ''} to {result.path}",
        highlight=False,
        markup=False,
    )


def _print_dump(
    dump: ByteDump,
    *,
    dump_format: DumpFormat,
    separator: DumpSeparator,
    as_json: bool,
    table: bool,
) -> None:
    if as_json:
        payload = dump.model_dump(mode="json")
        _console.print(json.dumps(payload, indent=2, sort_keys=True), highlight=False, markup=False)
        return
    if table:
        _console.print(build_bytes_table(dump))
        return
    text = render(dump.data, dump_format, separator)
    if text:
        _console.print(text, highlight=False, markup=False)


@app.command(cls=RwbinCommand)
def main(
    ctx: typer.Context,
    values: list[str] | None = typer.Argument(
        None,
        metavar="[VALUE] [FILENAME]",
        help="Literal to write (255, 0xFF, h'FF, d'255, b'11111111) and the target file.",
        show_default=False,
    ),
    read: str | None = typer.Option(
        None,
        "--read",
        "-r",
        metavar="FILENAME",
        help="Read FILENAME and print its bytes.",
    ),
    write: bool = typer.Option(False, "--write", "-w", help="Write VALUE to FILENAME (default action)."),
    dump_format: DumpFormat | None = typer.Option(
        None,
        "--format",
        "-f",
        case_sensitive=False,
        help="Representation used by --read (default from RWBIN_DUMP_FORMAT, else hex; --read only).",
    ),
    separator: DumpSeparator | None = typer.Option(
        None,
        "--separator",
        "-s",
        case_sensitive=False,
        help="Separator between bytes for hex/bin dumps (--read only).",
    ),
    as_json: bool = typer.Option(False, "--json", help="Print the read result as JSON (--read only)."),
    table: bool = typer.Option(False, "--table", help="Print the read result as a table (--read only)."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show the encoding trace (write only)."),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit.",
    ),
) -> None:
    """Convert a numeric literal to bytes and write it to a file, or read a file back."""

    args = list(values or [])

    try:
        settings = load_settings()
        if read is not None:
            if write or args:
                raise InvalidInvocation("--read cannot be combined with a value or --write.")
            if verbose:
                raise InvalidInvocation("--verbose only applies when writing.")
            dump = read_file(read, settings=settings)
            _print_dump(
                dump,
                dump_format=dump_format or settings.dump_format,
                separator=separator or settings.dump_separator,
                as_json=as_json,
                table=table,
            )
            return

        read_only = [
            flag
            for flag, given in (
                ("--format", dump_format is not None),
                ("--separator", separator is not None),
                ("--json", as_json),
                ("--table", table),
            )
            if given
        ]
        if read_only:
            raise InvalidInvocation(f"{', '.join(read_only)} only apply to --read.")
        if not args:
            raise InvalidInvocation("Incorrect input command: a value is required.")
        if len(args) > 2:
            raise InvalidInvocation(f"Incorrect input command: unexpected argument '{args[2]}'.")

        token = args[0]
        filename = args[1] if len(args) > 1 else None
        result = write_literal(token, filename, settings=settings)
        _print_write(result, verbose=verbose)
    except RwbinError as exc:
        _fail(ctx, exc)


def run() -> None:
    app()
