"""Doctor command for environment diagnostics."""

from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from rwbin.adapters.binary_file import BinaryFileStore
from rwbin.adapters.filenames import resolve_filename
from rwbin.cli.ui_components import print_error
from rwbin.core.config import AppSettings, get_user_env_file, load_settings, write_user_env_vars
from rwbin.core.domain.errors import RwbinError
from rwbin.core.domain.formats import DumpFormat, DumpSeparator

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()
_err_console = Console(stderr=True)

CHECK_FILE_NAME = "_rwbin_doctor_check.bin"


def _load_settings() -> AppSettings:
    try:
        return load_settings()
    except RwbinError as exc:
        print_error(_err_console, exc.message)
        raise typer.Exit(code=exc.exit_code) from exc


def _check_default_output(settings: AppSettings) -> tuple[bool, str]:
    try:
        return True, resolve_filename(settings.default_output)
    except RwbinError as exc:
        return False, exc.message


def _check_write(settings: AppSettings) -> tuple[bool, str]:
    """Write and read back a one-byte check file in the output directory."""

    store = BinaryFileStore()
    target = settings.resolve_path(CHECK_FILE_NAME)
    try:
        store.write(target, b"\xa5")
        ok = store.read(target) == b"\xa5"
    except RwbinError as exc:
        return False, exc.message
    finally:
        target.unlink(missing_ok=True)
    return ok, "OK" if ok else "Read-back mismatch"


@app.command()
def run() -> None:
    """Run baseline diagnostics and show recommended fixes."""

    settings = _load_settings()

    table = Table(title="rwbin Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    ok_name, detail_name = _check_default_output(settings)
    table.add_row("Default output", "OK" if ok_name else "FAIL", detail_name)

    output_dir = settings.output_dir or Path.cwd()
    if output_dir.is_dir():
        ok_write, detail_write = _check_write(settings)
    else:
        ok_write, detail_write = False, f"{output_dir} is not a directory"
    table.add_row("Output directory", "OK" if ok_write else "FAIL", f"{output_dir} ({detail_write})")

    table.add_row("Dump format", "OK", f"{settings.dump_format.value} / {settings.dump_separator.value}")
    table.add_row("Decimal width", "OK", f"{settings.max_decimal_bits} bits")

    env_file = get_user_env_file()
    table.add_row("User config", "OK" if env_file.exists() else "OPTIONAL", str(env_file))

    _console.print(table)

    if not ok_name or not ok_write:
        _console.print(
            "\n[yellow]Note:[/yellow] Run `rwbin-doctor setup` or set RWBIN_DEFAULT_OUTPUT / RWBIN_OUTPUT_DIR."
        )
        raise typer.Exit(code=1)


@app.command()
def setup() -> None:
    """Interactive setup (stores defaults in the user config .env)."""

    settings = _load_settings()

    default_output = typer.prompt("Default output file", default=settings.default_output).strip()
    format_choice = typer.prompt(
        f"Dump format ({', '.join(f.value for f in DumpFormat)})",
        default=settings.dump_format.value,
    ).strip().lower()
    separator_choice = typer.prompt(
        f"Dump separator ({', '.join(s.value for s in DumpSeparator)})",
        default=settings.dump_separator.value,
    ).strip().lower()

    try:
        default_output = resolve_filename(default_output)
    except RwbinError as exc:
        raise typer.BadParameter(exc.message) from exc
    try:
        dump_format = DumpFormat(format_choice)
        dump_separator = DumpSeparator(separator_choice)
    except ValueError as exc:
        raise typer.BadParameter(f"Unknown choice: {exc}") from exc

    env_path = write_user_env_vars(
        {
            "RWBIN_DEFAULT_OUTPUT": default_output,
            "RWBIN_DUMP_FORMAT": dump_format.value,
            "RWBIN_DUMP_SEPARATOR": dump_separator.value,
        }
    )

    _console.print(f"[green]Saved rwbin config to:[/green] {env_path}")


def main() -> None:
    app()
