"""rwbin configuration.

Why here:
- Centralizes environment variables (pydantic-settings) away from the CLI.
- The conversion service and the doctor read the same typed contract.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from rwbin.core.domain.errors import InvalidConfiguration
from rwbin.core.domain.formats import DumpFormat, DumpSeparator


def get_user_config_dir() -> Path:
    """Per-user configuration directory (cross-platform, no dependencies)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "rwbin"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "rwbin"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "rwbin"
    return Path.home() / ".config" / "rwbin"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


def _parse_env_lines(text: str) -> dict[str, str]:
    data: dict[str, str] = {}
    for raw_line in text.splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        if "=" not in line:
            continue
        key, value = line.split("=", 1)
        key = key.strip()
        value = value.strip().strip('"').strip("'")
        if key:
            data[key] = value
    return data


def write_user_env_vars(values: dict[str, str], *, env_path: Path | None = None) -> Path:
    """Write or update variables in the user's global .env."""

    env_path = env_path or get_user_env_file()
    env_path.parent.mkdir(parents=True, exist_ok=True)

    existing: dict[str, str] = {}
    if env_path.exists():
        try:
            existing = _parse_env_lines(env_path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError):
            existing = {}

    existing.update({k: v for k, v in values.items() if v is not None})

    lines = ["# rwbin user config (.env)"]
    for key in sorted(existing.keys()):
        lines.append(f"{key}={existing[key]}")
    env_path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return env_path


class AppSettings(BaseSettings):
    """Central application settings.

    Lookup order: process environment, then `./.env`, then the user's global
    `.env` (see `get_user_env_file`).
    """

    model_config = SettingsConfigDict(
        env_prefix="RWBIN_",
        extra="ignore",
        case_sensitive=False,
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    default_output: str = Field(
        default="out.bin",
        min_length=1,
        description="File written when the command line names no filename.",
    )
    output_dir: Path | None = Field(
        default=None,
        description="Base directory for file names; the working directory when unset.",
    )
    dump_format: DumpFormat = Field(
        default=DumpFormat.HEX,
        description="Default representation for `--read`.",
    )
    dump_separator: DumpSeparator = Field(
        default=DumpSeparator.SPACE,
        description="Separator between bytes in hex/bin dumps.",
    )
    max_decimal_bits: int = Field(
        default=64,
        ge=8,
        le=4096,
        description="Widest decimal value accepted, in bits.",
    )

    def resolve_path(self, name: str) -> Path:
        """Place a sanitized file name under `output_dir` when one is configured."""

        if self.output_dir is None:
            return Path(name)
        return self.output_dir / name


def load_settings(**overrides: object) -> AppSettings:
    """Build `AppSettings`, reporting bad values as `InvalidConfiguration`."""

    try:
        return AppSettings(**overrides)
    except ValidationError as exc:
        problems = "; ".join(
            f"RWBIN_{'_'.join(str(part) for part in error['loc']).upper()}: {error['msg']}"
            for error in exc.errors()
        )
        raise InvalidConfiguration(f"Invalid configuration: {problems}") from exc
