"""Run the CLI with `python -m rwbin`.

Keeps a simple entrypoint besides the `rwbin` console script.
"""

from __future__ import annotations

from rwbin.cli.main import run


def main() -> None:
    run()


if __name__ == "__main__":
    main()
