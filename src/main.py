"""Run script.

Lets `python -m main <IP_ADDRESS>` work from inside `src/` during
development, next to the `ipblocker` console script.
"""

from __future__ import annotations

from cli.main import run


def main() -> None:
    run()


if __name__ == "__main__":
    main()
