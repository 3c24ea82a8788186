"""Module entrypoint for ``python -m promptgen``.

This keeps module-mode execution behavior identical to the CLI script.
All argument parsing and orchestration happen in ``promptgen.cli``.
"""

from .cli import main


if __name__ == "__main__":
    raise SystemExit(main())
