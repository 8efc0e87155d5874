"""Module entrypoint for ``python -m lazydu``.

This keeps module-mode execution behavior identical to the console script.
All argument parsing and runtime setup happen in ``lazydu.cli``.
"""

from .cli import main


if __name__ == "__main__":
    raise SystemExit(main())
