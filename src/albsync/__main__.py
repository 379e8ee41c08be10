"""Module entrypoint for ``python -m albsync``."""

from albsync.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
