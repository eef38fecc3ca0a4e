"""Entry point for ``python -m mdnav``."""

from .cli import main

if __name__ == "__main__":
    raise SystemExit(main())
