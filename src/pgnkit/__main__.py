"""Application entry point."""

from __future__ import annotations

from pgnkit.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
