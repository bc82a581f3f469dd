from __future__ import annotations
import sys
from mdpane.app import run_app


def main() -> int:
    """Module entrypoint for `python -m mdpane.main` or `python -m mdpane`."""
    return run_app(sys.argv)


if __name__ == "__main__":
    raise SystemExit(main())
