from __future__ import annotations

import sys

from pynote.app import run_app


def main() -> int:
    """Module entrypoint for `python -m pynote.main` or the `pynote` script."""
    return run_app(sys.argv)


if __name__ == "__main__":
    raise SystemExit(main())
