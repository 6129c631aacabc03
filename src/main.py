#!/usr/bin/env python3
"""
Run shredder from a source checkout without installing it.

    PYTHONPATH=src python src/main.py <file1> <file2> ...

Once installed with ``pip install -e .`` the ``shredder`` console script
does the same thing.
"""

import sys

try:
    from shredder.cli import main
except ImportError as e:
    sys.exit(
        f"Error: could not import shredder ({e}).\n"
        "Install it with `pip install -e .` or set PYTHONPATH=src."
    )


if __name__ == "__main__":
    sys.exit(main())
