#!/usr/bin/env python3
"""
Basic Shredder Usage Example

This example zero-fills a scratch file with the library API, then runs
the same loop the CLI runs but with scripted answers instead of prompts.
"""

import tempfile
from pathlib import Path

import shredder


def main():
    workdir = Path(tempfile.mkdtemp())
    secret = workdir / "secret.txt"
    secret.write_text("This is my secret message!")

    # === ZERO-FILL ===
    written = shredder.zero_fill(secret)
    print(f"Overwrote {written} bytes")
    assert secret.read_bytes() == b"\x00" * written

    # === SCRIPTED LOOP ===
    # Fill everything, delete everything, no questions asked
    loop = shredder.Shredder(confirm_fill=lambda: True, confirm_delete=lambda: True)
    result = loop.process([secret, workdir / "missing.txt", workdir])

    for item in result.items:
        print(f"{item.status.value:>8}  {item.path}")
    print(result.to_dict()["summary"])

    workdir.rmdir()


if __name__ == "__main__":
    main()
