"""Command line entry point printing a few diagnostic values."""

from __future__ import annotations

import argparse
from collections.abc import Sequence

from qedcrypt.baseconv import bit_length

__all__ = ["main"]

_KEY_BYTES = 216


def main(argv: Sequence[str] | None = None) -> int:
    """Print a greeting, the byte length of a full cube key and a shift check."""
    parser = argparse.ArgumentParser(
        prog="qedcrypt",
        description="Print diagnostic values of the cube cipher.",
    )
    parser.parse_args(argv)

    print("Hello, world!")
    full_key = 2 ** (_KEY_BYTES * 8) - 2
    print(bit_length(full_key) // 8)
    number = 5
    print((number >> 2) << 2)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())