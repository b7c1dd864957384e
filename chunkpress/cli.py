"""Command-line entry point."""

from __future__ import annotations

import argparse
from collections.abc import Sequence


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command and return its exit status."""
    parser = argparse.ArgumentParser(
        prog="chunkpress",
        description="Split files into chunks for parallel compression.",
    )
    parser.parse_args(argv)
    print("Project Initialized")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())