"""Command-line interface: download logos for a service into a directory."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Iterable

from logofinder.config import Settings
from logofinder.phases.phase2 import resolve


def parse_args(argv: Iterable[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments for the batch downloader."""
    settings = Settings()
    parser = argparse.ArgumentParser(
        description="Download logos for a brand or service from public icon hosts."
    )
    parser.add_argument("service", help="Brand or service name, e.g. reactjs or 'visual studio'.")
    parser.add_argument(
        "--count",
        type=int,
        default=settings.download_count,
        help="Maximum number of logos to download (default: %(default)s).",
    )
    parser.add_argument(
        "--dir",
        dest="output_dir",
        default=settings.output_dir,
        help="Directory to write logos into; created if missing (default: %(default)s).",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log variations tried, files saved and sources that missed.",
    )
    return parser.parse_args(list(argv) if argv is not None else None)


def main(argv: Iterable[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(message)s",
    )

    print(f"Starting logo download for {args.service!r}...")
    result = resolve(args.service, args.count, args.output_dir, verbose=args.verbose)

    if not result.success:
        print(f"Failed to download logos: {result.error or 'no logos found'}")
        return 1

    print(f"Downloaded {result.count} logos")
    print(f"First logo: {result.logos[0].filepath}")
    for idx, logo in enumerate(result.logos, start=1):
        print(f"   {idx}. {logo.filename} - {logo.url}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
