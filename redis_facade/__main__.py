"""Interface for ``python -m redis_facade``."""

from __future__ import annotations

import asyncio
import logging
import os
from argparse import ArgumentParser
from typing import TYPE_CHECKING


if TYPE_CHECKING:
    from collections.abc import Sequence

from ._version import version
from .factory import DEFAULT_URL, create_facade


__all__ = ["main"]


async def _print_types(url: str, keys: Sequence[str]) -> None:
    async with create_facade(url=url) as facade:
        for key in keys:
            print(f"{key}\t{await facade.typeof(key)}")


def main(args: Sequence[str] | None = None) -> None:
    """Argument parser for the CLI."""
    parser = ArgumentParser(description="Report the Redis type of each key.")
    _ = parser.add_argument("-v", "--version", action="version", version=version)
    _ = parser.add_argument("--url", default=os.environ.get("REDIS_FACADE_URL", DEFAULT_URL), help="Redis URL")
    _ = parser.add_argument("--verbose", action="store_true", help="log commands at DEBUG level")
    _ = parser.add_argument("keys", nargs="*", metavar="KEY")
    options = parser.parse_args(args)

    logging.basicConfig(level=logging.DEBUG if options.verbose else logging.WARNING)
    if options.keys:
        asyncio.run(_print_types(options.url, options.keys))


if __name__ == "__main__":
    main()
