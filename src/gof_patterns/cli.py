"""Command-line entry point for the Abstract Factory demonstration."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Sequence

from .client import Client
from .config import ConfigFactory, configure_logging
from .exceptions import GofPatternsError

logger = logging.getLogger("gof_patterns")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gof-patterns",
        description="Run the Abstract Factory client against one or more factory variants.",
    )
    parser.add_argument(
        "--variant",
        action="append",
        metavar="ID",
        help="Factory variant to run (repeatable). Defaults to the two built-in variants.",
    )
    parser.add_argument(
        "--list",
        action="store_true",
        help="List the supported factory variants and exit.",
    )
    parser.add_argument("--debug", action="store_true", help="Enable debug logging.")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        settings = ConfigFactory().settings()
    except GofPatternsError as exc:
        sys.stderr.write(f"error: {exc}\n")
        return 2

    level = logging.DEBUG if args.debug else settings.effective_log_level
    configure_logging(level, settings.log_format)

    from .bootstrap import container

    client = container.resolve(Client)

    if args.list:
        for variant in client.registry.get_supported_providers():
            sys.stdout.write(variant + "\n")
        return 0

    variants = args.variant or settings.variant_list
    try:
        if variants:
            logger.info("Running client for variants: %s", ", ".join(variants))
            client.run_variants(variants)
        else:
            client.main()
    except GofPatternsError as exc:
        sys.stderr.write(f"error: {exc}\n")
        return 2
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
