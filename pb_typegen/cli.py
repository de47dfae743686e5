"""Command line entry point: generate TypeScript types from a PocketBase schema."""
import argparse
import asyncio
import logging
import sys
from pathlib import Path
from typing import List, Optional

from pb_typegen.core.config import load_settings
from pb_typegen.core.engine import TypegenEngine
from pb_typegen.core.logging import configure_logging

log = logging.getLogger(__name__)

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pb-typegen",
        description="Generate TypeScript interfaces from a PocketBase collection schema.",
    )
    parser.add_argument("--url", help="PocketBase server URL (env: PB_URL)")
    parser.add_argument("--username", help="Superuser email (env: PB_USERNAME)")
    parser.add_argument("--password", help="Superuser password (env: PB_PASSWORD)")
    parser.add_argument("--config", type=Path, help="YAML config file (default: ./.pocketbase.config.yaml)")
    parser.add_argument("-o", "--output", help="Output file (default: pb.types.ts)")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        help="Logging level (default: INFO)",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level or "INFO")

    try:
        settings = load_settings(
            config_file=args.config,
            url=args.url,
            username=args.username,
            password=args.password,
            output=args.output,
            log_level=args.log_level,
        )
        logging.getLogger().setLevel(settings.log_level.upper())
        result = asyncio.run(TypegenEngine(settings).run())
    except Exception as e:
        log.error("Generation failed: %s", e, exc_info=True)
        return 1

    if result.skipped:
        log.warning("Skipped collections without fields: %s", ", ".join(result.skipped))
    log.info("Types generated successfully!")
    return 0


if __name__ == "__main__":
    sys.exit(main())
