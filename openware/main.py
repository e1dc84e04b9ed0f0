#!/usr/bin/env python3
"""Fetch the openware token list once and print it as JSON."""

import argparse
import asyncio
import json
import os
import sys

import aiohttp
from dotenv import load_dotenv

from openware.state import resolve_server_side_state
from openware.tokens import fetch_tokens
from utils.logging import get_logger, set_log_level

load_dotenv()

DEFAULT_LOG_LEVEL = os.getenv("OPENWARE_LOG_LEVEL", "WARNING")
LOGGER_NAMES = ("openware.main", "openware.tokens", "utils.http")

logger = get_logger("openware.main")


async def run(query: str, state: bool) -> str:
    if state:
        return await resolve_server_side_state(query)
    result = await fetch_tokens(query)
    logger.info("tokens status=%s", result.status)
    return json.dumps(result.to_dict())


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Fetch the openware token list.")
    parser.add_argument("--query", type=str, default="")
    parser.add_argument("--state", action="store_true", help="Print the server-side page state instead")
    parser.add_argument(
        "--log-level",
        type=str,
        default=DEFAULT_LOG_LEVEL,
        help="Logging level (DEBUG, INFO, WARNING, ERROR)",
    )
    args = parser.parse_args(argv)
    set_log_level(args.log_level, *LOGGER_NAMES)

    try:
        output = asyncio.run(run(args.query, args.state))
    except (aiohttp.ClientError, asyncio.TimeoutError, ValueError) as e:
        logger.error("Failed to fetch tokens: %s", e)
        print(json.dumps({"error": str(e) or type(e).__name__}), file=sys.stderr)
        return 1

    print(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
