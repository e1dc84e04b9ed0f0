"""Fetch the token list from the openware dev exchange."""

import asyncio
from dataclasses import dataclass
from typing import Any

import aiohttp

from utils.http import fetch_json_with_status
from utils.logging import get_logger

logger = get_logger("openware.tokens")

TOKENS_URL = "https://dev.yellow.openware.work/tokens"


@dataclass(frozen=True)
class TokensResponse:
    """Decoded body of the tokens endpoint and the HTTP status it came with."""

    data: Any
    status: int

    def to_dict(self) -> dict:
        return {"data": self.data, "status": self.status}


async def fetch_tokens(query: Any) -> TokensResponse:
    """GET the tokens endpoint and return its JSON body with the status code.

    ``query`` is accepted for caller compatibility and does not change the
    request. Non-2xx statuses are returned, not raised. Transport, timeout and JSON
    decoding errors propagate unchanged.
    """
    try:
        data, status = await fetch_json_with_status(TOKENS_URL)
    except (aiohttp.ClientError, asyncio.TimeoutError) as e:
        logger.error("Request failed for %s: %s", TOKENS_URL, e)
        raise
    except ValueError as e:
        logger.error("Invalid JSON from %s: %s", TOKENS_URL, e)
        raise
    return TokensResponse(data=data, status=status)
