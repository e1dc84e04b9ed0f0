"""Async HTTP helper for fetching JSON together with the response status."""

import json
from typing import Any

import aiohttp

from utils.logging import get_logger

logger = get_logger("utils.http")


def _reject_constant(name: str) -> Any:
    raise ValueError(f"Invalid JSON constant: {name}")


async def fetch_json_with_status(
    url: str,
    session: aiohttp.ClientSession | None = None,
) -> tuple[Any, int]:
    """GET ``url`` and return ``(parsed_body, status)``.

    Any status code is returned as-is. The body is decoded regardless of its
    Content-Type; an empty or malformed body, or one using the non-standard
    ``NaN``/``Infinity`` constants, raises ``ValueError``. Transport failures
    raise the ``aiohttp.ClientError`` produced by aiohttp, and a timeout raises
    ``asyncio.TimeoutError``.

    When ``session`` is None a private session is opened and closed for this
    call only. A caller-supplied session is left open.
    """
    if session is None:
        async with aiohttp.ClientSession() as own_session:
            return await _get(own_session, url)
    return await _get(session, url)


async def _get(session: aiohttp.ClientSession, url: str) -> tuple[Any, int]:
    logger.debug("GET %s", url)
    async with session.get(url) as resp:
        if not 200 <= resp.status < 300:
            logger.warning("HTTP %s for %s", resp.status, url)
        body = await resp.text()
        return json.loads(body, parse_constant=_reject_constant), resp.status
