"""Initial page state rendered on the server before the client takes over."""

import json

from openware.tokens import fetch_tokens

INITIAL_QUERY = "ST3"


async def resolve_server_side_state(query: str = INITIAL_QUERY) -> str:
    result = await fetch_tokens(query)
    return json.dumps({"tokensQuery": query, "tokens": result.data})
