"""In-process HTTP server used by the async tests."""

from aiohttp import web
from aiohttp.test_utils import TestServer


def make_tokens_server(status: int, body: str, content_type: str = "application/json") -> tuple[TestServer, list]:
    """Return a server answering GET /tokens with a fixed response, and the list it records requests into."""
    seen = []

    async def handler(request: web.Request) -> web.Response:
        seen.append(
            {
                "method": request.method,
                "path": request.path,
                "query": request.query_string,
                "body": await request.read(),
            }
        )
        return web.Response(status=status, text=body, content_type=content_type)

    app = web.Application()
    app.router.add_get("/tokens", handler)
    return TestServer(app), seen
