"""Testing utilities for code built on mywaifu-client.

Fake the API with ``httpx.MockTransport`` instead of patching the client.

Example:
    ```python
    from mywaifu_client import ClientBuilder
    from mywaifu_client.testing import create_error_response, create_mock_response, route_transport


    def test_missing_waifu():
        transport = route_transport(
            {
                "/api/v1/waifu/1": create_mock_response({"id": 1, "name": "Rem"}),
                "/api/v1/waifu/2": create_error_response(404, "Waifu not found"),
            }
        )
        with ClientBuilder("test-key").with_transport(transport).build() as client:
            assert client.get_waifu(2).error.http_status == 404
    ```
"""

from collections.abc import Callable, Mapping
from typing import Any

import httpx

Route = httpx.Response | Callable[[httpx.Request], httpx.Response]


def create_mock_response(payload: Any, status_code: int = 200) -> httpx.Response:
    """Build a JSON response as the API would send it."""
    return httpx.Response(status_code, json=payload)


def create_error_response(status_code: int, message: str) -> httpx.Response:
    """Build a response carrying the API's error envelope."""
    return httpx.Response(status_code, json={"status": status_code, "message": message})


def route_transport(routes: Mapping[str, Route]) -> httpx.MockTransport:
    """Build a MockTransport that answers by request path.

    Routes are keyed on the URL path (without query string); values are
    responses or handlers taking the request. Unknown paths answer 404.
    """

    def handler(request: httpx.Request) -> httpx.Response:
        route = routes.get(request.url.path)
        if route is None:
            return create_error_response(404, f"No route for {request.url.path}")
        if isinstance(route, httpx.Response):
            # Fresh copy: a Response body can only be consumed once
            return httpx.Response(route.status_code, headers=route.headers, content=route.content)
        return route(request)

    return httpx.MockTransport(handler)


__all__ = ["Route", "create_error_response", "create_mock_response", "route_transport"]
