"""Sentry adapter – request interface built from a carried request."""
from __future__ import annotations

from http.cookies import SimpleCookie
from typing import Any

from logext.adapters.http.marshalers import HTTPRequest


def unwrap_request(value: Any) -> Any:
    if isinstance(value, HTTPRequest):
        return value.request
    return value


def request_to_dict(request: Any) -> dict[str, Any]:
    """Convert an ``httpx.Request`` (or its wrapper) into a Sentry request payload."""
    req = unwrap_request(request)
    if req is None:
        return {}

    url = req.url
    payload: dict[str, Any] = {
        "method": req.method,
        "url": str(url).split("#", 1)[0].split("?", 1)[0],
        "headers": {k: v for k, v in req.headers.items() if k != "cookie"},
    }
    query = url.query.decode("ascii", errors="replace")
    if query:
        payload["query_string"] = query

    raw_cookie = req.headers.get("cookie")
    if raw_cookie:
        jar = SimpleCookie()
        jar.load(raw_cookie)
        payload["cookies"] = {name: morsel.value for name, morsel in jar.items()}

    remote_addr = req.extensions.get("remote_addr")
    if remote_addr:
        payload["env"] = {"REMOTE_ADDR": remote_addr}
    return payload


__all__ = ["request_to_dict", "unwrap_request"]
