"""HTTP adapter – HTTPRequest and HTTPResponse marshalers.

Wrap an ``httpx.Request`` / ``httpx.Response`` so it can be passed as a
field and encoded properly::

    log.error("upstream failed", http_request=HTTPRequest(response.request))
"""
from __future__ import annotations

import dataclasses
from typing import Any
from urllib.parse import parse_qs

from logext.core.encoder import ObjectEncoder

_FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"


def headers_to_dict(headers: Any) -> dict[str, list[str]]:
    """Group repeated header values under one key, keeping their order."""
    result: dict[str, list[str]] = {}
    for key, value in headers.multi_items():
        result.setdefault(key, []).append(value)
    return result


def _post_form(request: Any) -> dict[str, list[str]] | None:
    content_type = request.headers.get("content-type", "")
    if not content_type.startswith(_FORM_CONTENT_TYPE):
        return None
    try:
        body = request.content
    except RuntimeError:
        # httpx.RequestNotRead: streamed body not read yet
        return None
    return parse_qs(body.decode("utf-8", errors="replace"), keep_blank_values=True)


@dataclasses.dataclass(frozen=True)
class HTTPRequest:
    """Marshals an ``httpx.Request``."""

    request: Any

    def marshal_log_object(self, enc: ObjectEncoder) -> None:
        req = self.request
        if req is None:
            return

        enc.add("method", req.method)
        enc.add("url", str(req.url))
        http_version = req.extensions.get("http_version")
        if http_version:
            if isinstance(http_version, bytes):
                http_version = http_version.decode("ascii", errors="replace")
            enc.add("http_version", http_version)
        enc.add("headers", headers_to_dict(req.headers))
        enc.add("host", req.url.host)

        post_form = _post_form(req)
        query = parse_qs(req.url.query.decode("ascii", errors="replace"), keep_blank_values=True)
        if query or post_form:
            form = {k: list(v) for k, v in query.items()}
            for key, values in (post_form or {}).items():
                form.setdefault(key, []).extend(values)
            enc.add("form", form)
        if post_form is not None:
            enc.add("post_form", post_form)

        remote_addr = req.extensions.get("remote_addr")
        if remote_addr:
            enc.add("remote_addr", remote_addr)

        uri = req.url.raw_path.decode("ascii", errors="replace")
        if uri:
            enc.add("request_uri", uri)


@dataclasses.dataclass(frozen=True)
class HTTPResponse:
    """Marshals an ``httpx.Response`` together with the request that produced it."""

    response: Any

    def marshal_log_object(self, enc: ObjectEncoder) -> None:
        res = self.response
        if res is None:
            return

        enc.add("status", f"{res.status_code} {res.reason_phrase}".strip())
        enc.add("status_code", res.status_code)
        enc.add("http_version", res.http_version)
        enc.add("headers", headers_to_dict(res.headers))

        try:
            request = res.request
        except RuntimeError:
            # httpx raises when the response was built without a request
            request = None
        if request is not None:
            enc.add_object("http_request", HTTPRequest(request))


__all__ = ["HTTPRequest", "HTTPResponse", "headers_to_dict"]
