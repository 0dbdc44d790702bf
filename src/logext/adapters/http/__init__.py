"""HTTP adapter – request/response marshalers for httpx objects."""
from logext.adapters.http.marshalers import HTTPRequest, HTTPResponse

__all__ = ["HTTPRequest", "HTTPResponse"]
