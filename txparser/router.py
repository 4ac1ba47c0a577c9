"""A minimal WSGI router that matches on exact path and method."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from http import HTTPStatus
from typing import Any
from urllib.parse import parse_qs


@dataclass
class Request:
    """An incoming HTTP request."""

    method: str
    path: str
    query: dict[str, list[str]] = field(default_factory=dict)
    body: bytes = b""

    @classmethod
    def from_environ(cls, environ: dict[str, Any]) -> Request:
        """Build a request from a WSGI environment."""
        try:
            size = int(environ.get("CONTENT_LENGTH") or 0)
        except ValueError:
            size = 0
        stream = environ.get("wsgi.input")
        body = stream.read(size) if size > 0 and stream is not None else b""
        return cls(
            method=environ.get("REQUEST_METHOD", "GET").upper(),
            path=environ.get("PATH_INFO", "") or "/",
            query=parse_qs(environ.get("QUERY_STRING", ""), keep_blank_values=True),
            body=body,
        )

    def query_get(self, key: str) -> str:
        """Return the first value of a query parameter, or an empty string."""
        values = self.query.get(key)
        return values[0] if values else ""


@dataclass
class Response:
    """An outgoing HTTP response."""

    status: int = HTTPStatus.OK
    headers: dict[str, str] = field(default_factory=dict)
    body: bytes = b""


Handler = Callable[[Request], Response]


def _status_line(status: int) -> str:
    try:
        phrase = HTTPStatus(status).phrase
    except ValueError:
        phrase = ""
    return f"{status} {phrase}".rstrip()


class Router:
    """Dispatches requests to handlers keyed by exact path, then method."""

    def __init__(self) -> None:
        self._rules: dict[str, dict[str, Handler]] = {}

    def handle(self, method: str, path: str, handler: Handler) -> None:
        """Register a handler; a later registration replaces an earlier one."""
        self._rules.setdefault(path, {})[method] = handler

    def dispatch(self, request: Request) -> Response:
        """Run the matching handler, or answer 404 or 405."""
        methods = self._rules.get(request.path)
        if methods is None:
            return Response(status=HTTPStatus.NOT_FOUND)
        handler = methods.get(request.method)
        if handler is None:
            return Response(status=HTTPStatus.METHOD_NOT_ALLOWED)
        return handler(request)

    def __call__(
        self, environ: dict[str, Any], start_response: Callable[..., Any]
    ) -> Iterable[bytes]:
        response = self.dispatch(Request.from_environ(environ))
        headers = list(response.headers.items())
        if not any(name.lower() == "content-length" for name, _ in headers):
            headers.append(("Content-Length", str(len(response.body))))
        start_response(_status_line(int(response.status)), headers)
        return [response.body]