"""Response wrapper for Mailgun API calls."""

from __future__ import annotations

import json
from typing import Any

import httpx

from .constants import JSON_CONTENT_TYPE
from .exceptions import ResponseDecodeError

_UNSET = object()


class Response:
    """Thin view over an ``httpx.Response``.

    HTTP error statuses are not raised; check :meth:`is_ok` and
    :meth:`is_json` before relying on :meth:`object`.

    Example:
        ```python
        response = client.get_routes(limit=10)
        if response.is_ok() and response.is_json():
            routes = response.object()["items"]
        ```
    """

    def __init__(self, raw: httpx.Response):
        self._raw = raw
        self._object: Any = _UNSET

    @property
    def raw(self) -> httpx.Response:
        """The wrapped ``httpx.Response``."""
        return self._raw

    def is_ok(self) -> bool:
        """Return True if the status code is exactly 200."""
        try:
            return int(self._raw.status_code) == 200
        except (TypeError, ValueError):
            return False

    def is_json(self) -> bool:
        """Return True if the Content-Type header is ``application/json``."""
        content_type = self._raw.headers.get("Content-Type")
        if not content_type:
            return False
        return JSON_CONTENT_TYPE in content_type

    def object(self) -> Any:
        """Decode the body as JSON.

        The decoded value is cached after the first successful call. A failed
        decode is not cached.

        Raises:
            ResponseDecodeError: If the body is not valid JSON.
        """
        if self._object is _UNSET:
            body = self._raw.text
            try:
                self._object = json.loads(body)
            except json.JSONDecodeError as e:
                raise ResponseDecodeError(f"Invalid JSON response body: {e}", body=body) from e
        return self._object

    # Forwarded reads from the raw response

    @property
    def status_code(self) -> int:
        return self._raw.status_code

    @property
    def code(self) -> str:
        """Status code as a string."""
        return str(self._raw.status_code)

    @property
    def reason_phrase(self) -> str:
        return self._raw.reason_phrase

    @property
    def headers(self) -> httpx.Headers:
        return self._raw.headers

    def header(self, name: str, default: str | None = None) -> str | None:
        """Get a response header by name (case-insensitive)."""
        return self._raw.headers.get(name, default)

    def __getitem__(self, name: str) -> str | None:
        return self._raw.headers.get(name)

    @property
    def content(self) -> bytes:
        return self._raw.content

    @property
    def text(self) -> str:
        return self._raw.text

    @property
    def url(self) -> httpx.URL:
        return self._raw.url

    def __repr__(self) -> str:
        return f"<Response [{self._raw.status_code}]>"
