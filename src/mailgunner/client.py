"""Mailgun API client."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from .constants import API_VERSION, AUTH_USERNAME, DEFAULT_HOST, USER_AGENT
from .exceptions import ConfigurationError
from .params import Params, ParamValue, encode_path_segment, expand_params, merge_params
from .response import Response

logger = logging.getLogger("mailgunner")


class Client:
    """Client for the Mailgun v2 HTTP API.

    Every method returns a :class:`~mailgunner.response.Response`. HTTP error
    statuses are returned, not raised; transport failures propagate as httpx
    exceptions.

    Example:
        ```python
        from mailgunner import Client

        client = Client(domain="samples.mailgun.org", api_key="key-xxx")

        # Paged unsubscribes
        response = client.get_unsubscribes(skip=0, limit=50)
        if response.is_ok():
            print(response.object()["items"])

        # Stats for several events
        client.get_stats(event=["sent", "opened"])

        # Create a route
        client.add_route({
            "description": "Example route",
            "priority": 1,
            "expression": "match_recipient('.*@samples.mailgun.org')",
            "action": ["forward('http://example.com/mail')", "stop()"],
        })
        ```
    """

    def __init__(
        self,
        domain: str,
        api_key: str,
        host: str = DEFAULT_HOST,
        *,
        transport: httpx.BaseTransport | None = None,
    ):
        """Initialize the Mailgun client.

        Args:
            domain: Your Mailgun sending domain.
            api_key: Your Mailgun API key.
            host: API host, always reached over HTTPS.
            transport: Optional httpx transport (e.g. ``httpx.MockTransport``).

        Raises:
            ConfigurationError: If domain, api_key or host is missing or empty.
        """
        if not domain:
            raise ConfigurationError("domain")
        if not api_key:
            raise ConfigurationError("api_key")
        if not host:
            raise ConfigurationError("host")

        self.domain = domain
        self.api_key = api_key
        self.host = host

        self._transport = transport
        self._http: httpx.Client | None = None

    def __repr__(self) -> str:
        return f"Client(domain={self.domain!r}, host={self.host!r})"

    @property
    def base_url(self) -> str:
        return f"https://{self.host}"

    @property
    def http(self) -> httpx.Client:
        """The HTTP connection, created on first use and reused afterwards."""
        if self._http is None or self._http.is_closed:
            self._http = httpx.Client(
                base_url=self.base_url,
                auth=httpx.BasicAuth(AUTH_USERNAME, self.api_key),
                headers={"User-Agent": USER_AGENT},
                verify=True,
                transport=self._transport,
            )
        return self._http

    def _domain_path(self, *segments: str) -> str:
        return self._path(self.domain, *segments)

    def _path(self, *segments: str) -> str:
        encoded = "/".join(encode_path_segment(segment) for segment in segments)
        return f"/{API_VERSION}/{encoded}"

    def _request(
        self,
        method: str,
        path: str,
        params: Params | None = None,
        data: Params | None = None,
    ) -> Response:
        """Make an API request."""
        request = self.http.build_request(
            method,
            path,
            params=expand_params(params) or None,
            data=expand_params(data) if data is not None else None,
        )
        logger.debug("%s %s", request.method, request.url)
        return Response(self.http.send(request))

    def close(self) -> None:
        """Close the HTTP client."""
        if self._http is not None:
            self._http.close()
            self._http = None

    def __enter__(self) -> Client:
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    # Unsubscribes

    def get_unsubscribes(self, params: Params | None = None, **filters: ParamValue) -> Response:
        """List unsubscribed addresses.

        Args:
            params: Filters such as ``skip`` and ``limit``.
            **filters: Same filters as keyword arguments.
        """
        return self._request(
            "GET", self._domain_path("unsubscribes"), params=merge_params(params, filters)
        )

    def get_unsubscribe(self, address: str) -> Response:
        """Get a single unsubscribe record by email address."""
        return self._request("GET", self._domain_path("unsubscribes", address))

    def add_unsubscribe(self, attributes: Params) -> Response:
        """Unsubscribe an address (``address`` and optional ``tag``)."""
        return self._request("POST", self._domain_path("unsubscribes"), data=attributes)

    def delete_unsubscribe(self, address_or_id: str) -> Response:
        """Remove an unsubscribe record by address or id."""
        return self._request("DELETE", self._domain_path("unsubscribes", address_or_id))

    # Stats and logs

    def get_stats(self, params: Params | None = None, **filters: ParamValue) -> Response:
        """Get event counters for the domain.

        Args:
            params: Filters such as ``skip``, ``limit`` and ``event``.
                ``event`` may be a single event name or a list of them.
            **filters: Same filters as keyword arguments.
        """
        return self._request(
            "GET", self._domain_path("stats"), params=merge_params(params, filters)
        )

    def get_log(self, params: Params | None = None, **filters: ParamValue) -> Response:
        """Get log entries for the domain, paged with ``skip``/``limit``."""
        return self._request(
            "GET", self._domain_path("log"), params=merge_params(params, filters)
        )

    # Messages

    def send_message(self, attributes: Params) -> Response:
        """Send a message.

        Args:
            attributes: Message fields (``from``, ``to``, ``subject``,
                ``text``, ``html``, ``o:tag`` ...). List values are sent as
                repeated fields. Attachments are not supported.
        """
        return self._request("POST", self._domain_path("messages"), data=attributes)

    # Bounces

    def get_bounces(self, params: Params | None = None, **filters: ParamValue) -> Response:
        """List bounced addresses, paged with ``skip``/``limit``."""
        return self._request(
            "GET", self._domain_path("bounces"), params=merge_params(params, filters)
        )

    def get_bounce(self, address: str) -> Response:
        """Get a single bounce record by email address."""
        return self._request("GET", self._domain_path("bounces", address))

    def add_bounce(self, attributes: Params) -> Response:
        """Add a bounce.

        Args:
            attributes: Bounce fields (``address``, optional ``code`` and ``error``).
        """
        return self._request("POST", self._domain_path("bounces"), data=attributes)

    def delete_bounce(self, address: str) -> Response:
        """Remove a bounce record so the address can receive mail again."""
        return self._request("DELETE", self._domain_path("bounces", address))

    # Complaints

    def get_complaints(self, params: Params | None = None, **filters: ParamValue) -> Response:
        """List spam complaints, paged with ``skip``/``limit``."""
        return self._request(
            "GET", self._domain_path("complaints"), params=merge_params(params, filters)
        )

    def get_complaint(self, address: str) -> Response:
        """Get a single spam complaint by email address."""
        return self._request("GET", self._domain_path("complaints", address))

    def add_complaint(self, attributes: Params) -> Response:
        """Add a spam complaint.

        Args:
            attributes: Complaint fields (``address``).
        """
        return self._request("POST", self._domain_path("complaints"), data=attributes)

    def delete_complaint(self, address: str) -> Response:
        """Remove a spam complaint by email address."""
        return self._request("DELETE", self._domain_path("complaints", address))

    # Routes (global, not scoped to the domain)

    def get_routes(self, params: Params | None = None, **filters: ParamValue) -> Response:
        """List routes, paged with ``skip``/``limit``."""
        return self._request("GET", self._path("routes"), params=merge_params(params, filters))

    def get_route(self, route_id: str) -> Response:
        """Get a route by id."""
        return self._request("GET", self._path("routes", route_id))

    def add_route(self, attributes: Params) -> Response:
        """Create a route.

        Args:
            attributes: Route fields (``priority``, ``description``,
                ``expression``, ``action``). ``action`` may be a list.
        """
        return self._request("POST", self._path("routes"), data=attributes)

    def update_route(self, route_id: str, attributes: Params) -> Response:
        """Update a route.

        Args:
            route_id: Route ID.
            attributes: Route fields to change.
        """
        return self._request("PUT", self._path("routes", route_id), data=attributes)

    def delete_route(self, route_id: str) -> Response:
        """Delete a route by id."""
        return self._request("DELETE", self._path("routes", route_id))

    # Mailboxes

    def get_mailboxes(self, params: Params | None = None, **filters: ParamValue) -> Response:
        """List mailboxes for the domain, paged with ``skip``/``limit``."""
        return self._request(
            "GET", self._domain_path("mailboxes"), params=merge_params(params, filters)
        )

    def add_mailbox(self, attributes: Params) -> Response:
        """Create a mailbox (``mailbox`` and ``password``)."""
        return self._request("POST", self._domain_path("mailboxes"), data=attributes)

    def update_mailbox(self, user: str, attributes: Params) -> Response:
        """Update a mailbox, e.g. change its ``password``."""
        return self._request("PUT", self._domain_path("mailboxes", user), data=attributes)

    def delete_mailbox(self, user: str) -> Response:
        """Delete a mailbox by user name."""
        return self._request("DELETE", self._domain_path("mailboxes", user))
