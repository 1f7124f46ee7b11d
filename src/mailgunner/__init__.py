"""Mailgunner - Python client for the Mailgun HTTP API."""

from .client import Client
from .constants import API_VERSION, DEFAULT_HOST, VERSION
from .response import Response
from .exceptions import (
    MailgunnerError,
    ConfigurationError,
    ResponseDecodeError,
)

__version__ = VERSION
__all__ = [
    "Client",
    "Response",
    "API_VERSION",
    "DEFAULT_HOST",
    "MailgunnerError",
    "ConfigurationError",
    "ResponseDecodeError",
]
