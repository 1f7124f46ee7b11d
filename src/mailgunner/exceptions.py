"""Mailgunner SDK exceptions."""

from __future__ import annotations


class MailgunnerError(Exception):
    """Base exception for Mailgunner SDK."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)


class ConfigurationError(MailgunnerError, ValueError):
    """Raised when the client is constructed with missing or empty options."""

    def __init__(self, option: str):
        super().__init__(f"Missing required option: {option}")
        self.option = option


class ResponseDecodeError(MailgunnerError, ValueError):
    """Raised when a response body is not valid JSON."""

    def __init__(self, message: str = "Response body is not valid JSON", body: str = ""):
        super().__init__(message)
        self.body = body
