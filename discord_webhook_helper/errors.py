"""Error types raised by the webhook client."""

from __future__ import annotations


class DiscordWebhookError(Exception):
    """Base error for webhook failures."""


class ConfigurationError(DiscordWebhookError):
    """Raised when the client is constructed with an invalid endpoint."""


class ValidationError(DiscordWebhookError, ValueError):
    """Raised before any request when the payload shape is invalid."""


class RemoteError(DiscordWebhookError):
    """Raised when Discord answers with a non-2xx status."""

    def __init__(self, message: str, *, status_code: int, reason: str, body: str) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.reason = reason
        self.body = body


class WebhookTimeoutError(DiscordWebhookError, TimeoutError):
    """Raised when no response arrived within the configured timeout."""

    def __init__(self, message: str, *, timeout_ms: int) -> None:
        super().__init__(message)
        self.timeout_ms = timeout_ms


class TransportError(DiscordWebhookError):
    """Raised for connection level failures (DNS, refused connections, protocol errors)."""


__all__ = [
    "ConfigurationError",
    "DiscordWebhookError",
    "RemoteError",
    "TransportError",
    "ValidationError",
    "WebhookTimeoutError",
]
