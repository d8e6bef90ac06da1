from .builder import DiscordEmbedBuilder
from .client import DEFAULT_TIMEOUT_MS, WEBHOOK_URL_PREFIX, DiscordWebhookClient, send_status, send_webhook
from .errors import (
    ConfigurationError,
    DiscordWebhookError,
    RemoteError,
    TransportError,
    ValidationError,
    WebhookTimeoutError,
)
from .models import (
    STATUS_COLORS,
    DiscordEmbed,
    DiscordEmbedField,
    DiscordEmbedFooter,
    DiscordEmbedMedia,
    DiscordStatusColor,
    DiscordWebhookPayload,
)

__all__ = [
    "DEFAULT_TIMEOUT_MS",
    "STATUS_COLORS",
    "WEBHOOK_URL_PREFIX",
    "ConfigurationError",
    "DiscordEmbed",
    "DiscordEmbedBuilder",
    "DiscordEmbedField",
    "DiscordEmbedFooter",
    "DiscordEmbedMedia",
    "DiscordStatusColor",
    "DiscordWebhookClient",
    "DiscordWebhookError",
    "DiscordWebhookPayload",
    "RemoteError",
    "TransportError",
    "ValidationError",
    "WebhookTimeoutError",
    "send_status",
    "send_webhook",
]
