from __future__ import annotations

import asyncio
import logging
import os
from collections.abc import Mapping, Sequence
from typing import Any

import httpx

from .builder import DiscordEmbedBuilder
from .errors import ConfigurationError, RemoteError, TransportError, ValidationError, WebhookTimeoutError
from .models import (
    STATUS_COLORS,
    DiscordEmbed,
    DiscordEmbedField,
    DiscordEmbedMedia,
    DiscordStatusColor,
    DiscordWebhookPayload,
    status_color,
    utc_timestamp,
)

logger = logging.getLogger(__name__)

WEBHOOK_URL_PREFIX = "https://discord.com/api/webhooks/"
DEFAULT_TIMEOUT_MS = 10000

# Discord webhook constraints from the public API docs.
_MAX_EMBEDS = 10

EmbedLike = DiscordEmbed | Mapping[str, Any]


def _as_embeds(embeds: Sequence[EmbedLike]) -> list[DiscordEmbed]:
    return [embed if isinstance(embed, DiscordEmbed) else DiscordEmbed.from_dict(embed) for embed in embeds]


class DiscordWebhookClient:
    """
    Discord webhook client bound to a single endpoint.

    The endpoint and identity (display name, avatar, timeout) are fixed at
    construction. Every send opens its own HTTP client, so one instance can
    be shared by concurrent tasks without coordination. Failures are raised
    as ``DiscordWebhookError`` subclasses and never retried.
    """

    STATUS_COLORS = STATUS_COLORS

    def __init__(
        self,
        endpoint: str | None,
        *,
        display_name: str | None = None,
        avatar_url: str | None = None,
        timeout_ms: int | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        if not endpoint or not endpoint.startswith(WEBHOOK_URL_PREFIX):
            raise ConfigurationError(f"Invalid webhook URL {endpoint!r}: must start with {WEBHOOK_URL_PREFIX}")
        try:
            httpx.URL(endpoint)
        except httpx.InvalidURL as exc:
            raise ConfigurationError(f"Invalid webhook URL {endpoint!r}: {exc}") from exc

        self._endpoint = endpoint
        self._display_name = display_name
        self._avatar_url = avatar_url
        self._timeout_ms = timeout_ms or DEFAULT_TIMEOUT_MS
        self._transport = transport

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> DiscordWebhookClient:
        """
        Build a client from ``DISCORD_WEBHOOK_URL`` and the optional
        ``DISCORD_WEBHOOK_USERNAME``, ``DISCORD_WEBHOOK_AVATAR_URL`` and
        ``DISCORD_WEBHOOK_TIMEOUT_MS`` variables.
        """
        env = os.environ if environ is None else environ

        raw_timeout = env.get("DISCORD_WEBHOOK_TIMEOUT_MS")
        timeout_ms = None
        if raw_timeout:
            try:
                timeout_ms = int(raw_timeout)
            except ValueError as exc:
                raise ConfigurationError(f"DISCORD_WEBHOOK_TIMEOUT_MS must be an integer, got {raw_timeout!r}") from exc

        return cls(
            env.get("DISCORD_WEBHOOK_URL"),
            display_name=env.get("DISCORD_WEBHOOK_USERNAME") or None,
            avatar_url=env.get("DISCORD_WEBHOOK_AVATAR_URL") or None,
            timeout_ms=timeout_ms,
        )

    @property
    def endpoint(self) -> str:
        return self._endpoint

    @property
    def display_name(self) -> str | None:
        return self._display_name

    @property
    def avatar_url(self) -> str | None:
        return self._avatar_url

    @property
    def timeout_ms(self) -> int:
        return self._timeout_ms

    async def send(self, content: str, embeds: Sequence[EmbedLike] | None = None) -> None:
        """Send a plain message with optional pre-built embeds."""
        payload = self._payload(content=content, embeds=_as_embeds(embeds) if embeds is not None else None)
        await self._dispatch(payload, "message")

    async def send_status(
        self,
        status: DiscordStatusColor | str,
        title: str,
        description: str | None = None,
        fields: Sequence[DiscordEmbedField] | None = None,
        image_url: str | None = None,
    ) -> None:
        """Send a single embed colored after ``status`` and stamped with the current time."""
        try:
            color = status_color(status)
        except ValueError as exc:
            raise ValidationError(f"Failed to send status embed: unknown status {status!r}") from exc

        embed = DiscordEmbed(title=title, color=color, timestamp=utc_timestamp())
        if description:
            embed.description = description
        if fields:
            embed.fields = list(fields)
        if image_url:
            embed.image = DiscordEmbedMedia(url=image_url)

        await self._dispatch(self._payload(embeds=[embed]), "status embed")

    async def send_embeds(self, embeds: Sequence[EmbedLike]) -> None:
        """Send 1 to 10 embeds, given as ``DiscordEmbed`` or in their wire (dict) form."""
        if len(embeds) == 0:
            raise ValidationError("Failed to send embeds: at least one embed required")
        if len(embeds) > _MAX_EMBEDS:
            raise ValidationError(f"Failed to send embeds: maximum {_MAX_EMBEDS} embeds allowed, got {len(embeds)}")

        await self._dispatch(self._payload(embeds=_as_embeds(embeds)), "embeds")

    def create_embed(self) -> DiscordEmbedBuilder:
        return DiscordEmbedBuilder()

    def _payload(self, *, content: str | None = None, embeds: list[DiscordEmbed] | None = None) -> DiscordWebhookPayload:
        return DiscordWebhookPayload(
            content=content,
            username=self._display_name,
            avatar_url=self._avatar_url,
            embeds=embeds,
        )

    async def _dispatch(self, data: DiscordWebhookPayload, what: str) -> None:
        payload = data.to_dict()
        logger.debug("Sending %s to Discord webhook: %s", what, payload)

        try:
            response = await asyncio.wait_for(self._post(payload), timeout=self._timeout_ms / 1000)
        except (asyncio.TimeoutError, httpx.TimeoutException) as exc:
            raise WebhookTimeoutError(
                f"Failed to send {what}: request timeout after {self._timeout_ms}ms",
                timeout_ms=self._timeout_ms,
            ) from exc
        except httpx.HTTPError as exc:
            raise TransportError(f"Failed to send {what}: {str(exc) or type(exc).__name__}") from exc

        logger.debug("Discord webhook answered %s: %s", response.status_code, response.content)

        if not response.is_success:
            raise RemoteError(
                f"Failed to send {what}: Discord API error: "
                f"{response.status_code} {response.reason_phrase} - {response.text}",
                status_code=response.status_code,
                reason=response.reason_phrase,
                body=response.text,
            )

    async def _post(self, payload: dict[str, Any]) -> httpx.Response:
        # A cancelled request closes its client on the way out of the block.
        async with httpx.AsyncClient(transport=self._transport, timeout=self._timeout_ms / 1000) as client:
            return await client.post(
                self._endpoint,
                json=payload,
                headers={"Content-Type": "application/json"},
            )


async def send_webhook(
    endpoint: str,
    content: str,
    *,
    display_name: str | None = None,
    avatar_url: str | None = None,
    embeds: Sequence[EmbedLike] | None = None,
    timeout_ms: int | None = None,
) -> None:
    """Send a one-off message without keeping a client around."""
    client = DiscordWebhookClient(endpoint, display_name=display_name, avatar_url=avatar_url, timeout_ms=timeout_ms)
    await client.send(content, embeds)


async def send_status(
    endpoint: str,
    status: DiscordStatusColor | str,
    title: str,
    description: str | None = None,
    *,
    display_name: str | None = None,
    avatar_url: str | None = None,
    fields: Sequence[DiscordEmbedField] | None = None,
    image_url: str | None = None,
    timeout_ms: int | None = None,
) -> None:
    """Send a one-off status embed without keeping a client around."""
    client = DiscordWebhookClient(endpoint, display_name=display_name, avatar_url=avatar_url, timeout_ms=timeout_ms)
    await client.send_status(status, title, description, fields, image_url)


__all__ = [
    "DEFAULT_TIMEOUT_MS",
    "WEBHOOK_URL_PREFIX",
    "DiscordWebhookClient",
    "send_status",
    "send_webhook",
]
