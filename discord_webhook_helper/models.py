"""
Dataclass representations of Discord webhook payloads.

Reference:
https://discord.com/developers/docs/resources/webhook#execute-webhook-jsonform-params
"""

from __future__ import annotations

import dataclasses
import datetime
import enum
import types
from collections.abc import Iterable, Mapping
from typing import Any


class DiscordStatusColor(str, enum.Enum):
    """Status levels that map onto a fixed embed color."""

    SUCCESS = "success"
    WARNING = "warning"
    ERROR = "error"
    INFO = "info"


STATUS_COLORS: Mapping[DiscordStatusColor, int] = types.MappingProxyType(
    {
        DiscordStatusColor.SUCCESS: 0x57F287,  # green
        DiscordStatusColor.WARNING: 0xFEE75C,  # yellow
        DiscordStatusColor.ERROR: 0xED4245,  # red
        DiscordStatusColor.INFO: 0x5865F2,  # blurple
    }
)


def status_color(status: DiscordStatusColor | str) -> int:
    return STATUS_COLORS[DiscordStatusColor(status)]


def utc_timestamp() -> str:
    """Current instant as ISO-8601 with millisecond precision, e.g. ``2026-01-01T00:00:00.000Z``."""
    now = datetime.datetime.now(datetime.timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def _without_none(items: list[tuple[str, Any]]) -> dict[str, Any]:
    # Unset attributes are left out of the wire payload entirely.
    return {key: value for key, value in items if value is not None}


@dataclasses.dataclass
class DiscordEmbedField:
    """Represents a single field in an embed."""

    name: str
    value: str
    inline: bool = False

    def __str__(self) -> str:  # pragma: no cover - utility formatting
        return f"{self.name}: {self.value}"


@dataclasses.dataclass
class DiscordEmbedFooter:
    text: str
    icon_url: str | None = None


@dataclasses.dataclass
class DiscordEmbedMedia:
    """Image or thumbnail reference."""

    url: str


@dataclasses.dataclass
class DiscordEmbed:
    """Represents an embed object. Every attribute is optional."""

    title: str | None = None
    description: str | None = None
    url: str | None = None
    timestamp: str | None = None
    color: int | None = None
    footer: DiscordEmbedFooter | None = None
    image: DiscordEmbedMedia | None = None
    thumbnail: DiscordEmbedMedia | None = None
    fields: list[DiscordEmbedField] | None = None

    def to_dict(self) -> dict[str, Any]:
        return dataclasses.asdict(self, dict_factory=_without_none)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> DiscordEmbed:
        """Build an embed from its wire representation."""
        footer = data.get("footer")
        image = data.get("image")
        thumbnail = data.get("thumbnail")
        fields = data.get("fields")
        return cls(
            title=data.get("title"),
            description=data.get("description"),
            url=data.get("url"),
            timestamp=data.get("timestamp"),
            color=data.get("color"),
            footer=DiscordEmbedFooter(footer["text"], footer.get("icon_url")) if footer is not None else None,
            image=DiscordEmbedMedia(image["url"]) if image is not None else None,
            thumbnail=DiscordEmbedMedia(thumbnail["url"]) if thumbnail is not None else None,
            fields=_fields_from_dicts(fields) if fields is not None else None,
        )

    def __str__(self) -> str:  # pragma: no cover - utility formatting
        return "\n".join(map(str, self.fields or []))


def _fields_from_dicts(fields: Iterable[Mapping[str, Any]]) -> list[DiscordEmbedField]:
    return [DiscordEmbedField(field["name"], field["value"], bool(field.get("inline", False))) for field in fields]


@dataclasses.dataclass
class DiscordWebhookPayload:
    """Top-level webhook payload."""

    content: str | None = None
    username: str | None = None
    avatar_url: str | None = None
    embeds: list[DiscordEmbed] | None = None

    def to_dict(self) -> dict[str, Any]:
        return dataclasses.asdict(self, dict_factory=_without_none)

    def __str__(self) -> str:  # pragma: no cover - utility formatting
        return f"{self.content}:\n" + "\n".join(map(str, self.embeds or []))


__all__ = [
    "STATUS_COLORS",
    "DiscordEmbed",
    "DiscordEmbedField",
    "DiscordEmbedFooter",
    "DiscordEmbedMedia",
    "DiscordStatusColor",
    "DiscordWebhookPayload",
    "status_color",
    "utc_timestamp",
]
