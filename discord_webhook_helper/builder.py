from __future__ import annotations

from collections.abc import Iterable

from .models import (
    DiscordEmbed,
    DiscordEmbedField,
    DiscordEmbedFooter,
    DiscordEmbedMedia,
    DiscordStatusColor,
    status_color,
    utc_timestamp,
)


class DiscordEmbedBuilder:
    """
    Fluent builder for a single embed. Every setter returns the builder so
    calls can be chained; nothing is validated here, Discord rejects
    malformed values when the embed is sent.

    ``build`` returns the builder's own embed instance rather than a copy,
    so further calls on the builder keep mutating an embed that was already
    handed out. Discard the builder once the embed is built.
    """

    def __init__(self) -> None:
        self._embed = DiscordEmbed()

    def set_title(self, title: str) -> DiscordEmbedBuilder:
        self._embed.title = title
        return self

    def set_description(self, description: str) -> DiscordEmbedBuilder:
        self._embed.description = description
        return self

    def set_url(self, url: str) -> DiscordEmbedBuilder:
        self._embed.url = url
        return self

    def set_color(self, color: int) -> DiscordEmbedBuilder:
        self._embed.color = color
        return self

    def set_status_color(self, status: DiscordStatusColor | str) -> DiscordEmbedBuilder:
        self._embed.color = status_color(status)
        return self

    def set_timestamp(self) -> DiscordEmbedBuilder:
        self._embed.timestamp = utc_timestamp()
        return self

    def set_footer(self, text: str, icon_url: str | None = None) -> DiscordEmbedBuilder:
        self._embed.footer = DiscordEmbedFooter(text=text, icon_url=icon_url)
        return self

    def set_image(self, url: str) -> DiscordEmbedBuilder:
        self._embed.image = DiscordEmbedMedia(url=url)
        return self

    def set_thumbnail(self, url: str) -> DiscordEmbedBuilder:
        self._embed.thumbnail = DiscordEmbedMedia(url=url)
        return self

    def add_field(self, name: str, value: str, inline: bool = False) -> DiscordEmbedBuilder:
        if self._embed.fields is None:
            self._embed.fields = []
        self._embed.fields.append(DiscordEmbedField(name=name, value=value, inline=inline))
        return self

    def add_fields(self, fields: Iterable[DiscordEmbedField]) -> DiscordEmbedBuilder:
        for field in fields:
            self.add_field(field.name, field.value, field.inline)
        return self

    def build(self) -> DiscordEmbed:
        return self._embed


__all__ = ["DiscordEmbedBuilder"]
