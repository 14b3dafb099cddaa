"""Rich console handler for Cover Art Archive lookups.

Where: platform/logging/handlers.py
What: Render structured lookup events with icons, colours and compact URLs.
Why: Keep formatting separate from logger setup so configuration stays concise.
"""

from __future__ import annotations

import logging
from typing import Any, ClassVar, override
from urllib.parse import urlsplit

from rich.console import ConsoleRenderable
from rich.logging import RichHandler
from rich.style import Style
from rich.text import Text

from .events import ArchiveEvent


class CoverArtRichHandler(RichHandler):
    """Rich handler that highlights request URLs and lookup outcomes."""

    _EVENT_STYLES: ClassVar[dict[str, tuple[str, str]]] = {
        ArchiveEvent.REQUEST_START: ("🌐", "blue"),
        ArchiveEvent.REQUEST_SUCCESS: ("📥", "green"),
        ArchiveEvent.REQUEST_ERROR: ("⛔", "red"),
        ArchiveEvent.LOOKUP_COMPLETE: ("🖼️", "green"),
    }
    _EVENT_PREFIXES: ClassVar[dict[str, str]] = {
        ArchiveEvent.REQUEST_START: "Requesting ",
        ArchiveEvent.REQUEST_SUCCESS: "Fetched ",
        ArchiveEvent.REQUEST_ERROR: "Failed ",
        ArchiveEvent.LOOKUP_COMPLETE: "Cover art ",
    }

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        """Initialize the handler with custom settings.

        Args:
            *args: Positional arguments to pass to RichHandler.
            **kwargs: Keyword arguments to pass to RichHandler.
        """
        kwargs["show_time"] = False
        kwargs["show_path"] = False
        kwargs["show_level"] = False
        kwargs["rich_tracebacks"] = True
        kwargs["markup"] = True
        kwargs["omit_repeated_times"] = False
        super().__init__(*args, **kwargs)

    @staticmethod
    def _format_url(url: str) -> Text:
        """Drop the scheme and colour the path separators of ``url``."""

        parts = urlsplit(url)
        display = f"{parts.netloc}{parts.path}" if parts.netloc else url

        text = Text()
        for char in display:
            if char == "/":
                _ = text.append(char, style=Style(color="magenta"))
            else:
                _ = text.append(char, style=Style(color="white"))
        return text

    def _render_event_message(self, record: logging.LogRecord) -> Text | None:
        """Render records carrying a ``caa_event`` extra."""

        event = getattr(record, "caa_event", None)
        if not isinstance(event, str):
            return None

        icon, color = self._EVENT_STYLES.get(event, ("ℹ️", "blue"))
        text = Text()
        _ = text.append(f"{icon} ", style=Style(color=color, bold=True))

        body = Text(style=Style(color=color))
        prefix = self._EVENT_PREFIXES.get(event)
        if prefix:
            _ = body.append(prefix)

        url = getattr(record, "url", None)
        if isinstance(url, str) and url:
            _ = body.append_text(self._format_url(url))

        details: list[str] = []
        status = getattr(record, "status", None)
        if isinstance(status, int):
            details.append(f"status={status}")
        if event == ArchiveEvent.LOOKUP_COMPLETE:
            image_count = getattr(record, "image_count", None)
            if isinstance(image_count, int):
                details.append(f"images={image_count}")
            if getattr(record, "has_front", False):
                details.append("front")
            if getattr(record, "has_back", False):
                details.append("back")
        error_message = getattr(record, "error_message", None)
        if error_message:
            details.append(str(error_message))
        if details:
            _ = body.append(" (" + ", ".join(details) + ")")

        _ = text.append_text(body)
        return text

    @override
    def render_message(self, record: logging.LogRecord, message: str) -> ConsoleRenderable:
        """Render message with custom styling for lookup events."""

        event_text = self._render_event_message(record)
        if event_text is not None:
            return event_text

        return super().render_message(record, message)


__all__ = ["CoverArtRichHandler"]
