"""Where: src/coverartarchive/domain/models.py
What: Typed records for Cover Art Archive image listings.
Why: Turn raw JSON into immutable values before they reach callers.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import StrEnum
from typing import Any, cast

from .errors import InvalidArgumentError


class ResourceType(StrEnum):
    """Entities the Cover Art Archive serves images for."""

    RELEASE = "release"
    RELEASE_GROUP = "release-group"

    @classmethod
    def parse(cls, value: str) -> "ResourceType":
        """Return the member matching ``value`` or raise ``InvalidArgumentError``."""

        try:
            return cls(value)
        except ValueError:
            allowed = ", ".join(member.value for member in cls)
            raise InvalidArgumentError(
                f"Invalid resource type {value!r}; expected one of: {allowed}"
            ) from None


def truthy(value: Any) -> bool:
    """Return True when the value represents an affirmative flag."""

    if isinstance(value, bool):
        return value
    if value is None:
        return False
    return str(value).strip().lower() in {"true", "1", "yes", "y", "t"}


def _optional_str(value: Any) -> str | None:
    """Return ``value`` as text, mapping ``None`` and empty strings to ``None``."""

    if value is None:
        return None
    text = str(value)
    return text or None


_KNOWN_THUMBNAIL_KEYS = frozenset({"small", "large", "250", "500", "1200"})
# The service publishes the same files under both spellings.
_THUMBNAIL_ALIASES = {"small": "250", "250": "small", "large": "500", "500": "large"}


@dataclass(frozen=True, slots=True)
class Thumbnails:
    """Pre-sized renditions of one image, keyed by size."""

    small: str | None = None
    large: str | None = None
    size_250: str | None = None
    size_500: str | None = None
    size_1200: str | None = None
    extra: tuple[tuple[str, str], ...] = ()

    @classmethod
    def from_payload(cls, payload: Any) -> "Thumbnails":
        """Build thumbnails from the raw ``thumbnails`` object (or ``None``)."""

        if not isinstance(payload, dict):
            return cls()
        raw = cast(dict[str, Any], payload)
        extra = tuple(
            sorted(
                (str(key), str(value))
                for key, value in raw.items()
                if key not in _KNOWN_THUMBNAIL_KEYS and value is not None
            )
        )
        return cls(
            small=_optional_str(raw.get("small")),
            large=_optional_str(raw.get("large")),
            size_250=_optional_str(raw.get("250")),
            size_500=_optional_str(raw.get("500")),
            size_1200=_optional_str(raw.get("1200")),
            extra=extra,
        )

    def _lookup(self, size: str) -> str | None:
        known = {
            "small": self.small,
            "large": self.large,
            "250": self.size_250,
            "500": self.size_500,
            "1200": self.size_1200,
        }
        if size in known:
            return known[size]
        return dict(self.extra).get(size)

    def get(self, size: str | int) -> str | None:
        """Return the thumbnail URL for ``size`` (``"250"``, ``"small"``, ``1200`` ...)."""

        key = str(size)
        found = self._lookup(key)
        if found is None and key in _THUMBNAIL_ALIASES:
            found = self._lookup(_THUMBNAIL_ALIASES[key])
        return found

    def as_dict(self) -> dict[str, str]:
        """Return the thumbnails as the service spelled them."""

        result: dict[str, str] = {}
        for key in ("small", "large", "250", "500", "1200"):
            value = self._lookup(key)
            if value is not None:
                result[key] = value
        result.update(self.extra)
        return result


@dataclass(frozen=True, slots=True)
class CoverArtImage:
    """One image entry of a Cover Art Archive listing.

    ``comment`` keeps the text the service sent (often ``""``) and is ``None``
    only when the field is absent. Thumbnail URLs and ``id`` treat empty
    strings as missing.
    """

    image: str
    thumbnails: Thumbnails
    approved: bool
    is_front: bool
    is_back: bool
    id: str | None = None
    types: tuple[str, ...] = ()
    comment: str | None = None
    edit: int | None = None

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "CoverArtImage":
        """Build an image from one raw JSON record.

        Raises:
            ValueError: If the record has no usable ``image`` URL.
        """
        image = payload.get("image")
        if not isinstance(image, str) or not image:
            raise ValueError("image record is missing its 'image' URL")

        types_raw = payload.get("types")
        types: tuple[str, ...] = ()
        if isinstance(types_raw, list):
            types = tuple(str(item) for item in cast(list[object], types_raw))

        comment = payload.get("comment")
        edit_raw = payload.get("edit")
        edit = edit_raw if isinstance(edit_raw, int) and not isinstance(edit_raw, bool) else None

        return cls(
            image=image,
            thumbnails=Thumbnails.from_payload(payload.get("thumbnails")),
            approved=truthy(payload.get("approved")),
            is_front=truthy(payload.get("front")),
            is_back=truthy(payload.get("back")),
            id=_optional_str(payload.get("id")),
            types=types,
            comment=comment if isinstance(comment, str) else None,
            edit=edit,
        )

    def thumbnail(self, size: str | int) -> str | None:
        """Shortcut for ``self.thumbnails.get(size)``."""

        return self.thumbnails.get(size)


__all__ = [
    "CoverArtImage",
    "ResourceType",
    "Thumbnails",
    "truthy",
]
