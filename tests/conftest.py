"""Shared pytest fixtures: a recording HTTP client and sample listings."""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any

import pytest

from coverartarchive.platform.http import HTTPResponse

RELEASE_MBID: str = "76df3287-6cda-33eb-8e9a-044b5e15ffdd"


class FakeHTTPClient:
    """Return a canned response and record every GET."""

    def __init__(self, status: int = 200, body: Any = None, *, text: str | None = None) -> None:
        self.status: int = status
        self.text: str = text if text is not None else json.dumps(body if body is not None else {})
        self.calls: list[tuple[str, dict[str, str]]] = []

    def get(self, url: str, headers: Mapping[str, str]) -> HTTPResponse:
        self.calls.append((url, dict(headers)))
        return HTTPResponse(status=self.status, headers={}, text=self.text)


def image_record(
    image_id: int,
    *,
    front: bool = False,
    back: bool = False,
    types: list[str] | None = None,
) -> dict[str, Any]:
    """Build one image record shaped like the service output."""

    base = f"http://coverartarchive.org/release/{RELEASE_MBID}/{image_id}"
    return {
        "approved": True,
        "back": back,
        "comment": "",
        "edit": 20202510 + image_id,
        "front": front,
        "id": image_id,
        "image": f"{base}.jpg",
        "thumbnails": {
            "250": f"{base}-250.jpg",
            "500": f"{base}-500.jpg",
            "1200": f"{base}-1200.jpg",
            "large": f"{base}-500.jpg",
            "small": f"{base}-250.jpg",
        },
        "types": types if types is not None else [],
    }


@pytest.fixture
def sample_listing() -> dict[str, Any]:
    """A listing with a front cover, a back cover and a booklet page."""

    return {
        "images": [
            image_record(829521842, front=True, types=["Front"]),
            image_record(829521843, back=True, types=["Back"]),
            image_record(829521844, types=["Booklet"]),
        ],
        "release": f"https://musicbrainz.org/release/{RELEASE_MBID}",
    }


@pytest.fixture
def make_image() -> Any:
    """Expose ``image_record`` to tests."""

    return image_record


@pytest.fixture
def fake_http() -> Any:
    """Factory building ``FakeHTTPClient`` instances."""

    return FakeHTTPClient
