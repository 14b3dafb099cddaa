"""
Summary: Exercise the CoverArt lookup against a recording HTTP client.
Why: Guard request shape, population order and error reporting.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import pytest

from coverartarchive import (
    Config,
    CoverArt,
    CoverArtError,
    InvalidArgumentError,
    NotFoundError,
    ResourceType,
    ServerError,
    TransportError,
)
from coverartarchive.platform.http import HTTPResponse
from coverartarchive.platform.logging import setup_logger

MBID = "76df3287-6cda-33eb-8e9a-044b5e15ffdd"


def test_request_targets_release_endpoint_with_json_accept(fake_http: Any) -> None:
    client = fake_http(body={"images": []})

    _ = CoverArt("release", MBID, client)

    assert len(client.calls) == 1
    url, headers = client.calls[0]
    assert url == f"https://coverartarchive.org/release/{MBID}"
    assert headers["Accept"] == "application/json"
    assert headers["User-Agent"].startswith("coverartarchive/")


def test_request_targets_release_group_endpoint(fake_http: Any) -> None:
    client = fake_http(body={})

    art = CoverArt.for_release_group(MBID, client)

    assert client.calls[0][0] == f"https://coverartarchive.org/release-group/{MBID}"
    assert art.resource_type is ResourceType.RELEASE_GROUP


def test_config_overrides_base_url_and_user_agent(fake_http: Any) -> None:
    client = fake_http(body={})
    config = Config(
        base_url="http://localhost:8080/",
        app_name="tagger",
        app_version="2.0",
        contact="mailto:me@example.com",
    )

    _ = CoverArt.for_release(MBID, client, config=config)

    url, headers = client.calls[0]
    assert url == f"http://localhost:8080/release/{MBID}"
    assert headers["User-Agent"] == "tagger/2.0 (mailto:me@example.com)"


def test_populates_images_in_response_order(fake_http: Any, sample_listing: dict[str, Any]) -> None:
    art = CoverArt("release", MBID, fake_http(body=sample_listing))

    images = art.get_images()
    assert [image.id for image in images] == ["829521842", "829521843", "829521844"]
    assert art.get_front_image() is images[0]
    assert art.get_back_image() is images[1]
    assert images[2].types == ("Booklet",)
    assert art.release == f"https://musicbrainz.org/release/{MBID}"
    assert art.get_mbid() == MBID


def test_single_front_image_is_returned(fake_http: Any, make_image: Any) -> None:
    listing = {"images": [make_image(1), make_image(2, front=True), make_image(3)]}

    art = CoverArt("release", MBID, fake_http(body=listing))

    assert art.get_front_image().id == "2"
    with pytest.raises(NotFoundError):
        _ = art.get_back_image()


def test_last_flagged_image_wins(fake_http: Any, make_image: Any) -> None:
    listing = {
        "images": [
            make_image(1, front=True, back=True),
            make_image(2, front=True),
            make_image(3, back=True),
        ]
    }

    art = CoverArt("release", MBID, fake_http(body=listing))

    assert art.get_front_image().id == "2"
    assert art.get_back_image().id == "3"


def test_missing_images_field_yields_empty_listing(fake_http: Any) -> None:
    art = CoverArt("release", MBID, fake_http(body={"release": "https://musicbrainz.org/release/x"}))

    assert art.get_images() == []
    assert art.front is None
    assert art.back is None
    with pytest.raises(NotFoundError, match="No front image was found"):
        _ = art.get_front_image()
    with pytest.raises(NotFoundError, match="No back image was found"):
        _ = art.get_back_image()


def test_null_images_field_yields_empty_listing(fake_http: Any) -> None:
    art = CoverArt("release", MBID, fake_http(body={"images": None}))

    assert art.images == ()


def test_get_images_returns_a_copy(fake_http: Any, sample_listing: dict[str, Any]) -> None:
    art = CoverArt("release", MBID, fake_http(body=sample_listing))

    images = art.get_images()
    images.clear()

    assert len(art.get_images()) == 3


def test_braced_mbid_is_accepted(fake_http: Any) -> None:
    client = fake_http(body={})

    art = CoverArt("release", "{" + MBID + "}", client)

    assert art.mbid == "{" + MBID + "}"


@pytest.mark.parametrize("resource_type", ["recording", "Release", "", "releases"])
def test_invalid_resource_type_fails_before_request(fake_http: Any, resource_type: str) -> None:
    client = fake_http(body={})

    with pytest.raises(InvalidArgumentError, match="Invalid resource type"):
        _ = CoverArt(resource_type, MBID, client)

    assert client.calls == []


def test_invalid_mbid_fails_before_request(fake_http: Any) -> None:
    client = fake_http(body={})

    with pytest.raises(InvalidArgumentError, match="Invalid MusicBrainz ID"):
        _ = CoverArt("release", "4dbf5678-7a31-406a-abbe-232f8az2cd63", client)

    assert client.calls == []


def test_invalid_argument_is_a_value_error(fake_http: Any) -> None:
    with pytest.raises(ValueError):
        _ = CoverArt("release", "not-an-mbid", fake_http(body={}))


@pytest.mark.parametrize("status", [404, 400, 503, 307])
def test_non_200_status_raises_server_error(fake_http: Any, status: int) -> None:
    with pytest.raises(ServerError) as excinfo:
        _ = CoverArt("release", MBID, fake_http(status=status, text="Not Found"))

    assert excinfo.value.status == status
    assert excinfo.value.url == f"https://coverartarchive.org/release/{MBID}"


@pytest.mark.parametrize(
    "text",
    [
        "<html>oops</html>",
        "[]",
        '"images"',
        '{"images": {"0": {}}}',
        '{"images": ["http://example.com/1.jpg"]}',
        '{"images": [{"front": true}]}',
    ],
)
def test_unusable_payload_raises_server_error(fake_http: Any, text: str) -> None:
    with pytest.raises(ServerError):
        _ = CoverArt("release", MBID, fake_http(text=text))


def test_transport_errors_propagate() -> None:
    class _FailingClient:
        def get(self, url: str, headers: dict[str, str]) -> HTTPResponse:
            raise TransportError(f"GET {url} failed: connection refused")

    with pytest.raises(TransportError):
        _ = CoverArt("release", MBID, _FailingClient())


def test_injected_client_errors_propagate_unchanged() -> None:
    class _BrokenClient:
        def get(self, url: str, headers: dict[str, str]) -> HTTPResponse:
            raise ConnectionResetError("peer reset")

    with pytest.raises(ConnectionResetError):
        _ = CoverArt("release", MBID, _BrokenClient())


def test_all_errors_share_a_base_class(fake_http: Any) -> None:
    with pytest.raises(CoverArtError):
        _ = CoverArt("release", MBID, fake_http(status=500))


def test_lookup_logs_completion_event(
    fake_http: Any, sample_listing: dict[str, Any], caplog: pytest.LogCaptureFixture
) -> None:
    with caplog.at_level(logging.DEBUG, logger="coverartarchive"):
        _ = CoverArt("release", MBID, fake_http(body=sample_listing))

    events = [getattr(record, "caa_event", None) for record in caplog.records]
    assert "archive.request.start" in events
    complete = [r for r in caplog.records if getattr(r, "caa_event", None) == "archive.lookup.complete"]
    assert len(complete) == 1
    assert getattr(complete[0], "image_count") == 3
    assert getattr(complete[0], "has_front") is True


def test_default_client_uses_requests_adapter(mocker: Any) -> None:
    response = mocker.Mock(status_code=200, text='{"images": []}', headers={})
    get = mocker.patch("coverartarchive.platform.http.http_client.requests.get", return_value=response)

    art = CoverArt("release", MBID, config=Config(connect_timeout=1.0, read_timeout=2.0))

    assert art.get_images() == []
    get.assert_called_once()
    assert get.call_args.kwargs["timeout"] == (1.0, 2.0)


def test_repr_mentions_identifier(fake_http: Any, sample_listing: dict[str, Any]) -> None:
    art = CoverArt("release", MBID, fake_http(body=sample_listing))

    assert repr(art) == f"CoverArt(resource_type='release', mbid='{MBID}', images=3)"


def test_configured_log_file_receives_lookup_records(
    fake_http: Any, sample_listing: dict[str, Any], tmp_path: Path
) -> None:
    log_file = tmp_path / "caa.log"
    try:
        _ = CoverArt("release", MBID, fake_http(body=sample_listing), config=Config(log_file=log_file))
        for handler in logging.getLogger("coverartarchive").handlers:
            handler.flush()

        content = log_file.read_text(encoding="utf-8")
        assert f"GET https://coverartarchive.org/release/{MBID}" in content
        assert f"Cover art for release {MBID}: 3 image(s)" in content
    finally:
        _ = setup_logger()
