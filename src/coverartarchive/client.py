"""Where: src/coverartarchive/client.py
What: Cover Art Archive lookup for one release or release group.
Why: Validate the identifier, fetch the JSON listing once and expose the
     images, including the designated front and back covers.

See https://musicbrainz.org/doc/Cover_Art_Archive/API for the service.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any, cast

from coverartarchive.config import Config
from coverartarchive.domain.errors import InvalidArgumentError, NotFoundError, ServerError
from coverartarchive.domain.mbid import is_valid_mbid
from coverartarchive.domain.models import CoverArtImage, ResourceType
from coverartarchive.platform.http import HTTPClient, RequestsHTTPClient, format_user_agent
from coverartarchive.platform.logging import ArchiveEvent, logger


def _build_url(base_url: str, resource_type: ResourceType, mbid: str) -> str:
    return f"{base_url.rstrip('/')}/{resource_type.value}/{mbid}"


def _decode_listing(text: str, url: str) -> dict[str, Any]:
    """Decode the response body into the top-level JSON object."""

    try:
        payload = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ServerError(f"Malformed JSON from {url}: {exc}", url=url) from exc
    if not isinstance(payload, dict):
        raise ServerError(f"Expected a JSON object from {url}", url=url)
    return cast(dict[str, Any], payload)


def _parse_images(
    payload: Mapping[str, Any], url: str
) -> tuple[list[CoverArtImage], CoverArtImage | None, CoverArtImage | None]:
    """Materialise image records in response order.

    Returns the images plus the front and back image; when several records
    claim the same flag the last one wins.
    """

    images_raw = payload.get("images")
    if images_raw is None:
        return [], None, None
    if not isinstance(images_raw, list):
        raise ServerError(f"'images' is not a list in response from {url}", url=url)

    images: list[CoverArtImage] = []
    front: CoverArtImage | None = None
    back: CoverArtImage | None = None
    for index, record in enumerate(cast(list[object], images_raw)):
        if not isinstance(record, dict):
            raise ServerError(f"Image #{index} is not an object in response from {url}", url=url)
        try:
            image = CoverArtImage.from_payload(cast(dict[str, Any], record))
        except ValueError as exc:
            raise ServerError(f"Image #{index} from {url}: {exc}", url=url) from exc
        if image.is_front:
            front = image
        if image.is_back:
            back = image
        images.append(image)
    return images, front, back


class CoverArt:
    """Cover art listing for a MusicBrainz release or release group.

    The lookup happens during construction, so an instance is always fully
    populated.

    Raises:
        InvalidArgumentError: Unknown resource type or malformed MBID.
        TransportError: The default HTTP client could not complete the request.
        ServerError: Non-200 status or an unusable payload.
    """

    def __init__(
        self,
        resource_type: ResourceType | str,
        mbid: str,
        http_client: HTTPClient | None = None,
        *,
        config: Config | None = None,
    ) -> None:
        self._config: Config = config if config is not None else Config()
        _ = self._config.configure_logging()
        self._resource_type: ResourceType = ResourceType.parse(resource_type)
        self._mbid: str = self._validated_mbid(mbid)
        self._http_client: HTTPClient = (
            http_client
            if http_client is not None
            else RequestsHTTPClient(self._config.connect_timeout, self._config.read_timeout)
        )

        url = _build_url(self._config.base_url, self._resource_type, self._mbid)
        payload = self._call(url)
        images, front, back = _parse_images(payload, url)
        release = payload.get("release")

        self._images: tuple[CoverArtImage, ...] = tuple(images)
        self._front: CoverArtImage | None = front
        self._back: CoverArtImage | None = back
        self._release: str | None = release if isinstance(release, str) else None

        logger.info(
            "Cover art for %s %s: %d image(s)",
            self._resource_type.value,
            self._mbid,
            len(self._images),
            extra={
                "caa_event": ArchiveEvent.LOOKUP_COMPLETE,
                "url": url,
                "image_count": len(self._images),
                "has_front": front is not None,
                "has_back": back is not None,
            },
        )

    @classmethod
    def for_release(
        cls, mbid: str, http_client: HTTPClient | None = None, *, config: Config | None = None
    ) -> "CoverArt":
        """Look up the cover art of a release."""

        return cls(ResourceType.RELEASE, mbid, http_client, config=config)

    @classmethod
    def for_release_group(
        cls, mbid: str, http_client: HTTPClient | None = None, *, config: Config | None = None
    ) -> "CoverArt":
        """Look up the cover art of a release group."""

        return cls(ResourceType.RELEASE_GROUP, mbid, http_client, config=config)

    @staticmethod
    def is_valid_mbid(mbid: str) -> bool:
        """Checks whether ``mbid`` is a valid MusicBrainz identifier."""

        return is_valid_mbid(mbid)

    @staticmethod
    def _validated_mbid(mbid: str) -> str:
        if not is_valid_mbid(mbid):
            raise InvalidArgumentError(f"Invalid MusicBrainz ID: {mbid!r}")
        return mbid

    def _call(self, url: str) -> dict[str, Any]:
        """Perform the GET request and decode the JSON body."""

        headers = {
            "Accept": "application/json",
            "User-Agent": format_user_agent(
                self._config.app_name, self._config.app_version, self._config.contact
            ),
        }
        logger.debug(
            "GET %s",
            url,
            extra={"caa_event": ArchiveEvent.REQUEST_START, "url": url},
        )
        response = self._http_client.get(url, headers)

        if response.status != 200:
            logger.warning(
                "Bad response from Cover Art Archive: status=%s url=%s",
                response.status,
                url,
                extra={"caa_event": ArchiveEvent.REQUEST_ERROR, "url": url, "status": response.status},
            )
            raise ServerError(
                f"Bad response from server (status {response.status}) for {url}",
                status=response.status,
                url=url,
            )

        logger.debug(
            "Fetched %s",
            url,
            extra={"caa_event": ArchiveEvent.REQUEST_SUCCESS, "url": url, "status": response.status},
        )
        try:
            return _decode_listing(response.text, url)
        except ServerError as exc:
            logger.warning(
                "Unusable payload from Cover Art Archive: %s",
                exc,
                extra={"caa_event": ArchiveEvent.REQUEST_ERROR, "url": url, "error_message": str(exc)},
            )
            raise

    @property
    def mbid(self) -> str:
        return self._mbid

    @property
    def resource_type(self) -> ResourceType:
        return self._resource_type

    @property
    def images(self) -> tuple[CoverArtImage, ...]:
        return self._images

    @property
    def front(self) -> CoverArtImage | None:
        return self._front

    @property
    def back(self) -> CoverArtImage | None:
        return self._back

    @property
    def release(self) -> str | None:
        """MusicBrainz release URL echoed by the service, if any."""

        return self._release

    def get_mbid(self) -> str:
        """Returns the MBID."""

        return self._mbid

    def get_images(self) -> list[CoverArtImage]:
        """Returns the images in response order."""

        return list(self._images)

    def get_front_image(self) -> CoverArtImage:
        """Returns the front image.

        Raises:
            NotFoundError: No image is flagged as front.
        """
        if self._front is None:
            raise NotFoundError("No front image was found")
        return self._front

    def get_back_image(self) -> CoverArtImage:
        """Returns the back image.

        Raises:
            NotFoundError: No image is flagged as back.
        """
        if self._back is None:
            raise NotFoundError("No back image was found")
        return self._back

    def __repr__(self) -> str:
        return (
            f"CoverArt(resource_type={self._resource_type.value!r}, "
            f"mbid={self._mbid!r}, images={len(self._images)})"
        )


__all__ = ["CoverArt"]
