"""Photos service HTTP client."""

import logging
from dataclasses import dataclass
from typing import Protocol

import httpx
from pydantic import TypeAdapter, ValidationError

from album_service.domain.albums import Photo
from album_service.domain.errors import UpstreamError

_logger = logging.getLogger(__name__)

_PHOTO_LIST = TypeAdapter(list[Photo] | None)


class PhotosClient(Protocol):
    """Interface for photos service interactions."""

    async def get_photos(self, album_id: int) -> list[Photo] | None:
        """Return the photos of an album, or None when the service sent none."""


@dataclass
class HttpxPhotosClient(PhotosClient):
    """HTTPX-backed photos service client."""

    base_url: str
    http_client: httpx.AsyncClient
    timeout_seconds: float = 10.0

    @classmethod
    def create(
        cls, base_url: str, timeout_seconds: float = 10.0
    ) -> "HttpxPhotosClient":
        """Create a photos client with a managed httpx session."""
        return cls(
            base_url=base_url,
            http_client=httpx.AsyncClient(),
            timeout_seconds=timeout_seconds,
        )

    async def get_photos(self, album_id: int) -> list[Photo] | None:
        """Fetch the photos of an album.

        Any non-2xx status, transport failure or malformed body raises
        ``UpstreamError``.
        """
        url = f"{self.base_url.rstrip('/')}/albums/{album_id}/photos"
        try:
            response = await self.http_client.get(
                url,
                headers={"Accept": "application/json"},
                timeout=self.timeout_seconds,
            )
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            _logger.warning(
                "Photos service returned %s for album %s",
                exc.response.status_code,
                album_id,
            )
            raise UpstreamError(
                f"Photos service returned {exc.response.status_code}"
            ) from exc
        except httpx.HTTPError as exc:
            _logger.warning(
                "Photos service request failed for album %s: %s", album_id, exc
            )
            raise UpstreamError("Photos service request failed") from exc
        return _parse_photos(response.content, album_id)

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()


def _parse_photos(content: bytes, album_id: int) -> list[Photo] | None:
    """Decode a photos payload; an empty body means no photos were sent."""
    if not content.strip():
        return None
    try:
        return _PHOTO_LIST.validate_json(content)
    except ValidationError as exc:
        _logger.warning("Photos service sent a malformed body for album %s", album_id)
        raise UpstreamError("Photos service returned a malformed body") from exc
