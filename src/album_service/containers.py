"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

import httpx

from album_service.adapters.photos_client import HttpxPhotosClient, PhotosClient
from album_service.config import Settings
from album_service.services.albums import AlbumService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    photos_client: PhotosClient
    album_service: AlbumService
    close_resources: Callable[[], Awaitable[None]]


def build_container(
    settings: Settings | None = None,
    http_client: httpx.AsyncClient | None = None,
) -> AppContainer:
    """Create the default dependency container.

    ``http_client`` replaces the managed httpx session, e.g. with one bound to
    a mock transport.
    """
    resolved_settings = settings or Settings()
    if http_client is None:
        photos_client = HttpxPhotosClient.create(
            base_url=resolved_settings.photos_service_url,
            timeout_seconds=resolved_settings.photos_service_timeout_seconds,
        )
    else:
        photos_client = HttpxPhotosClient(
            base_url=resolved_settings.photos_service_url,
            http_client=http_client,
            timeout_seconds=resolved_settings.photos_service_timeout_seconds,
        )
    album_service = AlbumService(photos_client)

    async def close_resources() -> None:
        await photos_client.close()

    return AppContainer(
        settings=resolved_settings,
        photos_client=photos_client,
        album_service=album_service,
        close_resources=close_resources,
    )
