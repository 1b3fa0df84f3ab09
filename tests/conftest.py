"""Shared test fixtures."""

from collections.abc import Callable, Iterator
from contextlib import ExitStack
from dataclasses import dataclass, field

import httpx
import pytest
from fastapi.testclient import TestClient

from album_service.adapters.photos_client import PhotosClient
from album_service.api.app import create_app
from album_service.config import Settings
from album_service.containers import AppContainer, build_container
from album_service.domain.albums import Photo
from album_service.domain.errors import UpstreamError
from album_service.services.albums import AlbumService

PHOTOS_PAYLOAD: list[dict[str, object]] = [
    {
        "id": 1,
        "title": "accusamus beatae ad facilis cum similique qui sunt",
        "url": "https://via.placeholder.com/600/92c952",
        "thumbnailUrl": "https://via.placeholder.com/150/92c952",
    },
    {
        "id": 2,
        "title": "reprehenderit est deserunt velit ipsam",
        "url": "https://via.placeholder.com/600/771796",
        "thumbnailUrl": "https://via.placeholder.com/150/771796",
    },
]


@dataclass
class FakePhotosClient(PhotosClient):
    """Fake photos client with canned per-album results."""

    photos: dict[int, list[Photo] | None] = field(default_factory=dict)
    failing: set[int] = field(default_factory=set)
    calls: list[int] = field(default_factory=list)

    async def get_photos(self, album_id: int) -> list[Photo] | None:
        self.calls.append(album_id)
        if album_id in self.failing:
            raise UpstreamError("Photos service returned 500")
        return self.photos.get(album_id)


@pytest.fixture
def settings() -> Settings:
    return Settings(photos_service_url="http://mock")


@pytest.fixture
def photos_client() -> FakePhotosClient:
    return FakePhotosClient()


@pytest.fixture
def container(settings: Settings, photos_client: FakePhotosClient) -> AppContainer:
    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        photos_client=photos_client,
        album_service=AlbumService(photos_client),
        close_resources=close_resources,
    )


@pytest.fixture
def mock_container(
    settings: Settings,
) -> Callable[[Callable[[httpx.Request], httpx.Response]], AppContainer]:
    """Build the real container with its httpx session on a mock transport."""

    def factory(handler: Callable[[httpx.Request], httpx.Response]) -> AppContainer:
        http_client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
        return build_container(settings, http_client=http_client)

    return factory


@pytest.fixture
def stub_api(container: AppContainer) -> Iterator[TestClient]:
    """Serve the app over the fake photos client."""
    with TestClient(create_app(container)) as client:
        yield client


@pytest.fixture
def upstream_api(
    mock_container: Callable[[Callable[[httpx.Request], httpx.Response]], AppContainer],
) -> Iterator[Callable[[Callable[[httpx.Request], httpx.Response]], TestClient]]:
    """Serve the fully wired app whose upstream is the given handler."""
    with ExitStack() as stack:

        def factory(handler: Callable[[httpx.Request], httpx.Response]) -> TestClient:
            app = create_app(mock_container(handler))
            return stack.enter_context(TestClient(app))

        yield factory
