"""ASGI entrypoint for the album service API."""

from album_service.api.app import create_app
from album_service.containers import build_container

app = create_app(build_container())
