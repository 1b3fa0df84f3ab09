"""Command-line entrypoint that serves the API with uvicorn."""

import uvicorn

from album_service.api.app import create_app
from album_service.config import Settings
from album_service.containers import build_container


def main() -> None:
    """Load settings and serve the app on the configured host and port."""
    settings = Settings()
    app = create_app(build_container(settings))
    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
