"""Album API endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING, Annotated

from fastapi import APIRouter, Depends, Path, Request
from fastapi.exceptions import RequestValidationError

from album_service.domain.albums import Album

if TYPE_CHECKING:
    from album_service.containers import AppContainer

router = APIRouter(prefix="/api", tags=["albums"])

_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1


def parse_album_id(
    album_id: Annotated[str, Path(pattern=r"^-?[0-9]+$")],
) -> int:
    """Parse a decimal album id that fits a signed 64-bit integer."""
    value = int(album_id)
    if not _INT64_MIN <= value <= _INT64_MAX:
        raise RequestValidationError(
            [
                {
                    "type": "int64_range",
                    "loc": ("path", "album_id"),
                    "msg": "Album id must fit a signed 64-bit integer",
                    "input": album_id,
                }
            ]
        )
    return value


@router.get("/albums/{album_id}", response_model=Album)
async def get_album(
    album_id: Annotated[int, Depends(parse_album_id)],
    request: Request,
) -> Album:
    """Return the album with the photos reported by the photos service."""
    container: AppContainer = request.app.state.container
    return await container.album_service.get_album(album_id)
