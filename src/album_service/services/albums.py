"""Album assembly service."""

from dataclasses import dataclass

from album_service.adapters.photos_client import PhotosClient
from album_service.domain.albums import Album, Photo


@dataclass
class AlbumService:
    """Service that joins an album id with its photos."""

    photos_client: PhotosClient

    async def get_album(self, album_id: int) -> Album:
        """Fetch the album's photos and assemble the album."""
        photos = await self.photos_client.get_photos(album_id)
        return assemble_album(album_id, photos)


def assemble_album(album_id: int, photos: list[Photo] | None) -> Album:
    """Build an album; the id always comes from the caller."""
    return Album(album_id=album_id, photos=photos)
