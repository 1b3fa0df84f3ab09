"""Album domain models."""

from pydantic import BaseModel, ConfigDict, Field


class Photo(BaseModel):
    """Photo record as returned by the photos service.

    Fields are strict so upstream values are passed through untouched;
    a wrongly typed field is a malformed body.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, strict=True)

    id: int | None = None
    title: str | None = None
    url: str | None = None
    thumbnail_url: str | None = Field(default=None, alias="thumbnailUrl")


class Album(BaseModel):
    """Album identifier joined with its photos.

    ``photos`` is ``None`` when the photos service returned no body or JSON
    null, and an empty list when it returned ``[]``.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    album_id: int = Field(alias="albumId")
    photos: list[Photo] | None = None
