from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union


@dataclass(frozen=True, slots=True)
class NoAlbum:
    """Reference carried by songs that do not belong to any album."""

    def __str__(self) -> str:
        return "<no album>"


@dataclass(frozen=True, slots=True)
class InAlbum:
    name: str

    def __str__(self) -> str:
        return self.name


AlbumRef = Union[NoAlbum, InAlbum]

NO_ALBUM = NoAlbum()


def album_ref(value: Optional[Union[str, AlbumRef]]) -> AlbumRef:
    if value is None:
        return NO_ALBUM
    if isinstance(value, (NoAlbum, InAlbum)):
        return value
    if isinstance(value, str):
        return InAlbum(value)
    raise TypeError(f"Unsupported album reference: {value!r}")


@dataclass(frozen=True, slots=True)
class Song:
    name: str
    album: AlbumRef
    duration: float

    @property
    def album_name(self) -> Optional[str]:
        match self.album:
            case InAlbum(name=name):
                return name
            case _:
                return None


class CatalogError(Exception):
    """Base class for catalog failures."""


class InvalidAlbumReference(CatalogError, ValueError):
    """Raised when a song names an album that is not in the catalog."""

    def __init__(self, album: str) -> None:
        super().__init__(f"invalid album name: {album!r}")
        self.album = album
