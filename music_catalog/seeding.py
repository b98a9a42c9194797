from __future__ import annotations

import logging

from .catalog import MusicCatalog
from .config import Settings

logger = logging.getLogger(__name__)


def build_catalog(settings: Settings) -> MusicCatalog:
    """Create a catalog and add the configured albums, then songs, in file order.

    An unknown album on any song raises ``InvalidAlbumReference``.
    """
    catalog = MusicCatalog(average=settings.catalog.average)
    for album in settings.albums:
        catalog.add_album(album.name, album.year)
    for song in settings.songs:
        catalog.add_song(song.name, song.album, song.duration)
    logger.info(
        "Loaded %d album%s and %d song%s",
        len(settings.albums),
        "" if len(settings.albums) == 1 else "s",
        len(catalog),
        "" if len(catalog) == 1 else "s",
    )
    return catalog
