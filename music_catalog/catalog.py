from __future__ import annotations

import logging
from typing import Dict, Iterator, Optional, Union

from .averaging import get_reducer
from .models import AlbumRef, InAlbum, InvalidAlbumReference, NoAlbum, Song, album_ref

logger = logging.getLogger(__name__)


class MusicCatalog:
    """Albums and songs of a single music group, held in memory.

    Songs live in an insertion-ordered set, so every order-dependent query
    (the pairwise average and the longest song/album tie-breaks) resolves in
    the order songs were added. Not thread-safe; callers serialize access.
    """

    def __init__(self, *, average: str = "pairwise") -> None:
        self._albums: Dict[str, int] = {}
        self._songs: Dict[Song, None] = {}
        self._average_strategy = average
        self._reduce = get_reducer(average)

    @property
    def average_strategy(self) -> str:
        return self._average_strategy

    def add_album(self, name: str, year: int) -> None:
        previous = self._albums.get(name)
        if previous is not None and previous != year:
            logger.debug("Album %s year changed %d -> %d", name, previous, year)
        self._albums[name] = year

    def add_song(
        self,
        name: str,
        album: Optional[Union[str, AlbumRef]],
        duration: float,
    ) -> None:
        ref = album_ref(album)
        if isinstance(ref, InAlbum) and ref.name not in self._albums:
            logger.warning("Rejected song %s: unknown album %s", name, ref.name)
            raise InvalidAlbumReference(ref.name)
        song = Song(name, ref, float(duration))
        if song in self._songs:
            logger.debug("Ignoring duplicate song %s", song)
            return
        self._songs[song] = None
        logger.debug("Added song %s (%s, %.1fs)", name, ref, song.duration)

    def ordered_song_names(self) -> Iterator[str]:
        return iter(sorted(song.name for song in self._songs))

    def album_names(self) -> Iterator[str]:
        return iter(list(self._albums))

    def album_in_year(self, year: int) -> Iterator[str]:
        return (name for name, album_year in list(self._albums.items()) if album_year == year)

    def album_year(self, name: str) -> Optional[int]:
        return self._albums.get(name)

    def songs(self) -> Iterator[Song]:
        return iter(list(self._songs))

    def count_songs(self, album_name: str) -> int:
        target = InAlbum(album_name)
        return sum(1 for song in self._songs if song.album == target)

    def count_songs_in_no_album(self) -> int:
        return sum(1 for song in self._songs if isinstance(song.album, NoAlbum))

    def average_duration_of_songs(self, album_name: str) -> Optional[float]:
        target = InAlbum(album_name)
        return self._reduce(song.duration for song in self._songs if song.album == target)

    def longest_song(self) -> Optional[str]:
        if not self._songs:
            return None
        # max() keeps the first of several equal maxima
        return max(self._songs, key=lambda song: song.duration).name

    def longest_album(self) -> Optional[str]:
        totals: Dict[AlbumRef, float] = {}
        for song in self._songs:
            totals[song.album] = totals.get(song.album, 0.0) + song.duration
        best: Optional[str] = None
        best_total = 0.0
        for ref, total in totals.items():
            match ref:
                case InAlbum(name=name):
                    if best is None or total > best_total:
                        best, best_total = name, total
                case NoAlbum():
                    continue
        return best

    def __len__(self) -> int:
        return len(self._songs)

    def __contains__(self, song: object) -> bool:
        return song in self._songs
