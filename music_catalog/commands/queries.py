from __future__ import annotations

from typing import Iterable

from ..catalog import MusicCatalog
from .output import value_or_missing


def _print_lines(lines: Iterable[str]) -> None:
    for line in lines:
        print(line)


def songs(catalog: MusicCatalog) -> None:
    _print_lines(catalog.ordered_song_names())


def albums(catalog: MusicCatalog) -> None:
    _print_lines(catalog.album_names())


def albums_in_year(catalog: MusicCatalog, year: int) -> None:
    _print_lines(catalog.album_in_year(year))


def count(catalog: MusicCatalog, album: str) -> None:
    print(catalog.count_songs(album))


def count_no_album(catalog: MusicCatalog) -> None:
    print(catalog.count_songs_in_no_album())


def average(catalog: MusicCatalog, album: str) -> None:
    print(value_or_missing(catalog.average_duration_of_songs(album)))


def longest_song(catalog: MusicCatalog) -> None:
    print(value_or_missing(catalog.longest_song()))


def longest_album(catalog: MusicCatalog) -> None:
    print(value_or_missing(catalog.longest_album()))
