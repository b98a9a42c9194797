from __future__ import annotations

from dataclasses import dataclass

from ..catalog import MusicCatalog
from .output import ok as ok_line, value_or_missing, warning


@dataclass(slots=True)
class CatalogReport:
    ok: bool
    checks: list[str]


def run(catalog: MusicCatalog) -> CatalogReport:
    """Summarize the catalog as status lines.

    An empty song set fails the report; albums without songs only warn.
    """
    checks: list[str] = []
    ok = True

    album_names = list(catalog.album_names())
    checks.append(ok_line("Albums", f"{len(album_names)} album(s)"))
    if len(catalog) == 0:
        ok = False
        checks.append(warning("Songs", "catalog has no songs"))
    else:
        checks.append(
            ok_line(
                "Songs",
                f"{len(catalog)} song(s), {catalog.count_songs_in_no_album()} without album",
            )
        )

    empty = [name for name in album_names if catalog.count_songs(name) == 0]
    if empty:
        checks.append(warning("Empty albums", ", ".join(sorted(empty))))

    for name in sorted(album_names):
        count = catalog.count_songs(name)
        if count == 0:
            continue
        avg = catalog.average_duration_of_songs(name)
        checks.append(
            ok_line(
                f"Album {name}",
                f"{catalog.album_year(name)}, {count} song(s), "
                f"{catalog.average_strategy} average {value_or_missing(avg)}s",
            )
        )

    checks.append(ok_line("Longest song", value_or_missing(catalog.longest_song())))
    checks.append(ok_line("Longest album", value_or_missing(catalog.longest_album())))
    return CatalogReport(ok=ok, checks=checks)
