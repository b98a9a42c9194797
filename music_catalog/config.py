from __future__ import annotations

from pathlib import Path
from typing import List, Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator

from .averaging import REDUCERS


class CatalogSettings(BaseModel):
    average: str = "pairwise"

    @field_validator("average")
    @classmethod
    def _known_average(cls, value: str) -> str:
        if value not in REDUCERS:
            known = ", ".join(sorted(REDUCERS))
            raise ValueError(f"unknown average strategy {value!r} (expected one of: {known})")
        return value


class AlbumEntry(BaseModel):
    model_config = ConfigDict(coerce_numbers_to_str=True)

    name: str
    year: int


class SongEntry(BaseModel):
    model_config = ConfigDict(coerce_numbers_to_str=True)

    name: str
    album: Optional[str] = None
    duration: float = Field(ge=0)


class LoggingSettings(BaseModel):
    level: str = "INFO"
    warnings_log: Optional[Path] = None

    @field_validator("warnings_log", mode="before")
    @classmethod
    def _expand_log(cls, value: Optional[str | Path]) -> Optional[Path]:
        if value is None:
            return None
        return Path(value).expanduser().resolve()


class Settings(BaseModel):
    catalog: CatalogSettings = CatalogSettings()
    albums: List[AlbumEntry] = Field(default_factory=list)
    songs: List[SongEntry] = Field(default_factory=list)
    logging: LoggingSettings = LoggingSettings()

    @classmethod
    def load(cls, path: Path) -> "Settings":
        with path.open("r", encoding="utf-8") as fh:
            raw = yaml.safe_load(fh)
        return cls.model_validate(raw or {})


def find_config(explicit_path: Optional[Path]) -> Path:
    if explicit_path:
        return explicit_path
    cwd = Path.cwd()
    for candidate in (cwd / "catalog.yaml", cwd / "catalog.yml"):
        if candidate.exists():
            return candidate
    raise FileNotFoundError("Could not find catalog.yaml - pass --config explicitly.")
