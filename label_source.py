# label_source.py
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import pandas as pd
import toml

from common_helper import clean_text, clean_year
from label_errors import ConfigParseError, MissingFieldError

REQUIRED_FIELDS = ("title", "artist", "cover")


@dataclass(frozen=True)
class LabelDescriptor:
    title: str
    artist: str
    cover_path: Path
    release_year: Optional[str] = None

    def __post_init__(self):
        year = clean_year(self.release_year)
        object.__setattr__(self, "title", self.title.upper())
        object.__setattr__(self, "artist", self.artist.upper())
        object.__setattr__(self, "release_year", year.upper() if year else None)
        object.__setattr__(self, "cover_path", Path(self.cover_path))


def label_from_fields(title, artist, cover, release_year=None):
    fields = {"title": title, "artist": artist, "cover": cover}
    for name in REQUIRED_FIELDS:
        if not clean_text(fields[name]):
            raise MissingFieldError(f"--{name} is required when no layout file is given")

    return LabelDescriptor(
        title=clean_text(title),
        artist=clean_text(artist),
        cover_path=Path(clean_text(cover)),
        release_year=release_year,
    )


def _entry_to_label(idx, entry, base_dir):
    if not isinstance(entry, dict):
        raise ConfigParseError(f"labels[{idx}] must be a table, got {type(entry).__name__}")

    for name in REQUIRED_FIELDS:
        value = entry.get(name)
        if not isinstance(value, str) or not value.strip():
            raise ConfigParseError(f"labels[{idx}] is missing required field '{name}'")

    year = entry.get("release_year")
    if isinstance(year, bool) or (year is not None and not isinstance(year, (str, int, float))):
        raise ConfigParseError(f"labels[{idx}].release_year must be text or a number")

    cover = Path(entry["cover"].strip())
    if not cover.is_absolute():
        cover = base_dir / cover

    return LabelDescriptor(
        title=entry["title"].strip(),
        artist=entry["artist"].strip(),
        cover_path=cover,
        release_year=year,
    )


def _read_toml_entries(path):
    try:
        data = toml.load(path)
    except OSError as e:
        raise ConfigParseError(f"Cannot read layout file {path}: {e}") from e
    except (toml.TomlDecodeError, UnicodeDecodeError) as e:
        raise ConfigParseError(f"Malformed layout file {path}: {e}") from e

    entries = data.get("labels")
    if not isinstance(entries, list):
        raise ConfigParseError(f"Layout file {path} must declare a 'labels' list")
    return entries


def _read_csv_entries(path):
    try:
        df = pd.read_csv(path, dtype=str, keep_default_na=False)
    except OSError as e:
        raise ConfigParseError(f"Cannot read layout file {path}: {e}") from e
    except (pd.errors.ParserError, pd.errors.EmptyDataError, UnicodeDecodeError) as e:
        raise ConfigParseError(f"Malformed layout file {path}: {e}") from e

    missing = [c for c in REQUIRED_FIELDS if c not in df.columns]
    if missing:
        raise ConfigParseError(
            f"Layout file {path} is missing column(s): {', '.join(missing)}"
        )

    entries = []
    for _, r in df.iterrows():
        entry = {name: str(r[name]) for name in REQUIRED_FIELDS}
        if "release_year" in df.columns:
            entry["release_year"] = str(r["release_year"])
        entries.append(entry)
    return entries


def load_layout(layout_path):
    """Read every label declared in a layout file, in file order.

    ``.csv`` files hold one label per row; anything else is parsed as TOML
    with a top-level ``labels`` array of tables.
    """
    path = Path(layout_path)

    if path.suffix.lower() == ".csv":
        entries = _read_csv_entries(path)
    else:
        entries = _read_toml_entries(path)

    if not entries:
        raise ConfigParseError(f"Layout file {path} declares no labels")

    base_dir = path.parent
    return [_entry_to_label(idx, entry, base_dir) for idx, entry in enumerate(entries)]


def collect_labels(layout=None, title=None, artist=None, cover=None, release_year=None):
    if layout:
        return load_layout(layout)
    return [label_from_fields(title, artist, cover, release_year)]
