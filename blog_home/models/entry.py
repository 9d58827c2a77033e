"""Pydantic models for blog entries and tags."""

import re
import unicodedata
from collections.abc import Sequence
from datetime import datetime
from enum import Enum
from typing import Any, NamedTuple
from urllib.parse import quote

from pydantic import BaseModel, ConfigDict, Field, model_validator

_SLUG_STRIP_RE = re.compile(r"[^a-z0-9]+")

# Symbols that tell tags apart (C++ vs C#) get spelled out before stripping
_SLUG_SYMBOLS = {"+": " plus ", "#": " sharp ", "&": " and ", "@": " at "}


def slugify(name: str) -> str:
    """Turn a tag name into a URL slug.

    Accents are folded to ASCII and meaningful symbols spelled out, e.g.
    'Café' -> 'cafe' and 'C++' -> 'c-plus-plus'. Names with nothing left after
    that (e.g. '日本語') are percent-encoded instead of becoming empty.
    """
    lowered = name.strip().lower()
    ascii_name = unicodedata.normalize("NFKD", lowered).encode("ascii", "ignore").decode("ascii")
    for symbol, word in _SLUG_SYMBOLS.items():
        ascii_name = ascii_name.replace(symbol, word)
    slug = _SLUG_STRIP_RE.sub("-", ascii_name).strip("-")
    return slug or quote(lowered, safe="")


class TagType(str, Enum):
    """Kinds of tag an entry can carry."""

    GENERAL = "general"
    CATEGORY = "category"
    SERIES = "series"

    @property
    def prefix(self) -> str:
        """Sigil shown before the tag name in tag lists."""
        return {"general": "#", "category": "@", "series": "+"}[self.value]

    @property
    def route(self) -> str:
        """Logical path segment for the tag's index page."""
        return {"general": "tag", "category": "category", "series": "series"}[self.value]


class Tag(BaseModel):
    """A tag associated with one or more entries."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1)
    type: TagType = TagType.GENERAL
    slug: str = ""

    @model_validator(mode="before")
    @classmethod
    def fill_slug(cls, data: Any) -> Any:
        """Derive the slug from the name when none was supplied."""
        if isinstance(data, dict) and not data.get("slug") and data.get("name"):
            data = {**data, "slug": slugify(str(data["name"]))}
        return data

    @property
    def label(self) -> str:
        """Display text, e.g. '#haskell' or '@Projects'."""
        return f"{self.type.prefix}{self.name}"

    @property
    def path(self) -> str:
        """Logical path of the tag's index page, e.g. '/tag/haskell'."""
        return f"/{self.type.route}/{self.slug}"


class Entry(BaseModel):
    """A blog entry as handed over by the persistence layer.

    The lede is already rendered HTML and is trusted as-is.
    """

    model_config = ConfigDict(frozen=True)

    title: str
    posted_at: datetime
    lede: str = ""


class HomeEntry(NamedTuple):
    """One row of the home page entry list: the entry, its resolved URL and its tags."""

    entry: Entry
    url: str
    tags: Sequence[Tag]
