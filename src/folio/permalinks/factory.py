"""Permalink factory for sources.

Resolves a source's output file path from its own ``permalink`` metadata or,
failing that, a site-wide default style:

- ``none``: keep the source path, converting template extensions to ``.html``
  (``about.md`` -> ``about.html``).
- ``pretty``: one directory per page (``about.md`` -> ``about/index.html``).
- patterns with placeholders such as ``blog/:year/:month/:title/``.
- anything else is taken literally.
"""

from __future__ import annotations

import posixpath
import re
from dataclasses import dataclass
from datetime import date, datetime
from typing import Any

from folio.core.exceptions import PermalinkPatternError
from folio.core.types import Source
from folio.core.utils import slugify

CONVERTED_EXTENSIONS = (".md", ".markdown", ".twig")
INDEX_FILE = "index.html"

_PLACEHOLDER = re.compile(r":(folder|basename|filename|title|year|month|day)")
_DATE_PLACEHOLDERS = frozenset({"year", "month", "day"})


@dataclass(frozen=True)
class Permalink:
    relative_file_path: str
    relative_url_path: str

    @classmethod
    def from_file_path(cls, file_path: str) -> Permalink:
        url_path = file_path
        if url_path == INDEX_FILE or url_path.endswith("/" + INDEX_FILE):
            url_path = url_path[: -len(INDEX_FILE)]
        return cls(relative_file_path=file_path, relative_url_path="/" + url_path)


def _html_path(pathname: str) -> str:
    stem, ext = posixpath.splitext(pathname)
    return stem + ".html" if ext in CONVERTED_EXTENSIONS else pathname


def _source_date(source: Source) -> date | None:
    value = source.data.get("date")
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        try:
            return date.fromisoformat(value[:10])
        except ValueError:
            return None
    return None


class SourcePermalinkFactory:
    """Creates :class:`Permalink` objects for sources. Pure, no I/O."""

    def __init__(self, default_permalink: str = "none") -> None:
        self.default_permalink = default_permalink

    def create(self, source: Source) -> Permalink:
        pattern = source.data.get("permalink") or self.default_permalink
        return Permalink.from_file_path(self._file_path(source, str(pattern)))

    def _file_path(self, source: Source, pattern: str) -> str:
        pathname = source.relative_pathname
        match pattern:
            case "none":
                path = _html_path(pathname)
            case "pretty":
                folder, basename = posixpath.split(pathname)
                stem = posixpath.splitext(basename)[0]
                path = posixpath.join(folder, INDEX_FILE if stem == "index" else f"{stem}/{INDEX_FILE}")
            case _ if _PLACEHOLDER.search(pattern):
                path = self._expand(source, pattern)
            case _:
                path = pattern

        if path.endswith("/"):
            path += INDEX_FILE
        if path.startswith("./"):
            path = path[2:]
        return path.lstrip("/")

    def _expand(self, source: Source, pattern: str) -> str:
        folder, basename = posixpath.split(source.relative_pathname)
        stem = posixpath.splitext(basename)[0]
        source_date = _source_date(source)
        title = source.data.get("title")

        def replace(match: re.Match[str]) -> str:
            name = match.group(1)
            if name in _DATE_PLACEHOLDERS and source_date is None:
                raise PermalinkPatternError(pattern, f"source '{source.source_id}' has no usable date")
            values: dict[str, Any] = {
                "folder": f"{folder}/" if folder else "",
                "basename": stem,
                "filename": posixpath.basename(_html_path(basename)),
                "title": slugify(str(title)) if title else stem,
            }
            if source_date is not None:
                values.update(
                    year=f"{source_date.year:04d}",
                    month=f"{source_date.month:02d}",
                    day=f"{source_date.day:02d}",
                )
            return values[name]

        return _PLACEHOLDER.sub(replace, pattern)
