"""Concrete data providers."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any

from folio.core.types import Source

logger = logging.getLogger(__name__)


class StaticDataProvider:
    """Provides a fixed list of items."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._items = list(items)

    def provide_data(self) -> list[Any]:
        return list(self._items)


class SourceCollectionDataProvider:
    """Provides a filtered, ordered view over a collection of sources.

    Typical use is a ``posts`` provider: every source under ``_posts/``,
    newest first, drafts excluded. Generated sources (pagination pages)
    are never provided.
    """

    def __init__(
        self,
        sources: Iterable[Source] = (),
        *,
        path_prefix: str | None = None,
        sort_key: str | None = "date",
        reverse: bool = True,
        include_drafts: bool = False,
    ) -> None:
        self._sources = list(sources)
        self.path_prefix = path_prefix
        self.sort_key = sort_key
        self.reverse = reverse
        self.include_drafts = include_drafts

    def add(self, source: Source) -> None:
        self._sources.append(source)

    def _accepts(self, source: Source) -> bool:
        if source.is_generated:
            return False
        if self.path_prefix and not source.relative_pathname.startswith(self.path_prefix):
            return False
        return self.include_drafts or not source.data.get("draft")

    def provide_data(self) -> list[Source]:
        selected = [source for source in self._sources if self._accepts(source)]
        if not self.sort_key:
            return selected

        # Sources without the sort key keep their relative order at the end
        dated = [source for source in selected if source.data.get(self.sort_key) is not None]
        undated = [source for source in selected if source.data.get(self.sort_key) is None]
        try:
            dated.sort(key=lambda source: source.data.get(self.sort_key), reverse=self.reverse)
        except TypeError:
            logger.warning("Mixed value types under '%s'; sorting by string value", self.sort_key)
            dated.sort(key=lambda source: str(source.data.get(self.sort_key)), reverse=self.reverse)
        return dated + undated
