"""Pagination generator.

Turns one source into a sequence of generated page sources::

    generator = PaginationGenerator(providers, SourcePermalinkFactory(), max_per_page=10)
    pages = generator.generate(source)

Each page is a duplicate of the source carrying ``pagination.items``,
``pagination.page``, ``pagination.total_pages``, ``pagination.total_items``
and links to its neighbours. Pages after the first get a ``permalink``
override derived from the source's own permalink.
"""

from __future__ import annotations

import logging
from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError

from folio.core.config import DEFAULT_PROVIDER
from folio.core.exceptions import InvalidPageSizeError, InvalidPaginationConfigError
from folio.core.ports import DataProviderLookup, PermalinkFactory
from folio.core.types import PaginationKey, Source
from folio.pagination.linker import link_pages
from folio.pagination.permalinks import rewrite_permalink
from folio.pagination.resolver import DataResolver
from folio.pagination.slicer import slice_items

logger = logging.getLogger(__name__)


class PaginationConfig(BaseModel):
    """Effective pagination settings of one source."""

    model_config = ConfigDict(frozen=True)

    provider: str = DEFAULT_PROVIDER
    max_per_page: int

    @classmethod
    def for_source(
        cls,
        source: Source,
        default_max_per_page: int,
        default_provider: str = DEFAULT_PROVIDER,
    ) -> PaginationConfig:
        pagination = source.data.pagination
        # Non-string providers can never match a grammar; keep them as text
        provider = default_provider if pagination.provider is None else str(pagination.provider)
        max_per_page = default_max_per_page if pagination.max_per_page is None else pagination.max_per_page
        # pydantic would read True as 1
        if isinstance(max_per_page, bool):
            raise InvalidPageSizeError(max_per_page, source.source_id)

        try:
            config = cls(provider=provider, max_per_page=max_per_page)
        except ValidationError as exc:
            raise InvalidPaginationConfigError(source.source_id, str(exc)) from exc

        if config.max_per_page <= 0:
            raise InvalidPageSizeError(config.max_per_page, source.source_id)
        return config


class PaginationGenerator:
    """Generates one page source per slice of a source's paginated data."""

    name = "pagination"

    def __init__(
        self,
        data_provider_manager: DataProviderLookup,
        permalink_factory: PermalinkFactory,
        max_per_page: int,
        default_provider: str = DEFAULT_PROVIDER,
    ) -> None:
        if isinstance(max_per_page, bool) or not isinstance(max_per_page, int) or max_per_page <= 0:
            raise InvalidPageSizeError(max_per_page)
        self.data_provider_manager = data_provider_manager
        self.permalink_factory = permalink_factory
        self.max_per_page = max_per_page
        self.default_provider = default_provider
        self.resolver = DataResolver(data_provider_manager)

    def generate(self, source: Source) -> list[Source]:
        config = PaginationConfig.for_source(source, self.max_per_page, self.default_provider)

        data = self.resolver.resolve(config.provider, source)
        if data is None:
            return []

        slices = slice_items(data, config.max_per_page)
        total_items = sum(len(items) for items in slices)

        pages: list[Source] = []
        for page_number, items in enumerate(slices, start=1):
            pages.append(self._build_page(source, page_number, items, len(slices), total_items))

        link_pages(pages)
        logger.info(
            "Paginated %s into %d page(s) of up to %d item(s) from %s",
            source.source_id,
            len(pages),
            config.max_per_page,
            config.provider,
        )
        return pages

    def _build_page(
        self,
        source: Source,
        page_number: int,
        items: dict[Any, Any],
        total_pages: int,
        total_items: int,
    ) -> Source:
        page = source.duplicate(f"{source.source_id}:page={page_number}")

        if page_number > 1:
            canonical = self.permalink_factory.create(source).relative_file_path
            permalink = rewrite_permalink(canonical, page_number)
            page.data.set("permalink", permalink)
            logger.debug("Page %d of %s -> %s", page_number, source.source_id, permalink)

        page.data.set(PaginationKey.ITEMS.path, items)
        page.data.set(PaginationKey.PAGE.path, page_number)
        page.data.set(PaginationKey.TOTAL_PAGES.path, total_pages)
        page.data.set(PaginationKey.TOTAL_ITEMS.path, total_items)
        return page
