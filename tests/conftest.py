"""Shared fixtures for the Folio test suite."""

from __future__ import annotations

import pytest

from folio.core.types import Source
from folio.pagination.generator import PaginationGenerator
from folio.permalinks.factory import SourcePermalinkFactory
from folio.providers.builtin import SourceCollectionDataProvider, StaticDataProvider
from folio.providers.manager import DataProviderManager


def make_post(number: int, **data) -> Source:
    data.setdefault("title", f"Post {number}")
    data.setdefault("date", f"2024-01-{number:02d}")
    return Source(f"_posts/post-{number}.md", f"_posts/post-{number}.md", data=data)


@pytest.fixture
def posts() -> list[Source]:
    return [make_post(n) for n in range(1, 8)]


@pytest.fixture
def providers(posts) -> DataProviderManager:
    return DataProviderManager(
        {
            "posts": StaticDataProvider(posts),
            "empty": StaticDataProvider(),
            "collection": SourceCollectionDataProvider(posts, path_prefix="_posts/"),
        }
    )


@pytest.fixture
def permalink_factory() -> SourcePermalinkFactory:
    return SourcePermalinkFactory()


@pytest.fixture
def generator(providers, permalink_factory) -> PaginationGenerator:
    return PaginationGenerator(providers, permalink_factory, max_per_page=3)
