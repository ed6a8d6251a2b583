from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from folio.core.ports import DataProviderLookup
from folio.core.types import Source
from folio.pagination.filters import FilterEvaluator
from folio.pagination.references import (
    DataReference,
    FilteredReference,
    PageReference,
    parse_provider_reference,
)

logger = logging.getLogger(__name__)

# Stand-in item for an empty data provider, so it still yields one page
EMPTY_PLACEHOLDER = ""

PaginationItems = list[Any] | dict[Any, Any]


class DataResolver:
    """Turns a provider reference into the items to paginate."""

    def __init__(self, providers: DataProviderLookup, filters: FilterEvaluator | None = None) -> None:
        self.providers = providers
        self.filters = filters or FilterEvaluator(providers)

    def resolve(self, reference: str, source: Source) -> PaginationItems | None:
        """Resolve ``reference`` for ``source``.

        Returns ``None`` when the reference matches no known grammar, or when
        a ``page.`` reference names a key the source does not have.
        """
        match parse_provider_reference(reference):
            case DataReference(name):
                data = _as_items(self.providers.data_provider(name).provide_data(), reference)
                return data if data else [EMPTY_PLACEHOLDER]
            case PageReference(key):
                value = source.data.get(key)
                return None if value is None else _as_items(value, reference)
            case FilteredReference(provider_name, key, value):
                return self.filters.filter(provider_name, key, value)
            case _:
                logger.debug("Provider reference %r matches no known grammar", reference)
                return None


def _as_items(value: Any, reference: str) -> PaginationItems:
    if isinstance(value, Mapping):
        return dict(value)
    if isinstance(value, Iterable) and not isinstance(value, (str, bytes)):
        return list(value)
    logger.warning("Data for %r is not a collection (%s); nothing to paginate", reference, type(value).__name__)
    return []
