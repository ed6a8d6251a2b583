from __future__ import annotations

import logging
from collections.abc import Iterator

from folio.core.exceptions import DuplicateProviderError, UnknownProviderError
from folio.core.ports import DataProvider

logger = logging.getLogger(__name__)


class DataProviderManager:
    """Registry of data providers, keyed by name."""

    def __init__(self, providers: dict[str, DataProvider] | None = None) -> None:
        self._providers: dict[str, DataProvider] = {}
        for name, provider in (providers or {}).items():
            self.register(name, provider)

    def register(self, name: str, provider: DataProvider, *, replace: bool = False) -> None:
        if name in self._providers and not replace:
            raise DuplicateProviderError(name)
        self._providers[name] = provider
        logger.debug("Registered data provider %s (%s)", name, type(provider).__name__)

    def data_provider(self, name: str) -> DataProvider:
        try:
            return self._providers[name]
        except KeyError:
            raise UnknownProviderError(name, self._providers) from None

    def names(self) -> list[str]:
        return list(self._providers)

    def __contains__(self, name: object) -> bool:
        return name in self._providers

    def __iter__(self) -> Iterator[str]:
        return iter(self._providers)
