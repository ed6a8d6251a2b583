"""Protocols for the collaborators the pagination engine depends on."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from folio.core.types import Source


@runtime_checkable
class DataProvider(Protocol):
    """Named source of an ordered collection of items."""

    def provide_data(self) -> Sequence[Any] | Mapping[Any, Any]: ...


@runtime_checkable
class DataProviderLookup(Protocol):
    """Resolves provider names to providers.

    Unknown names must raise :class:`~folio.core.exceptions.UnknownProviderError`.
    """

    def data_provider(self, name: str) -> DataProvider: ...


@runtime_checkable
class Permalink(Protocol):
    """Output location assigned to a source."""

    @property
    def relative_file_path(self) -> str: ...

    @property
    def relative_url_path(self) -> str: ...


@runtime_checkable
class PermalinkFactory(Protocol):
    """Pure protocol for computing a source's permalink. No I/O."""

    def create(self, source: Source) -> Permalink: ...
