"""Core data types for Folio.

A :class:`Source` is one unit of content flowing through the build pipeline.
Its metadata lives in a :class:`SourceData` bag: an open, dotted-key mapping
plus a typed :class:`PaginationData` record for the reserved ``pagination``
namespace.
"""

from __future__ import annotations

import copy
import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

logger = logging.getLogger(__name__)

PAGINATION_NAMESPACE = "pagination"


class PaginationKey(str, Enum):
    """Recognised keys of the ``pagination`` namespace."""

    # Configuration, written by authors in front matter
    PROVIDER = "provider"
    MAX_PER_PAGE = "max_per_page"
    # State, written by the pagination generator
    ITEMS = "items"
    PAGE = "page"
    TOTAL_PAGES = "total_pages"
    TOTAL_ITEMS = "total_items"
    PREVIOUS_PAGE = "previous_page"
    NEXT_PAGE = "next_page"

    @property
    def path(self) -> str:
        """Dotted path of the key inside a :class:`SourceData` bag."""
        return f"{PAGINATION_NAMESPACE}.{self.value}"


@dataclass
class PaginationData:
    """Typed view of a source's ``pagination`` namespace."""

    provider: Any = None
    max_per_page: Any = None
    items: dict[Any, Any] | None = None
    page: int | None = None
    total_pages: int | None = None
    total_items: int | None = None
    previous_page: Source | None = field(default=None, repr=False, compare=False)
    next_page: Source | None = field(default=None, repr=False, compare=False)
    extra: dict[str, Any] = field(default_factory=dict)

    def get(self, key: str, default: Any = None) -> Any:
        head, _, rest = key.partition(".")
        if head not in _PAGINATION_KEYS:
            return _get_path(self.extra, key, default)
        value = getattr(self, head)
        if rest:
            return _get_path(value, rest, default)
        return default if value is None else value

    def set(self, key: str, value: Any) -> None:
        head, _, rest = key.partition(".")
        if head not in _PAGINATION_KEYS:
            _set_path(self.extra, key, value)
        elif rest:
            # Only mapping-valued keys (items) can be addressed below their root
            current = getattr(self, head)
            if not isinstance(current, dict):
                current = {}
                setattr(self, head, current)
            _set_path(current, rest, value)
        else:
            setattr(self, head, value)

    def as_dict(self) -> dict[str, Any]:
        """Plain mapping of the set values; page references are kept as references."""
        values = {key: getattr(self, key) for key in _PAGINATION_KEYS if getattr(self, key) is not None}
        return {**self.extra, **values}

    def copy(self) -> PaginationData:
        return PaginationData(
            provider=self.provider,
            max_per_page=self.max_per_page,
            items=dict(self.items) if self.items is not None else None,
            page=self.page,
            total_pages=self.total_pages,
            total_items=self.total_items,
            previous_page=self.previous_page,
            next_page=self.next_page,
            extra=copy.deepcopy(self.extra),
        )


_PAGINATION_KEYS = tuple(key.value for key in PaginationKey)


def _get_path(values: Any, key: str, default: Any) -> Any:
    current = values
    for part in key.split("."):
        if not isinstance(current, Mapping) or part not in current:
            return default
        current = current[part]
    return current


def _set_path(values: dict[str, Any], key: str, value: Any) -> None:
    """Set a dotted ``key``, replacing non-mapping values on the way with dicts."""
    parts = key.split(".")
    current = values
    for part in parts[:-1]:
        child = current.get(part)
        if not isinstance(child, dict):
            child = current[part] = {}
        current = child
    current[parts[-1]] = value


class SourceData:
    """Metadata bag with dotted-key access.

    Keys under ``pagination`` are routed to :attr:`pagination`; every other
    key is stored in a nested mapping, so ``set("a.b", 1)`` creates
    ``{"a": {"b": 1}}``.
    """

    def __init__(self, values: Mapping[str, Any] | None = None) -> None:
        self.pagination = PaginationData()
        self._values: dict[str, Any] = {}
        for key, value in (values or {}).items():
            if key == PAGINATION_NAMESPACE:
                self._load_pagination(value)
            else:
                self._values[key] = copy.deepcopy(value)

    def _load_pagination(self, value: Any) -> None:
        if value is None:
            return
        if not isinstance(value, Mapping):
            logger.warning("Ignoring non-mapping pagination block: %r", value)
            return
        for key, item in value.items():
            self.pagination.set(str(key), item)

    def get(self, key: str, default: Any = None) -> Any:
        head, _, rest = key.partition(".")
        if head == PAGINATION_NAMESPACE:
            return self.pagination.get(rest, default) if rest else self.pagination
        return _get_path(self._values, key, default)

    def set(self, key: str, value: Any) -> None:
        head, _, rest = key.partition(".")
        if head == PAGINATION_NAMESPACE:
            if rest:
                self.pagination.set(rest, value)
            else:
                self.pagination = PaginationData()
                self._load_pagination(value)
            return
        _set_path(self._values, key, value)

    def has(self, key: str) -> bool:
        marker = object()
        return self.get(key, marker) is not marker

    def export(self) -> dict[str, Any]:
        """Export as a plain nested dict, e.g. for a template renderer."""
        exported = copy.deepcopy(self._values)
        pagination = self.pagination.as_dict()
        if pagination:
            exported[PAGINATION_NAMESPACE] = pagination
        return exported

    def copy(self) -> SourceData:
        duplicate = SourceData()
        duplicate._values = copy.deepcopy(self._values)
        duplicate.pagination = self.pagination.copy()
        return duplicate

    def __repr__(self) -> str:
        return f"SourceData({self._values!r}, pagination={self.pagination!r})"


@dataclass(eq=False)
class Source:
    """One content unit, identified by ``source_id``.

    Equality is identity: generated pages reference their neighbours, and
    comparing them field by field would walk the whole page set.
    """

    source_id: str
    relative_pathname: str
    data: SourceData = field(default_factory=SourceData)
    content: str | None = None
    is_generated: bool = False

    def __post_init__(self) -> None:
        if not isinstance(self.data, SourceData):
            self.data = SourceData(self.data)

    def duplicate(self, new_source_id: str) -> Source:
        """Return an independent copy of this source under a new identifier."""
        return Source(
            source_id=new_source_id,
            relative_pathname=self.relative_pathname,
            data=self.data.copy(),
            content=self.content,
            is_generated=True,
        )
