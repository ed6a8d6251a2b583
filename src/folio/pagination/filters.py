"""Single-predicate filtering of provider data."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from folio.core.ports import DataProviderLookup
from folio.core.types import Source

TRUE_VALUE = "1"
FALSE_VALUE = ""

_MISSING = object()


def normalize_expected_value(raw_value: str) -> str:
    """Map the literals ``true``/``false`` to their stored string forms."""
    if raw_value == "true":
        return TRUE_VALUE
    if raw_value == "false":
        return FALSE_VALUE
    return raw_value


def _metadata_value(item: Any, key: str) -> Any:
    if isinstance(item, Source):
        return item.data.get(key, _MISSING)
    if isinstance(item, Mapping):
        return item.get(key, _MISSING)
    return _MISSING


def matches(item: Any, key: str, expected: str) -> bool:
    """Whether ``item``'s metadata at ``key`` equals or contains ``expected``.

    Only strings and lists/tuples of strings are compared; any other value,
    including a missing key, never matches.
    """
    value = _metadata_value(item, key)
    if isinstance(value, str):
        return value == expected
    if isinstance(value, (list, tuple)):
        return expected in value
    return False


def filter_items(items: Iterable[Any] | Mapping[Any, Any], key: str, raw_value: str) -> list[Any]:
    expected = normalize_expected_value(raw_value)
    values = items.values() if isinstance(items, Mapping) else items
    return [item for item in values if matches(item, key, expected)]


class FilterEvaluator:
    """Evaluates ``filtered.<name>.<key>.<value>`` references."""

    def __init__(self, providers: DataProviderLookup) -> None:
        self.providers = providers

    def filter(self, provider_name: str, key: str, raw_value: str) -> list[Any]:
        data = self.providers.data_provider(provider_name).provide_data()
        return filter_items(data or [], key, raw_value)
