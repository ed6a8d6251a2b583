"""Parsing of provider references such as ``data.posts``.

A reference is parsed into one of three variants, or ``None`` when it does
not match any known grammar:

- ``data.<name>`` -> :class:`DataReference`
- ``page.<key>`` -> :class:`PageReference`
- ``filtered.<name>.<key>.<value>`` -> :class:`FilteredReference`
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from folio.core.exceptions import MalformedFilterReferenceError

_REFERENCE_PATTERN = re.compile(r"(?P<kind>data|page|filtered)\.(?P<rest>.+)")


@dataclass(frozen=True)
class DataReference:
    name: str


@dataclass(frozen=True)
class PageReference:
    key: str


@dataclass(frozen=True)
class FilteredReference:
    provider_name: str
    key: str
    value: str


ProviderReference = DataReference | PageReference | FilteredReference


def parse_provider_reference(reference: str) -> ProviderReference | None:
    """Parse ``reference``; ``None`` means pagination does not apply."""
    parsed = _REFERENCE_PATTERN.fullmatch(reference)
    if parsed is None:
        return None

    rest = parsed.group("rest")
    match parsed.group("kind"):
        case "data":
            return DataReference(rest)
        case "page":
            return PageReference(rest)
        case _:
            return _parse_filtered(reference, rest)


def _parse_filtered(reference: str, rest: str) -> FilteredReference:
    # Only the first three parts are read: "a.b.c.d" filters on value "c".
    parts = rest.split(".")
    if len(parts) < 3 or not parts[0] or not parts[1]:
        raise MalformedFilterReferenceError(reference)
    return FilteredReference(provider_name=parts[0], key=parts[1], value=parts[2])
