"""Core exceptions for Folio."""

from __future__ import annotations

from collections.abc import Iterable


class FolioError(Exception):
    """Base exception for all Folio errors."""


class PaginationError(FolioError):
    """Base exception for pagination errors."""


class InvalidPageSizeError(PaginationError):
    """Raised when a page size is not a positive integer."""

    def __init__(self, value: object, source_id: str | None = None) -> None:
        self.value = value
        self.source_id = source_id
        where = f" for source '{source_id}'" if source_id else ""
        super().__init__(f"Invalid max_per_page{where}: {value!r}. Expected a positive integer.")


class InvalidPaginationConfigError(PaginationError):
    """Raised when a source's pagination block cannot be validated."""

    def __init__(self, source_id: str, reason: str) -> None:
        self.source_id = source_id
        self.reason = reason
        super().__init__(f"Invalid pagination configuration for source '{source_id}': {reason}")


class MalformedFilterReferenceError(PaginationError):
    """Raised when a 'filtered.' provider reference lacks its required parts."""

    def __init__(self, reference: str) -> None:
        self.reference = reference
        super().__init__(
            f"Malformed filter reference '{reference}'. Expected 'filtered.<provider>.<key>.<value>'."
        )


class ProviderError(FolioError):
    """Base exception for data provider errors."""


class UnknownProviderError(ProviderError):
    """Raised when a data provider name is not registered."""

    def __init__(self, name: str, available: Iterable[str] = ()) -> None:
        self.name = name
        self.available = sorted(available)
        known = ", ".join(self.available) or "none"
        super().__init__(f"Data provider '{name}' not found. Available providers: {known}")


class DuplicateProviderError(ProviderError):
    """Raised when a data provider name is registered twice."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Data provider '{name}' is already registered.")


class PermalinkError(FolioError):
    """Base exception for permalink generation errors."""


class PermalinkPatternError(PermalinkError):
    """Raised when a permalink pattern cannot be applied to a source."""

    def __init__(self, pattern: str, reason: str) -> None:
        self.pattern = pattern
        self.reason = reason
        super().__init__(f"Cannot apply permalink pattern '{pattern}': {reason}")


class ConfigError(FolioError):
    """Raised when a configuration file cannot be loaded or parsed."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load config at '{path}': {reason}")
