"""Folio: pagination for static-content build pipelines."""

from folio.core.types import PaginationData, PaginationKey, Source, SourceData
from folio.pagination.generator import PaginationConfig, PaginationGenerator

__version__ = "0.1.0"
__all__ = [
    "PaginationConfig",
    "PaginationData",
    "PaginationGenerator",
    "PaginationKey",
    "Source",
    "SourceData",
]
