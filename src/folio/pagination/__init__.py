"""Pagination engine: resolve, slice, rewrite permalinks and link pages."""
