"""Data providers: named sources of items for pagination."""
