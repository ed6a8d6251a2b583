"""Permalink computation for sources."""
