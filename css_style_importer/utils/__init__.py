"""Shared utilities for CSS Style Importer."""
