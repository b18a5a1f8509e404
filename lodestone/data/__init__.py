"""Bundled selector definitions."""
