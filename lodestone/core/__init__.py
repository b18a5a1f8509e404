"""Extraction engine: registry, extraction protocol, resolver and transport."""
