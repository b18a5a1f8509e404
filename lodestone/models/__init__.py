"""Pydantic models for selector definitions, queries and results."""

from lodestone.models.definitions import PagedEntryDefinition, RegistryMeta, SelectorDefinition, decode_leaf
from lodestone.models.queries import (
    CharacterSearchQuery,
    CrossworldLinkshellSearchQuery,
    FreeCompanySearchQuery,
    LinkshellSearchQuery,
)
from lodestone.models.results import FetchResult, UserAgent

__all__ = [
    'SelectorDefinition',
    'PagedEntryDefinition',
    'RegistryMeta',
    'decode_leaf',
    'CharacterSearchQuery',
    'FreeCompanySearchQuery',
    'LinkshellSearchQuery',
    'CrossworldLinkshellSearchQuery',
    'FetchResult',
    'UserAgent',
]
