"""lodestone - data-driven Lodestone page extraction.

Selector definitions, not hand-written parsers, describe where each value
lives on a page; views bind a parsed page to those definitions and read
fields on demand.
"""

__version__ = '0.1.0'

from lodestone.client import LodestoneClient, iter_entries, iter_pages, parse_document
from lodestone.config import ClientSettings
from lodestone.core.extraction import as_int, as_list, as_optional_int, extract
from lodestone.core.fetcher import PageFetcher, SimpleFetcher
from lodestone.core.registry import (
    DefinitionsContainer,
    FileDefinitionsSource,
    Registry,
    RemoteDefinitionsSource,
    load_registry,
)
from lodestone.core.resolver import Archetype, SharedSlot, Stat, resolve
from lodestone.exceptions import ExtractionError, LodestoneError, RegistryLoadError, TransportError
from lodestone.models import (
    CharacterSearchQuery,
    CrossworldLinkshellSearchQuery,
    FetchResult,
    FreeCompanySearchQuery,
    LinkshellSearchQuery,
    PagedEntryDefinition,
    SelectorDefinition,
    UserAgent,
)
from lodestone.views import (
    Character,
    CharacterAchievementPage,
    CharacterAttributes,
    CharacterClassJob,
    CharacterMinions,
    CharacterMounts,
    CharacterSearchPage,
    CrossworldLinkshellPage,
    CrossworldLinkshellSearchPage,
    EntryView,
    FreeCompany,
    FreeCompanyMembersPage,
    FreeCompanySearchPage,
    LinkshellPage,
    LinkshellSearchPage,
    PagedView,
    ParsedView,
    extract_entries,
)

__all__ = [
    # Client
    'LodestoneClient',
    'ClientSettings',
    'iter_pages',
    'iter_entries',
    'parse_document',
    # Engine
    'SelectorDefinition',
    'PagedEntryDefinition',
    'Registry',
    'DefinitionsContainer',
    'FileDefinitionsSource',
    'RemoteDefinitionsSource',
    'load_registry',
    'extract',
    'as_int',
    'as_optional_int',
    'as_list',
    'extract_entries',
    'Archetype',
    'SharedSlot',
    'Stat',
    'resolve',
    # Transport
    'PageFetcher',
    'SimpleFetcher',
    'FetchResult',
    'UserAgent',
    # Views
    'ParsedView',
    'EntryView',
    'PagedView',
    'Character',
    'CharacterAttributes',
    'CharacterAchievementPage',
    'CharacterClassJob',
    'CharacterMounts',
    'CharacterMinions',
    'CharacterSearchPage',
    'FreeCompany',
    'FreeCompanyMembersPage',
    'FreeCompanySearchPage',
    'LinkshellPage',
    'CrossworldLinkshellPage',
    'LinkshellSearchPage',
    'CrossworldLinkshellSearchPage',
    # Queries
    'CharacterSearchQuery',
    'FreeCompanySearchQuery',
    'LinkshellSearchQuery',
    'CrossworldLinkshellSearchQuery',
    # Errors
    'LodestoneError',
    'ExtractionError',
    'RegistryLoadError',
    'TransportError',
]
