"""Definitions registry: decoding, sources and the swappable container."""

from lodestone.core.registry.container import DefinitionsContainer
from lodestone.core.registry.loader import UNVERSIONED, DefinitionSlice, Registry, load_registry
from lodestone.core.registry.sources import (
    BundledDefinitionsSource,
    DefinitionsSource,
    FileDefinitionsSource,
    RemoteDefinitionsSource,
)

__all__ = [
    'UNVERSIONED',
    'BundledDefinitionsSource',
    'DefinitionSlice',
    'DefinitionsContainer',
    'DefinitionsSource',
    'FileDefinitionsSource',
    'Registry',
    'RemoteDefinitionsSource',
    'load_registry',
]
