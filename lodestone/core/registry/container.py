"""Holds the current Registry and swaps it atomically on reload."""

import logging
import threading
from dataclasses import replace

import logfire

from lodestone.core.registry.loader import UNVERSIONED, Registry, load_registry
from lodestone.core.registry.sources import BundledDefinitionsSource, DefinitionsSource
from lodestone.exceptions import RegistryLoadError


class DefinitionsContainer:
    """The single place a client keeps its selector definitions.

    Readers take ``registry`` once per page and use that value throughout, so
    a reload in between never mixes old and new definitions in one view. A
    failed reload leaves the previous registry installed.

    Attributes:
        source: Where reload() reads the definitions document from
        logger: Logger instance for reload tracking

    """

    def __init__(self, registry: Registry | None = None, source: DefinitionsSource | None = None):
        """Initialize the container.

        Args:
            registry: Registry to start with. Defaults to None (call reload() before use).
            source: Document source for reload(). Defaults to the bundled document.

        """
        self.source: DefinitionsSource = source or BundledDefinitionsSource()
        self._registry = registry
        self._lock = threading.Lock()
        self.logger = logging.getLogger(__name__)

    @classmethod
    def from_source(cls, source: DefinitionsSource | None = None) -> 'DefinitionsContainer':
        """Create a container and load its first registry.

        Raises:
            RegistryLoadError: If the document cannot be read or decoded

        """
        container = cls(source=source)
        container.reload()
        return container

    @property
    def registry(self) -> Registry:
        """The current registry.

        Raises:
            RegistryLoadError: If no registry was ever loaded

        """
        registry = self._registry
        if registry is None:
            raise RegistryLoadError('no definitions loaded yet', source=self.source.location)
        return registry

    @property
    def loaded(self) -> bool:
        """Whether a registry is installed."""
        return self._registry is not None

    def swap(self, registry: Registry) -> Registry | None:
        """Install a registry, returning the one it replaced."""
        with self._lock:
            previous, self._registry = self._registry, registry
        return previous

    def reload(self) -> Registry:
        """Read and decode the source document, then install it.

        Returns:
            The newly installed registry.

        Raises:
            RegistryLoadError: If the document cannot be read or decoded. The
                previous registry stays installed.

        """
        with logfire.span('reload_definitions', source=self.source.location):
            try:
                text = self.source.read()
                registry = load_registry(text, version=self.source.version)
            except RegistryLoadError as e:
                logfire.warn('Definitions reload failed', source=self.source.location, error=e.reason)
                if e.source is not None:
                    self.logger.warning(f'Keeping previous definitions after failed reload: {e}')
                    raise
                located = RegistryLoadError(e.reason, source=self.source.location)
                self.logger.warning(f'Keeping previous definitions after failed reload: {located}')
                raise located from e

            if registry.version == UNVERSIONED:
                registry = replace(registry, version=self.source.location)

            previous = self.swap(registry)
            logfire.info(
                'Definitions reloaded',
                version=registry.version,
                previous=previous.version if previous else None,
                areas=len(registry.areas),
            )
            self.logger.info(f'Installed definitions {registry.version} ({len(registry.areas)} areas)')
            return registry
