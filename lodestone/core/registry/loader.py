"""Decodes a definitions document into an immutable Registry."""

import json
import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from pydantic import ValidationError

from lodestone.exceptions import RegistryLoadError
from lodestone.models.definitions import RegistryMeta, SelectorDefinition, decode_leaf

logger = logging.getLogger(__name__)

META_KEY = 'Meta'
UNVERSIONED = 'unversioned'

DefinitionSlice = Mapping[str, SelectorDefinition]

_EMPTY_SLICE: DefinitionSlice = MappingProxyType({})


@dataclass(frozen=True)
class Registry:
    """Every selector definition of one document version, grouped by feature area.

    A registry is never updated in place; reloading produces a new one.

    Attributes:
        version: Version or commit token of the source document
        meta: Document metadata (user agents)
        areas: Feature area name to (field name to definition)

    """

    version: str
    meta: RegistryMeta = field(default_factory=RegistryMeta)
    areas: Mapping[str, DefinitionSlice] = field(default_factory=lambda: MappingProxyType({}))

    def area(self, name: str) -> DefinitionSlice:
        """Return the definitions of one feature area.

        Args:
            name: Feature area name (e.g. 'CharacterAttributes')

        Returns:
            The area's definitions, or an empty mapping for unknown areas.

        """
        return self.areas.get(name, _EMPTY_SLICE)

    def get(self, area: str, field_name: str) -> SelectorDefinition | None:
        """Return one definition, or None if the area or field is unknown."""
        return self.area(area).get(field_name)

    @property
    def area_names(self) -> list[str]:
        """Sorted names of all feature areas."""
        return sorted(self.areas)


def _decode_document(source: str | bytes | Mapping[str, Any]) -> Mapping[str, Any]:
    if isinstance(source, Mapping):
        return source

    try:
        document = json.loads(source)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise RegistryLoadError(f'invalid JSON ({e})') from e

    if not isinstance(document, dict):
        raise RegistryLoadError(f'document must be a JSON object, got {type(document).__name__}')
    return document


def _decode_area(name: str, raw_area: Any) -> DefinitionSlice:
    if not isinstance(raw_area, Mapping):
        raise RegistryLoadError(f"area '{name}' must be an object, got {type(raw_area).__name__}")

    definitions: dict[str, SelectorDefinition] = {}
    for field_name, leaf in raw_area.items():
        try:
            definitions[field_name] = decode_leaf(leaf)
        except ValidationError as e:
            errors = '; '.join(f'{".".join(map(str, err["loc"])) or "<leaf>"}: {err["msg"]}' for err in e.errors())
            raise RegistryLoadError(f"malformed definition '{name}.{field_name}' ({errors})") from e
    return MappingProxyType(definitions)


def load_registry(source: str | bytes | Mapping[str, Any], version: str | None = None) -> Registry:
    """Build a Registry from a definitions document.

    The whole document is decoded before anything is returned; a single bad
    leaf fails the load.

    Args:
        source: JSON text, or an already decoded JSON object
        version: Version token; defaults to the document's Meta.version

    Returns:
        The decoded registry.

    Raises:
        RegistryLoadError: If the document is not valid JSON or any definition is malformed

    """
    document = _decode_document(source)

    raw_meta = document.get(META_KEY) or {}
    try:
        meta = RegistryMeta.model_validate(raw_meta)
    except ValidationError as e:
        raise RegistryLoadError(f'malformed {META_KEY} block ({e.error_count()} errors)') from e

    areas = {
        name: _decode_area(name, raw_area) for name, raw_area in document.items() if name != META_KEY
    }

    registry = Registry(
        version=version or meta.version or UNVERSIONED,
        meta=meta,
        areas=MappingProxyType(areas),
    )
    logger.debug(f'Decoded registry {registry.version} with {len(areas)} areas')
    return registry
