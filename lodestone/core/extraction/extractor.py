"""Reads values out of a tree node using selector definitions.

Absence is a normal outcome here: a selector that matches nothing, an index
past the last match or a regex that does not match all produce ``None``.
Only a value that is present but unusable raises ``ExtractionError``.
"""

import re

from bs4 import Tag
from soupsieve import SelectorSyntaxError

from lodestone.exceptions import ExtractionError
from lodestone.models.definitions import SelectorDefinition

_INTEGER = re.compile(r'\s*[+-]?[0-9]+\s*')


def select(node: Tag, definition: SelectorDefinition, field: str | None = None) -> list[Tag]:
    """Evaluate a definition's path against a node.

    Args:
        node: Root node the path is relative to
        definition: Definition whose path to evaluate
        field: Registry key of the field being read, used in the error

    Returns:
        All matches in document order.

    Raises:
        ExtractionError: If the path is not a valid CSS selector

    """
    try:
        return node.select(definition.path)
    except SelectorSyntaxError as e:
        raise ExtractionError(field or definition.path, definition.path, f'invalid selector ({e})') from e


def read_raw(match: Tag, definition: SelectorDefinition) -> str | None:
    """Read the attribute or trimmed text of one matched node, then apply the regex."""
    if definition.attribute:
        value = match.get(definition.attribute)
        if value is None:
            return None
        # bs4 returns multi-valued attributes such as class as a list
        raw = ' '.join(value) if isinstance(value, list) else str(value)
    else:
        raw = match.get_text().strip()

    if definition.value_pattern is None:
        return raw

    found = re.search(definition.value_pattern, raw)
    if found is None:
        return None
    return found.group(1)


def extract(node: Tag, definition: SelectorDefinition | None, field: str | None = None) -> str | None:
    """Extract one raw value from a node.

    Args:
        node: Node the definition's path is relative to
        definition: Definition to apply, or None if the registry has none
        field: Registry key of the field, reported if the selector is invalid

    Returns:
        The value, or None if it is absent.

    """
    if definition is None:
        return None

    matches = select(node, definition, field)
    if definition.index >= len(matches):
        return None

    return read_raw(matches[definition.index], definition)


def as_list(node: Tag, definition: SelectorDefinition | None, field: str | None = None) -> list[str]:
    """Extract the value of every match, ignoring the definition's index.

    Matches whose value is absent (missing attribute, regex miss) are dropped.

    Args:
        node: Node the definition's path is relative to
        definition: Definition to apply, or None if the registry has none
        field: Registry key of the field, reported if the selector is invalid

    Returns:
        Values in document order.

    """
    if definition is None:
        return []

    values = []
    for match in select(node, definition, field):
        value = read_raw(match, definition)
        if value is not None:
            values.append(value)
    return values


def _parse_int(raw: str) -> int | None:
    if _INTEGER.fullmatch(raw) is None:
        return None
    return int(raw)


def as_int(field: str, raw: str | None) -> int | None:
    """Coerce a value that must be an integer whenever it is present.

    Args:
        field: Registry key of the field, used in the error
        raw: Value returned by extract()

    Returns:
        The integer, or None if the value is absent.

    Raises:
        ExtractionError: If the value is present but not a base-10 integer

    """
    if raw is None:
        return None

    value = _parse_int(raw)
    if value is None:
        raise ExtractionError(field, raw, 'not an integer')
    return value


def as_optional_int(raw: str | None) -> int | None:
    """Coerce a value that is only an integer for some entities; None otherwise."""
    if raw is None:
        return None
    return _parse_int(raw)
