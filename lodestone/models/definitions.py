"""Pydantic models for selector definitions.

The JSON keys match the external selector feed (``Selector``, ``Attribute``,
``Regex``, ``Index``, ``Entries``); the lower-case spelling used by older
feed revisions is accepted as well.
"""

import re
from collections.abc import Mapping
from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

# (?<name>...) is .NET syntax; lookbehinds (?<= and (?<! are left alone
_DOTNET_NAMED_GROUP = re.compile(r'\(\?<(?![=!])')


class SelectorDefinition(BaseModel):
    """Where and how to read one value inside a tree node.

    Attributes:
        path: CSS selector evaluated relative to the node being read
        attribute: Attribute to read instead of the text content
        value_pattern: Regex whose first capture group becomes the value
        index: Which match to use when the selector matches several nodes

    """

    model_config = ConfigDict(frozen=True, extra='ignore')

    path: str = Field(
        min_length=1,
        validation_alias=AliasChoices('Selector', 'selector', 'path'),
        serialization_alias='Selector',
        description='CSS selector',
    )
    attribute: str | None = Field(
        default=None,
        validation_alias=AliasChoices('Attribute', 'attribute'),
        serialization_alias='Attribute',
        description='Attribute to read instead of text',
    )
    value_pattern: str | None = Field(
        default=None,
        validation_alias=AliasChoices('Regex', 'regex', 'value_pattern'),
        serialization_alias='Regex',
        description='Regex with one capture group',
    )
    index: int = Field(
        default=0,
        ge=0,
        validation_alias=AliasChoices('Index', 'index'),
        serialization_alias='Index',
        description='Match index',
    )

    @field_validator('attribute', 'value_pattern', mode='before')
    @classmethod
    def _empty_as_none(cls, value: Any) -> Any:
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @field_validator('value_pattern')
    @classmethod
    def _check_pattern(cls, value: str | None) -> str | None:
        if value is None:
            return None

        pattern = _DOTNET_NAMED_GROUP.sub('(?P<', value)
        try:
            compiled = re.compile(pattern)
        except re.error as e:
            raise ValueError(f'invalid regex {value!r}: {e}') from e

        if compiled.groups < 1:
            raise ValueError(f'regex {value!r} has no capture group')
        return pattern


class PagedEntryDefinition(SelectorDefinition):
    """Definition of the repeating records on one page of a collection.

    ``path`` locates the entry containers (one per record); ``entries`` are
    evaluated relative to each container, never to the page root.

    Attributes:
        entries: Field name to definition, read inside each entry container

    """

    entries: dict[str, SelectorDefinition] = Field(
        validation_alias=AliasChoices('Entries', 'entries'),
        serialization_alias='Entries',
        description='Per-entry field definitions',
    )

    @field_validator('entries', mode='before')
    @classmethod
    def _decode_entries(cls, value: Any) -> Any:
        if not isinstance(value, Mapping):
            return value
        return {name: decode_leaf(leaf) for name, leaf in value.items()}

    @property
    def entry_container_path(self) -> str:
        """CSS selector of the entry containers."""
        return self.path


class RegistryMeta(BaseModel):
    """Optional ``Meta`` block of a definitions document.

    Attributes:
        version: Version or commit token of the document
        user_agent_desktop: User agent that gets the desktop markup
        user_agent_mobile: User agent that gets the mobile markup

    """

    model_config = ConfigDict(frozen=True, extra='ignore')

    version: str | None = Field(default=None, validation_alias=AliasChoices('Version', 'version'))
    user_agent_desktop: str | None = Field(
        default=None, validation_alias=AliasChoices('UserAgentDesktop', 'userAgentDesktop', 'user_agent_desktop')
    )
    user_agent_mobile: str | None = Field(
        default=None, validation_alias=AliasChoices('UserAgentMobile', 'userAgentMobile', 'user_agent_mobile')
    )


def decode_leaf(data: Any) -> SelectorDefinition:
    """Decode one leaf of a definitions document.

    Leaves carrying an ``Entries`` key become PagedEntryDefinition, the rest
    SelectorDefinition.

    Args:
        data: Decoded JSON object, or an already built definition

    Returns:
        The validated definition.

    Raises:
        pydantic.ValidationError: If the leaf is not a well-formed definition

    """
    if isinstance(data, SelectorDefinition):
        return data
    if isinstance(data, Mapping) and ('Entries' in data or 'entries' in data):
        return PagedEntryDefinition.model_validate(data)
    return SelectorDefinition.model_validate(data)
