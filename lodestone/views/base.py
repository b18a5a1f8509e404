"""Views that bind a tree node to a slice of selector definitions.

A view borrows its node: it never copies or owns the tree, and every
property read runs the extraction again against the live node. Keep the
parsed document alive for as long as any view built over it is in use.
"""

from collections.abc import Mapping
from enum import Enum
from typing import Any, ClassVar, TypeVar

from bs4 import Tag

from lodestone.core.extraction import as_int, as_list, as_optional_int, extract, select
from lodestone.core.registry import Registry
from lodestone.models.definitions import PagedEntryDefinition, SelectorDefinition

ViewT = TypeVar('ViewT', bound='ParsedView')
EntryT = TypeVar('EntryT', bound='EntryView')


class ParsedView:
    """Lazily extracted fields of one node.

    Subclasses declare a closed ``str`` enum of their fields (member value =
    registry key) and one property per field built on the readers below.

    Attributes:
        area: Registry feature area the view reads its definitions from
        exported: Property names included in as_dict()
        node: The borrowed tree node
        definitions: Field name to definition for this view

    """

    area: ClassVar[str] = ''
    exported: ClassVar[tuple[str, ...]] = ()

    def __init__(self, node: Tag, definitions: Mapping[str, SelectorDefinition]):
        """Bind a node to its definitions.

        Args:
            node: Tree node to read from (not copied)
            definitions: Field name to definition for this view

        """
        self.node = node
        self.definitions = definitions

    @classmethod
    def from_registry(cls: type[ViewT], node: Tag, registry: Registry) -> ViewT:
        """Bind a node to this view's feature area of a registry."""
        return cls(node, registry.area(cls.area))

    def definition(self, field: Enum | str) -> SelectorDefinition | None:
        """Return the definition of a field, or None if the registry lacks it."""
        key = field.value if isinstance(field, Enum) else field
        return self.definitions.get(key)

    def _text(self, field: Enum) -> str | None:
        return extract(self.node, self.definition(field), field.value)

    def _int(self, field: Enum) -> int | None:
        return as_int(field.value, self._text(field))

    def _optional_int(self, field: Enum) -> int | None:
        return as_optional_int(self._text(field))

    def _list(self, field: Enum) -> list[str]:
        return as_list(self.node, self.definition(field), field.value)

    def as_dict(self) -> dict[str, Any]:
        """Read every exported property into a plain dict."""
        return {name: getattr(self, name) for name in self.exported}

    def __repr__(self) -> str:
        return f'<{type(self).__name__} area={self.area or "-"} fields={len(self.definitions)}>'


class EntryView(ParsedView):
    """Fields of one record inside a paged collection, bound to its entry container."""


def extract_entries(
    page_node: Tag,
    definition: SelectorDefinition | None,
    entry_type: type[EntryT] = EntryView,  # type: ignore[assignment]
    field: str = 'ENTRY',
) -> list[EntryT]:
    """Bind every entry container on a page to the per-entry definitions.

    Args:
        page_node: Root node of the page
        definition: Paged definition locating the containers
        entry_type: EntryView subclass to build for each container
        field: Registry key of the paged definition, reported if its selector is invalid

    Returns:
        One view per container, in document order. Empty when the definition
        is missing or matches nothing.

    """
    if definition is None:
        return []

    entries: Mapping[str, SelectorDefinition] = (
        definition.entries if isinstance(definition, PagedEntryDefinition) else {}
    )
    return [entry_type(container, entries) for container in select(page_node, definition, field)]


class PageField(str, Enum):
    """Registry keys shared by every paged area."""

    ENTRY = 'ENTRY'
    CURRENT_PAGE = 'CURRENT_PAGE'
    NUM_PAGES = 'NUM_PAGES'


class PagedView(ParsedView):
    """One page of a page-numbered collection.

    Only this page is known here; walking the remaining pages is up to the
    caller (see lodestone.client.iter_pages).

    Attributes:
        entry_type: EntryView subclass built for each record

    """

    entry_type: ClassVar[type[EntryView]] = EntryView

    @property
    def entries(self) -> list[EntryView]:
        """Records on this page, in page order."""
        return extract_entries(self.node, self.definition(PageField.ENTRY), self.entry_type)

    @property
    def current_page(self) -> int | None:
        """Number of this page, if the page shows it."""
        return self._optional_int(PageField.CURRENT_PAGE)

    @property
    def num_pages(self) -> int | None:
        """Total number of pages, if the page shows it."""
        return self._optional_int(PageField.NUM_PAGES)

    @property
    def has_next_page(self) -> bool:
        """Whether a page after this one exists."""
        current, total = self.current_page, self.num_pages
        if current is None or total is None:
            return False
        return current < total
