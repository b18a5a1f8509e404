"""Search result pages."""

from datetime import datetime
from enum import Enum

from lodestone.models.queries import (
    CharacterSearchQuery,
    CrossworldLinkshellSearchQuery,
    FreeCompanySearchQuery,
    LinkshellSearchQuery,
)
from lodestone.views.base import EntryView, PagedView
from lodestone.views.common import from_epoch


class CharacterSearchEntryField(str, Enum):
    AVATAR = 'AVATAR'
    ID = 'ID'
    NAME = 'NAME'
    SERVER = 'SERVER'
    LANG = 'LANG'
    RANK = 'RANK'
    RANK_ICON = 'RANK_ICON'


class CharacterSearchEntry(EntryView):
    exported = ('id', 'name', 'server', 'language')

    @property
    def avatar(self) -> str | None:
        return self._text(CharacterSearchEntryField.AVATAR)

    @property
    def id(self) -> str | None:
        return self._text(CharacterSearchEntryField.ID)

    @property
    def name(self) -> str | None:
        return self._text(CharacterSearchEntryField.NAME)

    @property
    def server(self) -> str | None:
        return self._text(CharacterSearchEntryField.SERVER)

    @property
    def language(self) -> str | None:
        return self._text(CharacterSearchEntryField.LANG)

    @property
    def rank(self) -> str | None:
        return self._text(CharacterSearchEntryField.RANK)

    @property
    def rank_icon(self) -> str | None:
        return self._text(CharacterSearchEntryField.RANK_ICON)


class CharacterSearchPage(PagedView):
    """One page of character search results.

    Attributes:
        query: The query the page answers

    """

    area = 'CharacterSearch'
    entry_type = CharacterSearchEntry
    exported = ('current_page', 'num_pages')

    def __init__(self, node, definitions, query: CharacterSearchQuery | None = None):
        super().__init__(node, definitions)
        self.query = query


class FreeCompanySearchEntryField(str, Enum):
    ID = 'ID'
    NAME = 'NAME'
    SERVER = 'SERVER'
    GRAND_COMPANY = 'GRAND_COMPANY'
    ACTIVE_MEMBERS = 'ACTIVE_MEMBERS'
    FORMED = 'FORMED'
    ESTATE_BUILT = 'ESTATE_BUILT'
    RECRUITMENT = 'RECRUITMENT'
    CREST = 'CREST'


class FreeCompanySearchEntry(EntryView):
    exported = ('id', 'name', 'server', 'grand_company', 'active_members', 'recruitment')

    @property
    def id(self) -> str | None:
        return self._text(FreeCompanySearchEntryField.ID)

    @property
    def name(self) -> str | None:
        return self._text(FreeCompanySearchEntryField.NAME)

    @property
    def server(self) -> str | None:
        return self._text(FreeCompanySearchEntryField.SERVER)

    @property
    def grand_company(self) -> str | None:
        return self._text(FreeCompanySearchEntryField.GRAND_COMPANY)

    @property
    def active_members(self) -> int | None:
        return self._optional_int(FreeCompanySearchEntryField.ACTIVE_MEMBERS)

    @property
    def formed(self) -> datetime | None:
        return from_epoch(self._optional_int(FreeCompanySearchEntryField.FORMED))

    @property
    def estate_built(self) -> str | None:
        return self._text(FreeCompanySearchEntryField.ESTATE_BUILT)

    @property
    def recruitment(self) -> str | None:
        return self._text(FreeCompanySearchEntryField.RECRUITMENT)

    @property
    def crest(self) -> list[str]:
        return self._list(FreeCompanySearchEntryField.CREST)


class FreeCompanySearchPage(PagedView):
    """One page of free company search results.

    Attributes:
        query: The query the page answers

    """

    area = 'FreeCompanySearch'
    entry_type = FreeCompanySearchEntry
    exported = ('current_page', 'num_pages')

    def __init__(self, node, definitions, query: FreeCompanySearchQuery | None = None):
        super().__init__(node, definitions)
        self.query = query


class LinkshellSearchEntryField(str, Enum):
    ID = 'ID'
    NAME = 'NAME'
    SERVER = 'SERVER'
    ACTIVE_MEMBERS = 'ACTIVE_MEMBERS'


class LinkshellSearchEntry(EntryView):
    exported = ('id', 'name', 'server', 'active_members')

    @property
    def id(self) -> str | None:
        return self._text(LinkshellSearchEntryField.ID)

    @property
    def name(self) -> str | None:
        return self._text(LinkshellSearchEntryField.NAME)

    @property
    def server(self) -> str | None:
        """Home world for linkshells, data center for cross-world linkshells."""
        return self._text(LinkshellSearchEntryField.SERVER)

    @property
    def active_members(self) -> int | None:
        return self._optional_int(LinkshellSearchEntryField.ACTIVE_MEMBERS)


class LinkshellSearchPage(PagedView):
    """One page of linkshell search results.

    Attributes:
        query: The query the page answers

    """

    area = 'LinkshellSearch'
    entry_type = LinkshellSearchEntry
    exported = ('current_page', 'num_pages')

    def __init__(self, node, definitions, query: LinkshellSearchQuery | None = None):
        super().__init__(node, definitions)
        self.query = query


class CrossworldLinkshellSearchPage(PagedView):
    """One page of cross-world linkshell search results.

    Attributes:
        query: The query the page answers

    """

    area = 'CrossworldLinkshellSearch'
    entry_type = LinkshellSearchEntry
    exported = ('current_page', 'num_pages')

    def __init__(self, node, definitions, query: CrossworldLinkshellSearchQuery | None = None):
        super().__init__(node, definitions)
        self.query = query
