"""Linkshell and cross-world linkshell member pages."""

from enum import Enum

from lodestone.views.base import EntryView, PagedView


class LinkshellMemberField(str, Enum):
    AVATAR = 'AVATAR'
    ID = 'ID'
    NAME = 'NAME'
    SERVER = 'SERVER'
    RANK = 'RANK'
    RANK_ICON = 'RANK_ICON'
    LINKSHELL_RANK = 'LINKSHELL_RANK'
    LINKSHELL_RANK_ICON = 'LINKSHELL_RANK_ICON'


class LinkshellMember(EntryView):
    """One member row, shared by world and cross-world linkshells."""

    exported = ('id', 'name', 'server', 'linkshell_rank')

    @property
    def avatar(self) -> str | None:
        return self._text(LinkshellMemberField.AVATAR)

    @property
    def id(self) -> str | None:
        return self._text(LinkshellMemberField.ID)

    @property
    def name(self) -> str | None:
        return self._text(LinkshellMemberField.NAME)

    @property
    def server(self) -> str | None:
        return self._text(LinkshellMemberField.SERVER)

    @property
    def rank(self) -> str | None:
        """Grand company rank."""
        return self._text(LinkshellMemberField.RANK)

    @property
    def rank_icon(self) -> str | None:
        return self._text(LinkshellMemberField.RANK_ICON)

    @property
    def linkshell_rank(self) -> str | None:
        """'Master' or 'Leader'; None for ordinary members."""
        return self._text(LinkshellMemberField.LINKSHELL_RANK)

    @property
    def linkshell_rank_icon(self) -> str | None:
        return self._text(LinkshellMemberField.LINKSHELL_RANK_ICON)


class LinkshellField(str, Enum):
    NAME = 'NAME'
    DATA_CENTER = 'DATA_CENTER'


class LinkshellPage(PagedView):
    """One page of a linkshell's member list.

    Attributes:
        id: Lodestone id of the linkshell, if known

    """

    area = 'Linkshell'
    entry_type = LinkshellMember
    exported = ('id', 'name', 'current_page', 'num_pages')

    def __init__(self, node, definitions, linkshell_id: str | None = None):
        super().__init__(node, definitions)
        self.id = linkshell_id

    @property
    def name(self) -> str | None:
        return self._text(LinkshellField.NAME)


class CrossworldLinkshellPage(LinkshellPage):
    """One page of a cross-world linkshell's member list."""

    area = 'CrossworldLinkshell'
    exported = ('id', 'name', 'data_center', 'current_page', 'num_pages')

    @property
    def data_center(self) -> str | None:
        return self._text(LinkshellField.DATA_CENTER)
