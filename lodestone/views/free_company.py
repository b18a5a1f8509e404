"""Free company profile and member roster."""

from datetime import datetime
from enum import Enum

from lodestone.views.base import EntryView, PagedView, ParsedView
from lodestone.views.common import from_epoch


class FreeCompanyField(str, Enum):
    NAME = 'NAME'
    TAG = 'TAG'
    SLOGAN = 'SLOGAN'
    SERVER = 'SERVER'
    GRAND_COMPANY = 'GRAND_COMPANY'
    RANK = 'RANK'
    ACTIVE_MEMBER_COUNT = 'ACTIVE_MEMBER_COUNT'
    FORMED = 'FORMED'
    RECRUITMENT = 'RECRUITMENT'
    ESTATE_NAME = 'ESTATE_NAME'
    CREST = 'CREST'


class FreeCompany(ParsedView):
    """A free company's profile page."""

    area = 'FreeCompany'
    exported = (
        'id',
        'name',
        'tag',
        'slogan',
        'server',
        'grand_company',
        'rank',
        'active_member_count',
        'formed',
        'recruitment',
        'estate_name',
    )

    def __init__(self, node, definitions, free_company_id: str | None = None):
        super().__init__(node, definitions)
        self.id = free_company_id

    @property
    def name(self) -> str | None:
        return self._text(FreeCompanyField.NAME)

    @property
    def tag(self) -> str | None:
        return self._text(FreeCompanyField.TAG)

    @property
    def slogan(self) -> str | None:
        return self._text(FreeCompanyField.SLOGAN)

    @property
    def server(self) -> str | None:
        return self._text(FreeCompanyField.SERVER)

    @property
    def grand_company(self) -> str | None:
        return self._text(FreeCompanyField.GRAND_COMPANY)

    @property
    def rank(self) -> int | None:
        return self._optional_int(FreeCompanyField.RANK)

    @property
    def active_member_count(self) -> int | None:
        return self._int(FreeCompanyField.ACTIVE_MEMBER_COUNT)

    @property
    def formed(self) -> datetime | None:
        return from_epoch(self._optional_int(FreeCompanyField.FORMED))

    @property
    def recruitment(self) -> str | None:
        return self._text(FreeCompanyField.RECRUITMENT)

    @property
    def estate_name(self) -> str | None:
        """None when the company owns no estate."""
        return self._text(FreeCompanyField.ESTATE_NAME)

    @property
    def crest(self) -> list[str]:
        """Image URLs of the crest layers, back to front."""
        return self._list(FreeCompanyField.CREST)


class MemberField(str, Enum):
    AVATAR = 'AVATAR'
    ID = 'ID'
    NAME = 'NAME'
    RANK = 'RANK'
    RANK_ICON = 'RANK_ICON'
    FC_RANK = 'FC_RANK'
    FC_RANK_ICON = 'FC_RANK_ICON'
    SERVER = 'SERVER'


class FreeCompanyMember(EntryView):
    """One member row of the roster."""

    exported = ('id', 'name', 'server', 'free_company_rank', 'rank')

    @property
    def avatar(self) -> str | None:
        return self._text(MemberField.AVATAR)

    @property
    def id(self) -> str | None:
        return self._text(MemberField.ID)

    @property
    def name(self) -> str | None:
        return self._text(MemberField.NAME)

    @property
    def rank(self) -> str | None:
        """Grand company rank."""
        return self._text(MemberField.RANK)

    @property
    def rank_icon(self) -> str | None:
        return self._text(MemberField.RANK_ICON)

    @property
    def free_company_rank(self) -> str | None:
        return self._text(MemberField.FC_RANK)

    @property
    def free_company_rank_icon(self) -> str | None:
        return self._text(MemberField.FC_RANK_ICON)

    @property
    def server(self) -> str | None:
        return self._text(MemberField.SERVER)


class FreeCompanyMembersPage(PagedView):
    """One page of a free company's member roster.

    Attributes:
        id: Lodestone id of the free company, if known

    """

    area = 'FreeCompanyMembers'
    entry_type = FreeCompanyMember
    exported = ('current_page', 'num_pages')

    def __init__(self, node, definitions, free_company_id: str | None = None):
        super().__init__(node, definitions)
        self.id = free_company_id
