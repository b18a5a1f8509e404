"""Parsed views over Lodestone pages."""

from lodestone.views.achievement import (
    AchievementEntry,
    AchievementEntryField,
    AchievementField,
    CharacterAchievementPage,
)
from lodestone.views.base import EntryView, PagedView, PageField, ParsedView, extract_entries
from lodestone.views.character import AttributesField, Character, CharacterAttributes, CharacterField
from lodestone.views.class_job import CharacterClassJob, ClassJobEntry, ClassJobEntryField
from lodestone.views.collectable import CharacterCollectable, CharacterMinions, CharacterMounts, CollectableField
from lodestone.views.free_company import (
    FreeCompany,
    FreeCompanyField,
    FreeCompanyMember,
    FreeCompanyMembersPage,
    MemberField,
)
from lodestone.views.linkshell import (
    CrossworldLinkshellPage,
    LinkshellField,
    LinkshellMember,
    LinkshellMemberField,
    LinkshellPage,
)
from lodestone.views.search import (
    CharacterSearchEntry,
    CharacterSearchEntryField,
    CharacterSearchPage,
    CrossworldLinkshellSearchPage,
    FreeCompanySearchEntry,
    FreeCompanySearchEntryField,
    FreeCompanySearchPage,
    LinkshellSearchEntry,
    LinkshellSearchEntryField,
    LinkshellSearchPage,
)

__all__ = [
    'AchievementEntry',
    'AchievementEntryField',
    'AchievementField',
    'AttributesField',
    'Character',
    'CharacterAchievementPage',
    'CharacterAttributes',
    'CharacterClassJob',
    'CharacterCollectable',
    'CharacterField',
    'CharacterMinions',
    'CharacterMounts',
    'CharacterSearchEntry',
    'CharacterSearchEntryField',
    'CharacterSearchPage',
    'ClassJobEntry',
    'ClassJobEntryField',
    'CollectableField',
    'CrossworldLinkshellPage',
    'CrossworldLinkshellSearchPage',
    'EntryView',
    'FreeCompany',
    'FreeCompanyField',
    'FreeCompanyMember',
    'FreeCompanyMembersPage',
    'FreeCompanySearchEntry',
    'FreeCompanySearchEntryField',
    'FreeCompanySearchPage',
    'LinkshellField',
    'LinkshellMember',
    'LinkshellMemberField',
    'LinkshellPage',
    'LinkshellSearchEntry',
    'LinkshellSearchEntryField',
    'LinkshellSearchPage',
    'MemberField',
    'PageField',
    'PagedView',
    'ParsedView',
    'extract_entries',
]
