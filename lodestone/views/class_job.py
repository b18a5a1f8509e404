"""Class and job levels of a character."""

from enum import Enum

from lodestone.views.base import EntryView, PageField, ParsedView, extract_entries
from lodestone.views.common import grouped_int


class ClassJobEntryField(str, Enum):
    NAME = 'NAME'
    LEVEL = 'LEVEL'
    EXP_CURRENT = 'EXP_CURRENT'
    EXP_MAX = 'EXP_MAX'


class ClassJobEntry(EntryView):
    """One class or job row of the class/job page.

    Locked classes show '-' in place of their level and experience; those
    read as None.
    """

    exported = ('name', 'level', 'exp_current', 'exp_max')

    @property
    def name(self) -> str | None:
        return self._text(ClassJobEntryField.NAME)

    @property
    def level(self) -> int | None:
        return self._optional_int(ClassJobEntryField.LEVEL)

    @property
    def exp_current(self) -> int | None:
        return grouped_int(self._text(ClassJobEntryField.EXP_CURRENT))

    @property
    def exp_max(self) -> int | None:
        """Experience needed for the next level; None at the level cap."""
        return grouped_int(self._text(ClassJobEntryField.EXP_MAX))

    @property
    def unlocked(self) -> bool:
        return self.level is not None


class CharacterClassJob(ParsedView):
    """A character's class/job page.

    Attributes:
        id: Lodestone id of the character, if known

    """

    area = 'ClassJob'
    exported = ('id', 'unlocked_count')

    def __init__(self, node, definitions, character_id: str | None = None):
        super().__init__(node, definitions)
        self.id = character_id

    @property
    def jobs(self) -> list[ClassJobEntry]:
        """Every class/job row, in page order."""
        return extract_entries(self.node, self.definition(PageField.ENTRY), ClassJobEntry)

    @property
    def unlocked(self) -> list[ClassJobEntry]:
        return [job for job in self.jobs if job.unlocked]

    @property
    def unlocked_count(self) -> int:
        return len(self.unlocked)

    def job(self, name: str) -> ClassJobEntry | None:
        """Find a row by its displayed name (case-insensitive)."""
        wanted = name.strip().casefold()
        for entry in self.jobs:
            if entry.name is not None and entry.name.casefold() == wanted:
                return entry
        return None
