"""Achievement pages of a character."""

from datetime import datetime
from enum import Enum

from lodestone.views.base import EntryView, PagedView
from lodestone.views.common import from_epoch


class AchievementEntryField(str, Enum):
    ID = 'ID'
    NAME = 'NAME'
    TIME = 'TIME'


class AchievementEntry(EntryView):
    exported = ('id', 'name', 'time')

    @property
    def id(self) -> str | None:
        return self._text(AchievementEntryField.ID)

    @property
    def name(self) -> str | None:
        return self._text(AchievementEntryField.NAME)

    @property
    def time(self) -> datetime | None:
        """When the achievement was unlocked."""
        return from_epoch(self._optional_int(AchievementEntryField.TIME))


class AchievementField(str, Enum):
    TOTAL_ACHIEVEMENTS = 'TOTAL_ACHIEVEMENTS'
    ACHIEVEMENT_POINTS = 'ACHIEVEMENT_POINTS'


class CharacterAchievementPage(PagedView):
    """One page of a character's unlocked achievements.

    Attributes:
        id: Lodestone id of the character, if known

    """

    area = 'Achievement'
    entry_type = AchievementEntry
    exported = ('total_achievements', 'achievement_points', 'current_page', 'num_pages')

    def __init__(self, node, definitions, character_id: str | None = None):
        super().__init__(node, definitions)
        self.id = character_id

    @property
    def total_achievements(self) -> int | None:
        return self._optional_int(AchievementField.TOTAL_ACHIEVEMENTS)

    @property
    def achievement_points(self) -> int | None:
        return self._optional_int(AchievementField.ACHIEVEMENT_POINTS)
