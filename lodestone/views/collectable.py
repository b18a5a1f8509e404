"""Mount and minion collections (served with mobile markup)."""

from enum import Enum

from lodestone.views.base import ParsedView


class CollectableField(str, Enum):
    NAME = 'NAME'
    ICON = 'ICON'


class CharacterCollectable(ParsedView):
    """Every collectable of one kind a character owns, listed on a single page."""

    area = 'Mount'
    exported = ('count', 'names')

    @property
    def names(self) -> list[str]:
        return self._list(CollectableField.NAME)

    @property
    def icons(self) -> list[str]:
        return self._list(CollectableField.ICON)

    @property
    def count(self) -> int:
        return len(self.names)

    def __contains__(self, name: object) -> bool:
        return name in self.names


class CharacterMounts(CharacterCollectable):
    area = 'Mount'


class CharacterMinions(CharacterCollectable):
    area = 'Minion'
