"""Resolves stats whose meaning depends on the character's archetype.

The character page shows two stats in the same positions for every job, but
what those positions mean depends on the job's secondary resource: a caster
(MP) shows magic potencies there, a gatherer (GP) gathering and perception,
a crafter (CP) craftsmanship and control. The resource label is read from the
page and decides which named stat each shared slot holds.
"""

from collections.abc import Mapping
from enum import Enum
from typing import NamedTuple

from lodestone.core.extraction import as_int


class Archetype(str, Enum):
    """Secondary-resource label shown next to a character's MP/GP/CP value."""

    MP = 'MP'
    GP = 'GP'
    CP = 'CP'

    @classmethod
    def from_token(cls, token: str | None) -> 'Archetype | None':
        """Map a label read from the page to an archetype; None for anything unknown."""
        if token is None:
            return None
        try:
            return cls(token.strip().upper())
        except ValueError:
            return None


class SharedSlot(str, Enum):
    """Page positions reused for different stats."""

    A = 'ATTACK_MAGIC_POTENCY'
    B = 'HEALING_MAGIC_POTENCY'


class Stat(str, Enum):
    """Named stats that can live in a shared slot."""

    ATTACK_MAGIC_POTENCY = 'attack_magic_potency'
    HEALING_MAGIC_POTENCY = 'healing_magic_potency'
    GATHERING = 'gathering'
    PERCEPTION = 'perception'
    CRAFTSMANSHIP = 'craftsmanship'
    CONTROL = 'control'


class ResolvedStat(NamedTuple):
    """A shared slot read as the stat it holds for one archetype."""

    stat: Stat | None
    value: int | None


SLOT_STATS: Mapping[SharedSlot, Mapping[Archetype, Stat]] = {
    SharedSlot.A: {
        Archetype.MP: Stat.ATTACK_MAGIC_POTENCY,
        Archetype.GP: Stat.GATHERING,
        Archetype.CP: Stat.CRAFTSMANSHIP,
    },
    SharedSlot.B: {
        Archetype.MP: Stat.HEALING_MAGIC_POTENCY,
        Archetype.GP: Stat.PERCEPTION,
        Archetype.CP: Stat.CONTROL,
    },
}

STAT_SLOTS: Mapping[Stat, SharedSlot] = {
    stat: slot for slot, by_archetype in SLOT_STATS.items() for stat in by_archetype.values()
}


def _check_exhaustive() -> None:
    for slot in SharedSlot:
        missing = set(Archetype) - set(SLOT_STATS.get(slot, {}))
        if missing:
            names = ', '.join(sorted(archetype.value for archetype in missing))
            raise RuntimeError(f'Shared slot {slot.name} has no stat for archetypes: {names}')
    unmapped = set(Stat) - set(STAT_SLOTS)
    if unmapped:
        raise RuntimeError(f'Stats without a shared slot: {", ".join(sorted(s.value for s in unmapped))}')


_check_exhaustive()


def resolve(archetype: Archetype | None, slot: SharedSlot, raw: str | None) -> ResolvedStat:
    """Interpret a shared slot's raw value for an archetype.

    Args:
        archetype: Archetype read from the page, or None if unknown
        slot: Which shared slot the value came from
        raw: Raw value extracted from the slot

    Returns:
        The stat the slot holds and its value; both None for unknown archetypes.

    Raises:
        ExtractionError: If the slot applies but its value is not an integer

    """
    if archetype is None:
        return ResolvedStat(None, None)

    stat = SLOT_STATS[slot][archetype]
    return ResolvedStat(stat, as_int(slot.value, raw))


def stat_value(stat: Stat, archetype: Archetype | None, slot_raw: str | None) -> int | None:
    """Value of a named stat, or None when the archetype puts another stat in its slot.

    This is the per-stat form of resolve() used by CharacterAttributes: the slot
    is only parsed when the requested stat is the one it holds.

    Args:
        stat: The stat being asked for
        archetype: Archetype read from the page, or None if unknown
        slot_raw: Raw value of the stat's shared slot

    Returns:
        The stat's value, or None if it does not apply.

    Raises:
        ExtractionError: If the stat applies but its slot value is not an integer

    """
    slot = STAT_SLOTS[stat]
    if archetype is None or SLOT_STATS[slot][archetype] is not stat:
        return None
    return resolve(archetype, slot, slot_raw).value
