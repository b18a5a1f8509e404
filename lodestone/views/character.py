"""Character profile and attribute views."""

from enum import Enum

from bs4 import Tag

from lodestone.core.registry import DefinitionSlice, Registry
from lodestone.core.resolver import Archetype, SharedSlot, Stat, stat_value
from lodestone.views.base import ParsedView


class AttributesField(str, Enum):
    STRENGTH = 'STRENGTH'
    DEXTERITY = 'DEXTERITY'
    VITALITY = 'VITALITY'
    INTELLIGENCE = 'INTELLIGENCE'
    MIND = 'MIND'
    CRITICAL_HIT_RATE = 'CRITICAL_HIT_RATE'
    DETERMINATION = 'DETERMINATION'
    DIRECT_HIT_RATE = 'DIRECT_HIT_RATE'
    DEFENSE = 'DEFENSE'
    MAGIC_DEFENSE = 'MAGIC_DEFENSE'
    ATTACK_POWER = 'ATTACK_POWER'
    SKILL_SPEED = 'SKILL_SPEED'
    ATTACK_MAGIC_POTENCY = SharedSlot.A.value
    HEALING_MAGIC_POTENCY = SharedSlot.B.value
    SPELL_SPEED = 'SPELL_SPEED'
    TENACITY = 'TENACITY'
    PIETY = 'PIETY'
    HP = 'HP'
    MP_GP_CP = 'MP_GP_CP'
    PARAMETER_NAME = 'MP_GP_CP_PARAMETER_NAME'


class CharacterAttributes(ParsedView):
    """A character's attribute table.

    The attack/healing magic potency positions hold different stats depending
    on the active job's archetype (see lodestone.core.resolver); the six stats
    that share them return None when they do not apply.
    """

    area = 'CharacterAttributes'
    exported = (
        'strength',
        'dexterity',
        'vitality',
        'intelligence',
        'mind',
        'critical_hit_rate',
        'determination',
        'direct_hit_rate',
        'defense',
        'magic_defense',
        'attack_power',
        'skill_speed',
        'attack_magic_potency',
        'healing_magic_potency',
        'spell_speed',
        'tenacity',
        'piety',
        'craftsmanship',
        'control',
        'gathering',
        'perception',
        'hp',
        'mp_gp_cp',
        'parameter_name',
    )

    @property
    def strength(self) -> int | None:
        return self._int(AttributesField.STRENGTH)

    @property
    def dexterity(self) -> int | None:
        return self._int(AttributesField.DEXTERITY)

    @property
    def vitality(self) -> int | None:
        return self._int(AttributesField.VITALITY)

    @property
    def intelligence(self) -> int | None:
        return self._int(AttributesField.INTELLIGENCE)

    @property
    def mind(self) -> int | None:
        return self._int(AttributesField.MIND)

    @property
    def critical_hit_rate(self) -> int | None:
        return self._int(AttributesField.CRITICAL_HIT_RATE)

    @property
    def determination(self) -> int | None:
        return self._int(AttributesField.DETERMINATION)

    @property
    def direct_hit_rate(self) -> int | None:
        return self._int(AttributesField.DIRECT_HIT_RATE)

    @property
    def defense(self) -> int | None:
        return self._int(AttributesField.DEFENSE)

    @property
    def magic_defense(self) -> int | None:
        return self._int(AttributesField.MAGIC_DEFENSE)

    @property
    def attack_power(self) -> int | None:
        return self._int(AttributesField.ATTACK_POWER)

    @property
    def skill_speed(self) -> int | None:
        return self._int(AttributesField.SKILL_SPEED)

    @property
    def spell_speed(self) -> int | None:
        """Only shown for disciples of war/magic."""
        return self._optional_int(AttributesField.SPELL_SPEED)

    @property
    def tenacity(self) -> int | None:
        return self._optional_int(AttributesField.TENACITY)

    @property
    def piety(self) -> int | None:
        return self._optional_int(AttributesField.PIETY)

    @property
    def hp(self) -> int | None:
        return self._int(AttributesField.HP)

    @property
    def mp_gp_cp(self) -> int | None:
        """MP, GP or CP value; parameter_name says which."""
        return self._int(AttributesField.MP_GP_CP)

    @property
    def parameter_name(self) -> str | None:
        """Label of the secondary resource ('MP', 'GP' or 'CP')."""
        return self._text(AttributesField.PARAMETER_NAME)

    @property
    def archetype(self) -> Archetype | None:
        return Archetype.from_token(self.parameter_name)

    def _shared(self, stat: Stat, slot: SharedSlot) -> int | None:
        return stat_value(stat, self.archetype, self._text(AttributesField(slot.value)))

    @property
    def attack_magic_potency(self) -> int | None:
        """Only set for disciples of war/magic."""
        return self._shared(Stat.ATTACK_MAGIC_POTENCY, SharedSlot.A)

    @property
    def healing_magic_potency(self) -> int | None:
        """Only set for disciples of war/magic."""
        return self._shared(Stat.HEALING_MAGIC_POTENCY, SharedSlot.B)

    @property
    def craftsmanship(self) -> int | None:
        """Only set for disciples of the hand."""
        return self._shared(Stat.CRAFTSMANSHIP, SharedSlot.A)

    @property
    def control(self) -> int | None:
        """Only set for disciples of the hand."""
        return self._shared(Stat.CONTROL, SharedSlot.B)

    @property
    def gathering(self) -> int | None:
        """Only set for disciples of the land."""
        return self._shared(Stat.GATHERING, SharedSlot.A)

    @property
    def perception(self) -> int | None:
        """Only set for disciples of the land."""
        return self._shared(Stat.PERCEPTION, SharedSlot.B)


class CharacterField(str, Enum):
    NAME = 'NAME'
    TITLE = 'TITLE'
    SERVER = 'SERVER'
    RACE_CLAN_GENDER = 'RACE_CLAN_GENDER'
    NAMEDAY = 'NAMEDAY'
    GUARDIAN_DEITY = 'GUARDIAN_DEITY'
    TOWN = 'TOWN'
    GRAND_COMPANY = 'GRAND_COMPANY'
    FREE_COMPANY_ID = 'FREE_COMPANY_ID'
    FREE_COMPANY_NAME = 'FREE_COMPANY_NAME'
    AVATAR = 'AVATAR'
    PORTRAIT = 'PORTRAIT'
    BIO = 'BIO'
    ACTIVE_CLASSJOB_LEVEL = 'ACTIVE_CLASSJOB_LEVEL'


class Character(ParsedView):
    """A character's profile page.

    Attributes:
        id: Lodestone id the page was fetched for, if known
        attributes_definitions: Definitions for the attribute table on the same page

    """

    area = 'Character'
    exported = (
        'id',
        'name',
        'title',
        'server',
        'race_clan_gender',
        'nameday',
        'guardian_deity',
        'city_state',
        'grand_company',
        'free_company_id',
        'free_company_name',
        'active_class_job_level',
        'avatar',
        'portrait',
        'bio',
    )

    def __init__(
        self,
        node: Tag,
        definitions: DefinitionSlice,
        attributes_definitions: DefinitionSlice | None = None,
        character_id: str | None = None,
    ):
        super().__init__(node, definitions)
        self.attributes_definitions = attributes_definitions or {}
        self.id = character_id

    @classmethod
    def from_registry(cls, node: Tag, registry: Registry, character_id: str | None = None) -> 'Character':
        return cls(node, registry.area(cls.area), registry.area(CharacterAttributes.area), character_id)

    @property
    def attributes(self) -> CharacterAttributes:
        """Attribute table of the active job, read from the same page."""
        return CharacterAttributes(self.node, self.attributes_definitions)

    @property
    def name(self) -> str | None:
        return self._text(CharacterField.NAME)

    @property
    def title(self) -> str | None:
        return self._text(CharacterField.TITLE)

    @property
    def server(self) -> str | None:
        """Home world, usually followed by the data center in brackets."""
        return self._text(CharacterField.SERVER)

    @property
    def race_clan_gender(self) -> str | None:
        return self._text(CharacterField.RACE_CLAN_GENDER)

    @property
    def nameday(self) -> str | None:
        return self._text(CharacterField.NAMEDAY)

    @property
    def guardian_deity(self) -> str | None:
        return self._text(CharacterField.GUARDIAN_DEITY)

    @property
    def city_state(self) -> str | None:
        return self._text(CharacterField.TOWN)

    @property
    def grand_company(self) -> str | None:
        return self._text(CharacterField.GRAND_COMPANY)

    @property
    def free_company_id(self) -> str | None:
        return self._text(CharacterField.FREE_COMPANY_ID)

    @property
    def free_company_name(self) -> str | None:
        return self._text(CharacterField.FREE_COMPANY_NAME)

    @property
    def active_class_job_level(self) -> int | None:
        return self._optional_int(CharacterField.ACTIVE_CLASSJOB_LEVEL)

    @property
    def avatar(self) -> str | None:
        return self._text(CharacterField.AVATAR)

    @property
    def portrait(self) -> str | None:
        return self._text(CharacterField.PORTRAIT)

    @property
    def bio(self) -> str | None:
        return self._text(CharacterField.BIO)
