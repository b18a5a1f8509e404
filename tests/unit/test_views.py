from datetime import datetime, timezone

import pytest

from lodestone.core import resolver
from lodestone.core.registry import load_registry
from lodestone.exceptions import ExtractionError
from lodestone.views import (
    Character,
    CharacterAchievementPage,
    CharacterAttributes,
    CharacterClassJob,
    CharacterMinions,
    CharacterMounts,
    CharacterSearchPage,
    CrossworldLinkshellPage,
    CrossworldLinkshellSearchPage,
    FreeCompany,
    FreeCompanyMembersPage,
    FreeCompanySearchPage,
    LinkshellPage,
    LinkshellSearchPage,
    PagedView,
)
from lodestone.views.common import from_epoch, grouped_int

PROFILE_HTML = """
<html><body>
  <div class="frame__chara">
    <div class="frame__chara__face"><img src="https://img.example/face.jpg"></div>
    <p class="frame__chara__name">Alyx Bergen</p>
    <p class="frame__chara__title">Warrior of Light</p>
    <p class="frame__chara__world">Cactuar [Aether]</p>
  </div>
  <div class="character__profile">
    <p class="character-block__name">Hyur / Midlander / Female</p>
    <p class="character-block__birth">1st Sun of the 1st Astral Moon</p>
    <p class="character-block__name">Halone, the Fury</p>
    <p class="character-block__name">Gridania</p>
    <p class="character-block__name">Order of the Twin Adder / Serpent Captain</p>
    <div class="character__freecompany__name">
      <h4><a href="/lodestone/freecompany/9231253336202687179/">Balance</a></h4>
    </div>
    <div class="character__class__data"><p>LEVEL 90</p></div>
    <div class="character__selfintroduction">Hello there.</div>
  </div>
</body></html>
"""

COLLECTABLE_HTML = """
<html><body>
  <ul class="mount__list">
    <li><img src="https://img.example/m1.png"><span class="mount__name">Company Chocobo</span></li>
    <li><img src="https://img.example/m2.png"><span class="mount__name">Fat Chocobo</span></li>
  </ul>
</body></html>
"""

ACHIEVEMENT_HTML = """
<html><body>
  <p class="parts__total">312 Achievements Unlocked</p>
  <p class="achievement__point">3455</p>
  <ul class="list">
    <li class="entry">
      <a class="entry__achievement" href="/lodestone/character/1/achievement/detail/2247/"></a>
      <p class="entry__activity__txt">Alyx Bergen earned the achievement "Breaking Brick Mountains".</p>
      <time class="entry__activity__time" data-epoch="1700000000"></time>
    </li>
    <li class="entry">
      <a class="entry__achievement" href="/lodestone/character/1/achievement/detail/12/"></a>
      <p class="entry__activity__txt">Alyx Bergen earned the achievement "To Crush Your Enemies I".</p>
    </li>
  </ul>
  <ul class="btn__pager"><li class="btn__pager__current">Page 1 of 4</li></ul>
</body></html>
"""

ACHIEVEMENT_DEFINITIONS = {
    'Achievement': {
        'TOTAL_ACHIEVEMENTS': {'Selector': '.parts__total', 'Regex': '(\\d+)'},
        'ACHIEVEMENT_POINTS': {'Selector': '.achievement__point'},
        'CURRENT_PAGE': {'Selector': '.btn__pager__current', 'Regex': 'Page (\\d+)'},
        'NUM_PAGES': {'Selector': '.btn__pager__current', 'Regex': 'of (\\d+)'},
        'ENTRY': {
            'Selector': 'ul.list > li.entry',
            'Entries': {
                'ID': {'Selector': '.entry__achievement', 'Attribute': 'href', 'Regex': '/detail/(\\w+)/'},
                'NAME': {'Selector': '.entry__activity__txt', 'Regex': '"(.+?)"'},
                'TIME': {'Selector': '.entry__activity__time', 'Attribute': 'data-epoch'},
            },
        },
    }
}


FORMED_SCRIPT = "<script>document.getElementById('datetime').innerHTML = ldst_strftime(1500000000, 'YMD');</script>"
FORMED = datetime(2017, 7, 14, 2, 40, tzinfo=timezone.utc)

CHARACTER_SEARCH_HTML = """
<html><body>
  <div class="ldst__window">
    <div class="entry">
      <a class="entry__link" href="/lodestone/character/13821878/">
        <div class="entry__chara__face"><img src="https://img.example/13821878.jpg"></div>
        <div class="entry__box">
          <p class="entry__name">Alyx Bergen</p>
          <p class="entry__world">Cactuar [Aether]</p>
          <ul class="entry__chara_info">
            <li><img src="https://img.example/job.png"><span>90</span></li>
            <li><img src="https://img.example/gc.png"><span>Storm Captain</span></li>
          </ul>
          <div class="entry__chara__lang">English</div>
        </div>
      </a>
    </div>
    <div class="entry">
      <a class="entry__link" href="/lodestone/character/22/">
        <p class="entry__name">Alyx Two</p>
        <p class="entry__world">Adamantoise [Aether]</p>
      </a>
    </div>
    <ul class="btn__pager"><li class="btn__pager__current">Page 1 of 2</li></ul>
  </div>
</body></html>
"""

FREE_COMPANY_SEARCH_HTML = f"""
<html><body>
  <div class="ldst__window">
    <div class="entry">
      <a class="entry__block" href="/lodestone/freecompany/9231253336202687179/">
        <div class="entry__freecompany__crest__image">
          <img src="https://img.example/c1.png"><img src="https://img.example/c2.png">
        </div>
        <div class="entry__freecompany__box">
          <p class="entry__world">Maelstrom</p>
          <p class="entry__name">Balance</p>
          <p class="entry__world">Cactuar [Aether]</p>
        </div>
      </a>
      <ul class="entry__freecompany__fc-data">
        <li class="entry__freecompany__fc-member">28</li>
        <li class="entry__freecompany__fc-housing">Estate Built</li>
        <li class="entry__freecompany__fc-day"><span id="datetime"></span>{FORMED_SCRIPT}</li>
      </ul>
      <p class="entry__freecompany__fc-active">Active: Always</p>
      <p class="entry__freecompany__fc-active">Recruitment: Open</p>
    </div>
    <div class="entry">
      <a class="entry__block" href="/lodestone/freecompany/42/">
        <div class="entry__freecompany__box">
          <p class="entry__world">Order of the Twin Adder</p>
          <p class="entry__name">Quiet Company</p>
          <p class="entry__world">Cactuar [Aether]</p>
        </div>
      </a>
    </div>
    <ul class="btn__pager"><li class="btn__pager__current">Page 3 of 3</li></ul>
  </div>
</body></html>
"""

CLASS_JOB_HTML = """
<html><body>
  <ul class="character__job">
    <li>
      <div class="character__job__level">72</div>
      <div class="character__job__name">Paladin</div>
      <div class="character__job__exp">12,345 / 2,000,000</div>
    </li>
    <li>
      <div class="character__job__level">90</div>
      <div class="character__job__name">Black Mage</div>
      <div class="character__job__exp">-- / --</div>
    </li>
    <li>
      <div class="character__job__level">-</div>
      <div class="character__job__name">Reaper</div>
      <div class="character__job__exp">-- / --</div>
    </li>
  </ul>
</body></html>
"""


def free_company_html(members: str = '28', estate: str = '') -> str:
    return f"""
    <html><body>
      <div class="entry__freecompany__crest__image">
        <img src="https://img.example/crest_base.png"><img src="https://img.example/crest_top.png">
      </div>
      <p class="entry__freecompany__gc">Maelstrom</p>
      <p class="entry__freecompany__gc">Cactuar [Aether]</p>
      <p class="freecompany__text__name">Balance</p>
      <p class="freecompany__text__tag">«BAL»</p>
      <p class="freecompany__text__message">Casual raiding, all welcome.</p>
      <p class="freecompany__formed"><span id="datetime"></span>{FORMED_SCRIPT}</p>
      <p class="freecompany__member-count">{members}</p>
      <p class="freecompany__rank">8</p>
      <p class="freecompany__recruitment">Open</p>
      {estate}
    </body></html>
    """


def linkshell_html(heading: str = '') -> str:
    return f"""
    <html><body>
      <h3 class="heading__linkshell__name">Night Owls</h3>
      {heading}
      <div class="ldst__window">
        <div class="entry">
          <a class="entry__link" href="/lodestone/character/13821878/">
            <div class="entry__chara__face"><img src="https://img.example/13821878.jpg"></div>
            <div class="entry__box">
              <p class="entry__name">Alyx Bergen</p>
              <p class="entry__world">Cactuar [Aether]</p>
              <ul class="entry__chara_info">
                <li><img src="https://img.example/job.png"><span>90</span></li>
                <li><img src="https://img.example/gc.png"><span>Storm Captain</span></li>
              </ul>
              <div class="entry__chara__linkshell"><img src="https://img.example/master.png"><span>Master</span></div>
            </div>
          </a>
        </div>
        <div class="entry">
          <a class="entry__link" href="/lodestone/character/22/">
            <p class="entry__name">Bo Member</p>
            <p class="entry__world">Gilgamesh [Aether]</p>
          </a>
        </div>
        <ul class="btn__pager"><li class="btn__pager__current">Page 1 of 2</li></ul>
      </div>
    </body></html>
    """


def linkshell_search_html(href: str) -> str:
    return f"""
    <html><body>
      <div class="ldst__window">
        <div class="entry">
          <a class="entry__link--line" href="{href}">
            <p class="entry__name">Night Owls</p>
            <p class="entry__world">Aether</p>
          </a>
          <div class="entry__linkshell__member"><i></i><span>12</span></div>
        </div>
        <ul class="btn__pager"><li class="btn__pager__current">Page 1 of 1</li></ul>
      </div>
    </body></html>
    """


class TestCharacterAttributes:
    def test_caster_reads_magic_potencies(self, make_soup, caster_stats_html, registry):
        attributes = CharacterAttributes.from_registry(make_soup(caster_stats_html), registry)

        assert attributes.parameter_name == 'MP'
        assert attributes.attack_magic_potency == 142
        assert attributes.healing_magic_potency == 140
        assert attributes.craftsmanship is None
        assert attributes.control is None
        assert attributes.gathering is None
        assert attributes.perception is None

    def test_caster_reads_fixed_positions(self, make_soup, caster_stats_html, registry):
        attributes = CharacterAttributes.from_registry(make_soup(caster_stats_html), registry)

        assert attributes.strength == 120
        assert attributes.intelligence == 5800
        assert attributes.skill_speed == 420
        assert attributes.spell_speed == 1100
        assert attributes.piety == 390
        assert attributes.hp == 92150
        assert attributes.mp_gp_cp == 10000

    def test_crafter_reads_same_slots_as_hand_stats(self, make_soup, crafter_stats_html, registry):
        attributes = CharacterAttributes.from_registry(make_soup(crafter_stats_html), registry)

        assert attributes.parameter_name == 'CP'
        assert attributes.craftsmanship == 4213
        assert attributes.control == 3987
        assert attributes.attack_magic_potency is None
        assert attributes.healing_magic_potency is None
        assert attributes.mp_gp_cp == 650

    def test_crafter_lacks_role_stats(self, make_soup, crafter_stats_html, registry):
        attributes = CharacterAttributes.from_registry(make_soup(crafter_stats_html), registry)

        assert attributes.spell_speed is None
        assert attributes.tenacity is None
        assert attributes.piety is None

    def test_gatherer(self, make_soup, make_stats_page, registry):
        cells = ['90'] * 12 + ['880', '910']
        attributes = CharacterAttributes.from_registry(make_soup(make_stats_page('GP', cells, resource='700')), registry)

        assert attributes.gathering == 880
        assert attributes.perception == 910
        assert attributes.craftsmanship is None

    def test_unknown_archetype_leaves_shared_stats_unset(self, make_soup, make_stats_page, registry):
        cells = ['90'] * 14
        attributes = CharacterAttributes.from_registry(make_soup(make_stats_page('TP', cells)), registry)

        assert attributes.archetype is None
        assert [getattr(attributes, name) for name in ('attack_magic_potency', 'craftsmanship', 'gathering')] == [
            None,
            None,
            None,
        ]
        assert attributes.strength == 90

    def test_reads_are_never_cached(self, make_soup, caster_stats_html, registry):
        document = make_soup(caster_stats_html)
        attributes = CharacterAttributes.from_registry(document, registry)
        assert attributes.strength == 120

        document.select('table.character__param__list td')[0].string = '999'

        assert attributes.strength == 999

    def test_missing_definition_degrades_to_none(self, make_soup, caster_stats_html, registry):
        definitions = {key: value for key, value in registry.area('CharacterAttributes').items() if key != 'STRENGTH'}
        attributes = CharacterAttributes(make_soup(caster_stats_html), definitions)

        assert attributes.strength is None
        assert attributes.dexterity == 300

    def test_malformed_value_raises(self, make_soup, make_stats_page, registry):
        cells = ['strong'] + ['90'] * 13
        attributes = CharacterAttributes.from_registry(make_soup(make_stats_page('MP', cells)), registry)

        with pytest.raises(ExtractionError) as excinfo:
            _ = attributes.strength

        assert excinfo.value.field == 'STRENGTH'
        assert excinfo.value.raw_value == 'strong'
        # other fields still read fine
        assert attributes.dexterity == 90

    def test_invalid_selector_is_reported_under_its_field(self, make_soup, caster_stats_html):
        registry = load_registry({'CharacterAttributes': {'STRENGTH': {'Selector': 'td[bad'}}})
        attributes = CharacterAttributes.from_registry(make_soup(caster_stats_html), registry)

        with pytest.raises(ExtractionError) as excinfo:
            _ = attributes.strength

        assert excinfo.value.field == 'STRENGTH'
        assert excinfo.value.raw_value == 'td[bad'

    def test_shared_stats_go_through_the_resolver(self, mocker, make_soup, caster_stats_html, registry):
        spy = mocker.spy(resolver, 'resolve')
        attributes = CharacterAttributes.from_registry(make_soup(caster_stats_html), registry)

        assert attributes.attack_magic_potency == 142
        assert attributes.craftsmanship is None
        spy.assert_called_once_with(resolver.Archetype.MP, resolver.SharedSlot.A, '142')

    def test_as_dict_contains_every_exported_field(self, make_soup, caster_stats_html, registry):
        data = CharacterAttributes.from_registry(make_soup(caster_stats_html), registry).as_dict()

        assert set(data) == set(CharacterAttributes.exported)
        assert data['attack_magic_potency'] == 142
        assert data['control'] is None


class TestCharacter:
    def test_profile_fields(self, make_soup, registry):
        character = Character.from_registry(make_soup(PROFILE_HTML), registry, character_id='1')

        assert character.id == '1'
        assert character.name == 'Alyx Bergen'
        assert character.title == 'Warrior of Light'
        assert character.server == 'Cactuar [Aether]'
        assert character.race_clan_gender == 'Hyur / Midlander / Female'
        assert character.guardian_deity == 'Halone, the Fury'
        assert character.city_state == 'Gridania'
        assert character.free_company_id == '9231253336202687179'
        assert character.free_company_name == 'Balance'
        assert character.active_class_job_level == 90
        assert character.avatar == 'https://img.example/face.jpg'

    def test_absent_sections_are_none(self, make_soup, registry):
        character = Character.from_registry(make_soup(PROFILE_HTML), registry)

        assert character.portrait is None
        assert character.id is None

    def test_attributes_read_from_same_page(self, make_soup, caster_stats_html, registry):
        character = Character.from_registry(make_soup(caster_stats_html), registry)

        assert character.attributes.attack_magic_potency == 142
        assert character.name is None


class TestCollectables:
    def test_mounts(self, make_soup, registry):
        mounts = CharacterMounts.from_registry(make_soup(COLLECTABLE_HTML), registry)

        assert mounts.names == ['Company Chocobo', 'Fat Chocobo']
        assert mounts.icons == ['https://img.example/m1.png', 'https://img.example/m2.png']
        assert mounts.count == 2
        assert 'Fat Chocobo' in mounts

    def test_minions_read_their_own_area(self, make_soup, registry):
        minions = CharacterMinions.from_registry(make_soup(COLLECTABLE_HTML), registry)

        assert minions.names == []
        assert minions.count == 0


class TestPagedViews:
    def test_roster_of_fifty(self, make_soup, make_roster_page, registry):
        members = [(str(1000 + i), f'Member {i}') for i in range(50)]
        page = FreeCompanyMembersPage.from_registry(make_soup(make_roster_page(members, current=1, total=3)), registry)

        entries = page.entries

        assert len(entries) == 50
        assert [(entry.id, entry.name) for entry in entries] == members
        assert len({entry.id for entry in entries}) == 50
        assert page.current_page == 1
        assert page.num_pages == 3
        assert page.has_next_page

    def test_entries_read_within_their_own_container(self, make_soup, make_roster_page, registry):
        page = FreeCompanyMembersPage.from_registry(make_soup(make_roster_page([('1', 'Ada'), ('2', 'Bo')])), registry)

        first, second = page.entries

        assert first.name == 'Ada'
        assert second.name == 'Bo'
        assert second.rank == 'Storm Sergeant First Class'
        assert second.free_company_rank == 'Member'
        assert second.free_company_rank_icon == 'https://img.example/fc_rank.png'
        assert second.avatar == 'https://img.example/2.jpg'
        assert second.server == 'Cactuar [Aether]'

    def test_last_page_has_no_next(self, make_soup, make_roster_page, registry):
        page = FreeCompanyMembersPage.from_registry(make_soup(make_roster_page([('1', 'Ada')], 3, 3)), registry)

        assert not page.has_next_page

    def test_page_without_pager_has_no_next(self, make_soup, registry):
        page = FreeCompanyMembersPage.from_registry(make_soup('<html><body></body></html>'), registry)

        assert page.entries == []
        assert page.current_page is None
        assert not page.has_next_page

    def test_missing_entry_definition_gives_no_entries(self, make_soup, make_roster_page):
        page = PagedView(make_soup(make_roster_page([('1', 'Ada')])), {})

        assert page.entries == []

    def test_achievement_page(self, make_soup):
        registry = load_registry(ACHIEVEMENT_DEFINITIONS)
        page = CharacterAchievementPage(make_soup(ACHIEVEMENT_HTML), registry.area('Achievement'), character_id='1')

        first, second = page.entries

        assert page.total_achievements == 312
        assert page.achievement_points == 3455
        assert page.num_pages == 4
        assert first.id == '2247'
        assert first.name == 'Breaking Brick Mountains'
        assert first.time == datetime(2023, 11, 14, 22, 13, 20, tzinfo=timezone.utc)
        assert second.name == 'To Crush Your Enemies I'
        assert second.time is None

    def test_out_of_range_epoch_reads_as_absent(self, make_soup):
        registry = load_registry(ACHIEVEMENT_DEFINITIONS)
        html = ACHIEVEMENT_HTML.replace('1700000000', '99999999999999999')
        page = CharacterAchievementPage(make_soup(html), registry.area('Achievement'))

        first = page.entries[0]

        assert first.name == 'Breaking Brick Mountains'
        assert first.time is None


def test_from_epoch():
    assert from_epoch(1500000000) == FORMED
    assert from_epoch(None) is None
    assert from_epoch(99999999999999999) is None


@pytest.mark.parametrize(
    ('raw', 'expected'),
    [('1,234,567', 1234567), ('12345', 12345), ('-', None), ('--', None), (None, None)],
)
def test_grouped_int(raw, expected):
    assert grouped_int(raw) == expected


class TestFreeCompany:
    def test_profile_fields(self, make_soup, registry):
        company = FreeCompany(make_soup(free_company_html()), registry.area('FreeCompany'), '9231253336202687179')

        assert company.id == '9231253336202687179'
        assert company.name == 'Balance'
        assert company.tag == 'BAL'
        assert company.slogan == 'Casual raiding, all welcome.'
        assert company.grand_company == 'Maelstrom'
        assert company.server == 'Cactuar [Aether]'
        assert company.rank == 8
        assert company.active_member_count == 28
        assert company.formed == FORMED
        assert company.recruitment == 'Open'
        assert company.crest == ['https://img.example/crest_base.png', 'https://img.example/crest_top.png']

    def test_estate_is_optional(self, make_soup, registry):
        without = FreeCompany(make_soup(free_company_html()), registry.area('FreeCompany'))
        estate = '<p class="freecompany__estate__name">Lily Hills Cottage</p>'
        with_estate = FreeCompany(make_soup(free_company_html(estate=estate)), registry.area('FreeCompany'))

        assert without.estate_name is None
        assert with_estate.estate_name == 'Lily Hills Cottage'

    def test_malformed_member_count_raises(self, make_soup, registry):
        company = FreeCompany(make_soup(free_company_html(members='lots')), registry.area('FreeCompany'))

        with pytest.raises(ExtractionError) as excinfo:
            _ = company.active_member_count

        assert excinfo.value.field == 'ACTIVE_MEMBER_COUNT'
        assert company.name == 'Balance'

    def test_empty_page_reads_as_absent(self, make_soup, registry):
        company = FreeCompany(make_soup('<html><body></body></html>'), registry.area('FreeCompany'))

        assert company.name is None
        assert company.active_member_count is None
        assert company.formed is None
        assert company.crest == []


class TestSearchPages:
    def test_character_search_entries(self, make_soup, registry):
        page = CharacterSearchPage(make_soup(CHARACTER_SEARCH_HTML), registry.area('CharacterSearch'))

        first, second = page.entries

        assert page.current_page == 1
        assert page.has_next_page
        assert first.id == '13821878'
        assert first.name == 'Alyx Bergen'
        assert first.server == 'Cactuar [Aether]'
        assert first.language == 'English'
        assert first.rank == 'Storm Captain'
        assert first.avatar == 'https://img.example/13821878.jpg'
        assert second.id == '22'
        assert second.language is None
        assert second.rank is None

    def test_free_company_search_entries(self, make_soup, registry):
        page = FreeCompanySearchPage(make_soup(FREE_COMPANY_SEARCH_HTML), registry.area('FreeCompanySearch'))

        first, second = page.entries

        assert not page.has_next_page
        assert first.id == '9231253336202687179'
        assert first.name == 'Balance'
        assert first.grand_company == 'Maelstrom'
        assert first.server == 'Cactuar [Aether]'
        assert first.active_members == 28
        assert first.formed == FORMED
        assert first.estate_built == 'Estate Built'
        assert first.recruitment == 'Recruitment: Open'
        assert first.crest == ['https://img.example/c1.png', 'https://img.example/c2.png']
        assert second.grand_company == 'Order of the Twin Adder'
        assert second.active_members is None
        assert second.formed is None
        assert second.crest == []

    def test_linkshell_search_entries(self, make_soup, registry):
        html = linkshell_search_html('/lodestone/linkshell/19984723346535274/')
        page = LinkshellSearchPage(make_soup(html), registry.area('LinkshellSearch'))

        (entry,) = page.entries

        assert entry.id == '19984723346535274'
        assert entry.name == 'Night Owls'
        assert entry.active_members == 12
        assert not page.has_next_page

    def test_crossworld_linkshell_ids_are_hex(self, make_soup, registry):
        html = linkshell_search_html('/lodestone/crossworld_linkshell/a1b2c3d4e5/')
        page = CrossworldLinkshellSearchPage(make_soup(html), registry.area('CrossworldLinkshellSearch'))

        (entry,) = page.entries

        assert entry.id == 'a1b2c3d4e5'
        assert entry.server == 'Aether'


class TestClassJob:
    def test_levels_and_experience(self, make_soup, registry):
        class_job = CharacterClassJob(make_soup(CLASS_JOB_HTML), registry.area('ClassJob'), '13821878')

        paladin, black_mage, reaper = class_job.jobs

        assert paladin.name == 'Paladin'
        assert paladin.level == 72
        assert paladin.exp_current == 12345
        assert paladin.exp_max == 2000000
        assert black_mage.level == 90
        assert black_mage.exp_max is None
        assert not reaper.unlocked
        assert reaper.level is None
        assert reaper.exp_current is None

    def test_unlocked_jobs_and_lookup(self, make_soup, registry):
        class_job = CharacterClassJob(make_soup(CLASS_JOB_HTML), registry.area('ClassJob'))

        assert class_job.unlocked_count == 2
        assert [job.name for job in class_job.unlocked] == ['Paladin', 'Black Mage']
        assert class_job.job('black mage').level == 90
        assert class_job.job('Astrologian') is None

    def test_as_dict(self, make_soup, registry):
        class_job = CharacterClassJob(make_soup(CLASS_JOB_HTML), registry.area('ClassJob'), '1')

        assert class_job.as_dict() == {'id': '1', 'unlocked_count': 2}


class TestLinkshell:
    def test_members_and_pager(self, make_soup, registry):
        page = LinkshellPage(make_soup(linkshell_html()), registry.area('Linkshell'), '19984723346535274')

        master, member = page.entries

        assert page.name == 'Night Owls'
        assert page.num_pages == 2
        assert page.has_next_page
        assert master.id == '13821878'
        assert master.rank == 'Storm Captain'
        assert master.linkshell_rank == 'Master'
        assert master.linkshell_rank_icon == 'https://img.example/master.png'
        assert member.server == 'Gilgamesh [Aether]'
        assert member.linkshell_rank is None

    def test_crossworld_linkshell_reads_data_center(self, make_soup, registry):
        html = linkshell_html('<p class="heading__cwls__dcname">Crystal</p>')
        page = CrossworldLinkshellPage(make_soup(html), registry.area('CrossworldLinkshell'), 'a1b2c3d4e5')

        assert page.name == 'Night Owls'
        assert page.data_center == 'Crystal'
        assert [member.name for member in page.entries] == ['Alyx Bergen', 'Bo Member']
