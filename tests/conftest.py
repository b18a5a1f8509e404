import json
from importlib import resources

import logfire
import pytest
from bs4 import BeautifulSoup

from lodestone.core.registry import load_registry

ATTRIBUTE_NAMES = [
    'Strength',
    'Dexterity',
    'Vitality',
    'Intelligence',
    'Mind',
    'Critical Hit',
    'Determination',
    'Direct Hit Rate',
    'Defense',
    'Magic Defense',
    'Attack Power',
    'Skill Speed',
    'Attack Magic Potency',
    'Healing Magic Potency',
    'Spell Speed',
    'Tenacity',
    'Piety',
]


def soup(html: str) -> BeautifulSoup:
    return BeautifulSoup(html, 'lxml')


def stats_page(label: str, cells: list[str], hp: str = '92150', resource: str = '10000') -> str:
    """Character page fragment laid out the way the bundled definitions expect."""
    rows = ''.join(
        f'<tr><th><span>{name}</span></th><td>{value}</td></tr>'
        for name, value in zip(ATTRIBUTE_NAMES, cells, strict=False)
    )
    return f"""
    <html><body>
      <div class="character__profile__data">
        <table class="character__param__list"><tbody>{rows}</tbody></table>
        <div class="character__param">
          <ul>
            <li><p class="character__param__text__hp--en-us">HP</p><span>{hp}</span></li>
            <li><p class="character__param__text__mp--en-us">{label}</p><span>{resource}</span></li>
          </ul>
        </div>
      </div>
    </body></html>
    """


def roster_page(members: list[tuple[str, str]], current: int = 1, total: int = 1) -> str:
    """Free company member page with one entry per (id, name) pair."""
    entries = ''.join(
        f"""
        <li class="entry">
          <a class="entry__bg" href="/lodestone/character/{member_id}/">
            <div class="entry__chara__face"><img src="https://img.example/{member_id}.jpg"></div>
            <div class="entry__box">
              <p class="entry__name">{name}</p>
              <p class="entry__world">Cactuar [Aether]</p>
              <ul class="entry__chara_info">
                <li><img src="https://img.example/job.png"></li>
                <li><img src="https://img.example/gc.png"><span>Storm Sergeant First Class</span></li>
              </ul>
              <ul class="entry__freecompany__info">
                <li><img src="https://img.example/fc_rank.png"><span>Member</span></li>
              </ul>
            </div>
          </a>
        </li>
        """
        for member_id, name in members
    )
    return f"""
    <html><body>
      <div class="ldst__window">
        <ul>{entries}</ul>
        <ul class="btn__pager"><li class="btn__pager__current">Page {current} of {total}</li></ul>
      </div>
    </body></html>
    """


def pytest_configure(config):
    """Register custom markers and keep logfire local."""
    config.addinivalue_line('markers', 'integration: marks tests as integration tests')
    config.addinivalue_line('markers', 'unit: marks tests as unit tests')
    logfire.configure(send_to_logfire=False, console=False)


def pytest_collection_modifyitems(config, items):
    """Apply directory-based marks to collected test items."""

    for item in items:
        if hasattr(item, 'fspath'):
            file_path = str(item.fspath)

            if '/tests/integration/' in file_path:
                item.add_marker(pytest.mark.integration)
            elif '/tests/unit/' in file_path:
                item.add_marker(pytest.mark.unit)


@pytest.fixture
def bundled_document():
    text = resources.files('lodestone.data').joinpath('definitions.json').read_text(encoding='utf-8')
    return json.loads(text)


@pytest.fixture
def registry(bundled_document):
    return load_registry(bundled_document)


@pytest.fixture
def caster_stats_html():
    cells = ['120', '300', '5200', '5800', '400', '2500', '1900', '1400', '4000', '4000', '300', '420', '142', '140']
    cells += ['1100', '400', '390']
    return stats_page('MP', cells)


@pytest.fixture
def crafter_stats_html():
    # crafters show no role table, so the last three cells are missing
    cells = ['90', '90', '90', '90', '90', '0', '0', '0', '0', '0', '0', '0', '4213', '3987']
    return stats_page('CP', cells, resource='650')


@pytest.fixture
def make_soup():
    return soup


@pytest.fixture
def make_stats_page():
    return stats_page


@pytest.fixture
def make_roster_page():
    return roster_page
