import pytest
from rich.console import Console

from lodestone.cli import THEME, build_parser, main, run
from lodestone.client import LodestoneClient
from lodestone.core.fetcher import PageFetcher
from lodestone.core.registry import DefinitionsContainer
from lodestone.models import FetchResult


@pytest.fixture
def fetcher(mocker):
    return mocker.Mock(spec=PageFetcher)


@pytest.fixture
def client(fetcher, registry):
    return LodestoneClient(DefinitionsContainer(registry=registry), fetcher)


@pytest.fixture
def console():
    return Console(theme=THEME, record=True, width=200)


def test_definitions_command_lists_areas(client, console, registry):
    assert run(build_parser().parse_args(['definitions']), client, console)

    output = console.export_text()
    assert registry.version in output
    assert 'CharacterAttributes' in output


def test_members_command_prints_roster(client, fetcher, console, make_roster_page):
    fetcher.fetch.return_value = FetchResult(url='x', html=make_roster_page([('7', 'Ada')]), status_code=200)

    assert run(build_parser().parse_args(['members', '42']), client, console)

    assert 'Ada' in console.export_text()


def test_class_jobs_command_prints_every_job(client, fetcher, console):
    html = """
    <ul class="character__job">
      <li><div class="character__job__level">90</div><div class="character__job__name">Paladin</div></li>
      <li><div class="character__job__level">-</div><div class="character__job__name">Reaper</div></li>
    </ul>
    """
    fetcher.fetch.return_value = FetchResult(url='x', html=html, status_code=200)

    assert run(build_parser().parse_args(['class-jobs', '13821878']), client, console)

    output = console.export_text()
    assert 'Paladin' in output
    assert 'Reaper' in output
    url, _ = fetcher.fetch.call_args.args
    assert url.endswith('/lodestone/character/13821878/class_job/')


def test_linkshell_command_uses_crossworld_path(client, fetcher, console):
    html = '<h3 class="heading__linkshell__name">Raid</h3>'
    fetcher.fetch.return_value = FetchResult(url='x', html=html, status_code=200)

    assert run(build_parser().parse_args(['linkshell', 'a1b2c3', '--crossworld', '--page', '2']), client, console)

    assert 'Raid' in console.export_text()
    url, _ = fetcher.fetch.call_args.args
    assert url.endswith('/lodestone/crossworld_linkshell/a1b2c3?page=2')


def test_missing_entity_is_reported(client, fetcher, console):
    fetcher.fetch.return_value = FetchResult(url='x', html='', status_code=404)

    assert not run(build_parser().parse_args(['character', '1']), client, console)


def test_main_exits_with_not_found_code(mocker, client, fetcher, tmp_path):
    fetcher.fetch.return_value = FetchResult(url='x', html='', status_code=404)
    mocker.patch('lodestone.cli.create_client', return_value=client)
    mocker.patch('lodestone.cli.setup_local_logging', return_value=tmp_path / 'run.log')
    mocker.patch.dict('os.environ', {'LOGFIRE_TOKEN': ''})

    with pytest.raises(SystemExit) as excinfo:
        main(['free-company', '1'])

    assert excinfo.value.code == 3


def test_main_exits_on_malformed_markup(mocker, client, fetcher, make_stats_page, tmp_path):
    page = make_stats_page('MP', ['strong'] + ['1'] * 13)
    fetcher.fetch.return_value = FetchResult(url='x', html=page, status_code=200)
    mocker.patch('lodestone.cli.create_client', return_value=client)
    mocker.patch('lodestone.cli.setup_local_logging', return_value=tmp_path / 'run.log')
    mocker.patch.dict('os.environ', {'LOGFIRE_TOKEN': ''})

    with pytest.raises(SystemExit) as excinfo:
        main(['character', '1'])

    assert excinfo.value.code == 2
