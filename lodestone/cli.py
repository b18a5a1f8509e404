"""Command line front end for lodestone."""

import argparse
import sys
from collections.abc import Iterable
from typing import Any

import logfire
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.theme import Theme

from lodestone.client import LodestoneClient
from lodestone.config import ClientSettings
from lodestone.core.fetcher import SimpleFetcher
from lodestone.core.registry import DefinitionsContainer, FileDefinitionsSource, RemoteDefinitionsSource
from lodestone.exceptions import ExtractionError, LodestoneError
from lodestone.models.queries import CharacterSearchQuery
from lodestone.utils.logging import setup_local_logging
from lodestone.views import EntryView, ParsedView

THEME = Theme(
    {
        'info': 'dim cyan',
        'warning': 'magenta',
        'danger': 'bold red',
        'success': 'bold green',
        'step': 'bold blue',
    }
)


def _format(value: Any) -> str:
    if value is None:
        return '[info]-[/info]'
    if isinstance(value, list):
        return ', '.join(map(str, value)) or '[info]-[/info]'
    return str(value)


def view_table(title: str, view: ParsedView) -> Table:
    """Render a view's exported fields as a two-column table."""
    table = Table(title=title, show_header=False)
    table.add_column('Field', style='step')
    table.add_column('Value')
    for name, value in view.as_dict().items():
        table.add_row(name, _format(value))
    return table


def entries_table(title: str, entries: Iterable[EntryView]) -> Table:
    """Render entry views as one row per entry."""
    table = Table(title=title)
    rows = [entry.as_dict() for entry in entries]
    columns = list(rows[0]) if rows else ['entries']
    for column in columns:
        table.add_column(column)
    for row in rows:
        table.add_row(*(_format(row.get(column)) for column in columns))
    return table


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(prog='lodestone', description='Read Lodestone pages through selector definitions')
    parser.add_argument('--definitions', type=str, help='Definitions document (path or http(s) URL)')
    parser.add_argument('--log-level', type=str, default='INFO', help='File log level (default: INFO)')

    sub = parser.add_subparsers(dest='command', required=True)

    character = sub.add_parser('character', help='Show a character profile and attributes')
    character.add_argument('id', type=str)

    members = sub.add_parser('members', help='List free company members')
    members.add_argument('id', type=str)
    members.add_argument('--page', type=int, default=1)
    members.add_argument('--all', action='store_true', help='Walk every page of the roster')

    search = sub.add_parser('search-character', help='Search characters by name')
    search.add_argument('name', type=str)
    search.add_argument('--world', type=str)
    search.add_argument('--page', type=int, default=1)

    company = sub.add_parser('free-company', help='Show a free company profile')
    company.add_argument('id', type=str)

    achievements = sub.add_parser('achievements', help='List a character\'s achievements')
    achievements.add_argument('id', type=str)
    achievements.add_argument('--page', type=int, default=1)

    class_jobs = sub.add_parser('class-jobs', help='Show class and job levels of a character')
    class_jobs.add_argument('id', type=str)

    linkshell = sub.add_parser('linkshell', help='List linkshell members')
    linkshell.add_argument('id', type=str)
    linkshell.add_argument('--crossworld', action='store_true', help='The id is a cross-world linkshell')
    linkshell.add_argument('--page', type=int, default=1)

    sub.add_parser('definitions', help='Show the loaded definitions version and areas')

    return parser


def create_client(settings: ClientSettings, definitions: str | None) -> LodestoneClient:
    """Create a client, honouring a --definitions override."""
    if definitions is None:
        return LodestoneClient.from_settings(settings)

    if definitions.startswith(('http://', 'https://')):
        source = RemoteDefinitionsSource(definitions, timeout=settings.timeout)
    else:
        source = FileDefinitionsSource(definitions)

    container = DefinitionsContainer.from_source(source)
    fetcher = SimpleFetcher(timeout=settings.timeout, min_delay=settings.min_delay, max_delay=settings.max_delay)
    return LodestoneClient(container, fetcher, base_url=settings.base_url)


def run(args: argparse.Namespace, client: LodestoneClient, console: Console) -> bool:  # noqa: C901
    """Execute one command. Returns False when the requested entity does not exist."""
    if args.command == 'definitions':
        registry = client.definitions.registry
        console.print(Panel(f'Version: {registry.version}', title='Definitions', style='success'))
        table = Table('Area', 'Fields')
        for name in registry.area_names:
            table.add_row(name, str(len(registry.area(name))))
        console.print(table)
        return True

    if args.command == 'character':
        with console.status(f'[step]Fetching character {args.id}...[/step]'):
            character = client.get_character(args.id)
        if character is None:
            return False
        console.print(view_table(f'Character {args.id}', character))
        console.print(view_table('Attributes', character.attributes))
        return True

    if args.command == 'members':
        if args.all:
            entries = list(client.iter_free_company_members(args.id))
            if not entries:
                return False
            console.print(entries_table(f'Members of {args.id}', entries))
            console.print(f'[success]✓ {len(entries)} members[/success]')
            return True

        page = client.get_free_company_members(args.id, args.page)
        if page is None:
            return False
        console.print(entries_table(f'Members of {args.id} (page {page.current_page}/{page.num_pages})', page.entries))
        return True

    if args.command == 'search-character':
        query = CharacterSearchQuery(name=args.name, world=args.world)
        results = client.search_character(query, args.page)
        if results is None:
            return False
        console.print(entries_table(f'Characters matching {args.name!r}', results.entries))
        return True

    if args.command == 'free-company':
        company = client.get_free_company(args.id)
        if company is None:
            return False
        console.print(view_table(f'Free company {args.id}', company))
        return True

    if args.command == 'achievements':
        achievement_page = client.get_character_achievement(args.id, args.page)
        if achievement_page is None:
            return False
        console.print(view_table('Achievements', achievement_page))
        console.print(entries_table(f'Page {args.page}', achievement_page.entries))
        return True

    if args.command == 'class-jobs':
        class_job = client.get_character_class_job(args.id)
        if class_job is None:
            return False
        console.print(entries_table(f'Classes and jobs of {args.id}', class_job.jobs))
        return True

    if args.command == 'linkshell':
        fetch = client.get_crossworld_linkshell if args.crossworld else client.get_linkshell
        linkshell_page = fetch(args.id, args.page)
        if linkshell_page is None:
            return False
        console.print(view_table('Linkshell', linkshell_page))
        console.print(entries_table(f'Members (page {args.page})', linkshell_page.entries))
        return True

    raise ValueError(f'Unknown command: {args.command}')


def main(argv: list[str] | None = None):
    """Main entry point."""
    args = build_parser().parse_args(argv)
    console = Console(theme=THEME)

    settings = ClientSettings.from_env()
    if settings.logfire_token:
        logfire.configure(token=settings.logfire_token)
        console.print('[info]Logfire setup complete[/info]')

    log_file = setup_local_logging(args.log_level)
    console.print(f'[info]Logging to {log_file}[/info]')

    try:
        with create_client(settings, args.definitions) as client:
            found = run(args, client, console)
    except ExtractionError as e:
        console.print(f'[danger]✗ Page markup no longer matches the definitions: {e}[/danger]')
        sys.exit(2)
    except LodestoneError as e:
        console.print(f'[danger]✗ {e}[/danger]')
        sys.exit(1)

    if not found:
        console.print('[warning]⚠ Not found on the Lodestone[/warning]')
        sys.exit(3)


if __name__ == '__main__':
    main()
