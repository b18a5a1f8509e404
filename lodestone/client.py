"""Lodestone client: fetches pages and binds them to parsed views."""

import logging
from collections.abc import Callable, Iterator
from typing import TypeVar

import logfire
from bs4 import BeautifulSoup, Tag

from lodestone.config import DEFAULT_BASE_URL, ClientSettings
from lodestone.core.fetcher import PageFetcher, SimpleFetcher
from lodestone.core.registry import DefinitionsContainer, Registry
from lodestone.exceptions import TransportError
from lodestone.models.queries import (
    CharacterSearchQuery,
    CrossworldLinkshellSearchQuery,
    FreeCompanySearchQuery,
    LinkshellSearchQuery,
)
from lodestone.models.results import UserAgent
from lodestone.utils.headers import UserAgentRotator
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
    EntryView,
    FreeCompany,
    FreeCompanyMembersPage,
    FreeCompanySearchPage,
    LinkshellPage,
    LinkshellSearchPage,
    PagedView,
)

T = TypeVar('T')
PageT = TypeVar('PageT', bound=PagedView)


def parse_document(html: str) -> BeautifulSoup:
    """Parse a response body into a navigable tree."""
    return BeautifulSoup(html, 'lxml')


class LodestoneClient:
    """Fetches Lodestone pages and returns views over them.

    Every getter returns None when the Lodestone answers 404. Each page is
    parsed once and bound to the registry that was current when it arrived.

    Attributes:
        definitions: Container holding the current selector registry
        fetcher: Transport used for page requests
        base_url: Lodestone region base URL
        logger: Logger instance for request tracking

    """

    def __init__(
        self,
        definitions: DefinitionsContainer,
        fetcher: PageFetcher | None = None,
        base_url: str = DEFAULT_BASE_URL,
    ):
        """Initialize the client.

        Args:
            definitions: Container with a loaded registry
            fetcher: Page transport. Defaults to a SimpleFetcher.
            base_url: Lodestone region base URL. Defaults to the NA Lodestone.

        """
        self.definitions = definitions
        self.fetcher = fetcher or SimpleFetcher()
        self.base_url = base_url.rstrip('/')
        self.logger = logging.getLogger(__name__)

    @classmethod
    def from_settings(cls, settings: ClientSettings | None = None) -> 'LodestoneClient':
        """Create a client and load its definitions.

        Args:
            settings: Client settings. Defaults to ClientSettings.from_env().

        Raises:
            RegistryLoadError: If the definitions document cannot be loaded

        """
        settings = settings or ClientSettings.from_env()
        definitions = DefinitionsContainer.from_source(settings.definitions_source())
        fetcher = SimpleFetcher(timeout=settings.timeout, min_delay=settings.min_delay, max_delay=settings.max_delay)
        return cls(definitions, fetcher, base_url=settings.base_url)

    def reload_definitions(self) -> Registry:
        """Reload selector definitions; the old ones stay in use if this fails.

        Raises:
            RegistryLoadError: If the new document cannot be loaded

        """
        return self.definitions.reload()

    def _user_agent(self, registry: Registry, variant: UserAgent) -> str:
        if variant is UserAgent.MOBILE:
            configured = registry.meta.user_agent_mobile
        else:
            configured = registry.meta.user_agent_desktop
        return configured or UserAgentRotator.get_random(variant)

    def get_parsed(
        self,
        path: str,
        factory: Callable[[Tag, Registry], T],
        user_agent: UserAgent = UserAgent.DESKTOP,
    ) -> T | None:
        """Fetch a page and build a view over it.

        Args:
            path: Path below the base URL
            factory: Builds the view from the document root and the registry
            user_agent: Markup variant to request. Defaults to desktop.

        Returns:
            The view, or None if the page does not exist.

        Raises:
            TransportError: For any failure other than 404
            RegistryLoadError: If no definitions are loaded

        """
        registry = self.definitions.registry
        url = f'{self.base_url}{path}'

        with logfire.span('fetch_page', url=url, user_agent=user_agent.value):
            result = self.fetcher.fetch(url, self._user_agent(registry, user_agent))

            if result.not_found:
                logfire.info('Page not found', url=url)
                self.logger.info(f'Not found: {url}')
                return None

            if not result.success:
                logfire.error('Page request failed', url=url, status_code=result.status_code)
                raise TransportError(url, result.status_code)

            return factory(parse_document(result.html or ''), registry)

    def get_character(self, character_id: str) -> Character | None:
        """Get a character's profile page."""
        return self.get_parsed(
            f'/lodestone/character/{character_id}/',
            lambda node, registry: Character.from_registry(node, registry, character_id),
        )

    def get_character_attributes(self, character_id: str) -> CharacterAttributes | None:
        """Get a character's attribute table (read from the profile page)."""
        return self.get_parsed(f'/lodestone/character/{character_id}/', CharacterAttributes.from_registry)

    def get_character_class_job(self, character_id: str) -> CharacterClassJob | None:
        """Get the levels and experience of every class and job of a character."""
        return self.get_parsed(
            f'/lodestone/character/{character_id}/class_job/',
            lambda node, registry: CharacterClassJob(node, registry.area(CharacterClassJob.area), character_id),
        )

    def get_character_achievement(self, character_id: str, page: int = 1) -> CharacterAchievementPage | None:
        """Get one page of a character's unlocked achievements."""
        return self.get_parsed(
            f'/lodestone/character/{character_id}/achievement/?page={page}',
            lambda node, registry: CharacterAchievementPage(
                node, registry.area(CharacterAchievementPage.area), character_id
            ),
        )

    def get_character_mount(self, character_id: str) -> CharacterMounts | None:
        """Get a character's mounts. The mount list is only complete in the mobile markup."""
        return self.get_parsed(
            f'/lodestone/character/{character_id}/mount/', CharacterMounts.from_registry, UserAgent.MOBILE
        )

    def get_character_minion(self, character_id: str) -> CharacterMinions | None:
        """Get a character's minions. The minion list is only complete in the mobile markup."""
        return self.get_parsed(
            f'/lodestone/character/{character_id}/minion/', CharacterMinions.from_registry, UserAgent.MOBILE
        )

    def search_character(self, query: CharacterSearchQuery, page: int = 1) -> CharacterSearchPage | None:
        """Get one page of character search results."""
        return self.get_parsed(
            f'/lodestone/character/{query.build_query_string()}&page={page}',
            lambda node, registry: CharacterSearchPage(node, registry.area(CharacterSearchPage.area), query),
        )

    def get_free_company(self, free_company_id: str) -> FreeCompany | None:
        """Get a free company's profile page."""
        return self.get_parsed(
            f'/lodestone/freecompany/{free_company_id}/',
            lambda node, registry: FreeCompany(node, registry.area(FreeCompany.area), free_company_id),
        )

    def get_free_company_members(self, free_company_id: str, page: int = 1) -> FreeCompanyMembersPage | None:
        """Get one page of a free company's member roster."""
        return self.get_parsed(
            f'/lodestone/freecompany/{free_company_id}/member/?page={page}',
            lambda node, registry: FreeCompanyMembersPage(
                node, registry.area(FreeCompanyMembersPage.area), free_company_id
            ),
        )

    def search_free_company(self, query: FreeCompanySearchQuery, page: int = 1) -> FreeCompanySearchPage | None:
        """Get one page of free company search results."""
        return self.get_parsed(
            f'/lodestone/freecompany/{query.build_query_string()}&page={page}',
            lambda node, registry: FreeCompanySearchPage(node, registry.area(FreeCompanySearchPage.area), query),
        )

    def get_linkshell(self, linkshell_id: str, page: int = 1) -> LinkshellPage | None:
        """Get one page of a linkshell's member list."""
        return self.get_parsed(
            f'/lodestone/linkshell/{linkshell_id}?page={page}',
            lambda node, registry: LinkshellPage(node, registry.area(LinkshellPage.area), linkshell_id),
        )

    def search_linkshell(self, query: LinkshellSearchQuery, page: int = 1) -> LinkshellSearchPage | None:
        """Get one page of linkshell search results."""
        return self.get_parsed(
            f'/lodestone/linkshell/{query.build_query_string()}&page={page}',
            lambda node, registry: LinkshellSearchPage(node, registry.area(LinkshellSearchPage.area), query),
        )

    def get_crossworld_linkshell(self, linkshell_id: str, page: int = 1) -> CrossworldLinkshellPage | None:
        """Get one page of a cross-world linkshell's member list."""
        return self.get_parsed(
            f'/lodestone/crossworld_linkshell/{linkshell_id}?page={page}',
            lambda node, registry: CrossworldLinkshellPage(
                node, registry.area(CrossworldLinkshellPage.area), linkshell_id
            ),
        )

    def search_crossworld_linkshell(
        self, query: CrossworldLinkshellSearchQuery, page: int = 1
    ) -> CrossworldLinkshellSearchPage | None:
        """Get one page of cross-world linkshell search results."""
        return self.get_parsed(
            f'/lodestone/crossworld_linkshell/{query.build_query_string()}&page={page}',
            lambda node, registry: CrossworldLinkshellSearchPage(
                node, registry.area(CrossworldLinkshellSearchPage.area), query
            ),
        )

    def iter_linkshell_members(
        self, linkshell_id: str, crossworld: bool = False, max_pages: int | None = None
    ) -> Iterator[EntryView]:
        """Walk every page of a linkshell's member list."""
        fetch = self.get_crossworld_linkshell if crossworld else self.get_linkshell
        return iter_entries(lambda page: fetch(linkshell_id, page), max_pages=max_pages)

    def iter_free_company_members(self, free_company_id: str, max_pages: int | None = None) -> Iterator[EntryView]:
        """Walk the whole member roster, one page request at a time."""
        return iter_entries(lambda page: self.get_free_company_members(free_company_id, page), max_pages=max_pages)

    def iter_character_search(self, query: CharacterSearchQuery, max_pages: int | None = None) -> Iterator[EntryView]:
        """Walk every page of a character search."""
        return iter_entries(lambda page: self.search_character(query, page), max_pages=max_pages)

    def close(self):
        """Close the underlying fetcher."""
        self.fetcher.close()

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.close()


def iter_pages(
    fetch_page: Callable[[int], PageT | None],
    start: int = 1,
    max_pages: int | None = None,
) -> Iterator[PageT]:
    """Fetch consecutive pages of a collection.

    Stops after a page that reports no next page, when a page is missing
    (404), or after max_pages pages.

    Args:
        fetch_page: Fetches one page by number
        start: First page number. Defaults to 1.
        max_pages: Upper bound on pages fetched. Defaults to None (no bound).

    Yields:
        Each page, in order.

    """
    number = start
    fetched = 0
    while max_pages is None or fetched < max_pages:
        page = fetch_page(number)
        if page is None:
            return
        fetched += 1
        yield page
        if not page.has_next_page:
            return
        number += 1


def iter_entries(
    fetch_page: Callable[[int], PagedView | None],
    start: int = 1,
    max_pages: int | None = None,
) -> Iterator[EntryView]:
    """Like iter_pages, but yield the entries of each page in order."""
    for page in iter_pages(fetch_page, start=start, max_pages=max_pages):
        yield from page.entries
