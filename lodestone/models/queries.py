"""Search query models for the Lodestone search endpoints."""

from urllib.parse import urlencode

from pydantic import BaseModel, ConfigDict, Field


class CharacterSearchQuery(BaseModel):
    """Parameters of a character search.

    Attributes:
        name: Character name, or part of it
        world: Home world to restrict results to
        data_center: Data center to restrict results to (ignored when world is set)
        class_job: Lodestone class/job filter token
        race_tribe: Lodestone race/clan filter token (e.g. 'tribe_1')
        grand_company: Grand company ids
        order: Lodestone sort order token

    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1)
    world: str | None = None
    data_center: str | None = None
    class_job: str | None = None
    race_tribe: str | None = None
    grand_company: tuple[int, ...] = ()
    order: str | None = None

    def build_query_string(self) -> str:
        """Build the query string for ``/lodestone/character/``.

        Returns:
            Query string starting with '?'.

        """
        params: list[tuple[str, str]] = [('q', self.name)]
        params.append(('worldname', self.world or (f'_dc_{self.data_center}' if self.data_center else '')))
        if self.class_job:
            params.append(('classjob', self.class_job))
        if self.race_tribe:
            params.append(('race_tribe', self.race_tribe))
        for company in self.grand_company:
            params.append(('gcid', str(company)))
        if self.order:
            params.append(('order', self.order))
        return '?' + urlencode(params)


class FreeCompanySearchQuery(BaseModel):
    """Parameters of a free company search.

    Attributes:
        name: Free company name, or part of it
        world: Home world to restrict results to
        data_center: Data center to restrict results to (ignored when world is set)
        active_members: Lodestone member-count bucket token (e.g. '1-10')
        recruiting: Only companies currently recruiting
        grand_company: Grand company ids
        order: Lodestone sort order token

    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1)
    world: str | None = None
    data_center: str | None = None
    active_members: str | None = None
    recruiting: bool = False
    grand_company: tuple[int, ...] = ()
    order: str | None = None

    def build_query_string(self) -> str:
        """Build the query string for ``/lodestone/freecompany/``.

        Returns:
            Query string starting with '?'.

        """
        params: list[tuple[str, str]] = [('q', self.name)]
        params.append(('worldname', self.world or (f'_dc_{self.data_center}' if self.data_center else '')))
        if self.active_members:
            params.append(('character_count', self.active_members))
        if self.recruiting:
            params.append(('join', '1'))
        for company in self.grand_company:
            params.append(('gcid', str(company)))
        if self.order:
            params.append(('order', self.order))
        return '?' + urlencode(params)


class LinkshellSearchQuery(BaseModel):
    """Parameters of a linkshell search.

    Attributes:
        name: Linkshell name, or part of it
        world: Home world to restrict results to
        data_center: Data center to restrict results to (ignored when world is set)
        active_members: Lodestone member-count bucket token (e.g. '11-30')
        order: Lodestone sort order token

    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1)
    world: str | None = None
    data_center: str | None = None
    active_members: str | None = None
    order: str | None = None

    def build_query_string(self) -> str:
        """Build the query string for ``/lodestone/linkshell/``."""
        params: list[tuple[str, str]] = [('q', self.name)]
        params.append(('worldname', self.world or (f'_dc_{self.data_center}' if self.data_center else '')))
        if self.active_members:
            params.append(('character_count', self.active_members))
        if self.order:
            params.append(('order', self.order))
        return '?' + urlencode(params)


class CrossworldLinkshellSearchQuery(BaseModel):
    """Parameters of a cross-world linkshell search.

    Cross-world linkshells belong to a data center, not a world.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1)
    data_center: str | None = None
    active_members: str | None = None
    order: str | None = None

    def build_query_string(self) -> str:
        """Build the query string for ``/lodestone/crossworld_linkshell/``."""
        params: list[tuple[str, str]] = [('q', self.name), ('dcname', self.data_center or '')]
        if self.active_members:
            params.append(('character_count', self.active_members))
        if self.order:
            params.append(('order', self.order))
        return '?' + urlencode(params)
