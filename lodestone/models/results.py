"""Models for page fetch results."""

from dataclasses import dataclass
from enum import Enum


class UserAgent(str, Enum):
    """Markup variant to request.

    The Lodestone serves structurally different markup to desktop and mobile
    browsers, so each endpoint picks the variant its definitions were written for.
    """

    DESKTOP = 'desktop'
    MOBILE = 'mobile'


@dataclass
class FetchResult:
    """Result of a page fetch.

    Attributes:
        url: URL that was fetched
        html: Response body, or None if the response carried none
        status_code: HTTP status code of the response
        fetch_time: Total time the fetch took in seconds

    """

    url: str
    html: str | None = None
    status_code: int | None = None
    fetch_time: float = 0.0

    @property
    def not_found(self) -> bool:
        """Whether the page does not exist (HTTP 404)."""
        return self.status_code == 404

    @property
    def success(self) -> bool:
        """Whether the fetch returned a 2xx response with a body."""
        return self.html is not None and self.status_code is not None and 200 <= self.status_code < 300
