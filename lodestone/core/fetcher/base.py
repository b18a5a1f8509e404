"""Abstract base class for page fetchers."""

from abc import ABC, abstractmethod

from lodestone.models.results import FetchResult


class PageFetcher(ABC):
    """Abstract base class for page fetchers.

    Implement this interface to plug in another HTTP stack. A fetcher reports
    every HTTP response, 404 included, as a FetchResult; only failures that
    produce no response at all are raised.
    """

    @abstractmethod
    def fetch(self, url: str, user_agent: str) -> FetchResult:
        """Fetch a page.

        Args:
            url: Absolute URL to fetch
            user_agent: User agent string to send

        Returns:
            FetchResult with body and status code

        Raises:
            TransportError: If no response could be obtained

        """
        pass

    def close(self) -> None:
        """Release any held connections."""
        return None

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.close()
