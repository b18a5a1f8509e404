"""HTTP fetcher built on requests."""

import logging
import random
import time

import requests

from lodestone.core.fetcher.base import PageFetcher
from lodestone.exceptions import TransportError
from lodestone.models.results import FetchResult
from lodestone.retry import get_retryer, log_retry
from lodestone.utils.headers import HeaderGenerator


class SimpleFetcher(PageFetcher):
    """requests-based fetcher with a polite delay between requests.

    Attributes:
        timeout: Request timeout in seconds
        min_delay: Minimum delay between requests in seconds
        max_delay: Maximum delay between requests in seconds
        max_attempts: Attempts made on connection errors and timeouts
        session: Requests session used for connection pooling
        last_request_time: Timestamp of last request for delay calculation

    """

    def __init__(
        self,
        timeout: float = 30,
        min_delay: float = 0.5,
        max_delay: float = 2.0,
        max_attempts: int = 3,
        session: requests.Session | None = None,
    ):
        """Initialize the fetcher.

        Args:
            timeout: Request timeout in seconds. Defaults to 30.
            min_delay: Minimum pause between requests. 0 disables the delay.
            max_delay: Maximum pause between requests
            max_attempts: Attempts made on connection errors and timeouts. Defaults to 3.
            session: Session to use; a new one is created if omitted

        """
        self.timeout = timeout
        self.min_delay = min_delay
        self.max_delay = max(max_delay, min_delay)
        self.max_attempts = max_attempts
        self.session = session or requests.Session()

        self.last_request_time = 0.0
        self.logger = logging.getLogger(__name__)

    def _apply_request_delay(self):
        """Sleep a random amount so requests do not arrive back to back."""
        if self.min_delay > 0:
            elapsed = time.time() - self.last_request_time
            delay_needed = random.uniform(self.min_delay, self.max_delay)

            if elapsed < delay_needed:
                time.sleep(delay_needed - elapsed)

        self.last_request_time = time.time()

    def fetch(self, url: str, user_agent: str) -> FetchResult:
        """Fetch a page, retrying connection errors and timeouts.

        Args:
            url: Absolute URL to fetch
            user_agent: User agent string to send

        Returns:
            FetchResult with body and status code, whatever the status

        Raises:
            TransportError: If every attempt failed without a response

        """
        start_time = time.time()
        self._apply_request_delay()

        headers = HeaderGenerator.generate_headers(user_agent)
        retryer = get_retryer(max_attempts=self.max_attempts, log_callback=log_retry)

        try:
            response = retryer(self.session.get, url, headers=headers, timeout=self.timeout, allow_redirects=True)
        except requests.RequestException as e:
            self.logger.exception(f'Fetch error for {url}')
            raise TransportError(url, reason=str(e)) from e

        fetch_time = time.time() - start_time
        self.logger.debug(f'GET {url} -> {response.status_code} in {fetch_time:.2f}s')

        return FetchResult(url=url, html=response.text, status_code=response.status_code, fetch_time=fetch_time)

    def close(self):
        """Close the session."""
        self.session.close()
