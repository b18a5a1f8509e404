"""Where definitions documents come from."""

from importlib import resources
from pathlib import Path
from typing import Protocol

import requests

from lodestone.exceptions import RegistryLoadError
from lodestone.retry import get_retryer, log_retry


class DefinitionsSource(Protocol):
    """Something that can produce the text of a definitions document.

    Attributes:
        location: Human-readable location, used in errors and logs
        version: Version token to stamp on the registry, or None to use the document's own

    """

    location: str
    version: str | None

    def read(self) -> str:
        """Return the raw JSON text of the document."""
        ...


class FileDefinitionsSource:
    """Definitions document stored on the local filesystem."""

    def __init__(self, path: str | Path, version: str | None = None):
        self.path = Path(path)
        self.location = str(self.path)
        self.version = version

    def read(self) -> str:
        try:
            return self.path.read_text(encoding='utf-8')
        except OSError as e:
            raise RegistryLoadError(f'cannot read file ({e})', source=self.location) from e


class BundledDefinitionsSource:
    """The definitions document shipped inside the package."""

    def __init__(self, name: str = 'definitions.json'):
        self.name = name
        self.location = f'lodestone/data/{name}'
        self.version = None

    def read(self) -> str:
        try:
            return resources.files('lodestone.data').joinpath(self.name).read_text(encoding='utf-8')
        except OSError as e:
            raise RegistryLoadError(f'cannot read packaged document ({e})', source=self.location) from e


class RemoteDefinitionsSource:
    """Definitions document served over HTTP.

    Attributes:
        url: Address of the JSON document
        timeout: Request timeout in seconds
        max_attempts: Attempts made on connection errors and timeouts

    """

    def __init__(self, url: str, timeout: float = 30, max_attempts: int = 3, version: str | None = None):
        """Initialize the remote source.

        Args:
            url: Address of the JSON document
            timeout: Request timeout in seconds. Defaults to 30.
            max_attempts: Attempts made on connection errors and timeouts. Defaults to 3.
            version: Version token; defaults to the document Meta.version, then the URL

        """
        self.url = url
        self.location = url
        self.timeout = timeout
        self.max_attempts = max_attempts
        self.version = version

    def read(self) -> str:
        retryer = get_retryer(max_attempts=self.max_attempts, log_callback=log_retry)
        try:
            response = retryer(requests.get, self.url, timeout=self.timeout)
        except requests.RequestException as e:
            raise RegistryLoadError(f'download failed ({e})', source=self.url) from e

        if not response.ok:
            raise RegistryLoadError(f'download failed (HTTP {response.status_code})', source=self.url)
        return response.text
