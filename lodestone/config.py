"""Client settings, read from the environment (and a .env file)."""

import os
from dataclasses import dataclass

from dotenv import load_dotenv

from lodestone.core.registry import (
    BundledDefinitionsSource,
    DefinitionsSource,
    FileDefinitionsSource,
    RemoteDefinitionsSource,
)

DEFAULT_BASE_URL = 'https://na.finalfantasyxiv.com'


@dataclass
class ClientSettings:
    """Configuration of a LodestoneClient.

    Attributes:
        base_url: Lodestone region to talk to. Defaults to the NA Lodestone.
        definitions_url: Remote definitions document. Takes precedence over definitions_file.
        definitions_file: Local definitions document. Defaults to None (bundled document).
        timeout: Request timeout in seconds. Defaults to 30.
        min_delay: Minimum pause between page requests in seconds. Defaults to 0.5.
        max_delay: Maximum pause between page requests in seconds. Defaults to 2.0.
        logfire_token: Token for logfire; logfire stays unconfigured without it.

    """

    base_url: str = DEFAULT_BASE_URL
    definitions_url: str | None = None
    definitions_file: str | None = None
    timeout: float = 30
    min_delay: float = 0.5
    max_delay: float = 2.0
    logfire_token: str | None = None

    def __post_init__(self) -> None:
        """Validate configuration after initialization.

        Raises:
            ValueError: If the base URL is not http(s) or a number is out of range.

        """
        if not self.base_url.startswith(('http://', 'https://')):
            raise ValueError(f'Base URL must be http(s): {self.base_url!r}')
        self.base_url = self.base_url.rstrip('/')
        if self.timeout <= 0:
            raise ValueError(f'Timeout must be positive, got {self.timeout}')
        if self.min_delay < 0 or self.max_delay < self.min_delay:
            raise ValueError(f'Invalid request delay range: {self.min_delay}..{self.max_delay}')

    @classmethod
    def from_env(cls, load_env_file: bool = True) -> 'ClientSettings':
        """Build settings from LODESTONE_* environment variables.

        Args:
            load_env_file: Whether to load a .env file first. Defaults to True.

        Returns:
            The settings.

        Raises:
            ValueError: If a numeric variable does not parse or a value is invalid.

        """
        if load_env_file:
            load_dotenv()

        return cls(
            base_url=os.getenv('LODESTONE_BASE_URL', DEFAULT_BASE_URL),
            definitions_url=os.getenv('LODESTONE_DEFINITIONS_URL') or None,
            definitions_file=os.getenv('LODESTONE_DEFINITIONS_FILE') or None,
            timeout=float(os.getenv('LODESTONE_TIMEOUT', '30')),
            min_delay=float(os.getenv('LODESTONE_MIN_DELAY', '0.5')),
            max_delay=float(os.getenv('LODESTONE_MAX_DELAY', '2.0')),
            logfire_token=os.getenv('LOGFIRE_TOKEN') or None,
        )

    def definitions_source(self) -> DefinitionsSource:
        """Pick where definitions come from: remote URL, then local file, then the bundled document."""
        if self.definitions_url:
            return RemoteDefinitionsSource(self.definitions_url, timeout=self.timeout)
        if self.definitions_file:
            return FileDefinitionsSource(self.definitions_file)
        return BundledDefinitionsSource()
