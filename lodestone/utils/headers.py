"""Browser user agents and request headers."""

import random

from lodestone.models.results import UserAgent


class UserAgentRotator:
    """Pools of realistic user agents, split by markup variant.

    Attributes:
        DESKTOP_AGENTS: User agents that get the desktop markup
        MOBILE_AGENTS: User agents that get the mobile markup

    """

    DESKTOP_AGENTS = [
        'Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36',
        'Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36',
        'Mozilla/5.0 (Windows NT 10.0; Win64; x64; rv:121.0) Gecko/20100101 Firefox/121.0',
        'Mozilla/5.0 (X11; Linux x86_64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36',
    ]

    MOBILE_AGENTS = [
        'Mozilla/5.0 (iPhone; CPU iPhone OS 17_1 like Mac OS X) AppleWebKit/605.1.15 (KHTML, like Gecko) Version/17.1 Mobile/15E148 Safari/604.1',
        'Mozilla/5.0 (Linux; Android 14; Pixel 8) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/120.0.0.0 Mobile Safari/537.36',
    ]

    @classmethod
    def get_random(cls, variant: UserAgent = UserAgent.DESKTOP) -> str:
        """Get a random user agent for a markup variant.

        Args:
            variant: Desktop or mobile. Defaults to desktop.

        Returns:
            A user agent string

        """
        pool = cls.MOBILE_AGENTS if variant is UserAgent.MOBILE else cls.DESKTOP_AGENTS
        return random.choice(pool)


class HeaderGenerator:
    """Generates browser-like request headers."""

    @staticmethod
    def generate_headers(user_agent: str, referer: str | None = None) -> dict[str, str]:
        """Generate request headers around a user agent.

        Args:
            user_agent: The user agent to send
            referer: Optional referer

        Returns:
            The headers to send

        """
        headers = {
            'User-Agent': user_agent,
            'Accept': 'text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8',
            'Accept-Language': 'en-US,en;q=0.9',
            'Accept-Encoding': 'gzip, deflate',
            'Connection': 'keep-alive',
        }

        if 'Chrome' in user_agent:
            headers.update(
                {
                    'Sec-Fetch-Dest': 'document',
                    'Sec-Fetch-Mode': 'navigate',
                    'Sec-Fetch-Site': 'none' if referer is None else 'same-origin',
                }
            )

        if referer:
            headers['Referer'] = referer

        return headers
