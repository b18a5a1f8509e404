"""Custom exceptions for lodestone."""


class LodestoneError(Exception):
    """Base class for all lodestone exceptions."""

    pass


class ExtractionError(LodestoneError):
    """Raised when a matched value cannot be read the way its field requires.

    Absent values are never reported this way; they surface as ``None``. This
    error means the markup no longer fits the selector definitions.
    """

    def __init__(self, field: str, raw_value: str | None, reason: str):
        """Initialize extraction error.

        Args:
            field: Registry key of the field that failed
            raw_value: The raw text or attribute value that was read
            reason: Why the value was rejected (e.g. 'not an integer')

        """
        self.field = field
        self.raw_value = raw_value
        self.reason = reason
        super().__init__(f"Field '{field}' {reason}: {raw_value!r}")


class RegistryLoadError(LodestoneError):
    """Raised when a definitions document cannot be decoded into a registry."""

    def __init__(self, reason: str, source: str | None = None):
        """Initialize registry load error.

        Args:
            reason: What went wrong while decoding
            source: Where the document came from, if known

        """
        self.reason = reason
        self.source = source
        where = f' ({source})' if source else ''
        super().__init__(f'Could not load selector definitions{where}: {reason}')


class TransportError(LodestoneError):
    """Raised when a page request fails for any reason other than 404."""

    def __init__(self, url: str, status_code: int | None = None, reason: str | None = None):
        """Initialize transport error.

        Args:
            url: URL that was requested
            status_code: HTTP status code received, or None if no response arrived
            reason: Underlying error message, if any

        """
        self.url = url
        self.status_code = status_code
        self.reason = reason
        detail = f'status={status_code}' if status_code is not None else (reason or 'no response')
        super().__init__(f'Request to {url} failed ({detail})')
