"""
Exception taxonomy for the exporter.

Resolution and request failures derive from FaceitExportError and abort
the run at the command boundary. PartialDataWarning names the
log category (``PARTIAL_DATA``) of skipped bulk items.
"""
from typing import Optional


class FaceitExportError(Exception):
    """Base exception for exporter failures."""

    def __init__(self, message: str, user_message: Optional[str] = None):
        super().__init__(message)
        self.user_message = user_message or message


class ConfigurationError(FaceitExportError):
    """Raised when options or credentials are missing or invalid."""


class NotFoundError(FaceitExportError):
    """Raised when a name-based lookup exhausts its search space."""

    def __init__(self, kind: str, query: str, scope: Optional[str] = None, hint: Optional[str] = None):
        where = f" under {scope}" if scope else ""
        message = f"{kind} not found by name: {query}{where}"
        super().__init__(f"{message}\n{hint}" if hint else message)
        self.kind = kind
        self.query = query
        self.scope = scope


class UpstreamError(FaceitExportError):
    """Raised for a non-2xx response (or a transport failure when status is None)."""

    def __init__(self, status: Optional[int], url: str, body: str = ""):
        head = f"{status} {url}" if status is not None else f"request failed {url}"
        super().__init__(f"{head}\n{body}" if body else head)
        self.status = status
        self.url = url
        self.body = body


class RateLimitExceeded(UpstreamError):
    """Raised when a request is still rate-limited after the retry budget."""


class PartialDataWarning(UserWarning):
    """Category for bulk items skipped after a failed fetch."""


# ``extra`` for log records of skipped bulk items; formatters emit it as ``category``.
PARTIAL_DATA = {"category": PartialDataWarning.__name__}
