"""Interfaces for the collaborators the export core depends on."""
from abc import ABC, abstractmethod
from typing import Any, Mapping, Optional, Sequence


class IJsonFetcher(ABC):
    """Authenticated JSON GET against the upstream API."""

    @abstractmethod
    async def get_json(self, path: str, params: Optional[Mapping[str, Any]] = None) -> Any:
        """Fetch ``path`` (relative to the API base) and return decoded JSON."""
        pass


class IRecordSink(ABC):
    """Destination for ordered sequences of flat records."""

    @abstractmethod
    def write(self, table: str, records: Sequence[Mapping[str, Any]]) -> None:
        """Persist one named table; record order is preserved."""
        pass
