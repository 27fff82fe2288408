"""FACEIT Data API client."""
import logging
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional

import httpx

from config import settings
from domain.exceptions import RateLimitExceeded, UpstreamError
from domain.interfaces import IJsonFetcher
from .retry_policy import RateLimitRetryPolicy

logger = logging.getLogger(__name__)


@dataclass
class ProbeResult:
    """Raw response of a diagnostic request."""

    ok: bool
    status: int
    url: str
    headers: Dict[str, str]
    body: str


class FaceitAPIClient(IJsonFetcher):
    """Asynchronous FACEIT Data API client; requests are issued one at a time."""

    def __init__(
        self,
        api_key: str,
        *,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        retry_policy: Optional[RateLimitRetryPolicy] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.api_key  = api_key
        self.base_url = (base_url or settings.FACEIT_BASE_URL).rstrip("/")
        self.timeout  = settings.REQUEST_TIMEOUT if timeout is None else timeout
        self.retry_policy = retry_policy or RateLimitRetryPolicy.from_settings(settings)
        self.session: Optional[httpx.AsyncClient] = None
        self._transport = transport

    async def __aenter__(self):
        self.session = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=self.timeout,
            headers={
                "Authorization": f"Bearer {self.api_key}",
                "Accept": "application/json",
            },
            transport=self._transport,
        )
        return self

    async def __aexit__(self, *_):
        if self.session:
            await self.session.aclose()
            self.session = None

    def _require_session(self) -> httpx.AsyncClient:
        if self.session is None:
            raise RuntimeError("FaceitAPIClient must be used as an async context manager")
        return self.session

    @staticmethod
    def _body_text(response: httpx.Response) -> str:
        try:
            return response.text
        except (UnicodeDecodeError, LookupError, httpx.ResponseNotRead):
            return ""

    async def get_json(self, path: str, params: Optional[Mapping[str, Any]] = None) -> Any:
        session = self._require_session()
        attempt = 0
        while True:
            try:
                response = await session.get(path, params=params)
            except httpx.HTTPError as exc:
                url = str(session.build_request("GET", path, params=params).url)
                logger.error(f"Network error for {url}: {exc}")
                raise UpstreamError(None, url, str(exc)) from exc

            url = str(response.request.url)
            if response.is_success:
                try:
                    return response.json()
                except ValueError as exc:
                    logger.error(f"Undecodable body from {url}: {exc}")
                    raise UpstreamError(response.status_code, url, self._body_text(response)) from exc

            if response.status_code == 429:
                if self.retry_policy.should_retry(attempt):
                    wait_ms = self.retry_policy.delay_ms(attempt, response.headers)
                    logger.warning(
                        f"429 rate-limited on {url}, waiting {wait_ms}ms "
                        f"(retry {attempt + 1}/{self.retry_policy.max_retries})"
                    )
                    await self.retry_policy.sleep(wait_ms / 1000.0)
                    attempt += 1
                    continue
                raise RateLimitExceeded(429, url, self._body_text(response))

            logger.debug(f"HTTP {response.status_code} for {url}")
            raise UpstreamError(response.status_code, url, self._body_text(response))

    async def probe(self, path: str, params: Optional[Mapping[str, Any]] = None) -> ProbeResult:
        """Single request without retry or status checking, for diagnostics."""
        session = self._require_session()
        clean = {k: v for k, v in (params or {}).items() if v is not None}
        response = await session.get(path, params=clean or None)
        return ProbeResult(
            ok=response.is_success,
            status=response.status_code,
            url=str(response.request.url),
            headers={k.lower(): v for k, v in response.headers.items()},
            body=self._body_text(response),
        )

    # ── Organizers ─────────────────────────────────────────────────────

    async def search_organizers(self, param_name: str, query: str, limit: int = 100, offset: int = 0) -> Any:
        return await self.get_json("/organizers", {param_name: query, "limit": limit, "offset": offset})

    async def list_organizer_championships(self, organizer_id: str, limit: int = 100, offset: int = 0) -> Any:
        return await self.get_json(
            f"/organizers/{organizer_id}/championships", {"limit": limit, "offset": offset}
        )

    # ── Championships ──────────────────────────────────────────────────

    async def get_championship(self, championship_id: str) -> Any:
        return await self.get_json(f"/championships/{championship_id}")

    async def list_championship_matches(self, championship_id: str, limit: int = 100, offset: int = 0) -> Any:
        return await self.get_json(
            f"/championships/{championship_id}/matches", {"limit": limit, "offset": offset}
        )

    # ── Leaderboards ───────────────────────────────────────────────────

    async def list_championship_leaderboards(self, championship_id: str, limit: int = 200, offset: int = 0) -> Any:
        return await self.get_json(
            f"/leaderboards/championships/{championship_id}", {"limit": limit, "offset": offset}
        )

    async def get_group_standings(self, championship_id: str, group: int, limit: int = 100, offset: int = 0) -> Any:
        return await self.get_json(
            f"/leaderboards/championships/{championship_id}/groups/{group}",
            {"limit": limit, "offset": offset},
        )

    async def get_leaderboard_standings(self, leaderboard_id: str, limit: int = 20, offset: int = 0) -> Any:
        return await self.get_json(f"/leaderboards/{leaderboard_id}", {"limit": limit, "offset": offset})

    # ── Matches, teams, players ────────────────────────────────────────

    async def get_match_stats(self, match_id: str) -> Any:
        return await self.get_json(f"/matches/{match_id}/stats")

    async def get_team(self, team_id: str) -> Any:
        return await self.get_json(f"/teams/{team_id}")

    async def search_player(self, nickname: str) -> Any:
        return await self.get_json("/players", {"nickname": nickname})
