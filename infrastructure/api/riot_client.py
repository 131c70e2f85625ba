"""Riot Games API client."""
import logging
from typing import Any, Optional, Type
from urllib.parse import quote
import httpx

from config import ClientConfig
from domain.exceptions import (
    AccountNotFound,
    MalformedResponse,
    MatchNotFound,
    NoMatchHistory,
    NotCurrentlyInMatch,
    RequestTimeout,
    RiotAPIError,
    TransportFailure,
    UnexpectedStatus,
)
from .rate_limiter import EndpointRateLimiter

logger = logging.getLogger(__name__)

RIOT_TOKEN_HEADER = "X-Riot-Token"


class RiotAPIClient:
    """
    Asynchronous Riot API client for the four v4 read endpoints.

    Maps every response to either decoded JSON or a typed ``RiotAPIError``.
    There are no retries here; a request is paced by the rate limiter and
    then sent exactly once.
    """

    def __init__(
        self,
        config: ClientConfig,
        rate_limiter: Optional[EndpointRateLimiter] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.config   = config
        self.session: Optional[httpx.AsyncClient] = None
        self._transport = transport

        if rate_limiter is None:
            rate_limiter = EndpointRateLimiter()
            rate_limiter.set_default_limiter(
                requests_per_1_sec=config.rate_limit_per_1_sec,
                requests_per_2_min=config.rate_limit_per_2_min,
            )
            self.rate_limiter = rate_limiter
            self._setup_endpoint_limiters()
        else:
            self.rate_limiter = rate_limiter

    def _setup_endpoint_limiters(self) -> None:
        self.rate_limiter.add_endpoint_limiter(
            "summoner",
            requests_per_1_sec=self.config.summoner_rate_limit_per_1_sec,
            requests_per_2_min=self.config.summoner_rate_limit_per_2_min,
        )
        self.rate_limiter.add_endpoint_limiter(
            "league",
            requests_per_1_sec=self.config.league_rate_limit_per_1_sec,
            requests_per_2_min=self.config.league_rate_limit_per_2_min,
        )
        self.rate_limiter.add_endpoint_limiter(
            "spectator",
            requests_per_1_sec=self.config.spectator_rate_limit_per_1_sec,
            requests_per_2_min=self.config.spectator_rate_limit_per_2_min,
        )
        self.rate_limiter.add_endpoint_limiter(
            "match",
            requests_per_1_sec=self.config.match_rate_limit_per_1_sec,
            requests_per_2_min=self.config.match_rate_limit_per_2_min,
        )

    async def __aenter__(self):
        self.session = httpx.AsyncClient(
            base_url=self.config.region.base_url,
            timeout=self.config.request_timeout,
            headers={RIOT_TOKEN_HEADER: self.config.api_key},
            transport=self._transport,
        )
        return self

    async def __aexit__(self, *_):
        if self.session:
            await self.session.aclose()
            self.session = None

    async def _make_request(
        self,
        path: str,
        endpoint_type: str,
        not_found: Type[RiotAPIError],
        params: Optional[dict] = None,
    ) -> Any:
        if self.session is None:
            raise RuntimeError("RiotAPIClient must be used as an async context manager")

        await self.rate_limiter.acquire(endpoint_type)

        try:
            response = await self.session.get(path, params=params)
        except httpx.TimeoutException as exc:
            logger.warning(f"Timeout for {path}: {exc}")
            raise RequestTimeout(url=path) from exc
        except httpx.HTTPError as exc:
            logger.error(f"Network error for {path}: {exc}")
            raise TransportFailure(url=path) from exc

        if response.status_code == 200:
            try:
                return response.json()
            except ValueError as exc:
                logger.error(f"Undecodable body for {path}")
                raise MalformedResponse(url=path) from exc

        if response.status_code == 404:
            raise not_found(url=path)

        if response.status_code in (401, 403):
            logger.error(f"{response.status_code} Unauthorized: check RIOT_API_KEY")
        else:
            logger.warning(f"HTTP {response.status_code} for {path}")
        raise UnexpectedStatus(response.status_code, url=path)

    # ── Summoner API ───────────────────────────────────────────────────

    async def get_summoner_by_name(self, name: str) -> Any:
        return await self._make_request(
            f"/lol/summoner/v4/summoners/by-name/{quote(name, safe='')}", "summoner", AccountNotFound
        )

    # ── League API ─────────────────────────────────────────────────────

    async def get_league_entries_by_summoner(self, summoner_id: str) -> Any:
        return await self._make_request(
            f"/lol/league/v4/entries/by-summoner/{summoner_id}", "league", AccountNotFound
        )

    # ── Spectator API ──────────────────────────────────────────────────

    async def get_active_game_by_summoner(self, summoner_id: str) -> Any:
        return await self._make_request(
            f"/lol/spectator/v4/active-games/by-summoner/{summoner_id}",
            "spectator",
            NotCurrentlyInMatch,
        )

    # ── Match API ──────────────────────────────────────────────────────

    async def get_matchlist_by_account(self, account_id: str) -> Any:
        params = {
            "queue": list(self.config.ranked_queues),
            "endIndex": self.config.history_window,
        }
        return await self._make_request(
            f"/lol/match/v4/matchlists/by-account/{account_id}",
            "match",
            NoMatchHistory,
            params=params,
        )

    async def get_match_by_id(self, match_id: str) -> Any:
        return await self._make_request(
            f"/lol/match/v4/matches/{match_id}", "match", MatchNotFound
        )
