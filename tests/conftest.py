import json
from typing import Callable, Dict, List, Union

import httpx
import pytest

from config import ClientConfig
from domain.entities import Account, Rank
from domain.enums import Tier
from infrastructure.api import DataDragonClient, EndpointRateLimiter, RiotAPIClient

Route = Union[httpx.Response, Callable[[httpx.Request], httpx.Response]]


class FakeRiotAPI:
    """Path-routed MockTransport; unknown paths answer 404."""

    def __init__(self) -> None:
        self.routes: Dict[str, Route] = {}
        self.requests: List[httpx.Request] = []

    def add(self, path: str, body=None, status: int = 200) -> None:
        self.routes[path] = httpx.Response(status, json=body) if body is not None else httpx.Response(status)

    def add_raw(self, path: str, route: Route) -> None:
        self.routes[path] = route

    def _handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        route = self.routes.get(request.url.path)
        if route is None:
            return httpx.Response(404, content=json.dumps({"status": {"status_code": 404}}))
        if callable(route):
            return route(request)
        return route

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self._handle)


@pytest.fixture
def client_config() -> ClientConfig:
    return ClientConfig(api_key="RGAPI-test", history_cooldown=0)


@pytest.fixture
def fake_api() -> FakeRiotAPI:
    return FakeRiotAPI()


@pytest.fixture
def make_client(client_config, fake_api):
    """Client wired to ``fake_api`` with an unlimited rate limiter."""
    def _make(config: ClientConfig = None) -> RiotAPIClient:
        return RiotAPIClient(
            config or client_config,
            rate_limiter=EndpointRateLimiter(),
            transport=fake_api.transport,
        )
    return _make


@pytest.fixture
def make_ddragon(client_config, fake_api):
    """Data Dragon client wired to ``fake_api``."""
    def _make(config: ClientConfig = None) -> DataDragonClient:
        return DataDragonClient(config or client_config, transport=fake_api.transport)
    return _make


@pytest.fixture
def account() -> Account:
    return Account(summoner_id="sum-1", account_id="acc-1", puuid="puuid-1", name="Faker123", level=142)


@pytest.fixture
def gold_rank() -> Rank:
    return Rank(
        tier=Tier.GOLD,
        division="II",
        queue_type="RANKED_SOLO_5x5",
        wins=60,
        losses=40,
        hot_streak=True,
        league_points=55,
    )
