"""Blocking entry points: one call, one fully resolved report or a typed error."""
from __future__ import annotations

import asyncio
from typing import Optional, Type

from config import ClientConfig, settings
from domain.entities import LiveMatch, MatchHistory, UserAccount
from infrastructure import DataDragonClient, RiotAPIClient
from .use_cases import (
    LookupHistoryUseCase,
    LookupLiveMatchUseCase,
    LookupProfileUseCase,
    LookupUseCase,
)


async def _run(use_case_cls: Type[LookupUseCase], username: str, config: ClientConfig):
    async with RiotAPIClient(config) as api, DataDragonClient(config) as ddragon:
        return await use_case_cls.from_client(api, ddragon).execute(username)


def lookup_profile(username: str, config: Optional[ClientConfig] = None) -> UserAccount:
    return asyncio.run(_run(LookupProfileUseCase, username, config or settings.client_config()))


def lookup_live_match(username: str, config: Optional[ClientConfig] = None) -> LiveMatch:
    return asyncio.run(_run(LookupLiveMatchUseCase, username, config or settings.client_config()))


def lookup_history(username: str, config: Optional[ClientConfig] = None) -> MatchHistory:
    return asyncio.run(_run(LookupHistoryUseCase, username, config or settings.client_config()))
