"""Use case: ranked profile of one player."""
from __future__ import annotations

import logging

from core.logging.context import context
from domain.entities import UserAccount
from application.services import RankResolver, RoleClassifier, gather_all
from .base import LookupUseCase

logger = logging.getLogger(__name__)


class LookupProfileUseCase(LookupUseCase):
    """Account, solo-queue rank and most played role."""

    async def execute(self, username: str) -> UserAccount:
        with context(command="lookup", username=username):
            account = await self._resolve_account(username)
            rank, role = await gather_all(
                (
                    RankResolver(self.summoner_repo).resolve_rank(account.summoner_id),
                    RoleClassifier(self.match_repo).classify_top_role(account.account_id),
                ),
                fail_fast=True,
            )
            logger.info(f"Profile ready: {rank.short_label} {role.value}")
            return UserAccount(account=account, rank=rank, top_role=role)
