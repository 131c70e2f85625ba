"""Live match aggregator: spectator roster enriched with every player's rank."""
import logging
from typing import Any

from domain.entities import Account, ActiveGameParticipant, LiveMatch, Participant, RankLookup
from domain.enums import Side
from domain.exceptions import RiotAPIError
from domain.interfaces import IMatchRepository
from .fan_out import gather_all
from .rank_resolver import RankResolver

logger = logging.getLogger(__name__)

EXPECTED_PARTICIPANTS = 10


class LiveMatchAggregator:
    """
    Resolves an in-progress match into two ranked rosters.

    All rank lookups are issued at once and joined by position. With
    ``fail_fast`` the first failed lookup cancels the rest and is raised;
    otherwise the failed entry is kept as an unresolved ``RankLookup``.
    """

    def __init__(
        self,
        match_repo: IMatchRepository,
        rank_resolver: RankResolver,
        *,
        fail_fast: bool = False,
    ):
        self.match_repo    = match_repo
        self.rank_resolver = rank_resolver
        self.fail_fast     = fail_fast

    async def aggregate(self, account: Account) -> LiveMatch:
        game = await self.match_repo.get_active_game(account.summoner_id)

        if len(game.participants) != EXPECTED_PARTICIPANTS:
            logger.warning(
                f"Live match reports {len(game.participants)} participants, "
                f"expected {EXPECTED_PARTICIPANTS}"
            )

        results = await gather_all(
            (self.rank_resolver.resolve_rank(p.summoner_id) for p in game.participants),
            fail_fast=self.fail_fast,
        )

        live = LiveMatch(game_mode=game.game_mode, game_type=game.game_type)
        for player, result in zip(game.participants, results):
            participant = Participant(
                summoner_name=player.summoner_name,
                side=Side.from_team_id(player.team_id),
                champion_id=player.champion_id,
                rank=self._to_lookup(player, result),
            )
            live.roster(participant.side).append(participant)

        logger.info(
            f"Live match resolved: {len(live.blue)} blue / {len(live.red)} red, "
            f"complete={live.is_complete}"
        )
        return live

    @staticmethod
    def _to_lookup(player: ActiveGameParticipant, result: Any) -> RankLookup:
        if isinstance(result, RiotAPIError):
            logger.warning(f"Rank lookup failed for {player.summoner_name}: {result.message}")
            return RankLookup.unresolved(result)
        if isinstance(result, BaseException):
            raise result
        return RankLookup.resolved(result)
