import asyncio
from dataclasses import replace
from unittest.mock import AsyncMock, Mock

import pytest

import application.lookup
from application import lookup_history, lookup_live_match, lookup_profile
from application.use_cases import LookupHistoryUseCase, LookupLiveMatchUseCase, LookupProfileUseCase
from domain.entities import ActiveGame, ActiveGameParticipant, ChampionCatalog, MatchSummary, Rank
from domain.enums import Outcome, Role, Side, Tier
from domain.exceptions import AccountNotFound, NotCurrentlyInMatch, UnexpectedStatus
from fakes import FakeChampionRepository, FakeMatchRepository, FakeSummonerRepository
from infrastructure.api import DataDragonClient, EndpointRateLimiter, RiotAPIClient
from payloads import (
    active_game_json,
    champion_json,
    league_entry_json,
    match_json,
    match_summary_json,
    matchlist_json,
    realm_json,
    summoner_json,
)


class TestLookupProfileUseCase:

    def test_unranked_player_without_history(self, account, client_config):
        use_case = LookupProfileUseCase(
            FakeSummonerRepository(accounts={"Faker123": account}),
            FakeMatchRepository(),
            client_config,
        )
        user = asyncio.run(use_case.execute("Faker123"))

        assert user.account.name == "Faker123"
        assert user.account.level == 142
        assert user.rank.tier is Tier.UNRANKED
        assert user.rank.win_rate() == -1.0
        assert user.top_role is Role.UNKNOWN
        assert not user.has_known_role

    def test_ranked_player_with_role(self, account, gold_rank, client_config):
        summaries = [MatchSummary(str(i), 420, 1, "JUNGLE", "NONE") for i in range(3)]
        use_case = LookupProfileUseCase(
            FakeSummonerRepository(accounts={"Faker123": account}, entries={"sum-1": [gold_rank]}),
            FakeMatchRepository(histories={"acc-1": summaries}),
            client_config,
        )
        user = asyncio.run(use_case.execute("Faker123"))
        assert user.rank == gold_rank
        assert user.top_role is Role.JUNGLE

    def test_unknown_account(self, client_config):
        use_case = LookupProfileUseCase(FakeSummonerRepository(), FakeMatchRepository(), client_config)
        with pytest.raises(AccountNotFound):
            asyncio.run(use_case.execute("Nobody"))

    def test_rank_failure_fails_the_lookup(self, account, client_config):
        use_case = LookupProfileUseCase(
            FakeSummonerRepository(accounts={"Faker123": account}, entries={"sum-1": UnexpectedStatus(500)}),
            FakeMatchRepository(),
            client_config,
        )
        with pytest.raises(UnexpectedStatus):
            asyncio.run(use_case.execute("Faker123"))


class TestLookupLiveMatchUseCase:

    def test_not_in_game(self, account, client_config):
        use_case = LookupLiveMatchUseCase(
            FakeSummonerRepository(accounts={"Faker123": account}), FakeMatchRepository(), client_config
        )
        with pytest.raises(NotCurrentlyInMatch):
            asyncio.run(use_case.execute("Faker123"))

    def test_champion_names_attached(self, account, client_config):
        game = ActiveGame("CLASSIC", "MATCHED_GAME", [ActiveGameParticipant("p0", "sum-p0", 100, 202)])
        use_case = LookupLiveMatchUseCase(
            FakeSummonerRepository(accounts={"Faker123": account}),
            FakeMatchRepository(active_games={"sum-1": game}),
            client_config,
            champion_repo=FakeChampionRepository(ChampionCatalog(names={202: "Jhin"})),
        )
        live = asyncio.run(use_case.execute("Faker123"))
        assert live.champions.name_for(live.blue[0].champion_id) == "Jhin"

    def test_fail_fast_follows_config(self, account, client_config):
        game = ActiveGame("CLASSIC", "MATCHED_GAME", [ActiveGameParticipant("p0", "sum-p0", 100, 1)])
        summoners = FakeSummonerRepository(accounts={"Faker123": account}, entries={"sum-p0": UnexpectedStatus(500)})
        matches = FakeMatchRepository(active_games={"sum-1": game})

        degraded = asyncio.run(LookupLiveMatchUseCase(summoners, matches, client_config).execute("Faker123"))
        assert not degraded.is_complete

        strict = LookupLiveMatchUseCase(summoners, matches, replace(client_config, live_match_fail_fast=True))
        with pytest.raises(UnexpectedStatus):
            asyncio.run(strict.execute("Faker123"))


class TestLookupHistoryUseCase:

    def test_builds_history(self, account, client_config):
        cooldown = Mock()
        cooldown.wait = AsyncMock()
        use_case = LookupHistoryUseCase(
            FakeSummonerRepository(accounts={"Faker123": account}),
            FakeMatchRepository(histories={"acc-1": [MatchSummary("9", 400, 5, "TOP", "SOLO")]}),
            client_config,
            cooldown=cooldown,
        )
        history = asyncio.run(use_case.execute("Faker123"))

        assert history.username == "Faker123"
        assert [r.outcome for r in history.records] == [Outcome.UNAVAILABLE]
        assert history.win_rate() == -1.0
        cooldown.wait.assert_awaited_once()

    def test_champion_names_attached(self, account, client_config):
        cooldown = Mock()
        cooldown.wait = AsyncMock()
        champions = FakeChampionRepository(ChampionCatalog(version="11.2.1", names={5: "Xin Zhao"}))
        use_case = LookupHistoryUseCase(
            FakeSummonerRepository(accounts={"Faker123": account}),
            FakeMatchRepository(histories={"acc-1": [MatchSummary("9", 400, 5, "TOP", "SOLO")]}),
            client_config,
            champion_repo=champions,
            cooldown=cooldown,
        )
        history = asyncio.run(use_case.execute("Faker123"))

        assert champions.calls == 1
        assert history.champions.name_for(5) == "Xin Zhao"

    def test_champion_failure_keeps_the_report(self, account, client_config):
        use_case = LookupHistoryUseCase(
            FakeSummonerRepository(accounts={"Faker123": account}),
            FakeMatchRepository(histories={"acc-1": []}),
            client_config,
            champion_repo=FakeChampionRepository(UnexpectedStatus(503)),
        )
        history = asyncio.run(use_case.execute("Faker123"))
        assert history.records == []
        assert history.champions.name_for(5) == "Unknown Champ"


@pytest.fixture
def wired_api(monkeypatch, fake_api):
    """Route the blocking lookups through ``fake_api`` with no rate limiting."""
    def _client(config):
        return RiotAPIClient(config, rate_limiter=EndpointRateLimiter(), transport=fake_api.transport)
    monkeypatch.setattr(application.lookup, "RiotAPIClient", _client)
    monkeypatch.setattr(
        application.lookup, "DataDragonClient", lambda config: DataDragonClient(config, transport=fake_api.transport)
    )
    fake_api.add("/lol/summoner/v4/summoners/by-name/Faker123", summoner_json())
    return fake_api


class TestBlockingLookups:

    def test_lookup_profile(self, wired_api, client_config):
        wired_api.add("/lol/league/v4/entries/by-summoner/sum-1", [league_entry_json()])
        wired_api.add("/lol/match/v4/matchlists/by-account/acc-1", matchlist_json([
            match_summary_json(1, lane="BOTTOM", role="DUO_CARRY"),
            match_summary_json(2, lane="BOTTOM", role="DUO_CARRY"),
            match_summary_json(3, lane="BOTTOM", role="DUO_SUPPORT"),
        ]))
        user = lookup_profile("Faker123", client_config)

        assert user.rank.short_label == "G_II"
        assert user.top_role is Role.ADC

    def test_lookup_profile_unranked_without_history(self, wired_api, client_config):
        wired_api.add("/lol/league/v4/entries/by-summoner/sum-1", [])
        user = lookup_profile("Faker123", client_config)
        assert user.rank == Rank.unranked()
        assert user.top_role is Role.UNKNOWN

    def test_lookup_live_match(self, wired_api, client_config):
        wired_api.add("/lol/spectator/v4/active-games/by-summoner/sum-1", active_game_json())
        for i in range(10):
            wired_api.add(f"/lol/league/v4/entries/by-summoner/sum-p{i}", [league_entry_json()])
        wired_api.add("/lol/league/v4/entries/by-summoner/sum-p9", {"status": {}}, status=503)

        live = lookup_live_match("Faker123", client_config)

        assert [len(live.roster(side)) for side in (Side.BLUE, Side.RED)] == [5, 5]
        assert [p.summoner_name for p in live.red if not p.rank.is_resolved] == ["player9"]

    def test_lookup_history(self, wired_api, client_config):
        wired_api.add("/lol/match/v4/matchlists/by-account/acc-1", matchlist_json([
            match_summary_json(1), match_summary_json(2), match_summary_json(3),
        ]))
        wired_api.add("/lol/match/v4/matches/1", match_json(subject_team=100, first_team_win="Win"))
        wired_api.add("/lol/match/v4/matches/2", match_json(subject_team=200, first_team_win="Win"))

        history = lookup_history("Faker123", client_config)

        assert [r.outcome for r in history.records] == [Outcome.WIN, Outcome.LOSS, Outcome.UNAVAILABLE]
        assert (history.wins, history.losses) == (1, 1)
        assert history.win_rate() == 50.0

    def test_lookup_history_with_champion_names(self, wired_api, client_config):
        wired_api.add("/lol/match/v4/matchlists/by-account/acc-1", matchlist_json([
            match_summary_json(1, champion=202), match_summary_json(2, champion=1),
        ]))
        wired_api.add("/lol/match/v4/matches/1", match_json())
        wired_api.add("/realms/na.json", realm_json("11.2.1"))
        wired_api.add("/cdn/11.2.1/data/en_US/champion.json", champion_json())

        history = lookup_history("Faker123", client_config)

        names = [history.champions.name_for(r.champion_id) for r in history.records]
        assert names == ["Jhin", "Unknown Champ"]

    def test_lookup_unknown_account(self, wired_api, client_config):
        with pytest.raises(AccountNotFound):
            lookup_history("Nobody", client_config)
