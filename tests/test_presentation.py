import pytest

import main
from config import Settings
from domain.entities import (
    ChampionCatalog,
    LiveMatch,
    MatchHistory,
    Participant,
    Rank,
    RankLookup,
    UserAccount,
    UserMatchRecord,
)
from domain.enums import Outcome, Role, Side
from domain.exceptions import AccountNotFound, NotCurrentlyInMatch
from presentation import console
from presentation.cli import COMMANDS, GameCommand, HistoryCommand, ProfileCommand, ReportCommand


def _participant(name: str, side: Side, rank: RankLookup) -> Participant:
    return Participant(summoner_name=name, side=side, champion_id=7, rank=rank)


class TestConsole:

    def test_win_rate_format(self):
        assert console.format_win_rate(-1.0) == "N/A"
        assert console.format_win_rate(52.456) == "52.46%"

    def test_streak_without_utf8(self, monkeypatch):
        monkeypatch.setenv("LANG", "C")
        assert console.format_streak(True) == "Y"
        assert console.format_streak(False) == "N"

    def test_streak_with_utf8(self, monkeypatch):
        monkeypatch.setenv("LANG", "en_US.UTF-8")
        assert console.format_streak(True) == console.FIRE
        assert console.format_streak(False) == console.COLD

    def test_profile(self, account):
        text = console.render_profile(UserAccount(account=account, rank=Rank.unranked(), top_role=Role.UNKNOWN))
        assert "Faker123" in text
        assert "142" in text
        assert "N/A" in text
        assert "UNKNOWN" in text
        for column in console.ACC_COLS:
            assert column in text

    def test_live_match(self, gold_rank):
        live = LiveMatch(
            game_mode="CLASSIC",
            game_type="MATCHED_GAME",
            blue=[_participant("blue0", Side.BLUE, RankLookup.resolved(gold_rank))],
            red=[_participant("red0", Side.RED, RankLookup.unresolved(NotCurrentlyInMatch()))],
            champions=ChampionCatalog(names={7: "Kennen"}),
        )
        lines = console.render_live_match(live).splitlines()

        assert lines[0] == "Game Mode: CLASSIC"
        assert lines[1] == "Game Type: MATCHED_GAME"
        assert "Avg Team Rank: G_II" in lines
        assert "Avg Team Rank: N/A" in lines
        blue_at = next(i for i, line in enumerate(lines) if "Blue Team" in line)
        red_at = next(i for i, line in enumerate(lines) if "Red Team" in line)
        assert blue_at < red_at
        red_row = next(line for line in lines if line.startswith("red0"))
        assert " ? " in red_row
        assert "Kennen" in red_row
        assert "could not be loaded" in lines[-1]

    def test_history(self):
        history = MatchHistory("Faker123", [
            UserMatchRecord(Role.ADC, 420, 22, Outcome.WIN),
            UserMatchRecord(Role.SUPPORT, 440, 12, Outcome.LOSS),
            UserMatchRecord(Role.MID, 999, 1, Outcome.UNAVAILABLE),
        ], champions=ChampionCatalog(names={22: "Ashe", 12: "Alistar"}))
        text = console.render_history(history)

        assert "Last 3 games stats:" in text
        assert "Total wins: 1" in text
        assert "Total losses: 1" in text
        assert "W/L Ratio: 50.00%" in text
        assert "Ranked Solo" in text
        assert "Unknown" in text
        assert "Unavailable" in text
        assert "Ashe" in text
        assert "Alistar" in text
        assert "Unknown Champ" in text


class TestCommands:

    def test_report_command_is_abstract(self, client_config):
        with pytest.raises(TypeError):
            ReportCommand(client_config)

    def test_registry(self):
        assert COMMANDS == {"lookup": ProfileCommand, "game": GameCommand, "history": HistoryCommand}

    def test_success_prints_report(self, monkeypatch, capsys, client_config, account, gold_rank):
        seen = {}

        def fake_lookup(username, config):
            seen["args"] = (username, config)
            return UserAccount(account=account, rank=gold_rank, top_role=Role.TOP)

        monkeypatch.setattr("presentation.cli.profile_command.lookup_profile", fake_lookup)
        assert ProfileCommand(client_config).run("Faker123") == 0
        assert seen["args"] == ("Faker123", client_config)
        assert "G_II" in capsys.readouterr().out

    def test_api_error_prints_message(self, monkeypatch, capsys, client_config):
        def fake_lookup(username, config):
            raise NotCurrentlyInMatch()

        monkeypatch.setattr("presentation.cli.game_command.lookup_live_match", fake_lookup)
        assert GameCommand(client_config).run("Faker123") == 1
        assert "Summoner is not in game." in capsys.readouterr().out

    def test_other_errors_propagate(self, monkeypatch, client_config):
        def fake_lookup(username, config):
            raise RuntimeError("boom")

        monkeypatch.setattr("presentation.cli.history_command.lookup_history", fake_lookup)
        with pytest.raises(RuntimeError):
            HistoryCommand(client_config).run("Faker123")


class TestMain:

    @pytest.fixture(autouse=True)
    def _quiet_logging(self, monkeypatch):
        monkeypatch.setattr(main, "bootstrap_logging", lambda **_: None)
        monkeypatch.setattr(main, "shutdown_logging", lambda: None)
        monkeypatch.setattr(Settings, "RIOT_API_KEY", "RGAPI-test")
        monkeypatch.setattr(Settings, "RIOT_REGION", "na1")

    def test_help(self, capsys):
        assert main.main(["help"]) == 0
        assert "lookup <username>" in capsys.readouterr().out

    def test_missing_api_key(self, monkeypatch, capsys):
        monkeypatch.setattr(Settings, "RIOT_API_KEY", "")
        assert main.main(["lookup", "Faker123"]) == 2
        assert "RIOT_API_KEY" in capsys.readouterr().out

    def test_bad_region(self):
        assert main.main(["--region", "mars", "lookup", "Faker123"]) == 2

    def test_username_words_are_joined(self, monkeypatch):
        seen = {}

        def fake_lookup(username, config):
            seen["username"] = username
            seen["region"] = config.region.value
            raise AccountNotFound()

        monkeypatch.setattr("presentation.cli.history_command.lookup_history", fake_lookup)
        assert main.main(["--region", "euw", "history", "Hide", "on", "bush"]) == 1
        assert seen == {"username": "Hide on bush", "region": "euw1"}

    def test_unknown_command_exits(self):
        with pytest.raises(SystemExit):
            main.main(["dance"])
