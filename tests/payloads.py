"""Riot v4 JSON bodies used across the tests."""
from typing import Iterable, List, Optional


def summoner_json(name: str = "Faker123", summoner_id: str = "sum-1", account_id: str = "acc-1") -> dict:
    return {
        "id": summoner_id,
        "accountId": account_id,
        "puuid": f"puuid-{summoner_id}",
        "name": name,
        "profileIconId": 7,
        "revisionDate": 1600000000000,
        "summonerLevel": 142,
    }


def league_entry_json(
    queue_type: str = "RANKED_SOLO_5x5",
    tier: str = "GOLD",
    division: str = "II",
    wins: int = 60,
    losses: int = 40,
    hot_streak: bool = True,
    league_points: int = 55,
) -> dict:
    return {
        "leagueId": "league-1",
        "queueType": queue_type,
        "tier": tier,
        "rank": division,
        "summonerId": "sum-1",
        "summonerName": "Faker123",
        "leaguePoints": league_points,
        "wins": wins,
        "losses": losses,
        "veteran": False,
        "inactive": False,
        "freshBlood": False,
        "hotStreak": hot_streak,
    }


def active_game_json(team_ids: Optional[Iterable[int]] = None) -> dict:
    team_ids = list(team_ids) if team_ids is not None else [100] * 5 + [200] * 5
    return {
        "gameId": 4000000001,
        "gameMode": "CLASSIC",
        "gameType": "MATCHED_GAME",
        "participants": [
            {
                "teamId": team_id,
                "summonerName": f"player{i}",
                "summonerId": f"sum-p{i}",
                "championId": 100 + i,
                "spell1Id": 4,
                "spell2Id": 14,
            }
            for i, team_id in enumerate(team_ids)
        ],
    }


def matchlist_json(matches: List[dict]) -> dict:
    return {"matches": matches, "startIndex": 0, "endIndex": len(matches), "totalGames": len(matches)}


def match_summary_json(game_id: int, lane: str = "MID", role: str = "SOLO", queue: int = 420, champion: int = 7) -> dict:
    return {
        "platformId": "NA1",
        "gameId": game_id,
        "champion": champion,
        "queue": queue,
        "season": 13,
        "timestamp": 1600000000000,
        "role": role,
        "lane": lane,
    }


def match_json(account_id: str = "acc-1", subject_team: int = 100, first_team_win: str = "Win") -> dict:
    """Ten participants; the subject is participant 1 on ``subject_team``."""
    participants = [{"participantId": 1, "teamId": subject_team}]
    participants += [{"participantId": i, "teamId": 100 if i <= 5 else 200} for i in range(2, 11)]
    identities = [{"participantId": 1, "player": {"accountId": account_id, "summonerName": "Faker123", "summonerId": "sum-1"}}]
    identities += [
        {"participantId": i, "player": {"accountId": f"acc-x{i}", "summonerName": f"x{i}", "summonerId": f"sum-x{i}"}}
        for i in range(2, 11)
    ]
    second_team_win = "Fail" if first_team_win == "Win" else "Win"
    return {
        "gameId": 1,
        "teams": [
            {"teamId": 100, "win": first_team_win},
            {"teamId": 200, "win": second_team_win},
        ],
        "participants": participants,
        "participantIdentities": identities,
    }


def realm_json(champion_version: str = "11.2.1") -> dict:
    return {"n": {"champion": champion_version, "item": champion_version}, "v": champion_version, "l": "en_US"}


def champion_json(names: Optional[dict] = None, version: str = "11.2.1") -> dict:
    """``champion.json`` body; ``names`` maps numeric key to display name."""
    names = names if names is not None else {22: "Ashe", 99: "Lux", 202: "Jhin"}
    return {
        "type": "champion",
        "format": "standAloneComplex",
        "version": version,
        "data": {
            name.replace(" ", ""): {"version": version, "id": name.replace(" ", ""), "key": str(key), "name": name}
            for key, name in names.items()
        },
    }
