"""Application settings and configuration."""
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Tuple
from dotenv import load_dotenv

from domain.enums import Region, QueueType

ENV_PATH = Path(__file__).resolve().parent / '.env'
load_dotenv(dotenv_path=ENV_PATH)


def _env_int(name: str, default: int) -> int:
    try:
        return int(os.getenv(name, str(default)))
    except ValueError:
        return default


def _env_float(name: str, default: float) -> float:
    try:
        return float(os.getenv(name, str(default)))
    except ValueError:
        return default


@dataclass(frozen=True)
class ClientConfig:
    """
    Everything the Riot client and the aggregators need at runtime.

    Passed explicitly into ``RiotAPIClient`` and the use cases.
    """

    api_key: str
    region: Region = Region.NA1
    request_timeout: float = 10.0

    # Match history window (matchlist ``endIndex``) and the queues it covers
    history_window: int = 20
    ranked_queues: Tuple[int, ...] = field(
        default_factory=lambda: tuple(q.queue_id for q in QueueType.history_queues())
    )

    # Pause before the match-detail fan-out, in seconds (0 disables it)
    history_cooldown: float = 0.3

    # Riot personal key hard limits: 20/s and 100/120s
    rate_limit_per_1_sec: int = 18
    rate_limit_per_2_min: int = 90

    # Per endpoint family; a family without its own limiter uses the limits above
    summoner_rate_limit_per_1_sec: int = 18
    summoner_rate_limit_per_2_min: int = 85
    league_rate_limit_per_1_sec: int = 15
    league_rate_limit_per_2_min: int = 75
    spectator_rate_limit_per_1_sec: int = 18
    spectator_rate_limit_per_2_min: int = 90
    match_rate_limit_per_1_sec: int = 18
    match_rate_limit_per_2_min: int = 90

    # True: one failed rank lookup fails the whole live match
    live_match_fail_fast: bool = False

    # Data Dragon static data (champion names)
    ddragon_url: str = "https://ddragon.leagueoflegends.com"
    champion_locale: str = "en_US"


class Settings:
    """
    Environment-backed settings.

    Values are read once at import time (after ``config/.env`` is loaded).
    The API key is never stored anywhere else; ``client_config()`` hands a
    frozen copy to the client.
    """

    RIOT_API_KEY: str = os.getenv('RIOT_API_KEY', '')
    RIOT_REGION:  str = os.getenv('RIOT_REGION', 'na1')

    # ── HTTP ───────────────────────────────────────────────────────────────
    REQUEST_TIMEOUT: float = _env_float('REQUEST_TIMEOUT', 10.0)

    # ── Rate limits (per 1 second / per 2 minutes) ────────────────────────
    RATE_LIMIT_PER_1_SEC: int = _env_int('RATE_LIMIT_PER_1_SEC', 18)
    RATE_LIMIT_PER_2_MIN: int = _env_int('RATE_LIMIT_PER_2_MIN', 90)

    SUMMONER_RATE_LIMIT_PER_1_SEC:  int = _env_int('SUMMONER_RATE_LIMIT_PER_1_SEC', 18)
    SUMMONER_RATE_LIMIT_PER_2_MIN:  int = _env_int('SUMMONER_RATE_LIMIT_PER_2_MIN', 85)
    LEAGUE_RATE_LIMIT_PER_1_SEC:    int = _env_int('LEAGUE_RATE_LIMIT_PER_1_SEC', 15)
    LEAGUE_RATE_LIMIT_PER_2_MIN:    int = _env_int('LEAGUE_RATE_LIMIT_PER_2_MIN', 75)
    SPECTATOR_RATE_LIMIT_PER_1_SEC: int = _env_int('SPECTATOR_RATE_LIMIT_PER_1_SEC', 18)
    SPECTATOR_RATE_LIMIT_PER_2_MIN: int = _env_int('SPECTATOR_RATE_LIMIT_PER_2_MIN', 90)
    MATCH_RATE_LIMIT_PER_1_SEC:     int = _env_int('MATCH_RATE_LIMIT_PER_1_SEC', 18)
    MATCH_RATE_LIMIT_PER_2_MIN:     int = _env_int('MATCH_RATE_LIMIT_PER_2_MIN', 90)

    # ── Match history ──────────────────────────────────────────────────────
    HISTORY_WINDOW:      int = _env_int('HISTORY_WINDOW', 20)
    HISTORY_COOLDOWN_MS: int = _env_int('HISTORY_COOLDOWN_MS', 300)

    # ── Live match ─────────────────────────────────────────────────────────
    LIVE_MATCH_FAIL_FAST: bool = os.getenv('LIVE_MATCH_FAIL_FAST', 'false').strip().lower() == 'true'

    # ── Static data ────────────────────────────────────────────────────────
    DDRAGON_URL:     str = os.getenv('DDRAGON_URL', 'https://ddragon.leagueoflegends.com')
    CHAMPION_LOCALE: str = os.getenv('CHAMPION_LOCALE', 'en_US')

    # ── Paths / logging ────────────────────────────────────────────────────
    BASE_DIR: Path = Path(__file__).resolve().parent.parent
    LOG_DIR:  Optional[Path] = Path(os.environ['LOG_DIR']) if os.getenv('LOG_DIR') else None

    LOG_LEVEL: str = os.getenv('LOG_LEVEL', 'WARNING')

    @classmethod
    def validate(cls) -> None:
        if not cls.RIOT_API_KEY:
            raise ValueError("RIOT_API_KEY must be set in the environment or config/.env")

    @classmethod
    def region(cls) -> Region:
        return Region.from_string(cls.RIOT_REGION)

    @classmethod
    def client_config(cls, region: Optional[Region] = None) -> ClientConfig:
        return ClientConfig(
            api_key=cls.RIOT_API_KEY,
            region=region or cls.region(),
            request_timeout=cls.REQUEST_TIMEOUT,
            history_window=max(1, min(cls.HISTORY_WINDOW, 100)),
            history_cooldown=max(0, cls.HISTORY_COOLDOWN_MS) / 1000.0,
            rate_limit_per_1_sec=cls.RATE_LIMIT_PER_1_SEC,
            rate_limit_per_2_min=cls.RATE_LIMIT_PER_2_MIN,
            summoner_rate_limit_per_1_sec=cls.SUMMONER_RATE_LIMIT_PER_1_SEC,
            summoner_rate_limit_per_2_min=cls.SUMMONER_RATE_LIMIT_PER_2_MIN,
            league_rate_limit_per_1_sec=cls.LEAGUE_RATE_LIMIT_PER_1_SEC,
            league_rate_limit_per_2_min=cls.LEAGUE_RATE_LIMIT_PER_2_MIN,
            spectator_rate_limit_per_1_sec=cls.SPECTATOR_RATE_LIMIT_PER_1_SEC,
            spectator_rate_limit_per_2_min=cls.SPECTATOR_RATE_LIMIT_PER_2_MIN,
            match_rate_limit_per_1_sec=cls.MATCH_RATE_LIMIT_PER_1_SEC,
            match_rate_limit_per_2_min=cls.MATCH_RATE_LIMIT_PER_2_MIN,
            live_match_fail_fast=cls.LIVE_MATCH_FAIL_FAST,
            ddragon_url=cls.DDRAGON_URL,
            champion_locale=cls.CHAMPION_LOCALE,
        )


settings = Settings()
