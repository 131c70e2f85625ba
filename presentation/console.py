"""Plain-text rendering of the three reports."""
from __future__ import annotations

import os
from typing import List, Optional

from domain.entities import LiveMatch, MatchHistory, Participant, Rank, UserAccount, UserMatchRecord
from domain.enums import Outcome, Side, WinRateBand

_GREEN = "\033[32m"
_RED = "\033[31m"
_CYAN = "\033[96m"
_YELLOW = "\033[93m"
_RESET = "\033[0m"

_BAND_COLORS = {
    WinRateBand.ABOVE_AVERAGE: _GREEN,
    WinRateBand.BELOW_AVERAGE: _RED,
}
_OUTCOME_COLORS = {
    Outcome.WIN: _GREEN,
    Outcome.LOSS: _RED,
}
_SIDE_COLORS = {
    Side.BLUE: _CYAN,
    Side.RED: _RED,
}

ACC_COLS = ("Level", "Rank", "W/L", "LP", "Hot Streak", "Top Role")
GAME_COLS = ("Username", "Rank", "LP", "W/L", "Champion", "Hot Streak")
MATCH_HISTORY_COLS = ("Role", "Mode", "Champion", "Outcome")

FIRE = "🔥"
COLD = "🧊"
NOT_AVAILABLE = "N/A"


def utf8_supported() -> bool:
    return os.getenv("LANG", "").upper().endswith("UTF-8")


def _paint(text: str, color: Optional[str]) -> str:
    return f"{color}{text}{_RESET}" if color else text


def _cell(value: object, width: int, align: str = "^", color: Optional[str] = None) -> str:
    """Pad first, then color, so escape codes never shift the columns."""
    return _paint(f"{value!s:{align}{width}}", color)


def _row(cells: List[str]) -> str:
    return " | ".join(cells)


def _rule(widths: List[int]) -> str:
    return "-+-".join("-" * w for w in widths)


def format_win_rate(percentage: float) -> str:
    if WinRateBand.from_percentage(percentage) is WinRateBand.NOT_AVAILABLE:
        return NOT_AVAILABLE
    return f"{percentage:.2f}%"


def _win_rate_cell(rank: Rank, width: int) -> str:
    return _cell(format_win_rate(rank.win_rate()), width, color=_BAND_COLORS.get(rank.win_rate_band))


def format_streak(hot_streak: bool) -> str:
    if utf8_supported():
        return FIRE if hot_streak else COLD
    return "Y" if hot_streak else "N"


# ── Profile ────────────────────────────────────────────────────────────

def render_profile(user: UserAccount) -> str:
    widths = [6, 6, 7, 6, 10, 10]
    rank = user.rank
    lines = [
        _paint(f"{' ' + user.account.name + ' ':=^58}", _YELLOW),
        _row([_cell(c, w) for c, w in zip(ACC_COLS, widths)]),
        _rule(widths),
        _row([
            _cell(user.account.level, widths[0]),
            _cell(rank.short_label, widths[1]),
            _win_rate_cell(rank, widths[2]),
            _cell(rank.league_points if not rank.is_unranked else NOT_AVAILABLE, widths[3]),
            _cell(format_streak(rank.hot_streak), widths[4]),
            _cell(user.top_role.value, widths[5]),
        ]),
    ]
    return "\n".join(lines)


# ── Live match ─────────────────────────────────────────────────────────

def _participant_row(p: Participant, champion: str, widths: List[int]) -> str:
    if not p.rank.is_resolved:
        return _row([
            _cell(p.summoner_name, widths[0], "<"),
            _cell("?", widths[1]),
            _cell("-", widths[2]),
            _cell("-", widths[3]),
            _cell(champion, widths[4]),
            _cell("-", widths[5]),
        ])
    rank = p.rank.rank
    return _row([
        _cell(p.summoner_name, widths[0], "<"),
        _cell(rank.short_label, widths[1]),
        _cell(rank.league_points if not rank.is_unranked else NOT_AVAILABLE, widths[2]),
        _win_rate_cell(rank, widths[3]),
        _cell(champion, widths[4]),
        _cell(format_streak(rank.hot_streak), widths[5]),
    ])


def render_live_match(live: LiveMatch) -> str:
    widths = [17, 6, 6, 7, 20, 10]
    lines = [
        f"Game Mode: {live.game_mode}",
        f"Game Type: {live.game_type}",
    ]
    for side in (Side.BLUE, Side.RED):
        lines.append("")
        lines.append(f"Avg Team Rank: {live.average_rank(side)}")
        lines.append(_paint(f"{' ' + side.label + ' ':=^81}", _SIDE_COLORS[side]))
        lines.append(_row([_cell(c, w) for c, w in zip(GAME_COLS, widths)]))
        lines.append(_rule(widths))
        lines.extend(
            _participant_row(p, live.champions.name_for(p.champion_id), widths)
            for p in live.roster(side)
        )
    if not live.is_complete:
        lines.append("")
        lines.append("Some ranks could not be loaded and are shown as '?'.")
    return "\n".join(lines)


# ── Match history ──────────────────────────────────────────────────────

def _history_row(record: UserMatchRecord, champion: str, widths: List[int]) -> str:
    return _row([
        _cell(record.role.value, widths[0]),
        _cell(record.queue_name, widths[1]),
        _cell(champion, widths[2]),
        _cell(record.outcome.value, widths[3], color=_OUTCOME_COLORS.get(record.outcome)),
    ])


def render_history(history: MatchHistory) -> str:
    widths = [10, 15, 20, 15]
    lines = [
        _paint(f"{' ' + history.username + ' Match History ':=^68}", _YELLOW),
        f"Last {len(history.records)} games stats:",
        f"Total wins: {history.wins}",
        f"Total losses: {history.losses}",
        f"W/L Ratio: {format_win_rate(history.win_rate())}",
        _row([_cell(c, w) for c, w in zip(MATCH_HISTORY_COLS, widths)]),
        _rule(widths),
    ]
    lines.extend(
        _history_row(r, history.champions.name_for(r.champion_id), widths)
        for r in history.records
    )
    return "\n".join(lines)


def render_error(message: str) -> str:
    return _paint(message, _RED)
