"""
CSV serialization for match lists and points tables.
"""
import csv
import io
import re
from typing import Any, Iterable, List

from src.scoring.records import MatchRecord, PlayerStats
from src.utils.constants import MAIN_BRACKET

MATCH_COLUMNS = [
    'Match ID', 'Round', 'Player 1', 'Player 2',
    'Player 1 Score', 'Player 2 Score', 'Score Difference', 'Winner', 'State',
    'Stage Name', 'Play Order', 'Updated At'
]

STATS_COLUMNS = [
    'Event ID', 'Player', 'Swiss Wins', 'Swiss Losses', 'Swiss Close Losses',
    'Byes', 'Streak Bonus', 'Finals Place', 'Finals Points', 'Event Total'
]


def format_cell(value: Any) -> Any:
    """None -> '', whole floats -> int, everything else unchanged."""
    if value is None:
        return ''
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


def _write_rows(header: List[str], rows: Iterable[List[Any]]) -> str:
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator='\n')
    writer.writerow(header)
    for row in rows:
        writer.writerow([format_cell(v) for v in row])
    return buffer.getvalue()


def matches_to_csv(matches: Iterable[MatchRecord]) -> str:
    """Serialize normalized matches, one row per match."""
    rows = (
        [
            m.match_id or 'unknown',
            m.round or 0,
            m.player1 or 'Unknown Player 1',
            m.player2 or 'Unknown Player 2',
            m.player1_score,
            m.player2_score,
            m.score_difference,
            m.winner,
            m.state or 'unknown',
            m.stage_name or MAIN_BRACKET,
            m.play_order,
            m.updated_at
        ]
        for m in matches
    )
    return _write_rows(MATCH_COLUMNS, rows)


def player_stats_to_csv(stats: Iterable[PlayerStats]) -> str:
    """Serialize a points table, one row per player, in the given order."""
    rows = (
        [
            s.event_id or 'unknown',
            s.player or 'Unknown Player',
            s.swiss_wins,
            s.swiss_losses,
            s.swiss_close_losses,
            s.byes,
            s.streak_bonus,
            s.finals_place,
            s.finals_points,
            s.event_total
        ]
        for s in stats
    )
    return _write_rows(STATS_COLUMNS, rows)


def safe_filename(name: str) -> str:
    """Replace every character outside [A-Za-z0-9] with '_'."""
    return re.sub(r'[^A-Za-z0-9]', '_', name)
