"""
Scoring module for Challonge events.

Provides:
- MatchRecord / PlayerStats: engine input and output records
- calculate_player_points: Swiss, finals and total points per player
- format_leaderboard: ASCII standings for terminal output
"""

from src.scoring.records import MatchRecord, PlayerStats
from src.scoring.engine import (
    calculate_player_points,
    discover_players,
    split_stages,
    tabulate_swiss,
    tabulate_finals,
    ever_played
)
from src.scoring.display import format_leaderboard, format_event_header, format_points

__all__ = [
    'MatchRecord',
    'PlayerStats',
    'calculate_player_points',
    'discover_players',
    'split_stages',
    'tabulate_swiss',
    'tabulate_finals',
    'ever_played',
    'format_leaderboard',
    'format_event_header',
    'format_points',
]
