"""
CSV export of matches and event standings.
"""
from src.export.csv_export import (
    MATCH_COLUMNS, STATS_COLUMNS,
    matches_to_csv, player_stats_to_csv, safe_filename, format_cell
)

__all__ = [
    'MATCH_COLUMNS',
    'STATS_COLUMNS',
    'matches_to_csv',
    'player_stats_to_csv',
    'safe_filename',
    'format_cell',
]
