"""
Display formatting for event standings.

Provides ASCII-formatted leaderboards for terminal output.
"""

from typing import List

from src.scoring.records import PlayerStats


def format_points(value: float) -> str:
    """Format a points value without a trailing '.0' for whole numbers."""
    if float(value).is_integer():
        return str(int(value))
    return f"{value:g}"


def format_leaderboard(stats: List[PlayerStats], event_name: str = "") -> str:
    """
    Format the points table as an ASCII table.

    Args:
        stats: Ranked player stats as returned by calculate_player_points
        event_name: Optional title line

    Returns:
        Formatted string for terminal display
    """
    lines = []
    lines.append(f"=== {event_name or 'STANDINGS'} ===")
    lines.append("")

    # Header
    lines.append(f"{'Rank':<6}{'Player':<28}{'W-CL-L':<10}{'Byes':<6}{'Streak':<8}{'Finals':<8}{'Total':<8}")
    lines.append("-" * 74)

    # Rows
    for i, row in enumerate(stats, 1):
        record = f"{row.swiss_wins}-{row.swiss_close_losses}-{row.swiss_losses}"
        finals = "-"
        if row.finals_place is not None:
            finals = f"#{row.finals_place} +{row.finals_points}"
        name = row.player if len(row.player) <= 26 else row.player[:24] + ".."

        lines.append(
            f"{i:<6}{name:<28}{record:<10}{row.byes:<6}"
            f"{format_points(row.streak_bonus):<8}{finals:<8}{format_points(row.event_total):<8}"
        )

    return "\n".join(lines)


def format_event_header(event_id: str, event_name: str, num_matches: int, num_players: int) -> str:
    """Format event header information."""
    lines = []
    lines.append(f"Event: {event_name} ({event_id})")
    lines.append(f"Matches: {num_matches}")
    lines.append(f"Players: {num_players}")
    lines.append("")
    return "\n".join(lines)
