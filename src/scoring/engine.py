"""
Points calculation for a single Challonge event.

Scoring runs in three passes over one snapshot of normalized matches:
- Swiss/group stage: wins, losses, close losses, streak bonus and byes
- Finals: placement points for the grand final and third-place match
- Totals: weighted sum per player, then pruning of players who never
  played a scored game

Points:
- Swiss win: +3, close loss (<= 2 point margin): +1.5, loss: +0.5
- Bye: +3
- Streak: +0.5 for each consecutive scored win after the first
- Finals: 1st +6, 2nd +4, 3rd +3, 4th +2
"""

import logging
from collections import defaultdict
from typing import Dict, Iterable, List, Sequence

from src.scoring.records import MatchRecord, PlayerStats
from src.utils.constants import BYE, CLOSE_LOSS_MARGIN, STREAK_STEP, FINALS_TABLE

logger = logging.getLogger(__name__)


def discover_players(matches: Iterable[MatchRecord]) -> List[str]:
    """
    Collect distinct player names in order of first appearance.

    The BYE placeholder and empty names are excluded.
    """
    seen: Dict[str, None] = {}
    for match in matches:
        for name in (match.player1, match.player2):
            if name and name != BYE:
                seen.setdefault(name, None)
    return list(seen)


def split_stages(matches: Sequence[MatchRecord]):
    """Partition matches into (swiss, finals) lists, preserving order."""
    swiss = [m for m in matches if m.is_swiss]
    finals = [m for m in matches if not m.is_swiss]
    return swiss, finals


def tabulate_swiss(swiss_matches: Sequence[MatchRecord], stats: Dict[str, PlayerStats]):
    """
    Accumulate group stage counters into stats, round by round.

    Args:
        swiss_matches: Group stage matches in any order
        stats: Player name -> PlayerStats accumulator (updated in place)
    """
    if not swiss_matches:
        return

    rounds: Dict[int, List[MatchRecord]] = defaultdict(list)
    for match in swiss_matches:
        rounds[match.round].append(match)

    streaks = {player: 0 for player in stats}

    for round_number in sorted(rounds):
        for match in rounds[round_number]:
            if not match.is_complete or match.has_bye:
                continue

            result = match.resolve_result()
            if result is None:
                continue
            winner, loser = result

            # Implicit bye: complete, unscored and not forfeited
            if not match.forfeited and not match.has_score:
                continue

            if match.forfeited:
                stats[winner].swiss_wins += 1
                streaks[loser] = 0
                continue

            winner_stats = stats[winner]
            winner_stats.swiss_wins += 1
            streaks[winner] += 1
            if streaks[winner] >= 2:
                winner_stats.streak_bonus += STREAK_STEP

            loser_stats = stats[loser]
            if match.score_difference <= CLOSE_LOSS_MARGIN:
                loser_stats.swiss_close_losses += 1
            else:
                loser_stats.swiss_losses += 1
            streaks[loser] = 0

    total_rounds = len(rounds)
    for player, player_stats in stats.items():
        played = sum(1 for m in swiss_matches if m.is_complete and m.involves(player))
        player_stats.byes = max(0, total_rounds - played)


def tabulate_finals(finals_matches: Sequence[MatchRecord], stats: Dict[str, PlayerStats]):
    """
    Award placement points from the grand final and third-place match.

    Earlier elimination rounds carry no points. A player seen in more than
    one terminal match keeps the last placement processed.
    """
    for match in finals_matches:
        if not match.is_complete or match.has_bye:
            continue

        placements = FINALS_TABLE.get(match.identifier)
        if placements is None:
            continue

        result = match.resolve_result()
        if result is None:
            continue

        for player, (place, points) in zip(result, placements):
            stats[player].finals_place = place
            stats[player].finals_points = points


def ever_played(player: str, matches: Iterable[MatchRecord]) -> bool:
    """True if the player has a completed, scored, non-forfeited match."""
    return any(
        m.involves(player) and m.is_complete and not m.forfeited and m.has_score
        for m in matches
    )


def calculate_player_points(event_id: str, matches: Sequence[MatchRecord]) -> List[PlayerStats]:
    """
    Compute the ranked points table for one event.

    Args:
        event_id: Tournament id written on every row
        matches: All normalized matches of the event

    Returns:
        PlayerStats sorted by event_total (descending). Ties keep the order
        in which players first appear in matches.
    """
    players = discover_players(matches)
    stats = {player: PlayerStats(event_id=event_id, player=player) for player in players}

    swiss_matches, finals_matches = split_stages(matches)
    tabulate_swiss(swiss_matches, stats)
    tabulate_finals(finals_matches, stats)

    for player, player_stats in stats.items():
        player_stats.compute_total()
        if not ever_played(player, matches):
            player_stats.reset()

    logger.debug(
        "Scored event %s: %d players, %d swiss matches, %d finals matches",
        event_id, len(stats), len(swiss_matches), len(finals_matches)
    )

    return sorted(stats.values(), key=lambda s: s.event_total, reverse=True)
