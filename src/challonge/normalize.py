"""
Normalization of Challonge payloads into scoring MatchRecords.

Resolves player ids to display names, parses scores_csv and classifies each
match as group stage, final stage or main bracket.
"""
import re
from typing import Dict, List, Optional, Tuple, Any

from src.challonge.models import ChallongeTournament, ChallongeMatch
from src.scoring.records import MatchRecord
from src.utils.constants import (
    BYE, UNKNOWN_PLAYER1, UNKNOWN_PLAYER2, UNKNOWN_WINNER,
    GROUP_STAGE, FINAL_STAGE, MAIN_BRACKET
)

# First "a-b" pair of a scores_csv value such as "5-2" or "3-1,2-3"
_SCORE_PAIR = re.compile(r"\s*(\d+)\s*-\s*(\d+)")


def parse_scores(
    scores_csv: Optional[str],
    winner_id: Optional[str] = None,
    player1_id: Optional[str] = None,
    player2_id: Optional[str] = None,
    player1_score: Optional[int] = None,
    player2_score: Optional[int] = None
) -> Tuple[Optional[int], Optional[int]]:
    """
    Extract (player1_score, player2_score) for a match.

    The first number of scores_csv is the winner's score. When player 2 won
    the pair is swapped; without a winner it is assigned positionally.
    An empty scores_csv falls back to the raw per-player score fields.
    Unparseable strings give (None, None).
    """
    if not scores_csv:
        return player1_score, player2_score

    m = _SCORE_PAIR.match(scores_csv)
    if not m:
        return None, None

    first, second = int(m.group(1)), int(m.group(2))
    if winner_id is not None and winner_id == player2_id and winner_id != player1_id:
        return second, first
    return first, second


def build_name_maps(
    tournament: ChallongeTournament,
    positional_ids: bool = True
) -> Tuple[Dict[str, str], Dict[str, str]]:
    """
    Build participant id -> name lookups.

    Returns:
        (participant_map, group_player_map). The group map also holds
        positional guesses when positional_ids is set and every distinct
        match player id can be paired with one participant.
    """
    participant_map: Dict[str, str] = {}
    group_player_map: Dict[str, str] = {}

    for p in tournament.participants:
        participant_map[p.id] = p.name
        for group_player_id in p.group_player_ids:
            group_player_map[group_player_id] = p.name

    if positional_ids:
        match_player_ids: Dict[str, None] = {}
        for match in tournament.matches:
            for pid in (match.player1_id, match.player2_id):
                if pid:
                    match_player_ids.setdefault(pid, None)

        if len(match_player_ids) == len(tournament.participants):
            for pid, p in zip(match_player_ids, tournament.participants):
                group_player_map.setdefault(pid, p.name)

    return participant_map, group_player_map


def _lookup(player_id: Optional[str], fallback: str, *maps: Dict[str, str]) -> Optional[str]:
    if not player_id:
        return None
    for names in maps:
        if player_id in names:
            return names[player_id]
    return fallback


def classify_stage(tournament: ChallongeTournament, match: ChallongeMatch) -> Tuple[str, Optional[str]]:
    """Return (stage_name, group_stage label) for a match."""
    if not tournament.group_stages_enabled:
        return MAIN_BRACKET, None
    if not match.group_id:
        return FINAL_STAGE, None

    group = tournament.find_group_stage(match.group_id)
    label = group.identifier if group else f"Group {match.group_id}"
    return GROUP_STAGE, label


def normalize_match(
    tournament: ChallongeTournament,
    match: ChallongeMatch,
    participant_map: Dict[str, str],
    group_player_map: Dict[str, str]
) -> MatchRecord:
    """Convert one raw match into a MatchRecord."""
    stage_name, group_stage = classify_stage(tournament, match)

    # Finals of a group stage tournament use participant ids directly
    if stage_name == FINAL_STAGE:
        maps = (participant_map,)
    else:
        maps = (participant_map, group_player_map)

    player1 = _lookup(match.player1_id, UNKNOWN_PLAYER1, *maps) or BYE
    player2 = _lookup(match.player2_id, UNKNOWN_PLAYER2, *maps) or BYE
    winner = _lookup(match.winner_id, UNKNOWN_WINNER, *maps)

    player1_score, player2_score = parse_scores(
        match.scores_csv,
        winner_id=match.winner_id,
        player1_id=match.player1_id,
        player2_id=match.player2_id,
        player1_score=match.player1_score,
        player2_score=match.player2_score
    )

    return MatchRecord(
        match_id=match.id,
        round=match.round,
        player1=player1,
        player2=player2,
        state=match.state,
        player1_id=match.player1_id,
        player2_id=match.player2_id,
        winner_id=match.winner_id,
        winner=winner,
        player1_score=player1_score,
        player2_score=player2_score,
        forfeited=match.forfeited,
        group_id=match.group_id,
        group_stage=group_stage,
        stage_name=stage_name,
        identifier=match.identifier,
        play_order=match.suggested_play_order or None,
        created_at=match.created_at,
        updated_at=match.updated_at
    )


def normalize_matches(tournament: ChallongeTournament, positional_ids: bool = True) -> List[MatchRecord]:
    """Normalize every match of a tournament, preserving API order."""
    participant_map, group_player_map = build_name_maps(tournament, positional_ids)
    return [
        normalize_match(tournament, match, participant_map, group_player_map)
        for match in tournament.matches
    ]


def load_tournament(payload: Dict[str, Any], positional_ids: bool = True) -> Tuple[ChallongeTournament, List[MatchRecord]]:
    """
    Parse an API response into a tournament and its normalized matches.

    Args:
        payload: JSON body of tournaments/{id}.json with participants and matches
        positional_ids: Allow positional id -> name guesses (direct tournaments)

    Returns:
        (ChallongeTournament, List[MatchRecord])
    """
    tournament = ChallongeTournament.from_dict(payload)
    return tournament, normalize_matches(tournament, positional_ids)
