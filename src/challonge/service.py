"""
Fetch-and-normalize helpers shared by the web app and the CLI.
"""
import logging
from typing import List, Optional, Tuple

from src.challonge.client import ChallongeClient
from src.challonge.models import ChallongeParticipant, ChallongeTournament
from src.challonge.normalize import normalize_matches
from src.scoring.records import MatchRecord

logger = logging.getLogger(__name__)


def fetch_event(
    client: ChallongeClient,
    tournament_id: str,
    community_id: Optional[str] = None
) -> Tuple[ChallongeTournament, List[MatchRecord]]:
    """
    Fetch a tournament and normalize its matches.

    Community tournaments are addressed as '<community>-<tournament>' and do
    not use positional id guesses. When the tournament body carries no
    participants, the participants endpoint is queried separately.

    Returns:
        (ChallongeTournament, List[MatchRecord])
    """
    if community_id:
        payload = client.get_community_tournament(tournament_id, community_id)
        api_id = f"{community_id}-{tournament_id}"
    else:
        payload = client.get_tournament(tournament_id)
        api_id = tournament_id

    tournament = ChallongeTournament.from_dict(payload)
    if not tournament.participants:
        tournament.participants = [
            ChallongeParticipant.from_dict(p) for p in client.get_participants(api_id)
        ]

    matches = normalize_matches(tournament, positional_ids=community_id is None)
    logger.info("Loaded tournament %s: %d participants, %d matches",
                tournament.id or api_id, len(tournament.participants), len(matches))
    return tournament, matches
