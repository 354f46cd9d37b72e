"""
Challonge API module.

Provides:
- ChallongeClient: v1 API access with retries
- Payload dataclasses (ChallongeTournament, ChallongeParticipant, ...)
- Normalization of raw matches into scoring MatchRecords
"""
from src.challonge.client import ChallongeClient, ChallongeAPIError
from src.challonge.models import (
    ChallongeTournament, ChallongeParticipant, ChallongeMatch, GroupStage
)
from src.challonge.normalize import (
    parse_scores, build_name_maps, classify_stage,
    normalize_match, normalize_matches, load_tournament
)
from src.challonge.service import fetch_event

__all__ = [
    'ChallongeClient',
    'ChallongeAPIError',
    'ChallongeTournament',
    'ChallongeParticipant',
    'ChallongeMatch',
    'GroupStage',
    'parse_scores',
    'build_name_maps',
    'classify_stage',
    'normalize_match',
    'normalize_matches',
    'load_tournament',
    'fetch_event',
]
