"""
Data records exchanged with the scoring engine.

MatchRecord is the normalized form of one tournament match; PlayerStats is
one row of the computed points table.
"""

from dataclasses import dataclass, asdict
from typing import Optional, Dict, Any

from src.utils.constants import (
    BYE, STATE_COMPLETE, GROUP_STAGE, MAIN_BRACKET,
    WIN_POINTS, CLOSE_LOSS_POINTS, LOSS_POINTS, BYE_POINTS
)


@dataclass(frozen=True)
class MatchRecord:
    """A single tournament match with resolved player names."""
    match_id: str
    round: int
    player1: Optional[str]
    player2: Optional[str]
    state: str
    player1_id: Optional[str] = None
    player2_id: Optional[str] = None
    winner_id: Optional[str] = None
    winner: Optional[str] = None
    player1_score: Optional[int] = None
    player2_score: Optional[int] = None
    forfeited: bool = False
    group_id: Optional[str] = None
    group_stage: Optional[str] = None
    stage_name: str = MAIN_BRACKET
    identifier: Optional[str] = None
    play_order: Optional[int] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None

    @property
    def score_difference(self) -> Optional[int]:
        if self.player1_score is None or self.player2_score is None:
            return None
        return abs(self.player1_score - self.player2_score)

    @property
    def has_score(self) -> bool:
        return self.player1_score is not None and self.player2_score is not None

    @property
    def is_complete(self) -> bool:
        return self.state == STATE_COMPLETE

    @property
    def is_swiss(self) -> bool:
        return self.stage_name == GROUP_STAGE

    @property
    def has_bye(self) -> bool:
        """True if either side is missing or the BYE placeholder."""
        return (not self.player1 or not self.player2
                or self.player1 == BYE or self.player2 == BYE)

    def involves(self, player: str) -> bool:
        return self.player1 == player or self.player2 == player

    def resolve_result(self):
        """
        Resolve the winner and loser names from winner_id.

        Returns:
            (winner, loser) tuple, or None if winner_id matches neither side
        """
        if self.winner_id is None:
            return None
        if self.winner_id == self.player1_id:
            return self.player1, self.player2
        if self.winner_id == self.player2_id:
            return self.player2, self.player1
        return None


@dataclass
class PlayerStats:
    """Points table row for one player in one event."""
    event_id: str
    player: str
    swiss_wins: int = 0
    swiss_losses: int = 0
    swiss_close_losses: int = 0
    byes: int = 0
    streak_bonus: float = 0.0
    finals_place: Optional[int] = None
    finals_points: int = 0
    event_total: float = 0.0

    def compute_total(self) -> float:
        """Recompute event_total from the counters and return it."""
        self.event_total = float(
            self.swiss_wins * WIN_POINTS
            + self.swiss_close_losses * CLOSE_LOSS_POINTS
            + self.swiss_losses * LOSS_POINTS
            + self.streak_bonus
            + self.byes * BYE_POINTS
            + self.finals_points
        )
        return self.event_total

    def reset(self):
        """Zero every counter. finals_place is left as recorded."""
        self.swiss_wins = 0
        self.swiss_losses = 0
        self.swiss_close_losses = 0
        self.byes = 0
        self.streak_bonus = 0.0
        self.finals_points = 0
        self.event_total = 0.0

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
