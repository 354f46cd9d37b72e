"""
Pydantic models for the Challonge points web API.
"""
from pydantic import BaseModel, Field
from typing import List, Optional

from src.scoring.records import PlayerStats


class ErrorResponse(BaseModel):
    """Error response."""
    error: str
    details: Optional[str] = None


class PlayerStatsRow(BaseModel):
    """One row of an event points table."""
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

    @classmethod
    def from_stats(cls, stats: PlayerStats) -> 'PlayerStatsRow':
        return cls(**stats.to_dict())


class PointsResponse(BaseModel):
    """JSON form of an event points table."""
    event_id: str
    event_name: str
    players: List[PlayerStatsRow] = Field(default_factory=list)
