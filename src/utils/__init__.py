"""
Utilities module for Challonge points scoring.
"""
from src.utils.constants import (
    BYE, UNKNOWN_PLAYER1, UNKNOWN_PLAYER2, UNKNOWN_WINNER,
    STATE_PENDING, STATE_OPEN, STATE_COMPLETE,
    GROUP_STAGE, FINAL_STAGE, MAIN_BRACKET,
    WIN_POINTS, CLOSE_LOSS_POINTS, LOSS_POINTS, BYE_POINTS, STREAK_STEP,
    CLOSE_LOSS_MARGIN, GRAND_FINAL, THIRD_PLACE, FINALS_TABLE
)

__all__ = [
    'BYE', 'UNKNOWN_PLAYER1', 'UNKNOWN_PLAYER2', 'UNKNOWN_WINNER',
    'STATE_PENDING', 'STATE_OPEN', 'STATE_COMPLETE',
    'GROUP_STAGE', 'FINAL_STAGE', 'MAIN_BRACKET',
    'WIN_POINTS', 'CLOSE_LOSS_POINTS', 'LOSS_POINTS', 'BYE_POINTS', 'STREAK_STEP',
    'CLOSE_LOSS_MARGIN', 'GRAND_FINAL', 'THIRD_PLACE', 'FINALS_TABLE'
]
