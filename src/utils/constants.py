"""
Constants for Challonge points scoring.
"""

# Placeholder name for an absent opponent
BYE = "BYE"

# Placeholder names for ids missing from the participant list
UNKNOWN_PLAYER1 = "Player 1"
UNKNOWN_PLAYER2 = "Player 2"
UNKNOWN_WINNER = "Winner"

# Match states reported by Challonge
STATE_PENDING = "pending"
STATE_OPEN = "open"
STATE_COMPLETE = "complete"

# Stage names
GROUP_STAGE = "Group Stage"
FINAL_STAGE = "Final Stage"
MAIN_BRACKET = "Main Bracket"

# Swiss scoring weights
WIN_POINTS = 3
CLOSE_LOSS_POINTS = 1.5
LOSS_POINTS = 0.5
BYE_POINTS = 3
STREAK_STEP = 0.5

# A loss by this many points or fewer counts as a close loss
CLOSE_LOSS_MARGIN = 2

# Terminal finals matches
GRAND_FINAL = "G"
THIRD_PLACE = "3P"

# identifier -> ((winner place, winner points), (loser place, loser points))
FINALS_TABLE = {
    GRAND_FINAL: ((1, 6), (2, 4)),
    THIRD_PLACE: ((3, 3), (4, 2)),
}
