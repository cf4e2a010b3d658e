"""
Rules module for Truco.
Contains game constants and the tunable thresholds used by the heuristic bots.
"""

from dataclasses import dataclass


# Game constants
CARDS_PER_HAND = 3
MAX_TRICKS = 3
WINNING_SCORE = 12

# Mão de onze: a side at 11 points must decide whether to play a hand worth 3
FORCED_HAND_SCORE = 11
FORCED_HAND_STAKE = 3
DECLINED_FORCED_HAND_POINTS = 1

# PassiveBot refuses the forced hand above this opponent score
PASSIVE_FORCED_HAND_MAX_OPPONENT_SCORE = 7

# Relative value scale (see truco_bot.ranking)
MIN_RELATIVE_VALUE = 1
TRUMP_BASE_VALUE = 37
MAX_RELATIVE_VALUE = 40


@dataclass(frozen=True)
class Thresholds:
    """
    Hand and card strength cutoffs, on the relative value scale (1..40 per card).

    strong_card: a card at or above this value counts as strong (top
        non-trump rank or any manilha with the defaults)
    bad_hand / average_hand / good_hand: total hand value boundaries
    """
    strong_card: int = 33
    bad_hand: int = 33
    average_hand: int = 53
    good_hand: int = 79

    def __post_init__(self):
        if not MIN_RELATIVE_VALUE <= self.strong_card <= MAX_RELATIVE_VALUE:
            raise ValueError(
                f"strong_card must be within {MIN_RELATIVE_VALUE}..{MAX_RELATIVE_VALUE}, got {self.strong_card}"
            )
        if not self.bad_hand <= self.average_hand <= self.good_hand:
            raise ValueError(
                "Hand thresholds must satisfy bad_hand <= average_hand <= good_hand, "
                f"got {self.bad_hand}, {self.average_hand}, {self.good_hand}"
            )


DEFAULT_THRESHOLDS = Thresholds()


def declining_forced_hand_loses(opponent_score: int) -> bool:
    """Whether conceding the forced hand hands the opponent the game."""
    return opponent_score + DECLINED_FORCED_HAND_POINTS >= WINNING_SCORE


def losing_forced_hand_loses(opponent_score: int) -> bool:
    """Whether losing the forced hand after accepting it ends the game."""
    return opponent_score + FORCED_HAND_STAKE >= WINNING_SCORE
