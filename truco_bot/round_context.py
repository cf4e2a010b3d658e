"""
Round context: where in the hand a snapshot sits.
Pure projections of the snapshot, no state of their own.
"""

from enum import IntEnum

from .exceptions import InvalidRoundStateError
from .game_state import GameSnapshot, TrickOutcome
from .rules import MAX_TRICKS


class TrickNumber(IntEnum):
    FIRST = 1
    SECOND = 2
    THIRD = 3


def current_trick_number(snapshot: GameSnapshot) -> TrickNumber:
    """
    Trick about to be played: one more than the tricks already recorded.

    Raises:
        InvalidRoundStateError: If every trick of the hand was already played
    """
    number = len(snapshot.trick_outcomes) + 1
    if number > MAX_TRICKS:
        raise InvalidRoundStateError(f"Trick {number} does not exist, a hand has {MAX_TRICKS} tricks")
    return TrickNumber(number)


def won_previous_trick(snapshot: GameSnapshot) -> bool:
    """
    Whether the most recent completed trick was won by this side.

    Only the last outcome counts: on trick 3 after (WON, LOST) this is False,
    even though the first trick still decides a drawn hand.
    """
    if not snapshot.trick_outcomes:
        raise InvalidRoundStateError("No trick has been played yet in this hand")
    return snapshot.trick_outcomes[-1] == TrickOutcome.WON


def opponent_already_played(snapshot: GameSnapshot) -> bool:
    return snapshot.opponent_card is not None
