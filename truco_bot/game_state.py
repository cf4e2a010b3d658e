"""
Game state snapshot handed to the bots by the Truco engine.
Location: truco_bot/game_state.py

The snapshot is read-only: the engine builds a fresh one for every decision
call and the bots never modify it.
"""

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Optional, Tuple

from .card import Card
from .exceptions import InvalidRoundStateError, UnknownStakeLevelError
from .rules import MAX_TRICKS


class TrickOutcome(Enum):
    """Result of a completed trick from the bot's point of view."""
    WON = "won"
    LOST = "lost"
    DRAWN = "drawn"


class StakeLevel(IntEnum):
    """Points currently at risk in the hand."""
    ONE = 1
    TRUCO = 3
    SIX = 6
    NINE = 9
    TWELVE = 12

    @classmethod
    def from_value(cls, value: int) -> 'StakeLevel':
        try:
            return cls(value)
        except ValueError:
            raise UnknownStakeLevelError(
                f"Unknown stake level {value!r}. Must be one of {[level.value for level in cls]}"
            ) from None

    def next_level(self) -> Optional['StakeLevel']:
        """Stake after a raise, or None when already at the top."""
        levels = list(StakeLevel)
        index = levels.index(self)
        if index + 1 == len(levels):
            return None
        return levels[index + 1]


class RaiseResponse(IntEnum):
    """Answer to an opponent raise; values are the engine's integer codes."""
    DECLINE = -1
    ACCEPT = 0
    COUNTER_RAISE = 1


@dataclass(frozen=True)
class GameSnapshot:
    """Observable state for one decision of one side."""
    hand: Tuple[Card, ...]
    indicator: Card
    opponent_card: Optional[Card] = None
    trick_outcomes: Tuple[TrickOutcome, ...] = ()
    own_score: int = 0
    opponent_score: int = 0
    stake: StakeLevel = StakeLevel.ONE

    def __post_init__(self):
        object.__setattr__(self, 'hand', tuple(self.hand))
        object.__setattr__(self, 'trick_outcomes', tuple(self.trick_outcomes))
        object.__setattr__(self, 'stake', StakeLevel.from_value(self.stake))

        if len(self.hand) + len(self.trick_outcomes) > MAX_TRICKS:
            raise InvalidRoundStateError(
                f"{len(self.hand)} cards in hand and {len(self.trick_outcomes)} tricks played "
                f"exceed the {MAX_TRICKS} tricks of a hand"
            )

    def describe(self) -> str:
        """One-line summary used in log messages."""
        hand = ' '.join(str(card) for card in self.hand) or '-'
        outcomes = ','.join(outcome.value for outcome in self.trick_outcomes) or '-'
        opponent = self.opponent_card if self.opponent_card is not None else '-'
        return (f"hand={hand} vira={self.indicator} opponent={opponent} "
                f"tricks={outcomes} score={self.own_score}x{self.opponent_score} "
                f"stake={int(self.stake)}")
