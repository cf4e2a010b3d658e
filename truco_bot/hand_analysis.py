"""
Hand analysis for Truco decision making.
Location: truco_bot/hand_analysis.py

Aggregates card ranking into hand-level signals: manilha count, strong card
count, total hand value and a coarse strength class.
"""

from enum import Enum
from typing import Optional

from .card import Card
from .game_state import GameSnapshot
from .ranking import is_trump, relative_value, strongest, weakest
from .rules import DEFAULT_THRESHOLDS, Thresholds


class HandStrength(Enum):
    POOR = "poor"
    AVERAGE = "average"
    GOOD = "good"
    EXCELLENT = "excellent"


class HandAnalyzer:
    """
    Strength queries over the cards currently held in a snapshot.

    Every query reads the snapshot's hand again; nothing is cached, since the
    hand shrinks by one card per trick.
    """

    def __init__(self, snapshot: GameSnapshot, thresholds: Thresholds = DEFAULT_THRESHOLDS):
        self.snapshot = snapshot
        self.thresholds = thresholds

    def value_of(self, card: Card) -> int:
        return relative_value(card, self.snapshot.indicator)

    def trump_count(self) -> int:
        """Number of manilhas in hand."""
        return sum(1 for card in self.snapshot.hand if is_trump(card, self.snapshot.indicator))

    def strong_card_count(self, threshold: Optional[int] = None) -> int:
        """
        Number of cards whose relative value reaches the cutoff.

        Args:
            threshold: Cutoff to use instead of thresholds.strong_card
        """
        cutoff = self.thresholds.strong_card if threshold is None else threshold
        return sum(1 for card in self.snapshot.hand if self.value_of(card) >= cutoff)

    def total_hand_value(self) -> int:
        return sum(self.value_of(card) for card in self.snapshot.hand)

    def strength_class(self) -> HandStrength:
        """Coarse class; a total exactly on a threshold belongs to the higher class."""
        total = self.total_hand_value()
        if total >= self.thresholds.good_hand:
            return HandStrength.EXCELLENT
        if total >= self.thresholds.average_hand:
            return HandStrength.GOOD
        if total >= self.thresholds.bad_hand:
            return HandStrength.AVERAGE
        return HandStrength.POOR

    def strongest_card(self) -> Card:
        return strongest(self.snapshot.hand, self.snapshot.indicator)

    def weakest_card(self) -> Card:
        return weakest(self.snapshot.hand, self.snapshot.indicator)

    def weakest_card_beating(self, card: Card) -> Optional[Card]:
        """Cheapest card in hand that beats the given card, None if none does."""
        target = self.value_of(card)
        winners = [c for c in self.snapshot.hand if self.value_of(c) > target]
        if not winners:
            return None
        return weakest(winners, self.snapshot.indicator)
