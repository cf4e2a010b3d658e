"""
Player module for Truco.
Defines the strategy interface every bot implements.
"""

from abc import ABC, abstractmethod

from .card import Card
from .game_state import GameSnapshot, RaiseResponse
from .rules import DEFAULT_THRESHOLDS, Thresholds


class BotInterface(ABC):
    """Abstract interface that all bots must implement."""

    def __init__(self, name: str, thresholds: Thresholds = DEFAULT_THRESHOLDS):
        self.name = name
        self.thresholds = thresholds

    @abstractmethod
    def should_accept_forced_hand(self, snapshot: GameSnapshot) -> bool:
        """
        Decide whether to play the mão de onze.

        Args:
            snapshot: State at the start of a hand where our score is 11

        Returns:
            True to play the hand for 3 points, False to concede 1 point
        """
        pass

    @abstractmethod
    def should_raise(self, snapshot: GameSnapshot) -> bool:
        """
        Decide whether to ask for truco (or the next stake) before playing.

        Args:
            snapshot: State at the start of our turn in the current trick

        Returns:
            True to raise the stake
        """
        pass

    @abstractmethod
    def choose_card(self, snapshot: GameSnapshot) -> Card:
        """
        Choose which card to play.

        Args:
            snapshot: State at our turn in the current trick

        Returns:
            A card from snapshot.hand; the engine removes it from the hand
        """
        pass

    @abstractmethod
    def respond_to_raise(self, snapshot: GameSnapshot) -> RaiseResponse:
        """
        Answer an opponent raise.

        Args:
            snapshot: State when the raise was asked; stake is the value before it

        Returns:
            ACCEPT, DECLINE (run) or COUNTER_RAISE
        """
        pass

    def __str__(self):
        return self.name
