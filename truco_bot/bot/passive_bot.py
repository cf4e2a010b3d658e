"""
Passive bot implementation for Truco.
Never raises and always accepts; plays its cards by simple lowest-winner rules.
"""

import logging

from ..card import Card, Rank
from ..exceptions import EmptyHandError, InvalidRoundStateError
from ..game_state import GameSnapshot, RaiseResponse
from ..hand_analysis import HandAnalyzer
from ..player import BotInterface
from ..ranking import is_trump
from ..round_context import TrickNumber, current_trick_number, opponent_already_played
from ..rules import (DEFAULT_THRESHOLDS, FORCED_HAND_SCORE, PASSIVE_FORCED_HAND_MAX_OPPONENT_SCORE,
                     Thresholds)

logger = logging.getLogger(__name__)


class PassiveBot(BotInterface):
    """Baseline bot that leaves every stake decision to the opponent."""

    def __init__(self, name: str = "PassiveBot", thresholds: Thresholds = DEFAULT_THRESHOLDS):
        super().__init__(name, thresholds)

    def should_accept_forced_hand(self, snapshot: GameSnapshot) -> bool:
        if snapshot.own_score != FORCED_HAND_SCORE:
            raise InvalidRoundStateError(
                f"Forced hand is only decided at {FORCED_HAND_SCORE} points, own score is {snapshot.own_score}"
            )
        if snapshot.trick_outcomes:
            raise InvalidRoundStateError("Forced hand must be decided before the first trick")
        if snapshot.opponent_score > PASSIVE_FORCED_HAND_MAX_OPPONENT_SCORE:
            return False
        return any(is_trump(card, snapshot.indicator) or card.rank == Rank.THREE
                   for card in snapshot.hand)

    def should_raise(self, snapshot: GameSnapshot) -> bool:
        current_trick_number(snapshot)
        return False

    def choose_card(self, snapshot: GameSnapshot) -> Card:
        if not snapshot.hand:
            raise EmptyHandError("Cannot choose a card from an empty hand")

        trick = current_trick_number(snapshot)
        if trick == TrickNumber.THIRD:
            if len(snapshot.hand) != 1:
                raise InvalidRoundStateError(
                    f"Last trick expects exactly one card in hand, got {len(snapshot.hand)}"
                )
            return snapshot.hand[0]

        analyzer = HandAnalyzer(snapshot, self.thresholds)
        if opponent_already_played(snapshot):
            winner = analyzer.weakest_card_beating(snapshot.opponent_card)
            card = winner if winner is not None else analyzer.weakest_card()
        else:
            card = analyzer.strongest_card()

        logger.debug(f"{self.name} plays {card} on trick {int(trick)} ({snapshot.describe()})")
        return card

    def respond_to_raise(self, snapshot: GameSnapshot) -> RaiseResponse:
        if snapshot.stake.next_level() is None:
            raise InvalidRoundStateError(f"No raise is possible above stake {int(snapshot.stake)}")
        current_trick_number(snapshot)
        return RaiseResponse.ACCEPT
