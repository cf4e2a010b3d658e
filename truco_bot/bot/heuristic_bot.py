"""
Heuristic bot implementation for Truco.
Uses round-aware rules over manilha count, strong cards and total hand value.
"""

import logging

from ..card import Card
from ..exceptions import EmptyHandError, InvalidRoundStateError
from ..game_state import GameSnapshot, RaiseResponse
from ..hand_analysis import HandAnalyzer
from ..player import BotInterface
from ..round_context import (TrickNumber, current_trick_number, opponent_already_played,
                             won_previous_trick)
from ..rules import (CARDS_PER_HAND, DEFAULT_THRESHOLDS, FORCED_HAND_SCORE, Thresholds,
                     declining_forced_hand_loses, losing_forced_hand_loses)

logger = logging.getLogger(__name__)


class HeuristicBot(BotInterface):
    """Rule-based bot that plays tricks cheaply and raises on manilhas."""

    def __init__(self, name: str = "HeuristicBot", thresholds: Thresholds = DEFAULT_THRESHOLDS):
        super().__init__(name, thresholds)

    def should_accept_forced_hand(self, snapshot: GameSnapshot) -> bool:
        """Mão de onze: play only when conceding loses or the hand can carry it."""
        if snapshot.own_score != FORCED_HAND_SCORE:
            raise InvalidRoundStateError(
                f"Forced hand is only decided at {FORCED_HAND_SCORE} points, own score is {snapshot.own_score}"
            )
        if snapshot.trick_outcomes:
            raise InvalidRoundStateError("Forced hand must be decided before the first trick")

        analyzer = HandAnalyzer(snapshot, self.thresholds)

        if declining_forced_hand_loses(snapshot.opponent_score):
            decision = True
        elif self._is_structurally_strong(analyzer):
            decision = True
        elif losing_forced_hand_loses(snapshot.opponent_score):
            decision = False
        else:
            decision = analyzer.total_hand_value() > self.thresholds.good_hand

        logger.debug(f"{self.name} forced hand -> {decision} ({snapshot.describe()})")
        return decision

    def should_raise(self, snapshot: GameSnapshot) -> bool:
        """Ask for truco from the second trick on, when the hand supports it."""
        trick = current_trick_number(snapshot)
        if snapshot.stake.next_level() is None:
            return False

        analyzer = HandAnalyzer(snapshot, self.thresholds)

        if trick == TrickNumber.FIRST:
            # Nothing is known yet beyond our own cards
            decision = False
        elif trick == TrickNumber.SECOND:
            decision = (won_previous_trick(snapshot)
                        or analyzer.trump_count() == 2
                        or self._has_trump_and_strong(analyzer))
        else:
            if not snapshot.hand:
                raise EmptyHandError("No card left to raise on in the last trick")
            if opponent_already_played(snapshot):
                decision = analyzer.value_of(snapshot.hand[0]) > analyzer.value_of(snapshot.opponent_card)
            else:
                decision = analyzer.strong_card_count() >= 1 or analyzer.trump_count() >= 1

        logger.debug(f"{self.name} raise on trick {int(trick)} -> {decision} ({snapshot.describe()})")
        return decision

    def choose_card(self, snapshot: GameSnapshot) -> Card:
        if not snapshot.hand:
            raise EmptyHandError("Cannot choose a card from an empty hand")

        trick = current_trick_number(snapshot)
        analyzer = HandAnalyzer(snapshot, self.thresholds)

        if trick == TrickNumber.FIRST:
            card = self._choose_first_trick_card(snapshot, analyzer)
        elif trick == TrickNumber.SECOND:
            card = self._choose_second_trick_card(snapshot, analyzer)
        else:
            if len(snapshot.hand) != 1:
                raise InvalidRoundStateError(
                    f"Last trick expects exactly one card in hand, got {len(snapshot.hand)}"
                )
            card = snapshot.hand[0]

        logger.debug(f"{self.name} plays {card} on trick {int(trick)} ({snapshot.describe()})")
        return card

    def respond_to_raise(self, snapshot: GameSnapshot) -> RaiseResponse:
        proposed = snapshot.stake.next_level()
        if proposed is None:
            raise InvalidRoundStateError(f"No raise is possible above stake {int(snapshot.stake)}")

        trick = current_trick_number(snapshot)
        analyzer = HandAnalyzer(snapshot, self.thresholds)

        if trick == TrickNumber.FIRST:
            response = self._first_trick_response(analyzer)
        elif trick == TrickNumber.SECOND:
            response = self._second_trick_response(snapshot, analyzer)
        else:
            response = self._third_trick_response(snapshot, analyzer)

        if response == RaiseResponse.COUNTER_RAISE and proposed.next_level() is None:
            # The opponent already asked for the top stake
            response = RaiseResponse.ACCEPT

        logger.debug(f"{self.name} answers raise to {int(proposed)} on trick {int(trick)} -> "
                     f"{response.name} ({snapshot.describe()})")
        return response

    def _choose_first_trick_card(self, snapshot: GameSnapshot, analyzer: HandAnalyzer) -> Card:
        if opponent_already_played(snapshot):
            winner = analyzer.weakest_card_beating(snapshot.opponent_card)
            return winner if winner is not None else analyzer.weakest_card()

        if analyzer.total_hand_value() <= self.thresholds.bad_hand:
            return analyzer.weakest_card()
        return analyzer.strongest_card()

    def _choose_second_trick_card(self, snapshot: GameSnapshot, analyzer: HandAnalyzer) -> Card:
        if opponent_already_played(snapshot):
            # Opponent only leads here after taking the first trick
            winner = analyzer.weakest_card_beating(snapshot.opponent_card)
            return winner if winner is not None else analyzer.strongest_card()

        # Keep the manilha for the last trick
        if analyzer.total_hand_value() <= self.thresholds.average_hand and analyzer.trump_count() > 0:
            return analyzer.weakest_card()
        return analyzer.strongest_card()

    def _first_trick_response(self, analyzer: HandAnalyzer) -> RaiseResponse:
        if analyzer.trump_count() == 2 or self._has_trump_and_strong(analyzer):
            return RaiseResponse.COUNTER_RAISE
        if analyzer.trump_count() >= 1 or analyzer.total_hand_value() > self.thresholds.good_hand:
            return RaiseResponse.ACCEPT
        return RaiseResponse.DECLINE

    def _second_trick_response(self, snapshot: GameSnapshot, analyzer: HandAnalyzer) -> RaiseResponse:
        strong_cards = analyzer.strong_card_count()
        if (analyzer.trump_count() == 2
                or self._has_trump_and_strong(analyzer)
                or (won_previous_trick(snapshot) and strong_cards >= 1)):
            return RaiseResponse.COUNTER_RAISE
        if analyzer.trump_count() >= 1 or analyzer.total_hand_value() > self.thresholds.average_hand:
            return RaiseResponse.ACCEPT
        return RaiseResponse.DECLINE

    def _third_trick_response(self, snapshot: GameSnapshot, analyzer: HandAnalyzer) -> RaiseResponse:
        playable = analyzer.total_hand_value() >= self.thresholds.bad_hand
        if analyzer.trump_count() >= 1 or (won_previous_trick(snapshot) and playable):
            return RaiseResponse.COUNTER_RAISE
        if playable:
            return RaiseResponse.ACCEPT
        return RaiseResponse.DECLINE

    @staticmethod
    def _has_trump_and_strong(analyzer: HandAnalyzer) -> bool:
        return analyzer.trump_count() >= 1 and analyzer.strong_card_count() >= 1

    def _is_structurally_strong(self, analyzer: HandAnalyzer) -> bool:
        trumps = analyzer.trump_count()
        return (trumps >= 2
                or self._has_trump_and_strong(analyzer)
                or analyzer.strong_card_count() == CARDS_PER_HAND)
