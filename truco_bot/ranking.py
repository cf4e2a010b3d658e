"""
Card ranking for Truco.
Computes the strength of every card relative to the turned-up indicator card (vira).

The relative value is a strict total order over the 40-card deck:
manilhas (trumps) take 37..40 ordered by suit, the nine remaining ranks take
1..36 ordered by rank and then suit.
"""

from functools import lru_cache
from typing import Sequence

import numpy as np

from .card import Card, Rank, RANK_ORDER, SUIT_ORDER, full_deck
from .exceptions import EmptyHandError
from .rules import MIN_RELATIVE_VALUE, TRUMP_BASE_VALUE

_DECK = full_deck()
_RANK_INDEX = np.array([RANK_ORDER.index(card.rank) for card in _DECK])
_SUIT_INDEX = np.array([card.suit.strength for card in _DECK])


def trump_rank(indicator: Card) -> Rank:
    """Manilha rank for the hand: the rank after the vira, wrapping from 3 to 4."""
    return indicator.rank.next_rank()


def is_trump(card: Card, indicator: Card) -> bool:
    return card.rank == trump_rank(indicator)


@lru_cache(maxsize=len(_DECK))
def value_table(indicator: Card) -> np.ndarray:
    """
    Relative value of every card id for one indicator.

    Args:
        indicator: The vira of the current hand

    Returns:
        Read-only integer array of length 40, indexed by Card.card_id
    """
    trump_index = RANK_ORDER.index(trump_rank(indicator))
    compressed = np.where(_RANK_INDEX > trump_index, _RANK_INDEX - 1, _RANK_INDEX)
    values = np.where(
        _RANK_INDEX == trump_index,
        TRUMP_BASE_VALUE + _SUIT_INDEX,
        MIN_RELATIVE_VALUE + compressed * len(SUIT_ORDER) + _SUIT_INDEX,
    ).astype(np.int64)
    values.setflags(write=False)
    return values


def relative_value(card: Card, indicator: Card) -> int:
    return int(value_table(indicator)[card.card_id])


def strongest(cards: Sequence[Card], indicator: Card) -> Card:
    """Highest-valued card; the first one in stored order wins a tie."""
    if not cards:
        raise EmptyHandError("Cannot pick the strongest card of an empty hand")
    return max(cards, key=lambda c: relative_value(c, indicator))


def weakest(cards: Sequence[Card], indicator: Card) -> Card:
    """Lowest-valued card; the first one in stored order wins a tie."""
    if not cards:
        raise EmptyHandError("Cannot pick the weakest card of an empty hand")
    return min(cards, key=lambda c: relative_value(c, indicator))
