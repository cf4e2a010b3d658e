"""
Card module for Truco.
Defines Card, Suit, and Rank with the fixed game ordering of the 40-card deck.
"""

from dataclasses import dataclass
from enum import Enum
from typing import List


class Suit(Enum):
    """Card suits, declared weakest to strongest (used to order manilhas)."""
    DIAMONDS = "♦"
    SPADES = "♠"
    HEARTS = "♥"
    CLUBS = "♣"

    @property
    def strength(self) -> int:
        return SUIT_ORDER.index(self)

    @property
    def letter(self) -> str:
        return self.name[0]

    def __str__(self):
        return self.value


class Rank(Enum):
    """Card ranks in Truco order (4 lowest, 3 highest)."""
    FOUR = 1
    FIVE = 2
    SIX = 3
    SEVEN = 4
    QUEEN = 5
    JACK = 6
    KING = 7
    ACE = 8
    TWO = 9
    THREE = 10

    @property
    def symbol(self) -> str:
        return _RANK_SYMBOLS[self]

    def next_rank(self) -> 'Rank':
        """Rank that follows this one, wrapping from THREE back to FOUR."""
        index = RANK_ORDER.index(self)
        return RANK_ORDER[(index + 1) % len(RANK_ORDER)]

    def __str__(self):
        return self.symbol

    def __lt__(self, other):
        if not isinstance(other, Rank):
            return NotImplemented
        return self.value < other.value


SUIT_ORDER = tuple(Suit)
RANK_ORDER = tuple(sorted(Rank, key=lambda r: r.value))

_RANK_SYMBOLS = {
    Rank.FOUR: "4", Rank.FIVE: "5", Rank.SIX: "6", Rank.SEVEN: "7",
    Rank.QUEEN: "Q", Rank.JACK: "J", Rank.KING: "K", Rank.ACE: "A",
    Rank.TWO: "2", Rank.THREE: "3",
}
_RANKS_BY_SYMBOL = {symbol: rank for rank, symbol in _RANK_SYMBOLS.items()}
_SUITS_BY_TEXT = {}
for _suit in Suit:
    _SUITS_BY_TEXT[_suit.letter] = _suit
    _SUITS_BY_TEXT[_suit.value] = _suit


@dataclass(frozen=True)
class Card:
    """Represents a playing card with rank and suit."""
    rank: Rank
    suit: Suit

    @property
    def card_id(self) -> int:
        """Stable index of the card in the 40-card deck (0..39)."""
        return RANK_ORDER.index(self.rank) * len(SUIT_ORDER) + self.suit.strength

    @classmethod
    def from_string(cls, text: str) -> 'Card':
        """
        Parse a card written as rank followed by suit.

        Args:
            text: e.g. "3C", "qh", "A♠"

        Returns:
            The parsed card

        Raises:
            ValueError: If the rank or suit is not recognised
        """
        cleaned = text.strip().upper()
        if len(cleaned) != 2:
            raise ValueError(f"Invalid card '{text}'. Expected <rank><suit>, e.g. 3C")

        rank = _RANKS_BY_SYMBOL.get(cleaned[0])
        suit = _SUITS_BY_TEXT.get(cleaned[1])
        if rank is None:
            raise ValueError(f"Invalid rank in '{text}'. Must be one of {list(_RANKS_BY_SYMBOL)}")
        if suit is None:
            raise ValueError(f"Invalid suit in '{text}'. Must be one of D, S, H, C")
        return cls(rank, suit)

    def __str__(self):
        return f"{self.rank}{self.suit}"

    def __repr__(self):
        return f"Card({self.rank.name}, {self.suit.name})"


def full_deck() -> List[Card]:
    """Create the 40-card Truco deck ordered by card id."""
    return [Card(rank, suit) for rank in RANK_ORDER for suit in SUIT_ORDER]
