"""
Unit tests for cards and card ranking.
Tests manilha detection, relative values and the total order over the deck.
"""

import numpy as np
import pytest

from truco_bot.card import Card, Rank, Suit, full_deck
from truco_bot.exceptions import EmptyHandError
from truco_bot.ranking import is_trump, relative_value, strongest, trump_rank, value_table, weakest


def c(text):
    return Card.from_string(text)


class TestCard:
    """Test card functionality."""

    def test_card_creation(self):
        card = Card(Rank.THREE, Suit.CLUBS)
        assert card.rank == Rank.THREE
        assert card.suit == Suit.CLUBS
        assert str(card) == "3♣"

    def test_card_equality(self):
        assert Card(Rank.ACE, Suit.SPADES) == Card(Rank.ACE, Suit.SPADES)
        assert Card(Rank.ACE, Suit.SPADES) != Card(Rank.ACE, Suit.HEARTS)
        assert len({Card(Rank.ACE, Suit.SPADES), Card(Rank.ACE, Suit.SPADES)}) == 1

    def test_card_is_immutable(self):
        card = c("QH")
        with pytest.raises(AttributeError):
            card.rank = Rank.KING

    def test_from_string(self):
        assert c("3C") == Card(Rank.THREE, Suit.CLUBS)
        assert c("qh") == Card(Rank.QUEEN, Suit.HEARTS)
        assert c(" A♠ ") == Card(Rank.ACE, Suit.SPADES)
        assert c("4d") == Card(Rank.FOUR, Suit.DIAMONDS)

    @pytest.mark.parametrize("text", ["", "1C", "3X", "10H", "KCC"])
    def test_from_string_rejects_invalid_text(self, text):
        with pytest.raises(ValueError):
            Card.from_string(text)

    def test_full_deck(self):
        deck = full_deck()
        assert len(deck) == 40
        assert len(set(deck)) == 40
        assert [card.card_id for card in deck] == list(range(40))

    def test_rank_order_wraps(self):
        assert Rank.FOUR.next_rank() == Rank.FIVE
        assert Rank.SEVEN.next_rank() == Rank.QUEEN
        assert Rank.THREE.next_rank() == Rank.FOUR
        assert Rank.SEVEN < Rank.QUEEN < Rank.ACE < Rank.THREE


class TestManilha:
    """Test trump (manilha) detection from the vira."""

    def test_trump_rank_is_next_rank(self):
        assert trump_rank(c("4D")) == Rank.FIVE
        assert trump_rank(c("7S")) == Rank.QUEEN
        assert trump_rank(c("KH")) == Rank.ACE
        assert trump_rank(c("2C")) == Rank.THREE

    def test_trump_rank_wraps_after_three(self):
        assert trump_rank(c("3D")) == Rank.FOUR
        assert is_trump(c("4C"), c("3D"))
        assert not is_trump(c("3C"), c("3D"))

    def test_is_trump(self):
        vira = c("4D")
        assert is_trump(c("5S"), vira)
        assert not is_trump(c("4H"), vira)
        assert not is_trump(c("3C"), vira)


class TestRelativeValue:
    """Test the relative value order."""

    def test_manilhas_follow_suit_order(self):
        vira = c("4D")
        values = [relative_value(c(text), vira) for text in ("5D", "5S", "5H", "5C")]
        assert values == [37, 38, 39, 40]

    def test_manilhas_beat_every_other_card(self):
        vira = c("4D")
        manilhas = [card for card in full_deck() if is_trump(card, vira)]
        others = [card for card in full_deck() if not is_trump(card, vira) and card != vira]
        assert len(manilhas) == 4
        assert min(relative_value(m, vira) for m in manilhas) > max(relative_value(o, vira) for o in others)

    def test_non_trumps_follow_rank_then_suit(self):
        vira = c("4D")
        assert relative_value(c("3C"), vira) == 36
        assert relative_value(c("3D"), vira) == 33
        assert relative_value(c("2C"), vira) == 32
        assert relative_value(c("AC"), vira) == 28
        assert relative_value(c("KC"), vira) == 24
        assert relative_value(c("4H"), vira) == 3
        assert relative_value(c("7H"), vira) < relative_value(c("QD"), vira)

    def test_rank_above_manilha_is_shifted_down(self):
        # Vira 2 makes the threes manilhas, so the twos become the best plain rank
        vira = c("2D")
        assert relative_value(c("2H"), vira) == 35
        assert relative_value(c("AC"), vira) == 32

    @pytest.mark.parametrize("vira", full_deck())
    def test_strict_total_order_for_every_vira(self, vira):
        others = [card for card in full_deck() if card != vira]
        values = [relative_value(card, vira) for card in others]
        assert len(set(values)) == 39

        trumps = [card for card in others if is_trump(card, vira)]
        plain = [card for card in others if not is_trump(card, vira)]
        assert len(trumps) == 4
        assert min(relative_value(t, vira) for t in trumps) > max(relative_value(p, vira) for p in plain)

    @pytest.mark.parametrize("vira", [c("4D"), c("QS"), c("3C")])
    def test_value_table_is_permutation(self, vira):
        table = value_table(vira)
        assert table.shape == (40,)
        assert np.array_equal(np.sort(table), np.arange(1, 41))

    def test_value_table_is_read_only(self):
        table = value_table(c("4D"))
        with pytest.raises(ValueError):
            table[0] = 99

    def test_relative_value_is_pure(self):
        vira = c("JH")
        assert relative_value(c("KS"), vira) == relative_value(c("KS"), vira)
        assert value_table(vira) is value_table(c("JH"))


class TestExtremes:
    """Test strongest/weakest selection."""

    def test_strongest_and_weakest(self):
        vira = c("4D")
        hand = [c("3C"), c("4H"), c("5S")]
        assert strongest(hand, vira) == c("5S")
        assert weakest(hand, vira) == c("4H")

    def test_ties_keep_stored_order(self):
        vira = c("4D")
        first, second = Card(Rank.KING, Suit.CLUBS), Card(Rank.KING, Suit.CLUBS)
        assert strongest([first, second], vira) is first
        assert weakest([first, second], vira) is first

    def test_empty_hand_raises(self):
        with pytest.raises(EmptyHandError):
            strongest([], c("4D"))
        with pytest.raises(EmptyHandError):
            weakest([], c("4D"))


if __name__ == "__main__":
    pytest.main([__file__])
