from dataclasses import FrozenInstanceError

import pytest

from cardboard.common.card import Card, Rank, Suit


def test_card_initialization():
    card = Card(Suit.HEARTS, Rank.EIGHT, 8)
    assert card.suit == Suit.HEARTS
    assert card.rank == Rank.EIGHT
    assert card.point_value == 8


def test_card_repr():
    card = Card(Suit.HEARTS, Rank.EIGHT, 8)
    assert repr(card) == "Card(Suit.HEARTS, Rank.EIGHT, 8)"


def test_card_str():
    assert str(Card(Suit.HEARTS, Rank.EIGHT, 8)) == "8 of hearts"
    assert str(Card(Suit.SPADES, Rank.QUEEN, 12)) == "queen of spades"


def test_image_key_joins_rank_and_suit():
    assert Card(Suit.CLUBS, Rank.ACE, 1).image_key == "aceclubs"
    assert Card(Suit.HEARTS, Rank.TEN, 10).image_key == "10hearts"


def test_card_is_immutable():
    card = Card(Suit.HEARTS, Rank.EIGHT, 8)
    with pytest.raises(FrozenInstanceError):
        card.point_value = 9


def test_invalid_suit():
    with pytest.raises(TypeError):
        Card("hearts", Rank.EIGHT, 8)


def test_invalid_rank():
    with pytest.raises(TypeError):
        Card(Suit.HEARTS, "8", 8)


def test_invalid_point_value():
    with pytest.raises(TypeError):
        Card(Suit.HEARTS, Rank.EIGHT, "8")
    with pytest.raises(TypeError):
        Card(Suit.HEARTS, Rank.EIGHT, True)


def test_point_value_is_chosen_by_the_game():
    thirteens_king = Card(Suit.SPADES, Rank.KING, 13)
    blackjack_king = Card(Suit.SPADES, Rank.KING, 10)
    assert thirteens_king != blackjack_king


def test_card_equality_and_hash():
    card1 = Card(Suit.HEARTS, Rank.EIGHT, 8)
    card2 = Card(Suit.HEARTS, Rank.EIGHT, 8)
    card3 = Card(Suit.CLUBS, Rank.EIGHT, 8)

    assert card1 == card2
    assert card1 != card3
    assert len({card1, card2, card3}) == 2
