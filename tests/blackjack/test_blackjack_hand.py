import pytest

from cardboard.blackjack.hand import BlackjackHand
from cardboard.common.card import Rank


def hand_of(cards, capacity=7):
    hand = BlackjackHand(capacity)
    for card in cards:
        hand.add_card(card)
    return hand


def test_ace_and_ten_is_twenty_one(blackjack_cards):
    hand = hand_of(blackjack_cards(Rank.ACE, Rank.TEN))
    assert hand.value() == 21
    assert hand.is_blackjack
    assert hand.is_soft


def test_ace_ace_nine_is_twenty_one(blackjack_cards):
    hand = hand_of(blackjack_cards(Rank.ACE, Rank.ACE, Rank.NINE))
    assert hand.value() == 21
    assert not hand.is_blackjack


def test_two_aces(blackjack_cards):
    assert hand_of(blackjack_cards(Rank.ACE, Rank.ACE)).value() == 12


def test_soft_ace_drops_to_one(blackjack_cards):
    hand = hand_of(blackjack_cards(Rank.ACE, Rank.SIX, Rank.NINE))
    assert hand.value() == 16
    assert not hand.is_soft


def test_face_cards_count_ten(blackjack_cards):
    hand = hand_of(blackjack_cards(Rank.KING, Rank.QUEEN))
    assert hand.value() == 20


def test_bust(blackjack_cards):
    hand = hand_of(blackjack_cards(Rank.TEN, Rank.JACK, Rank.TWO))
    assert hand.value() == 22
    assert hand.is_bust


def test_empty_hand_value():
    assert BlackjackHand().value() == 0


def test_full_hand_ignores_more_cards(blackjack_cards):
    cards = blackjack_cards(Rank.TWO, Rank.THREE, Rank.FOUR)
    hand = BlackjackHand(capacity=2)
    assert hand.add_card(cards[0])
    assert hand.add_card(cards[1])
    assert not hand.add_card(cards[2])
    assert len(hand) == 2


def test_missing_card_is_not_added():
    hand = BlackjackHand()
    assert not hand.add_card(None)
    assert len(hand) == 0


def test_card_at(blackjack_cards):
    cards = blackjack_cards(Rank.TWO)
    hand = hand_of(cards, capacity=3)
    assert hand.card_at(0) == cards[0]
    assert hand.card_at(2) is None
    with pytest.raises(IndexError):
        hand.card_at(3)


def test_capacity_must_be_positive():
    with pytest.raises(ValueError):
        BlackjackHand(0)


def test_hand_str_and_repr(blackjack_cards):
    hand = hand_of(blackjack_cards(Rank.ACE, Rank.KING))
    assert str(hand) == "ace of spades, king of hearts"
    assert repr(hand) == f"BlackjackHand({hand.cards!r})"
