"""
手牌容器的单元测试.
"""

import pytest

from playing_card.core.deck import Card, Rank, Suit
from playing_card.core.eval import HandType
from playing_card.core.exceptions import HandOperationError
from playing_card.core.hand import Hand
from playing_card.tests.anti_cheat.core_usage_checker import CoreUsageChecker
from playing_card.tests.conftest import make_cards


class TestHandContainer:
    """Hand的增删改操作."""

    def test_hand_creation(self):
        hand = Hand()

        CoreUsageChecker.verify_real_objects(hand, "Hand")

        assert hand.number_of_cards == 0
        assert len(hand) == 0
        assert hand.cards == ()

    def test_hand_owns_its_cards(self):
        cards = make_cards("AS KH")
        hand = Hand(cards)
        cards.append(Card(Rank.TWO, Suit.CLUBS))
        assert hand.number_of_cards == 2

    def test_add_card(self):
        hand = Hand()
        card = Card(Rank.ACE, Suit.SPADES)

        hand.add_card(card)

        assert hand.number_of_cards == 1
        assert hand.cards[0] == card

    def test_add_cards_keeps_order(self):
        hand = Hand()
        hand.add_cards(make_cards("AS KH"))
        hand.add_cards(make_cards("2C"))
        assert [str(c) for c in hand] == ["AS", "KH", "2C"]

    def test_remove_card(self):
        card = Card(Rank.ACE, Suit.SPADES)
        hand = Hand([card])

        hand.remove_card(card)

        assert hand.number_of_cards == 0

    def test_remove_missing_card(self):
        hand = Hand(make_cards("AS"))
        with pytest.raises(HandOperationError):
            hand.remove_card(Card(Rank.KING, Suit.HEARTS))
        assert hand.number_of_cards == 1

    def test_clear(self):
        hand = Hand(make_cards("AS KH QD"))
        hand.clear()
        assert hand.number_of_cards == 0

    def test_replace_cards_by_position(self):
        hand = Hand(make_cards("AS KH QD JC 9S"))

        hand.replace_cards([1, 3], make_cards("2C 3D"))

        assert [str(c) for c in hand.cards] == ["AS", "2C", "QD", "3D", "9S"]

    def test_replace_nothing(self):
        hand = Hand(make_cards("AS KH QD JC 9S"))
        hand.replace_cards([], [])
        assert str(hand) == "AS KH QD JC 9S"

    @pytest.mark.parametrize("indices, new_cards", [
        ([0, 1], "2C"),          # 数量不一致
        ([5], "2C"),             # 越界
        ([-1], "2C"),            # 负数位置
        ([0, 0], "2C 3C"),       # 重复位置
    ])
    def test_replace_cards_invalid_is_atomic(self, indices, new_cards):
        hand = Hand(make_cards("AS KH QD JC 9S"))

        with pytest.raises(HandOperationError):
            hand.replace_cards(indices, make_cards(new_cards))

        assert str(hand) == "AS KH QD JC 9S"

    def test_cards_snapshot_is_immutable(self):
        hand = Hand(make_cards("AS KH"))
        assert isinstance(hand.cards, tuple)

    def test_repr(self):
        hand = Hand(make_cards("AS"))
        assert repr(hand) == "Hand([Card(ACE, SPADES)])"


class TestHandEvaluation:
    """Hand的评估和比较."""

    def test_evaluate(self):
        assert Hand(make_cards("AS AH 3D 5C 7S")).evaluate() == HandType.PAIR
        assert Hand(make_cards("AS KS QS JS 10S")).evaluate() == HandType.ROYAL_FLUSH
        assert Hand().evaluate() == HandType.HIGH_CARD

    def test_evaluate_after_replacement(self):
        hand = Hand(make_cards("AS AH 3D 5C 7S"))
        hand.replace_cards([2, 3, 4], make_cards("AD KC KS"))
        assert hand.evaluate() == HandType.FULL_HOUSE

    def test_ordering(self):
        royal = Hand(make_cards("AS KS QS JS 10S"))
        pair = Hand(make_cards("AS AH KD QC JS"))
        trips = Hand(make_cards("KS KH KD QC JS"))

        assert royal > trips > pair
        assert pair < trips
        assert pair <= pair
        assert royal >= trips
        assert sorted([pair, royal, trips], reverse=True) == [royal, trips, pair]

    def test_compare_to(self):
        first = Hand(make_cards("AS AH 3D 5C 7S"))
        second = Hand(make_cards("7S 5C 3D AH AS"))
        assert first.compare_to(second) == 0

    def test_equality_is_order_sensitive(self):
        first = Hand(make_cards("AS AH 3D 5C 7S"))
        second = Hand(make_cards("7S 5C 3D AH AS"))
        assert first != second
        assert first == Hand(make_cards("AS AH 3D 5C 7S"))
        # 顺序不同但比较结果相等
        assert first <= second and first >= second

    def test_hand_is_unhashable(self):
        with pytest.raises(TypeError):
            hash(Hand())
