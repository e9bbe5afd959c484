"""
扑克牌型评估器.

提供牌型识别和手牌比较功能：
- 恰好5张牌时直接分类；
- 超过5张牌时穷举所有5张牌的组合，取最大牌型；
- 少于5张牌时固定返回高牌，不视为错误.

评估器是纯函数式的，不持有状态，可以在多线程中并发使用.
"""

import logging
from collections import Counter
from itertools import combinations
from typing import Callable, FrozenSet, List, NamedTuple, Sequence, Tuple

from ..deck.card import Card
from ..deck.types import Rank
from .types import HandType

logger = logging.getLogger(__name__)

HAND_SIZE = 5

_WHEEL_RANKS: FrozenSet[Rank] = frozenset(
    {Rank.ACE, Rank.TWO, Rank.THREE, Rank.FOUR, Rank.FIVE}
)
_ROYAL_RANKS: FrozenSet[Rank] = frozenset({Rank.ACE, Rank.KING})


class _HandProfile(NamedTuple):
    """5张牌的分类特征."""

    ranks: FrozenSet[Rank]
    rank_counts: Tuple[int, ...]
    is_flush: bool
    is_straight: bool


# 按优先级从高到低排列，第一个命中的规则决定牌型.
# 同花顺同时满足同花和顺子，所以顺序不能调整.
_CLASSIFICATION_RULES: Tuple[Tuple[Callable[[_HandProfile], bool], HandType], ...] = (
    (lambda p: p.is_flush and p.is_straight and _ROYAL_RANKS <= p.ranks, HandType.ROYAL_FLUSH),
    (lambda p: p.is_flush and p.is_straight, HandType.STRAIGHT_FLUSH),
    (lambda p: p.rank_counts == (4, 1), HandType.FOUR_OF_A_KIND),
    (lambda p: p.rank_counts == (3, 2), HandType.FULL_HOUSE),
    (lambda p: p.is_flush, HandType.FLUSH),
    (lambda p: p.is_straight, HandType.STRAIGHT),
    (lambda p: p.rank_counts == (3, 1, 1), HandType.THREE_OF_A_KIND),
    (lambda p: p.rank_counts == (2, 2, 1), HandType.TWO_PAIR),
    (lambda p: p.rank_counts == (2, 1, 1, 1), HandType.PAIR),
)


class HandEvaluator:
    """
    扑克牌型评估器.

    Examples:
        >>> evaluator = HandEvaluator()
        >>> cards = [Card.from_str(s) for s in ["AS", "KS", "QS", "JS", "10S"]]
        >>> evaluator.evaluate(cards)
        <HandType.ROYAL_FLUSH: 10>
    """

    def evaluate(self, cards: Sequence[Card]) -> HandType:
        """
        评估给定牌的最佳牌型.

        结果与输入顺序无关，输入的牌不会被修改.

        Args:
            cards: 任意张数的牌

        Returns:
            HandType: 最佳5张牌组合的牌型；少于5张牌时为高牌
        """
        cards = list(cards)
        if len(cards) < HAND_SIZE:
            return HandType.HIGH_CARD
        if len(cards) == HAND_SIZE:
            return self.classify_five(cards)

        best = HandType.HIGH_CARD
        for five_cards in combinations(cards, HAND_SIZE):
            hand_type = self.classify_five(five_cards)
            if hand_type > best:
                best = hand_type
                if best == HandType.ROYAL_FLUSH:
                    break
        logger.debug("评估 %d 张牌，最佳牌型: %s", len(cards), best.name)
        return best

    def best_hand(self, cards: Sequence[Card]) -> Tuple[HandType, Tuple[Card, ...]]:
        """
        找出最佳的5张牌组合.

        牌型相同的组合按降序排列后的牌比较，取较大者，保证结果确定.

        Args:
            cards: 任意张数的牌

        Returns:
            Tuple[HandType, Tuple[Card, ...]]: 最佳牌型及对应的牌（降序）.
                少于5张牌时返回高牌和全部牌
        """
        cards = list(cards)
        if len(cards) < HAND_SIZE:
            return HandType.HIGH_CARD, tuple(sorted(cards, reverse=True))

        return max(
            ((self.classify_five(combo), tuple(sorted(combo, reverse=True)))
             for combo in combinations(cards, HAND_SIZE)),
            key=lambda item: (item[0], item[1]),
        )

    def compare(self, hand_a: Sequence[Card], hand_b: Sequence[Card]) -> int:
        """
        比较两手牌的强弱.

        先比较牌型；牌型相同时，把两手牌各自按牌的全序降序排列后逐张比较，
        第一处不同决定结果. 这是简化的踢脚牌比较：不会先按对子、三条等分组再比较，
        所以对一对、两对等多组牌型只是近似的扑克规则.
        所有位置都相同时，牌数较多的一方较大.

        Args:
            hand_a: 第一手牌
            hand_b: 第二手牌

        Returns:
            int: 1表示hand_a更强，-1表示hand_b更强，0表示相等
        """
        hand_a, hand_b = list(hand_a), list(hand_b)
        type_a = self.evaluate(hand_a)
        type_b = self.evaluate(hand_b)
        if type_a != type_b:
            return 1 if type_a > type_b else -1

        ordered_a = sorted(hand_a, reverse=True)
        ordered_b = sorted(hand_b, reverse=True)
        for card_a, card_b in zip(ordered_a, ordered_b):
            if card_a != card_b:
                return 1 if card_a > card_b else -1

        if len(ordered_a) != len(ordered_b):
            return 1 if len(ordered_a) > len(ordered_b) else -1
        return 0

    def classify_five(self, cards: Sequence[Card]) -> HandType:
        """
        评估恰好5张牌的牌型.

        Args:
            cards: 恰好5张牌

        Returns:
            HandType: 牌型

        Raises:
            ValueError: 当牌数不是5张时
        """
        if len(cards) != HAND_SIZE:
            raise ValueError(f"必须是5张牌，实际: {len(cards)}")

        profile = self._profile(cards)
        for matches, hand_type in _CLASSIFICATION_RULES:
            if matches(profile):
                return hand_type
        return HandType.HIGH_CARD

    def _profile(self, cards: Sequence[Card]) -> _HandProfile:
        sorted_cards = sorted(cards, key=lambda c: c.rank)
        ranks = [card.rank for card in sorted_cards]
        rank_counts = tuple(sorted(Counter(ranks).values(), reverse=True))
        return _HandProfile(
            ranks=frozenset(ranks),
            rank_counts=rank_counts,
            is_flush=self._is_flush(sorted_cards),
            is_straight=self._is_straight(ranks),
        )

    @staticmethod
    def _is_flush(cards: Sequence[Card]) -> bool:
        return len({card.suit for card in cards}) == 1

    @staticmethod
    def _is_straight(ranks: List[Rank]) -> bool:
        """
        检查是否为顺子.

        Args:
            ranks: 5张牌的点数

        Returns:
            bool: 是否为顺子. A-2-3-4-5中A作为1；其余情况A只能作为顺子的最高牌
        """
        unique_ranks = sorted(set(ranks))
        # 有重复点数就不可能连续
        if len(unique_ranks) < HAND_SIZE:
            return False

        if set(unique_ranks) == _WHEEL_RANKS:
            return True

        return all(
            later - earlier == 1
            for earlier, later in zip(unique_ranks, unique_ranks[1:])
        )


_DEFAULT_EVALUATOR = HandEvaluator()


def evaluate(cards: Sequence[Card]) -> HandType:
    """评估给定牌的最佳牌型，见 HandEvaluator.evaluate."""
    return _DEFAULT_EVALUATOR.evaluate(cards)


def compare(hand_a: Sequence[Card], hand_b: Sequence[Card]) -> int:
    """比较两手牌的强弱，见 HandEvaluator.compare."""
    return _DEFAULT_EVALUATOR.compare(hand_a, hand_b)
