"""
手牌数据结构.

Hand是一组按发牌顺序排列、可修改的牌. 顺序不影响牌型评估，
但换牌（抽牌阶段）按位置进行，所以需要保留.
"""

from typing import Iterable, Iterator, List, Optional, Sequence, Tuple

from ..deck.card import Card
from ..eval.evaluator import HandEvaluator
from ..eval.types import HandType
from ..exceptions import HandOperationError

_EVALUATOR = HandEvaluator()


class Hand:
    """
    表示玩家的一手牌.

    手牌独占自己的牌列表，对外只暴露不可变的快照.
    比较运算符基于HandEvaluator.compare；==表示牌和顺序完全相同.

    Examples:
        >>> hand = Hand([Card.from_str(s) for s in ["AS", "AH", "3D", "5C", "7S"]])
        >>> hand.evaluate()
        <HandType.PAIR: 2>
    """

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, cards: Optional[Iterable[Card]] = None) -> None:
        self._cards: List[Card] = list(cards) if cards is not None else []

    @property
    def cards(self) -> Tuple[Card, ...]:
        """按发牌顺序排列的牌的快照."""
        return tuple(self._cards)

    @property
    def number_of_cards(self) -> int:
        return len(self._cards)

    def add_card(self, card: Card) -> None:
        self._cards.append(card)

    def add_cards(self, cards: Iterable[Card]) -> None:
        self._cards.extend(cards)

    def remove_card(self, card: Card) -> None:
        """
        移除第一张与给定牌相同的牌.

        Args:
            card: 要移除的牌

        Raises:
            HandOperationError: 当手牌中没有这张牌时
        """
        try:
            self._cards.remove(card)
        except ValueError:
            raise HandOperationError(f"手牌中没有这张牌: {card}") from None

    def clear(self) -> None:
        self._cards.clear()

    def replace_cards(self, indices: Sequence[int], new_cards: Sequence[Card]) -> None:
        """
        按位置替换手牌中的牌.

        indices[i]位置的牌被替换为new_cards[i]，其他位置保持不变.
        任何参数无效时手牌保持原样.

        Args:
            indices: 要替换的位置（从0开始）
            new_cards: 新牌，数量必须与indices相同

        Raises:
            HandOperationError: 当数量不匹配、位置重复或越界时
        """
        if len(indices) != len(new_cards):
            raise HandOperationError(
                f"替换位置数量({len(indices)})与新牌数量({len(new_cards)})不一致"
            )
        if len(set(indices)) != len(indices):
            raise HandOperationError(f"替换位置重复: {list(indices)}")
        for index in indices:
            if not 0 <= index < len(self._cards):
                raise HandOperationError(
                    f"替换位置越界: {index}，手牌共{len(self._cards)}张"
                )

        for index, card in zip(indices, new_cards):
            self._cards[index] = card

    def evaluate(self) -> HandType:
        """评估这手牌的最佳牌型."""
        return _EVALUATOR.evaluate(self._cards)

    def compare_to(self, other: 'Hand') -> int:
        """
        与另一手牌比较强弱.

        Returns:
            int: 1表示当前手牌更强，-1表示更弱，0表示相等
        """
        return _EVALUATOR.compare(self._cards, other._cards)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Hand):
            return NotImplemented
        return self.compare_to(other) < 0

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Hand):
            return NotImplemented
        return self.compare_to(other) <= 0

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Hand):
            return NotImplemented
        return self.compare_to(other) > 0

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Hand):
            return NotImplemented
        return self.compare_to(other) >= 0

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Hand):
            return NotImplemented
        return self._cards == other._cards

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self.cards)

    def __str__(self) -> str:
        return " ".join(str(card) for card in self._cards)

    def __repr__(self) -> str:
        return f"Hand([{', '.join(repr(card) for card in self._cards)}])"
