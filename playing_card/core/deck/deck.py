"""
扑克牌组管理.

定义Deck类，提供标准52张牌的管理功能，包括洗牌、发牌等操作.
牌组只是评估器的外部协作者：评估器不关心牌是怎样被发出来的.
"""

import logging
import random
from typing import Iterable, List, Optional, Tuple

from ..exceptions import DeckExhaustedError
from .card import Card
from .types import get_all_ranks, get_all_suits

logger = logging.getLogger(__name__)


def _standard_cards() -> List[Card]:
    """按黑桃、红桃、方块、梅花顺序生成52张牌，每种花色内点数升序"""
    return [Card(rank, suit) for suit in get_all_suits() for rank in get_all_ranks()]


class Deck:
    """
    表示一副扑克牌.

    默认包含52张标准扑克牌，按黑桃、红桃、方块、梅花的顺序，每种花色内点数升序.
    发牌从牌顶（列表头部）开始. 使用可选的随机数生成器以支持确定性测试.

    Attributes:
        _cards: 当前牌组中的牌列表，下标0为牌顶
        _rng: 随机数生成器

    Examples:
        >>> deck = Deck(random.Random(42))
        >>> deck.shuffle()
        >>> card = deck.deal_card()
        >>> len(deck)
        51
    """

    def __init__(self, rng: Optional[random.Random] = None,
                 cards: Optional[Iterable[Card]] = None) -> None:
        """
        初始化牌组.

        Args:
            rng: 随机数生成器，用于洗牌操作。如果为None，使用默认随机数生成器
            cards: 指定牌组中的牌（牌顶在前）。如果为None，使用标准52张牌
        """
        self._rng = rng or random.Random()
        self._cards: List[Card] = _standard_cards() if cards is None else list(cards)

    def shuffle(self) -> None:
        """洗牌，由随机数生成器打乱牌的顺序."""
        self._rng.shuffle(self._cards)
        logger.debug("牌组已洗牌，剩余 %d 张", len(self._cards))

    def deal_card(self) -> Card:
        """
        从牌顶发一张牌.

        Returns:
            Card: 发出的牌

        Raises:
            DeckExhaustedError: 当牌组为空时
        """
        if not self._cards:
            raise DeckExhaustedError("Cannot deal from empty deck")
        return self._cards.pop(0)

    def deal_cards(self, count: int) -> List[Card]:
        """
        发多张牌.

        要么全部发出，要么一张都不发.

        Args:
            count: 要发的牌数

        Returns:
            List[Card]: 按发牌顺序排列的牌列表

        Raises:
            ValueError: 当count为负数时
            DeckExhaustedError: 当牌组中的牌不足时
        """
        if count < 0:
            raise ValueError("Count must be non-negative")
        if count > len(self._cards):
            raise DeckExhaustedError(
                f"Cannot deal {count} cards, only {len(self._cards)} remaining"
            )

        dealt_cards = self._cards[:count]
        del self._cards[:count]
        logger.debug("发出 %d 张牌: %s", count, " ".join(str(c) for c in dealt_cards))
        return dealt_cards

    @property
    def cards_remaining(self) -> int:
        """牌组中剩余的牌数."""
        return len(self._cards)

    @property
    def is_empty(self) -> bool:
        return not self._cards

    @property
    def remaining_cards(self) -> Tuple[Card, ...]:
        """
        获取剩余的牌但不发出.

        Returns:
            Tuple[Card, ...]: 剩余牌的快照，牌顶在前
        """
        return tuple(self._cards)

    def reset(self) -> None:
        """重置牌组为标准52张牌，与构造时是否指定了牌无关."""
        self._cards = _standard_cards()

    def peek_top(self) -> Optional[Card]:
        """
        查看顶部的牌但不发出.

        Returns:
            Optional[Card]: 顶部的牌，如果牌组为空则返回None
        """
        if not self._cards:
            return None
        return self._cards[0]

    def __len__(self) -> int:
        return len(self._cards)

    def __str__(self) -> str:
        return f"Deck({len(self._cards)} cards remaining)"

    def __repr__(self) -> str:
        return f"Deck(cards_remaining={len(self._cards)})"
