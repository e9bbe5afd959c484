"""
扑克牌数据结构.

定义不可变的Card类，支持严格的类型检查、全序比较和字符串解析.
"""

from dataclasses import dataclass
from functools import total_ordering
from typing import Dict

from ..exceptions import CardParseError
from .types import Rank, Suit


@total_ordering
@dataclass(frozen=True)
class Card:
    """
    表示一张扑克牌.

    不可变数据类，包含点数和花色. 比较时先比点数，点数相同再按花色优先级比较，
    因此任意两张不同的牌都有确定的大小关系.

    Attributes:
        rank: 点数
        suit: 花色

    Examples:
        >>> card = Card(Rank.ACE, Suit.SPADES)
        >>> str(card)
        'AS'
        >>> card > Card(Rank.ACE, Suit.HEARTS)
        True
    """

    rank: Rank
    suit: Suit

    def __post_init__(self) -> None:
        """
        验证扑克牌数据的有效性.

        Raises:
            TypeError: 当花色或点数类型无效时
        """
        if not isinstance(self.rank, Rank):
            raise TypeError(f"点数必须是Rank类型，实际: {type(self.rank)}")
        if not isinstance(self.suit, Suit):
            raise TypeError(f"花色必须是Suit类型，实际: {type(self.suit)}")

    def __str__(self) -> str:
        """
        返回扑克牌的短字符串表示.

        Returns:
            str: 格式为"点数花色"的字符串，如"AS"表示黑桃A
        """
        return f"{self.rank.symbol}{self.suit.value}"

    def __repr__(self) -> str:
        return f"Card({self.rank.name}, {self.suit.name})"

    @classmethod
    def from_str(cls, card_str: str) -> 'Card':
        """
        从字符串创建扑克牌对象.

        Args:
            card_str: 扑克牌字符串，格式为"点数花色"，如"AS"、"10h"、"Td"

        Returns:
            Card: 对应的扑克牌对象

        Raises:
            TypeError: 当输入不是字符串时
            CardParseError: 当字符串格式无效时
        """
        if not isinstance(card_str, str):
            raise TypeError(f"输入必须是字符串，实际: {type(card_str)}")

        text = card_str.strip()
        if len(text) < 2:
            raise CardParseError(f"卡牌字符串格式错误: {card_str!r}")

        # 处理10的特殊情况
        if text.startswith("10"):
            rank_str, suit_str = "10", text[2:]
        else:
            rank_str, suit_str = text[0].upper(), text[1:]

        if rank_str not in _RANK_BY_SYMBOL:
            raise CardParseError(f"无效的点数: {rank_str!r}")
        if suit_str.upper() not in _SUIT_BY_SYMBOL:
            raise CardParseError(f"无效的花色: {suit_str!r}")

        return cls(_RANK_BY_SYMBOL[rank_str], _SUIT_BY_SYMBOL[suit_str.upper()])

    def __lt__(self, other: object) -> bool:
        """
        比较两张牌的大小.

        Args:
            other: 另一张牌

        Returns:
            bool: 点数较小，或点数相同且花色优先级较低时返回True
        """
        if not isinstance(other, Card):
            return NotImplemented
        if self.rank != other.rank:
            return self.rank < other.rank
        return self.suit < other.suit

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Card):
            return NotImplemented
        return self.rank == other.rank and self.suit == other.suit

    def __hash__(self) -> int:
        return hash((self.rank, self.suit))


_RANK_BY_SYMBOL: Dict[str, Rank] = {
    "2": Rank.TWO, "3": Rank.THREE, "4": Rank.FOUR, "5": Rank.FIVE,
    "6": Rank.SIX, "7": Rank.SEVEN, "8": Rank.EIGHT, "9": Rank.NINE,
    "10": Rank.TEN, "T": Rank.TEN, "J": Rank.JACK, "Q": Rank.QUEEN,
    "K": Rank.KING, "A": Rank.ACE,
}

_SUIT_BY_SYMBOL: Dict[str, Suit] = {suit.value: suit for suit in Suit}
