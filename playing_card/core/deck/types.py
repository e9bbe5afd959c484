"""
扑克牌相关类型定义.

定义扑克牌的花色、点数等基础枚举类型.
"""

from enum import Enum, IntEnum
from functools import total_ordering
from typing import Dict, List


@total_ordering
class Suit(Enum):
    """
    扑克牌花色枚举.

    花色对牌型没有意义（同花判断除外），但为了比较的确定性需要一个固定的全序：
    黑桃 > 红桃 > 方块 > 梅花. 顺序由显式的优先级表决定，与声明顺序无关.
    """

    SPADES = "S"      # 黑桃
    HEARTS = "H"      # 红桃
    DIAMONDS = "D"    # 方块
    CLUBS = "C"       # 梅花

    @property
    def precedence(self) -> int:
        """花色优先级，数值越大花色越大."""
        return _SUIT_PRECEDENCE[self]

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Suit):
            return NotImplemented
        return self.precedence < other.precedence


_SUIT_PRECEDENCE: Dict[Suit, int] = {
    Suit.CLUBS: 1,
    Suit.DIAMONDS: 2,
    Suit.HEARTS: 3,
    Suit.SPADES: 4,
}


class Rank(IntEnum):
    """
    扑克牌点数枚举.

    定义13种扑克牌点数，数值越大表示点数越大.
    A在比较中始终最大(14)，只有在A-2-3-4-5顺子中作为1使用.
    """

    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13
    ACE = 14

    @property
    def symbol(self) -> str:
        """点数的短符号，如"A"、"10"."""
        return _RANK_SYMBOLS.get(self, str(self.value))


_RANK_SYMBOLS: Dict[Rank, str] = {
    Rank.JACK: "J",
    Rank.QUEEN: "Q",
    Rank.KING: "K",
    Rank.ACE: "A",
}


def get_all_suits() -> List[Suit]:
    """
    获取所有花色.

    Returns:
        List[Suit]: 按声明顺序（黑桃、红桃、方块、梅花）排列的花色列表
    """
    return list(Suit)


def get_all_ranks() -> List[Rank]:
    """
    获取所有点数.

    Returns:
        List[Rank]: 从2到A升序排列的点数列表
    """
    return list(Rank)
