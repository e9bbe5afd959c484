"""
牌型评估相关类型定义.

定义牌型等级枚举，它是所有手牌比较的基础.
"""

from enum import IntEnum


class HandType(IntEnum):
    """
    扑克牌型枚举.

    数值越大表示牌型越强，顺序即标准扑克牌型排名，必须严格保持.
    """

    HIGH_CARD = 1          # 高牌
    PAIR = 2               # 一对
    TWO_PAIR = 3           # 两对
    THREE_OF_A_KIND = 4    # 三条
    STRAIGHT = 5           # 顺子
    FLUSH = 6              # 同花
    FULL_HOUSE = 7         # 葫芦
    FOUR_OF_A_KIND = 8     # 四条
    STRAIGHT_FLUSH = 9     # 同花顺
    ROYAL_FLUSH = 10       # 皇家同花顺

    @property
    def display_name(self) -> str:
        """
        返回牌型的中文名称.

        Returns:
            str: 如"皇家同花顺"
        """
        return _DISPLAY_NAMES[self]

    def __str__(self) -> str:
        return self.display_name


_DISPLAY_NAMES = {
    HandType.HIGH_CARD: "高牌",
    HandType.PAIR: "一对",
    HandType.TWO_PAIR: "两对",
    HandType.THREE_OF_A_KIND: "三条",
    HandType.STRAIGHT: "顺子",
    HandType.FLUSH: "同花",
    HandType.FULL_HOUSE: "葫芦",
    HandType.FOUR_OF_A_KIND: "四条",
    HandType.STRAIGHT_FLUSH: "同花顺",
    HandType.ROYAL_FLUSH: "皇家同花顺",
}
