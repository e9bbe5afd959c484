"""
playing-card - 扑克牌型评估库

给定5张或更多扑克牌，找出其中最好的5张牌牌型，并为手牌提供全序比较.

Packages:
    core: 纯领域逻辑（扑克牌、牌组、牌型评估、手牌）
    application: 视频扑克示例和配置
    ui: 命令行界面
"""

__version__ = "1.0.0"

from .core import (
    Card,
    Deck,
    Hand,
    HandEvaluator,
    HandType,
    Rank,
    Suit,
    compare,
    evaluate,
)

__all__ = [
    'Card', 'Deck', 'Hand', 'HandEvaluator', 'HandType',
    'Rank', 'Suit', 'compare', 'evaluate',
]
