"""
Core Module - 纯领域逻辑层

该模块包含扑克牌和牌型评估的核心逻辑.
核心模块只能依赖其他核心模块，不能依赖应用层或UI层.

Modules:
    deck: 扑克牌、花色、点数和牌组
    eval: 牌型评估和手牌比较
    hand: 可修改的手牌容器
    exceptions: 协作组件的异常定义
"""

from .deck import Card, Deck, Rank, Suit
from .eval import HandEvaluator, HandType, compare, evaluate
from .hand import Hand

__all__ = [
    'Card', 'Deck', 'Rank', 'Suit',
    'HandEvaluator', 'HandType', 'compare', 'evaluate',
    'Hand',
]
