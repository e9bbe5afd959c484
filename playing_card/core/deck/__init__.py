"""
扑克牌与牌组模块.

提供Card、Suit、Rank和Deck，实现扑克牌的基本数据模型和发牌功能.
"""

from .types import Rank, Suit
from .card import Card
from .deck import Deck

__all__ = ['Card', 'Deck', 'Rank', 'Suit']
