"""
扑克牌型评估模块.

提供HandEvaluator类和HandType枚举，实现牌型识别和手牌比较功能.
"""

from .types import HandType
from .evaluator import HandEvaluator, compare, evaluate

__all__ = ['HandType', 'HandEvaluator', 'compare', 'evaluate']
