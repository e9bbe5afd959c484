"""
手牌模块.

提供可修改的Hand容器，通过牌型评估器评估和比较自身.
"""

from .hand import Hand

__all__ = ['Hand']
