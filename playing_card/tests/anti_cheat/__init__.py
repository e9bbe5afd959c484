"""
Anti-Cheat - 反作弊检查

确保测试使用真实的核心对象，并且核心层保持独立.
"""

from .core_usage_checker import CoreUsageChecker

__all__ = ['CoreUsageChecker']
