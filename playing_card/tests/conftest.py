"""
Test Configuration - pytest配置文件

该文件提供测试的基础设施，包括：
- 通用的测试fixture
- 测试标记定义

所有测试都会自动加载这些配置。
"""

import random
from typing import List

import pytest

from playing_card.core.deck import Card, Deck
from playing_card.core.eval import HandEvaluator
from playing_card.tests.anti_cheat.core_usage_checker import CoreUsageChecker


def make_cards(text: str) -> List[Card]:
    """从空格分隔的字符串创建牌列表，如 "AS KH 10D"."""
    return [Card.from_str(s) for s in text.split()]


@pytest.fixture
def cards():
    """牌列表构造函数fixture"""
    return make_cards


@pytest.fixture
def evaluator():
    """真实的评估器fixture"""
    evaluator = HandEvaluator()
    CoreUsageChecker.verify_real_objects(evaluator, "HandEvaluator")
    return evaluator


@pytest.fixture
def seeded_deck():
    """使用固定种子的牌组fixture"""
    return Deck(random.Random(42))


@pytest.fixture
def core_usage_checker():
    """核心使用检查器fixture"""
    return CoreUsageChecker()


# 测试标记定义
def pytest_configure(config):
    """pytest配置"""
    config.addinivalue_line(
        "markers", "anti_cheat: 标记需要反作弊检查的测试"
    )
    config.addinivalue_line(
        "markers", "property_test: 标记基于属性的测试"
    )
    config.addinivalue_line(
        "markers", "integration: 标记集成测试"
    )
    config.addinivalue_line(
        "markers", "performance: 标记性能测试"
    )
    config.addinivalue_line(
        "markers", "slow: 标记耗时较长的穷举测试"
    )
