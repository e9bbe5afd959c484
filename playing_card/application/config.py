"""
配置管理.

包含视频扑克的赔率表、游戏设置以及日志配置. 所有配置都是dataclass，
在__post_init__中校验，无效配置抛出ConfigError.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, Optional

from ..core.eval.types import HandType
from ..core.exceptions import ConfigError


def _jacks_or_better() -> Dict[HandType, int]:
    return {
        HandType.ROYAL_FLUSH: 250,
        HandType.STRAIGHT_FLUSH: 50,
        HandType.FOUR_OF_A_KIND: 25,
        HandType.FULL_HOUSE: 9,
        HandType.FLUSH: 6,
        HandType.STRAIGHT: 4,
        HandType.THREE_OF_A_KIND: 3,
        HandType.TWO_PAIR: 2,
        HandType.PAIR: 1,
        HandType.HIGH_CARD: 0,
    }


@dataclass
class PayoutTable:
    """
    视频扑克赔率表.

    Attributes:
        multipliers: 每种牌型的赔率倍数，缺省为Jacks or Better标准赔率
    """
    multipliers: Dict[HandType, int] = field(default_factory=_jacks_or_better)

    def __post_init__(self):
        """验证赔率表覆盖所有牌型且倍数非负"""
        self.multipliers = dict(self.multipliers)
        missing = [hand_type.name for hand_type in HandType if hand_type not in self.multipliers]
        if missing:
            raise ConfigError(f"赔率表缺少牌型: {missing}")
        for hand_type, multiplier in self.multipliers.items():
            if multiplier < 0:
                raise ConfigError(f"赔率不能为负数: {hand_type.name}={multiplier}")

    def payout(self, hand_type: HandType) -> int:
        """返回指定牌型的赔率倍数"""
        return self.multipliers[hand_type]


@dataclass
class VideoPokerConfig:
    """视频扑克游戏配置"""
    payout_table: PayoutTable = field(default_factory=PayoutTable)
    hand_size: int = 5                    # 发牌张数
    random_seed: Optional[int] = None     # 随机种子，用于可重现的游戏

    def __post_init__(self):
        if self.hand_size != 5:
            raise ConfigError(f"视频扑克每手必须是5张牌: {self.hand_size}")


@dataclass
class LoggingConfig:
    """日志配置"""
    log_level: str = 'WARNING'
    log_format: str = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

    def __post_init__(self):
        self.log_level = self.log_level.upper()
        if self.log_level not in ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'):
            raise ConfigError(f"无效的日志级别: {self.log_level}")


def configure_logging(config: Optional[LoggingConfig] = None) -> None:
    """
    按配置初始化根日志记录器.

    Args:
        config: 日志配置，为None时使用默认配置
    """
    config = config or LoggingConfig()
    logging.basicConfig(
        level=getattr(logging, config.log_level),
        format=config.log_format,
        force=True,
    )
    logging.getLogger(__name__).debug("日志级别设置为 %s", config.log_level)
