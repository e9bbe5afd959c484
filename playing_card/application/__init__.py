"""
Application Module - 应用层

基于核心评估器构建的玩法示例和配置管理.
"""

from .config import (
    LoggingConfig,
    PayoutTable,
    VideoPokerConfig,
    configure_logging,
)
from .video_poker import (
    VideoPokerGame,
    VideoPokerRound,
    choose_discards,
    demonstrate_hand_comparison,
    demonstrate_probabilities,
    render_multiple_hands,
    render_round,
)

__all__ = [
    'LoggingConfig', 'PayoutTable', 'VideoPokerConfig', 'configure_logging',
    'VideoPokerGame', 'VideoPokerRound', 'choose_discards',
    'demonstrate_hand_comparison', 'demonstrate_probabilities',
    'render_multiple_hands', 'render_round',
]
