"""扑克牌型评估CLI模块.

提供基于click的命令行入口.
"""

from .cli_game import main, parse_cards

__all__ = ['main', 'parse_cards']
