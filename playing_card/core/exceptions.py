"""
扑克牌库业务异常定义.

核心评估逻辑是全函数，不抛异常；这里的异常只用于牌的解析、发牌和手牌操作等协作组件.
每个子类同时继承对应的内置异常，方便调用方按内置类型捕获.
"""


class PlayingCardError(Exception):
    """扑克牌库基础异常类"""
    pass


class CardParseError(PlayingCardError, ValueError):
    """卡牌字符串解析失败异常"""
    pass


class DeckExhaustedError(PlayingCardError, IndexError):
    """牌组中的牌不足异常"""
    pass


class HandOperationError(PlayingCardError, ValueError):
    """无效的手牌操作异常"""
    pass


class ConfigError(PlayingCardError, ValueError):
    """配置错误异常"""
    pass
