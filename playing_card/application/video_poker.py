"""
视频扑克示例.

演示评估器在五张抽牌（Jacks or Better）玩法中的用法：
发5张牌 -> 按策略决定保留哪些牌 -> 换牌 -> 评估最终牌型并按赔率表结算.
还提供手牌强弱排名和发牌概率两个报告.
"""

import logging
import random
from collections import Counter
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from ..core.deck.card import Card
from ..core.deck.deck import Deck
from ..core.deck.types import Rank, Suit
from ..core.eval.evaluator import HandEvaluator
from ..core.eval.types import HandType
from ..core.hand.hand import Hand
from .config import PayoutTable, VideoPokerConfig

logger = logging.getLogger(__name__)

_EVALUATOR = HandEvaluator()

# 直接发到各牌型的概率
DEALT_HAND_ODDS: Tuple[Tuple[str, str], ...] = (
    ("皇家同花顺", "1 / 649,740"),
    ("同花顺", "1 / 72,193"),
    ("四条", "1 / 4,165"),
    ("葫芦", "1 / 694"),
    ("同花", "1 / 509"),
    ("顺子", "1 / 255"),
    ("三条", "1 / 47"),
    ("两对", "1 / 21"),
    ("J或更大的一对", "1 / 6"),
)


@dataclass(frozen=True)
class VideoPokerRound:
    """
    一手视频扑克的完整记录.

    Attributes:
        initial_cards: 初始发到的5张牌
        initial_type: 初始牌型
        discarded: 被更换的位置（从0开始）
        final_cards: 换牌后的5张牌
        final_type: 最终牌型
        payout: 赔率倍数
    """
    initial_cards: Tuple[Card, ...]
    initial_type: HandType
    discarded: Tuple[int, ...]
    final_cards: Tuple[Card, ...]
    final_type: HandType
    payout: int

    @property
    def is_winner(self) -> bool:
        return self.payout > 0


def choose_discards(cards: Sequence[Card]) -> List[int]:
    """
    决定要更换的牌的位置.

    - 顺子及以上：全部保留
    - 三条、两对、一对：保留成组的牌，其余更换
    - 高牌：见 _high_card_discards

    Args:
        cards: 当前的5张牌

    Returns:
        List[int]: 要更换的位置，升序
    """
    hand_type = _EVALUATOR.evaluate(cards)
    if hand_type >= HandType.STRAIGHT:
        return []

    if hand_type in (HandType.THREE_OF_A_KIND, HandType.TWO_PAIR, HandType.PAIR):
        rank_counts = Counter(card.rank for card in cards)
        held_ranks = {rank for rank, count in rank_counts.items() if count >= 2}
        return [i for i, card in enumerate(cards) if card.rank not in held_ranks]

    return _high_card_discards(cards)


def _high_card_discards(cards: Sequence[Card]) -> List[int]:
    """
    高牌时的换牌策略.

    依次尝试：保留4张同花听牌；两头顺听牌时全部保留；保留J及以上的大牌；
    都没有时更换最小的3张.
    """
    suit_counts = Counter(card.suit for card in cards)
    flush_suit: Optional[Suit] = next(
        (suit for suit, count in suit_counts.items() if count == 4), None
    )
    if flush_suit is not None:
        return [i for i, card in enumerate(cards) if card.suit != flush_suit]

    if _is_open_ended_straight_draw([card.rank for card in cards]):
        return []

    high_cards = [i for i, card in enumerate(cards) if card.rank >= Rank.JACK]
    if high_cards:
        return [i for i in range(len(cards)) if i not in high_cards]

    lowest = sorted(range(len(cards)), key=lambda i: cards[i])[:3]
    return sorted(lowest)


def _is_open_ended_straight_draw(ranks: Sequence[Rank]) -> bool:
    unique_ranks = sorted(set(ranks))
    if len(unique_ranks) < 4:
        return False

    for start in range(len(unique_ranks) - 3):
        window = unique_ranks[start:start + 4]
        if window[-1] - window[0] == 3:
            return True

    # A-2-3-4 听A作为1的顺子
    return {Rank.ACE, Rank.TWO, Rank.THREE, Rank.FOUR} <= set(unique_ranks)


class VideoPokerGame:
    """
    五张抽牌视频扑克.

    每手使用一副新洗的牌. 传入带种子的随机数生成器可以得到可重现的牌局.

    Examples:
        >>> game = VideoPokerGame(rng=random.Random(7))
        >>> result = game.play_hand()
        >>> len(result.final_cards)
        5
    """

    def __init__(self, config: Optional[VideoPokerConfig] = None,
                 rng: Optional[random.Random] = None) -> None:
        self.config = config or VideoPokerConfig()
        self._rng = rng or random.Random(self.config.random_seed)

    @property
    def payout_table(self) -> PayoutTable:
        return self.config.payout_table

    def play_hand(self) -> VideoPokerRound:
        """
        完整地玩一手牌.

        Returns:
            VideoPokerRound: 这一手的记录
        """
        deck = Deck(self._rng)
        deck.shuffle()

        hand = Hand(deck.deal_cards(self.config.hand_size))
        initial_cards = hand.cards
        initial_type = hand.evaluate()

        discarded = choose_discards(initial_cards)
        if discarded:
            hand.replace_cards(discarded, deck.deal_cards(len(discarded)))

        final_type = hand.evaluate()
        payout = self.payout_table.payout(final_type)
        logger.info(
            "视频扑克: %s (%s) -> 更换 %s -> %s (%s)，赔率 %dx",
            " ".join(str(c) for c in initial_cards), initial_type.name,
            discarded, hand, final_type.name, payout,
        )
        return VideoPokerRound(
            initial_cards=initial_cards,
            initial_type=initial_type,
            discarded=tuple(discarded),
            final_cards=hand.cards,
            final_type=final_type,
            payout=payout,
        )

    def run_multiple_hands(self, count: int = 3) -> List[VideoPokerRound]:
        """
        连续玩多手牌.

        Raises:
            ValueError: 当count小于1时
        """
        if count < 1:
            raise ValueError(f"手数必须至少为1: {count}")
        return [self.play_hand() for _ in range(count)]


def render_round(poker_round: VideoPokerRound) -> str:
    """
    把一手视频扑克渲染为文本.

    Args:
        poker_round: 一手牌的记录

    Returns:
        str: 多行文本
    """
    lines = ["=== 视频扑克 ===", "初始手牌:"]
    for index, card in enumerate(poker_round.initial_cards):
        lines.append(f"  {index + 1}: {card}")
    lines.append(f"初始牌型: {poker_round.initial_type}")

    if not poker_round.discarded:
        lines.append("策略: 保留全部")
    else:
        positions = [index + 1 for index in poker_round.discarded]
        lines.append(f"策略: 更换第 {positions} 张")
        lines.append("换牌后:")
        for index, card in enumerate(poker_round.final_cards):
            marker = "(新)" if index in poker_round.discarded else "(保留)"
            lines.append(f"  {index + 1}: {card} {marker}")

    lines.append(f"最终牌型: {poker_round.final_type}")
    lines.append(f"赔率: {poker_round.payout}x")
    lines.append("赢了!" if poker_round.is_winner else "下次好运!")
    return "\n".join(lines)


def render_multiple_hands(rounds: Sequence[VideoPokerRound]) -> str:
    lines = []
    for number, poker_round in enumerate(rounds, start=1):
        lines.append(f"第 {number} 手")
        lines.append("=" * 50)
        lines.append(render_round(poker_round))
        lines.append("")
    return "\n".join(lines)


def _sample_hands() -> List[Tuple[str, Hand]]:
    def parse(text: str) -> Hand:
        return Hand(Card.from_str(s) for s in text.split())

    return [
        ("皇家同花顺", parse("AS KS QS JS 10S")),
        ("一对A", parse("AS AH KD QC JS")),
        ("三条K", parse("KS KH KD QC JS")),
        ("高牌", parse("KS QH JD 9C 7S")),
    ]


def demonstrate_hand_comparison(payout_table: Optional[PayoutTable] = None) -> str:
    """
    演示手牌比较：列出几手示例牌的牌型和赔率，再按强弱排名.

    Returns:
        str: 多行报告文本
    """
    payout_table = payout_table or PayoutTable()
    hands = _sample_hands()

    lines = ["=== 手牌比较 ===", ""]
    for name, hand in hands:
        hand_type = hand.evaluate()
        lines.append(f"{name}: {hand}")
        lines.append(f"  牌型: {hand_type}")
        lines.append(f"  赔率: {payout_table.payout(hand_type)}x")
        lines.append("")

    ranked = sorted(hands, key=lambda item: item[1], reverse=True)
    lines.append("从强到弱排名:")
    for position, (name, _) in enumerate(ranked, start=1):
        lines.append(f"  {position}. {name}")
    return "\n".join(lines)


def demonstrate_probabilities() -> str:
    """返回直接发到各牌型概率的报告文本."""
    lines = ["=== 概率分析 ===", "", "直接发到各牌型的概率:"]
    for hand_name, odds in DEALT_HAND_ODDS:
        lines.append(f"  {hand_name}: {odds}")
    lines.append("")
    lines.append("注意: 以上是理论概率，实际结果还取决于换牌决策.")
    return "\n".join(lines)
