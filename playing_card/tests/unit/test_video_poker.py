"""
视频扑克示例的单元测试.

测试换牌策略、整手牌流程、赔率结算和报告文本.
"""

import random

import pytest

from playing_card.application.config import PayoutTable, VideoPokerConfig
from playing_card.application.video_poker import (
    VideoPokerGame,
    VideoPokerRound,
    choose_discards,
    demonstrate_hand_comparison,
    demonstrate_probabilities,
    render_multiple_hands,
    render_round,
)
from playing_card.core.eval import HandType, evaluate
from playing_card.tests.anti_cheat.core_usage_checker import CoreUsageChecker
from playing_card.tests.conftest import make_cards


class TestChooseDiscards:
    """换牌策略测试."""

    @pytest.mark.parametrize("hand", [
        "AS KS QS JS 10S",     # 皇家同花顺
        "2S 3H 4D 5C 6S",      # 顺子
        "2H 5H 9H KH 3H",      # 同花
        "AS AH AD KC KS",      # 葫芦
    ])
    def test_made_hands_hold_everything(self, hand):
        assert choose_discards(make_cards(hand)) == []

    def test_three_of_a_kind_keeps_trips(self):
        assert choose_discards(make_cards("KS KH KD 2C 7S")) == [3, 4]

    def test_two_pair_replaces_kicker(self):
        assert choose_discards(make_cards("KS KH 2D 2C 7S")) == [4]

    def test_pair_keeps_pair(self):
        assert choose_discards(make_cards("2S 9H 9D KC 4S")) == [0, 3, 4]

    def test_high_card_flush_draw(self):
        assert choose_discards(make_cards("2H 5H 9H KH 3C")) == [4]

    def test_high_card_open_ended_straight_draw(self):
        assert choose_discards(make_cards("5S 6H 7D 8C KS")) == []

    def test_high_card_wheel_draw(self):
        assert choose_discards(make_cards("AS 2H 3D 4C 9S")) == []

    def test_high_card_holds_jacks_or_better(self):
        assert choose_discards(make_cards("JS 2H 5D 8C QD")) == [1, 2, 3]

    def test_high_card_replaces_three_lowest(self):
        assert choose_discards(make_cards("2S 4H 6D 8C 10S")) == [0, 1, 2]
        assert choose_discards(make_cards("10S 8C 2S 6D 4H")) == [2, 3, 4]


class TestVideoPokerGame:
    """完整牌局测试."""

    def test_play_hand(self):
        game = VideoPokerGame(rng=random.Random(7))

        poker_round = game.play_hand()

        CoreUsageChecker.verify_real_objects(poker_round, "VideoPokerRound")
        assert len(poker_round.initial_cards) == 5
        assert len(poker_round.final_cards) == 5
        assert poker_round.initial_type == evaluate(poker_round.initial_cards)
        assert poker_round.final_type == evaluate(poker_round.final_cards)
        assert poker_round.discarded == tuple(choose_discards(poker_round.initial_cards))
        assert poker_round.payout == PayoutTable().payout(poker_round.final_type)

    def test_held_cards_keep_position(self):
        game = VideoPokerGame(rng=random.Random(11))
        for poker_round in game.run_multiple_hands(20):
            for index in range(5):
                if index not in poker_round.discarded:
                    assert poker_round.final_cards[index] == poker_round.initial_cards[index]
                else:
                    assert poker_round.final_cards[index] not in poker_round.initial_cards
            assert len(set(poker_round.final_cards)) == 5

    def test_seeded_games_are_reproducible(self):
        first = VideoPokerGame(VideoPokerConfig(random_seed=3)).run_multiple_hands(5)
        second = VideoPokerGame(VideoPokerConfig(random_seed=3)).run_multiple_hands(5)
        assert first == second

    def test_custom_payout_table(self):
        multipliers = {hand_type: 1 for hand_type in HandType}
        config = VideoPokerConfig(payout_table=PayoutTable(multipliers), random_seed=5)
        rounds = VideoPokerGame(config).run_multiple_hands(10)
        assert all(poker_round.payout == 1 for poker_round in rounds)
        assert all(poker_round.is_winner for poker_round in rounds)

    def test_run_multiple_hands_count(self):
        game = VideoPokerGame(rng=random.Random(1))
        assert len(game.run_multiple_hands(4)) == 4
        with pytest.raises(ValueError):
            game.run_multiple_hands(0)


class TestRendering:
    """报告文本测试."""

    def _round(self, discarded, payout=0):
        initial = tuple(make_cards("AS AH 3D 5C 7S"))
        final = tuple(make_cards("AS AH AD 5C KS")) if discarded else initial
        return VideoPokerRound(
            initial_cards=initial,
            initial_type=evaluate(initial),
            discarded=discarded,
            final_cards=final,
            final_type=evaluate(final),
            payout=payout,
        )

    def test_render_round_with_replacement(self):
        text = render_round(self._round((2, 4), payout=3))
        assert "初始手牌:" in text
        assert "  1: AS" in text
        assert "初始牌型: 一对" in text
        assert "策略: 更换第 [3, 5] 张" in text
        assert "  3: AD (新)" in text
        assert "  1: AS (保留)" in text
        assert "最终牌型: 三条" in text
        assert "赔率: 3x" in text
        assert "赢了!" in text

    def test_render_round_standing_pat(self):
        text = render_round(self._round(()))
        assert "策略: 保留全部" in text
        assert "换牌后:" not in text
        assert "下次好运!" in text

    def test_render_multiple_hands(self):
        text = render_multiple_hands([self._round(()), self._round(())])
        assert "第 1 手" in text
        assert "第 2 手" in text
        assert "第 3 手" not in text

    def test_hand_comparison_report(self):
        text = demonstrate_hand_comparison()
        assert "=== 手牌比较 ===" in text
        assert "从强到弱排名:" in text
        ranking = text.split("从强到弱排名:")[1]
        assert [line.strip() for line in ranking.strip().splitlines()] == [
            "1. 皇家同花顺", "2. 三条K", "3. 一对A", "4. 高牌",
        ]
        assert "赔率: 250x" in text

    def test_probability_report(self):
        text = demonstrate_probabilities()
        assert "=== 概率分析 ===" in text
        assert "皇家同花顺: 1 / 649,740" in text
