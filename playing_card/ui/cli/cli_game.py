"""扑克牌型评估CLI.

这个模块提供命令行入口，所有业务逻辑都委托给core和application层：
- evaluate: 评估一组牌的最佳牌型
- compare: 比较两手牌
- video-poker: 玩若干手视频扑克
- report: 输出手牌比较和概率报告
"""

from typing import Iterable, List, Optional

import click

from playing_card.application.config import (
    LoggingConfig,
    VideoPokerConfig,
    configure_logging,
)
from playing_card.application.video_poker import (
    VideoPokerGame,
    demonstrate_hand_comparison,
    demonstrate_probabilities,
    render_multiple_hands,
)
from playing_card.core.deck.card import Card
from playing_card.core.eval.evaluator import HandEvaluator
from playing_card.core.exceptions import CardParseError

_LOG_LEVELS = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']


def parse_cards(tokens: Iterable[str], param_hint: Optional[str] = None) -> List[Card]:
    """把命令行参数解析为牌列表.

    每个参数可以包含多张用空格分隔的牌，如 "AS KS" 或 AS KS. 同一张牌不能出现两次.

    Args:
        tokens: 命令行参数
        param_hint: 出错时提示的参数名

    Returns:
        解析出的牌列表

    Raises:
        click.BadParameter: 存在无法解析的牌或重复的牌时
    """
    cards = []
    for token in tokens:
        for text in token.split():
            try:
                card = Card.from_str(text)
            except CardParseError as e:
                raise click.BadParameter(str(e), param_hint=param_hint) from e
            if card in cards:
                raise click.BadParameter(f"重复的牌: {card}", param_hint=param_hint)
            cards.append(card)
    return cards


@click.group()
@click.option('--log-level', type=click.Choice(_LOG_LEVELS, case_sensitive=False),
              default='WARNING', show_default=True, help='日志级别')
@click.pass_context
def main(ctx: click.Context, log_level: str) -> None:
    """扑克牌型评估工具."""
    configure_logging(LoggingConfig(log_level=log_level))
    ctx.obj = HandEvaluator()


@main.command()
@click.argument('cards', nargs=-1, required=True)
@click.pass_obj
def evaluate(evaluator: HandEvaluator, cards: tuple) -> None:
    """评估CARDS中最好的5张牌牌型，如: evaluate AS KS QS JS 10S."""
    parsed = parse_cards(cards, param_hint='CARDS')
    hand_type, best_five = evaluator.best_hand(parsed)
    click.echo(f"牌型: {hand_type} ({hand_type.name})")
    if len(parsed) >= 5:
        click.echo(f"最佳组合: {' '.join(str(card) for card in best_five)}")


@main.command()
@click.option('--first', 'first', required=True, help='第一手牌，如 "AS AH 3D 5C 7S"')
@click.option('--second', 'second', required=True, help='第二手牌')
@click.pass_obj
def compare(evaluator: HandEvaluator, first: str, second: str) -> None:
    """比较两手牌的强弱."""
    first_cards = parse_cards([first], param_hint='--first')
    second_cards = parse_cards([second], param_hint='--second')
    shared = [card for card in second_cards if card in first_cards]
    if shared:
        raise click.BadParameter(
            f"两手牌中有相同的牌: {' '.join(str(card) for card in shared)}",
            param_hint='--second')

    click.echo(f"第一手: {evaluator.evaluate(first_cards)}")
    click.echo(f"第二手: {evaluator.evaluate(second_cards)}")

    result = evaluator.compare(first_cards, second_cards)
    if result > 0:
        click.echo("结果: 第一手牌获胜")
    elif result < 0:
        click.echo("结果: 第二手牌获胜")
    else:
        click.echo("结果: 平局")


@main.command('video-poker')
@click.option('--hands', type=click.IntRange(min=1), default=1, show_default=True,
              help='要玩的手数')
@click.option('--seed', type=int, default=None, help='随机种子，用于可重现的牌局')
def video_poker(hands: int, seed: Optional[int]) -> None:
    """玩若干手五张抽牌视频扑克."""
    game = VideoPokerGame(VideoPokerConfig(random_seed=seed))
    rounds = game.run_multiple_hands(hands)
    click.echo(render_multiple_hands(rounds))
    total = sum(poker_round.payout for poker_round in rounds)
    click.echo(f"总赔率: {total}x / {hands} 手")


@main.command()
def report() -> None:
    """输出手牌比较和概率报告."""
    click.echo(demonstrate_hand_comparison())
    click.echo("")
    click.echo(demonstrate_probabilities())


if __name__ == '__main__':
    main()
