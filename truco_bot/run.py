#!/usr/bin/env python3
"""
Command-line advisor for Truco.
Builds a snapshot from the arguments and prints what a bot would do.
"""

import argparse
import logging
import sys
from typing import List, Optional

from .bot import BOT_TYPES, create_bot
from .card import Card
from .game_state import GameSnapshot, StakeLevel, TrickOutcome
from .player import BotInterface
from .rules import FORCED_HAND_SCORE
from .utils import format_snapshot, setup_logging

logger = logging.getLogger(__name__)


def build_snapshot(args: argparse.Namespace) -> GameSnapshot:
    """Create the snapshot described by parsed command-line arguments."""
    return GameSnapshot(
        hand=[Card.from_string(text) for text in args.hand],
        indicator=Card.from_string(args.vira),
        opponent_card=Card.from_string(args.opponent_card) if args.opponent_card else None,
        trick_outcomes=[TrickOutcome(text.lower()) for text in args.outcomes],
        own_score=args.score,
        opponent_score=args.opponent_score,
        stake=args.stake,
    )


def advise(bot: BotInterface, snapshot: GameSnapshot) -> List[str]:
    """Ask the bot every decision that applies to the snapshot."""
    lines = []
    if snapshot.own_score == FORCED_HAND_SCORE and not snapshot.trick_outcomes:
        accept = bot.should_accept_forced_hand(snapshot)
        lines.append(f"Forced hand: {'play' if accept else 'decline'}")

    lines.append(f"Raise: {'yes' if bot.should_raise(snapshot) else 'no'}")
    lines.append(f"Card: {bot.choose_card(snapshot)}")

    if snapshot.stake.next_level() is not None:
        lines.append(f"Raise response: {bot.respond_to_raise(snapshot).name}")
    return lines


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Show the decisions of a Truco bot for a game state")
    parser.add_argument('--hand', nargs='+', required=True,
                        help='Cards in hand, e.g. 3C 4H 5S (ranks 4567QJKA23, suits DSHC)')
    parser.add_argument('--vira', required=True, help='Turned-up indicator card')
    parser.add_argument('--opponent-card', help='Card the opponent already played this trick')
    parser.add_argument('--outcomes', nargs='*', default=[],
                        choices=[outcome.value for outcome in TrickOutcome],
                        help='Results of the tricks already played this hand')
    parser.add_argument('--score', type=int, default=0, help='Own score')
    parser.add_argument('--opponent-score', type=int, default=0, help='Opponent score')
    parser.add_argument('--stake', type=int, default=int(StakeLevel.ONE),
                        help='Current stake of the hand (1, 3, 6, 9 or 12)')
    parser.add_argument('--bot', choices=list(BOT_TYPES), default='heuristic',
                        help='Strategy to consult')
    parser.add_argument('--verbose', action='store_true',
                        help='Enable verbose logging')
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = create_parser()
    args = parser.parse_args(argv)

    setup_logging(level=logging.DEBUG if args.verbose else logging.WARNING)

    bot = create_bot(args.bot)
    try:
        snapshot = build_snapshot(args)
        decisions = advise(bot, snapshot)
    except ValueError as e:
        parser.error(str(e))

    logger.info(f"Consulted {bot} for {snapshot.describe()}")

    print(format_snapshot(snapshot))
    for line in decisions:
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())
