"""
Utility module for Truco bots.
Contains logging setup and console formatting helpers.
"""

import logging
from typing import Optional, Sequence

from .card import Card
from .game_state import GameSnapshot
from .ranking import is_trump, relative_value, trump_rank


def setup_logging(level: int = logging.INFO, log_file: Optional[str] = None):
    """Set up logging configuration for the bots."""
    handlers = [logging.StreamHandler()]
    if log_file:
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(levelname)s - %(message)s',
        handlers=handlers,
        force=True,
    )


def format_hand(hand: Sequence[Card], indicator: Optional[Card] = None) -> str:
    """
    Format a hand of cards for display.

    Args:
        hand: Cards in stored order
        indicator: When given, each card is annotated with its relative value
            and manilhas are marked with '*'

    Returns:
        Formatted string with 1-based positions
    """
    if not hand:
        return "Empty hand"

    parts = []
    for position, card in enumerate(hand, start=1):
        text = f"{position}) {card}"
        if indicator is not None:
            marker = '*' if is_trump(card, indicator) else ''
            text += f" [{relative_value(card, indicator)}{marker}]"
        parts.append(text)
    return '  '.join(parts)


def format_snapshot(snapshot: GameSnapshot) -> str:
    """Format the observable game state as a console block."""
    border = "+" + "=" * 39 + "+"
    lines = [
        border,
        f" Stake: {int(snapshot.stake)}",
        f" Score: {snapshot.own_score} x {snapshot.opponent_score}",
    ]

    if snapshot.trick_outcomes:
        outcomes = ' | '.join(outcome.name for outcome in snapshot.trick_outcomes)
        lines.append(f" Tricks: [ {outcomes} ]")

    lines.append(f" Vira: {snapshot.indicator} (manilha: {trump_rank(snapshot.indicator)})")

    if snapshot.opponent_card is not None:
        lines.append(f" Opponent card: {snapshot.opponent_card}")

    lines.append(f" Hand: {format_hand(snapshot.hand, snapshot.indicator)}")
    lines.append(border)
    return '\n'.join(lines)
