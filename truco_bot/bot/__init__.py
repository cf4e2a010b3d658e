"""
Truco bot strategies.
Location: truco_bot/bot/__init__.py
"""

from typing import Optional

from ..player import BotInterface
from ..rules import DEFAULT_THRESHOLDS, Thresholds
from .heuristic_bot import HeuristicBot
from .passive_bot import PassiveBot

BOT_TYPES = {
    'heuristic': HeuristicBot,
    'passive': PassiveBot,
}


def create_bot(bot_type: str, thresholds: Optional[Thresholds] = None) -> BotInterface:
    """Create a bot of the given type."""
    if bot_type not in BOT_TYPES:
        raise ValueError(f"Unknown bot type: {bot_type}. Available: {list(BOT_TYPES.keys())}")
    return BOT_TYPES[bot_type](thresholds=thresholds or DEFAULT_THRESHOLDS)


__all__ = [
    'BOT_TYPES',
    'HeuristicBot',
    'PassiveBot',
    'create_bot',
]
