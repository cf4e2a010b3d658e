"""
Truco bot package.
Location: truco_bot/__init__.py
"""

from .card import Card, Rank, Suit, full_deck
from .game_state import GameSnapshot, RaiseResponse, StakeLevel, TrickOutcome
from .hand_analysis import HandAnalyzer, HandStrength
from .player import BotInterface
from .rules import DEFAULT_THRESHOLDS, Thresholds

__all__ = [
    'BotInterface',
    'Card',
    'DEFAULT_THRESHOLDS',
    'GameSnapshot',
    'HandAnalyzer',
    'HandStrength',
    'RaiseResponse',
    'Rank',
    'StakeLevel',
    'Suit',
    'Thresholds',
    'TrickOutcome',
    'full_deck',
]
