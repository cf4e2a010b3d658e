"""
Exceptions raised by the Truco decision policies.
All of them signal a caller/engine bug, never a recoverable game situation.
"""


class TrucoBotError(ValueError):
    """Base class for contract violations between the engine and a bot."""


class EmptyHandError(TrucoBotError):
    """A decision that needs a card was asked with no cards in hand."""


class InvalidRoundStateError(TrucoBotError):
    """The snapshot describes a trick/hand state the policy cannot be in."""


class UnknownStakeLevelError(TrucoBotError):
    """The stake value is not one of the recognised levels."""
