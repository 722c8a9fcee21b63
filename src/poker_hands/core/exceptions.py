"""Errors raised by the poker hands engine."""


class PokerHandsError(Exception):
    """Base class for poker hands errors."""
    pass


class InvalidHandError(PokerHandsError, ValueError):
    """A hand was built from the wrong number of cards."""
    pass


class DeckExhaustedError(PokerHandsError):
    """The card source ran out before a full hand could be dealt."""
    pass


class EvaluationError(PokerHandsError):
    """No rule in the pipeline produced a combination."""
    pass
