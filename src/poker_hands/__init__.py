"""Five-card poker hand classification package."""

from poker_hands.core.card import Card, Rank, Suit
from poker_hands.core.containers import CardSource
from poker_hands.core.deck import Deck
from poker_hands.core.exceptions import (
    DeckExhaustedError,
    EvaluationError,
    InvalidHandError,
    PokerHandsError,
)
from poker_hands.core.hand import Hand
from poker_hands.evaluation.evaluator import RulePipeline, classify, get_rules
from poker_hands.evaluation.types import Combination, CombinationName

__version__ = "0.1.0"
__all__ = [
    "Card",
    "Rank",
    "Suit",
    "CardSource",
    "Deck",
    "Hand",
    "Combination",
    "CombinationName",
    "RulePipeline",
    "classify",
    "get_rules",
    "PokerHandsError",
    "InvalidHandError",
    "DeckExhaustedError",
    "EvaluationError",
]
