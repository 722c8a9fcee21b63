# src/poker_hands/evaluation/types.py
"""Common types for hand evaluation."""
from dataclasses import dataclass
from enum import Enum
from typing import Tuple

from poker_hands.core.card import Card


class CombinationName(str, Enum):
    """Names of the combinations a hand can be classified as, weakest first."""
    HIGH_CARD = 'High card'
    PAIR = 'Pair'
    TWO_PAIRS = 'Two pairs'
    THREE_OF_A_KIND = 'Three of a kind'
    STRAIGHT = 'Straight'
    FLUSH = 'Flush'
    FOUR_OF_A_KIND = 'Four of a kind'
    STRAIGHT_FLUSH = 'Straight Flush'
    FLUSH_ROYAL = 'Flush Royal'

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Combination:
    """
    A classified hand.

    Attributes:
        name: Which combination was recognised
        cards: The cards that make up the combination. For pairs, trips and
            quads only the matching cards; otherwise cards in hand order.
    """
    name: CombinationName
    cards: Tuple[Card, ...]

    def __post_init__(self):
        object.__setattr__(self, 'cards', tuple(self.cards))

    def __str__(self) -> str:
        """Render as 'Pair: A♦ A♠'."""
        return f"{self.name}: {' '.join(str(card) for card in self.cards)}"

    def to_json(self) -> dict:
        """Convert to JSON-compatible dictionary."""
        return {
            "name": self.name.value,
            "cards": [str(card) for card in self.cards],
        }
