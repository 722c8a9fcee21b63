"""High card fallback."""
from typing import Optional

from poker_hands.core.hand import Hand
from poker_hands.evaluation.rules.base import BaseRule
from poker_hands.evaluation.types import Combination, CombinationName


class HighCardRule(BaseRule):
    """The single highest-ranked card. Always matches."""

    name = 'High card'

    def evaluate(self, hand: Hand) -> Optional[Combination]:
        high = hand[0]
        for card in hand[1:]:
            # strictly greater, so the first of equal ranks is kept
            if card.rank > high.rank:
                high = card
        return Combination(CombinationName.HIGH_CARD, [high])
