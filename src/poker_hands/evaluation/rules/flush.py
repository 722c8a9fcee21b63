"""Flush detection."""
from typing import Optional

from poker_hands.core.hand import Hand
from poker_hands.evaluation.rules.base import BaseRule
from poker_hands.evaluation.types import Combination, CombinationName


class FlushRule(BaseRule):
    """All five cards share one suit."""

    name = 'Flush'

    def evaluate(self, hand: Hand) -> Optional[Combination]:
        suit = hand[0].suit
        if any(card.suit != suit for card in hand):
            return None
        return Combination(CombinationName.FLUSH, hand.get_cards())
