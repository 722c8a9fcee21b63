"""Straight detection."""
import logging
from typing import List, Optional

from poker_hands.core.card import Card, Rank
from poker_hands.core.hand import Hand
from poker_hands.evaluation.rules.base import BaseRule
from poker_hands.evaluation.types import Combination, CombinationName

logger = logging.getLogger(__name__)


class StraightRule(BaseRule):
    """Five cards of consecutive rank, any suits. Ace plays high or low."""

    name = 'Straight'

    def evaluate(self, hand: Hand) -> Optional[Combination]:
        return self.evaluate_sorted(hand, hand.sorted_by_rank())

    def evaluate_sorted(self, hand: Hand, sorted_cards: List[Card]) -> Optional[Combination]:
        """
        Check for a straight given the hand's cards already sorted by rank.

        Args:
            hand: The hand as dealt; the result lists cards in this order
            sorted_cards: The same cards in ascending rank order

        Returns:
            Straight combination, or None
        """
        # Ace always sorts last, so A-2-3-4-5 shows up as 2,3,4,5,A: only
        # the four low cards need to be consecutive.
        if sorted_cards[0].rank == Rank.TWO and sorted_cards[-1].rank == Rank.ACE:
            checked = sorted_cards[:4]
        else:
            checked = sorted_cards

        for lower, higher in zip(checked, checked[1:]):
            if higher.rank.value != lower.rank.value + 1:
                return None

        logger.debug(f"Straight found in {hand}")
        return Combination(CombinationName.STRAIGHT, hand.get_cards())
