"""Straight flush and royal flush detection."""
import logging
from typing import Optional

from poker_hands.core.card import Rank
from poker_hands.core.hand import Hand
from poker_hands.evaluation.rules.base import BaseRule
from poker_hands.evaluation.rules.flush import FlushRule
from poker_hands.evaluation.rules.straight import StraightRule
from poker_hands.evaluation.types import Combination, CombinationName

logger = logging.getLogger(__name__)

ROYAL_RANKS = (Rank.TEN, Rank.JACK, Rank.QUEEN, Rank.KING, Rank.ACE)


class StraightFlushRule(BaseRule):
    """
    Composite of the straight and flush rules.

    Reports the stronger of the two when only one applies, a straight flush
    when both apply, and a royal flush when that straight flush runs ten to
    ace. Plain straights and flushes are resolved here, so neither of the
    component rules needs a place of its own in the pipeline.
    """

    name = 'Straight Flush / Flush Royal'

    def __init__(self):
        self.straight_rule = StraightRule()
        self.flush_rule = FlushRule()

    def evaluate(self, hand: Hand) -> Optional[Combination]:
        sorted_cards = hand.sorted_by_rank()
        straight = self.straight_rule.evaluate_sorted(hand, sorted_cards)
        flush = self.flush_rule.evaluate(hand)

        if straight and flush:
            ranks = tuple(card.rank for card in sorted_cards)
            if ranks == ROYAL_RANKS:
                logger.debug(f"Royal flush found in {hand}")
                return Combination(CombinationName.FLUSH_ROYAL, hand.get_cards())
            logger.debug(f"Straight flush found in {hand}")
            return Combination(CombinationName.STRAIGHT_FLUSH, hand.get_cards())

        return straight or flush
