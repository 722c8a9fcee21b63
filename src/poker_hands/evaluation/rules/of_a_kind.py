"""Pairs, two pairs, trips and quads."""
import logging
from typing import Optional

from poker_hands.core.hand import Hand
from poker_hands.evaluation.duplicates import find_duplicates
from poker_hands.evaluation.rules.base import BaseRule
from poker_hands.evaluation.types import Combination, CombinationName

logger = logging.getLogger(__name__)

# Combination for a single group of matching ranks, keyed by group size
SINGLE_GROUP_NAMES = {
    2: CombinationName.PAIR,
    3: CombinationName.THREE_OF_A_KIND,
    4: CombinationName.FOUR_OF_A_KIND,
}


class DuplicatesRule(BaseRule):
    """
    Classifies a hand by its groups of matching ranks.

    Only the number of groups decides between one group and two, so a full
    house (three plus two) is reported as two pairs carrying all five cards.
    """

    name = 'Four of a kind / Three of a kind / Two pairs / Pair'

    def evaluate(self, hand: Hand) -> Optional[Combination]:
        duplicates = find_duplicates(hand)

        if len(duplicates) == 2:
            cards = [card for group in duplicates for card in group]
            return Combination(CombinationName.TWO_PAIRS, cards)

        if len(duplicates) == 1:
            group = duplicates[0]
            name = SINGLE_GROUP_NAMES.get(len(group))
            if name is None:
                logger.debug(f"No combination for a group of {len(group)} in {hand}")
                return None
            return Combination(name, group)

        return None
