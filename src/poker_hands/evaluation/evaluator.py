"""Main hand classification interface."""
import logging
from typing import Iterable, List, Optional, Union

from poker_hands.core.card import Card
from poker_hands.core.exceptions import EvaluationError
from poker_hands.core.hand import Hand
from poker_hands.evaluation.rules.base import BaseRule
from poker_hands.evaluation.rules.high import HighCardRule
from poker_hands.evaluation.rules.of_a_kind import DuplicatesRule
from poker_hands.evaluation.rules.straight_flush import StraightFlushRule
from poker_hands.evaluation.types import Combination

logger = logging.getLogger(__name__)


def get_rules() -> List[BaseRule]:
    """
    Build the standard rules in priority order.

    Straight flushes (and with them plain straights and flushes) are checked
    first, then matching ranks, and high card last so every hand classifies.
    """
    return [StraightFlushRule(), DuplicatesRule(), HighCardRule()]


class RulePipeline:
    """
    Classifies hands by running rules in priority order.

    The first rule to recognise a combination decides the result; later rules
    are not consulted.
    """

    def __init__(self, rules: Optional[Iterable[BaseRule]] = None):
        """
        Initialize the pipeline.

        Args:
            rules: Rules in priority order. Defaults to get_rules().
        """
        self._rules: List[BaseRule] = list(rules) if rules is not None else get_rules()

    @property
    def rules(self) -> List[BaseRule]:
        """The rules in priority order."""
        return self._rules.copy()

    def evaluate_hand(self, hand: Union[Hand, Iterable[Card]]) -> Combination:
        """
        Classify a hand.

        Args:
            hand: A Hand, or any five cards

        Returns:
            Combination from the first rule that matched

        Raises:
            InvalidHandError: If not given exactly five cards
            EvaluationError: If no rule matched
        """
        if not isinstance(hand, Hand):
            hand = Hand(hand)

        for rule in self._rules:
            combination = rule.evaluate(hand)
            if combination is not None:
                logger.debug(f"{rule!r} matched {hand}: {combination}")
                return combination
            logger.debug(f"{rule!r} declined {hand}")

        raise EvaluationError(f"No rule matched hand {hand}")


_default_pipeline = RulePipeline()


def classify(hand: Union[Hand, Iterable[Card]]) -> Combination:
    """Convenience function to classify a hand with the standard rules."""
    return _default_pipeline.evaluate_hand(hand)
