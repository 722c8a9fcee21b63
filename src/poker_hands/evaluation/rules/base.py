"""Base class for combination rules."""
from abc import ABC, abstractmethod
from typing import Optional

from poker_hands.core.hand import Hand
from poker_hands.evaluation.types import Combination


class BaseRule(ABC):
    """
    A single combination detector.

    A rule inspects a hand and either recognises its combination or returns
    None so the pipeline can move on. Rules are stateless and must not modify
    the hand.
    """

    name: str = ''

    @abstractmethod
    def evaluate(self, hand: Hand) -> Optional[Combination]:
        """
        Classify a hand.

        Args:
            hand: Five cards to inspect

        Returns:
            The recognised combination, or None if the rule does not apply
        """
        pass

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"
