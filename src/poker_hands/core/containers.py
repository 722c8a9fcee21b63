"""Interfaces for sources of cards."""

import logging
from abc import ABC, abstractmethod
from typing import Optional

from .card import Card
from .exceptions import DeckExhaustedError
from .hand import HAND_SIZE, Hand

logger = logging.getLogger(__name__)


class CardSource(ABC):
    """Interface for anything that deals cards (a deck, a stacked test deck)."""

    @abstractmethod
    def deal_card(self) -> Optional[Card]:
        """
        Deal a single card.

        Returns:
            Card or None if the source is empty
        """
        pass

    @property
    @abstractmethod
    def size(self) -> int:
        """Number of cards left to deal."""
        pass

    def deal_hand(self) -> Hand:
        """
        Deal a complete five-card hand.

        Raises:
            DeckExhaustedError: If fewer than five cards remain. Nothing is
                dealt in that case.
        """
        if self.size < HAND_SIZE:
            logger.warning(f"Cannot deal a hand, only {self.size} cards remaining")
            raise DeckExhaustedError(
                f"Not enough cards to deal: need {HAND_SIZE}, {self.size} remaining"
            )

        cards = []
        for _ in range(HAND_SIZE):
            card = self.deal_card()
            if card is None:
                raise DeckExhaustedError(
                    f"Card source ran out after {len(cards)} cards"
                )
            cards.append(card)
        return Hand(cards)
