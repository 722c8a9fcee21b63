"""Deck implementation."""
import logging
import random
from typing import List, Optional

from .card import Card, Rank, Suit
from .containers import CardSource

logger = logging.getLogger(__name__)


class Deck(CardSource):
    """
    A standard 52-card deck.

    Attributes:
        cards: List of cards in the deck; the last card is the top
    """

    def __init__(self, seed: Optional[int] = None):
        """
        Initialize a new, unshuffled deck.

        Args:
            seed: Seed for the shuffle; None draws from system randomness
        """
        self._rng = random.Random(seed)
        self.cards: List[Card] = []
        self._initialize_deck()

    def _initialize_deck(self) -> None:
        """Create a fresh deck of cards."""
        self.cards = [Card(rank=rank, suit=suit) for suit in Suit for rank in Rank]

    def reset(self) -> None:
        """Return all 52 cards to the deck, unshuffled."""
        self._initialize_deck()

    def shuffle(self) -> None:
        """Shuffle the deck in place with the deck's own generator."""
        self._rng.shuffle(self.cards)
        logger.debug(f"Shuffled deck ({self.size} cards)")

    def deal_card(self) -> Optional[Card]:
        """
        Deal a single card from the top of the deck.

        Returns:
            Card or None if deck is empty
        """
        if not self.cards:
            return None
        return self.cards.pop()

    def deal_cards(self, count: int) -> List[Card]:
        """
        Deal multiple cards from the top of the deck.

        Returns:
            List of cards (may be fewer than requested if deck runs out)
        """
        cards = []
        for _ in range(count):
            card = self.deal_card()
            if card is None:
                break
            cards.append(card)
        return cards

    def get_cards(self) -> List[Card]:
        """Get all cards in the deck."""
        return self.cards.copy()

    @property
    def size(self) -> int:
        """Number of cards in the deck."""
        return len(self.cards)
