"""Five-card hand implementation."""

import logging
import re
from collections.abc import Iterable, Iterator, Sequence

from .card import Card
from .exceptions import InvalidHandError

logger = logging.getLogger(__name__)

HAND_SIZE = 5


class Hand(Sequence):
    """
    An immutable hand of exactly five cards.

    Card order is the order the cards were dealt in. Rules that need the
    cards sorted work on a copy from sorted_by_rank(), so the hand itself is
    never reordered.

    Raises:
        InvalidHandError: If not given exactly five cards
    """

    def __init__(self, cards: Iterable[Card]):
        cards = tuple(cards)
        if len(cards) != HAND_SIZE:
            raise InvalidHandError(
                f"A hand requires exactly {HAND_SIZE} cards, got {len(cards)}"
            )
        self._cards = cards

    def __getitem__(self, index):
        return self._cards[index]

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self._cards)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Hand):
            return NotImplemented
        return self._cards == other._cards

    def __hash__(self) -> int:
        return hash(self._cards)

    def get_cards(self) -> list[Card]:
        """Get all cards in the hand, in dealt order."""
        return list(self._cards)

    def sorted_by_rank(self) -> list[Card]:
        """Return a new list of the cards in ascending rank order."""
        return sorted(self._cards, key=lambda card: card.rank.value)

    @classmethod
    def from_string(cls, hand_str: str) -> 'Hand':
        """
        Create a Hand from a string representation.

        Args:
            hand_str: Cards separated by spaces or commas ("As Kd 10h 9c 2s"),
                      or concatenated two-character cards ("AsKdTh9c2s")

        Returns:
            Hand instance with the parsed cards

        Raises:
            ValueError: If a card is invalid
            InvalidHandError: If the string does not hold exactly five cards
        """
        hand_str = hand_str.strip()
        if re.search(r'[\s,]', hand_str):
            card_strings = [s for s in re.split(r'[\s,]+', hand_str) if s]
        else:
            if len(hand_str) % 2 != 0:
                raise ValueError(f"Invalid hand string length: {hand_str} (must be multiple of 2)")
            card_strings = [hand_str[i:i + 2] for i in range(0, len(hand_str), 2)]

        cards = []
        for i, card_str in enumerate(card_strings):
            try:
                cards.append(Card.from_string(card_str))
            except ValueError as e:
                raise ValueError(f"Invalid card at position {i + 1} in hand string '{hand_str}': {e}")

        hand = cls(cards)
        logger.debug(f"Created hand from string '{hand_str}': {hand}")
        return hand

    def __str__(self) -> str:
        return ' '.join(str(card) for card in self._cards)

    def __repr__(self) -> str:
        return f"Hand({', '.join(repr(card) for card in self._cards)})"
