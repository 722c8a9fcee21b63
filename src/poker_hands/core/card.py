"""Card related classes and utilities."""
from dataclasses import dataclass
from enum import Enum
from functools import total_ordering


class Suit(Enum):
    """Card suits."""
    SPADES = '♠'
    CLUBS = '♣'
    DIAMONDS = '♦'
    HEARTS = '♥'

    def __str__(self) -> str:
        return self.value


@total_ordering
class Rank(Enum):
    """Card ranks, valued 2 through 14 (Ace high)."""
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13
    ACE = 14

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Rank):
            return NotImplemented
        return self.value < other.value

    @property
    def symbol(self) -> str:
        """Display symbol: digits for 2-10, J/Q/K/A for faces."""
        return _FACE_SYMBOLS.get(self, str(self.value))

    def __str__(self) -> str:
        return self.symbol


_FACE_SYMBOLS = {
    Rank.JACK: 'J',
    Rank.QUEEN: 'Q',
    Rank.KING: 'K',
    Rank.ACE: 'A',
}

# Accepted spellings when parsing; 'T' and '10' both mean ten
_RANK_LOOKUP = {rank.symbol: rank for rank in Rank}
_RANK_LOOKUP['T'] = Rank.TEN

_SUIT_LOOKUP = {
    's': Suit.SPADES,
    'c': Suit.CLUBS,
    'd': Suit.DIAMONDS,
    'h': Suit.HEARTS,
}
_SUIT_LOOKUP.update({suit.value: suit for suit in Suit})


@dataclass(frozen=True)
class Card:
    """
    Represents a playing card.

    Attributes:
        rank: Card rank (2-A)
        suit: Card suit (spades, clubs, diamonds, hearts)
    """
    rank: Rank
    suit: Suit

    def __str__(self) -> str:
        """String representation such as 'A♠' or '10♦'."""
        return f"{self.rank}{self.suit}"

    def __repr__(self) -> str:
        return f"Card({self.rank.name}, {self.suit.name})"

    @classmethod
    def from_string(cls, card_str: str) -> 'Card':
        """
        Create a Card from a string representation.

        Args:
            card_str: Rank followed by suit, e.g. 'As', 'Td', '10d' or 'A♠'

        Returns:
            Card instance

        Raises:
            ValueError: If string format is invalid
        """
        card_str = card_str.strip()
        if len(card_str) not in (2, 3):
            raise ValueError(f"Invalid card string: {card_str}")

        rank_str, suit_str = card_str[:-1], card_str[-1]
        rank = _RANK_LOOKUP.get(rank_str.upper())
        suit = _SUIT_LOOKUP.get(suit_str.lower())
        if rank is None or suit is None:
            raise ValueError(f"Invalid rank or suit in: {card_str}")

        return cls(rank=rank, suit=suit)
