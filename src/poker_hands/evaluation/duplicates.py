"""Grouping of cards that share a rank."""
from typing import Dict, List

from poker_hands.core.card import Card, Rank
from poker_hands.core.hand import Hand


def find_duplicates(hand: Hand) -> List[List[Card]]:
    """
    Group the cards of a hand by rank and keep the groups with two or more cards.

    Cards within a group keep hand order. Groups are ordered by where the hand
    first shows them to be duplicates, i.e. by the position of each group's
    second card, so 2h 7h 7s Ad 2s gives [[7h, 7s], [2h, 2s]].

    Args:
        hand: Hand to inspect

    Returns:
        List of duplicate groups, empty if every rank is distinct
    """
    groups: Dict[Rank, List[Card]] = {}
    discovered: List[Rank] = []

    for card in hand:
        group = groups.setdefault(card.rank, [])
        group.append(card)
        if len(group) == 2:
            discovered.append(card.rank)

    return [groups[rank] for rank in discovered]
