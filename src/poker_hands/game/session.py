"""Round-by-round dealing and classification."""

import logging
from collections import Counter, deque
from dataclasses import dataclass
from typing import Callable, Deque, Iterator, Optional

from poker_hands.core.deck import Deck
from poker_hands.core.exceptions import DeckExhaustedError
from poker_hands.core.hand import Hand
from poker_hands.evaluation.evaluator import RulePipeline
from poker_hands.evaluation.types import Combination

logger = logging.getLogger(__name__)


@dataclass
class RoundResult:
    """The hand dealt in one round and what it was classified as."""

    number: int
    hand: Hand
    combination: Combination

    def __str__(self) -> str:
        return f"Round {self.number}: {self.hand} -> {self.combination}"

    def to_json(self) -> dict:
        """Convert to JSON-compatible dictionary."""
        return {
            "round": self.number,
            "hand": [str(card) for card in self.hand],
            "combination": self.combination.to_json(),
        }


class GameSession:
    """
    Deals and classifies one hand per round.

    By default every round gets a freshly shuffled deck. With reuse_deck the
    same deck keeps dealing until it cannot produce a full hand, at which
    point the round is aborted and the session stops.

    Only the last HISTORY_SIZE results are kept in history; summary() works
    from a running count of every round played.
    """

    HISTORY_SIZE = 20

    def __init__(
        self,
        pipeline: Optional[RulePipeline] = None,
        seed: Optional[int] = None,
        reuse_deck: bool = False,
    ):
        self.pipeline = pipeline or RulePipeline()
        self.reuse_deck = reuse_deck
        self.deck = Deck(seed=seed)
        self.deck.shuffle()
        self.rounds_played = 0
        self.history: Deque[RoundResult] = deque(maxlen=self.HISTORY_SIZE)
        self._counts: Counter = Counter()

    def _next_hand(self) -> Hand:
        if self.rounds_played and not self.reuse_deck:
            self.deck.reset()
            self.deck.shuffle()
        return self.deck.deal_hand()

    def play_round(self) -> RoundResult:
        """
        Deal a hand and classify it.

        Raises:
            DeckExhaustedError: If a reused deck cannot deal a full hand
        """
        hand = self._next_hand()
        combination = self.pipeline.evaluate_hand(hand)
        self.rounds_played += 1
        result = RoundResult(number=self.rounds_played, hand=hand, combination=combination)
        self.history.append(result)
        self._counts[combination.name] += 1
        logger.info(f"{result}")
        return result

    def play(
        self,
        rounds: int = 0,
        on_round: Optional[Callable[[RoundResult], None]] = None,
    ) -> Iterator[RoundResult]:
        """
        Play rounds, yielding each result.

        Args:
            rounds: Number of rounds to play; 0 plays until the deck runs out,
                    which with a fresh deck per round means indefinitely
            on_round: Optional callback invoked with each result
        """
        played = 0
        while rounds <= 0 or played < rounds:
            try:
                result = self.play_round()
            except DeckExhaustedError as e:
                logger.warning(f"Round {self.rounds_played + 1} aborted: {e}")
                return
            played += 1
            if on_round is not None:
                on_round(result)
            yield result

    def summary(self) -> Counter:
        """Count how often each combination came up."""
        return Counter(self._counts)
