from collections import Counter
from typing import List

from poker_hands.evaluation.rules.base import BaseRule
from poker_hands.evaluation.types import CombinationName
from poker_hands.game.session import RoundResult


def display_round(result: RoundResult) -> None:
    """Show a dealt hand and its combination."""
    print(f"\n=== Round {result.number} ===")
    print(f"Hand: {result.hand}")
    print(result.combination)


def display_summary(summary: Counter) -> None:
    """Show how often each combination came up, strongest first."""
    total = sum(summary.values())
    print(f"\n=== Summary ({total} rounds) ===")
    if not total:
        print("No hands dealt.")
        return
    for name in reversed(CombinationName):
        count = summary.get(name, 0)
        if count:
            print(f"{name.value}: {count} ({count / total:.1%})")


def display_rules(rules: List[BaseRule]) -> None:
    """List the rules in the order they are tried."""
    for i, rule in enumerate(rules, 1):
        print(f"{i}: {rule.name}")
