"""Tests for the command line interface."""
import json

import pytest
from click.testing import CliRunner

from poker_hands import cli as cli_module
from poker_hands.cli import PAUSE_PROMPT, cli
from poker_hands.evaluation.evaluator import RulePipeline
from poker_hands.evaluation.rules.high import HighCardRule


@pytest.fixture
def runner():
    return CliRunner()


def invoke(runner, *args):
    return runner.invoke(cli, ['--log-level', 'ERROR', *args])


@pytest.mark.parametrize("cards,expected", [
    (["As", "Ks", "Qs", "Js", "Ts"], "Flush Royal: A♠ K♠ Q♠ J♠ 10♠"),
    (["2h", "7h", "7s", "Ad", "2s"], "Two pairs: 7♥ 7♠ 2♥ 2♠"),
    (["A♥", "5♠", "7♣", "4♣", "10♠"], "High card: A♥"),
    (["Jd,8c,10d,7d,9h"], "Straight: J♦ 8♣ 10♦ 7♦ 9♥"),
])
def test_classify(runner, cards, expected):
    result = invoke(runner, 'classify', *cards)
    assert result.exit_code == 0, result.output
    assert result.output.strip() == expected


def test_classify_json(runner):
    result = invoke(runner, 'classify', '--json', 'Ad', 'Js', 'Qs', 'Kh', 'As')
    assert result.exit_code == 0, result.output
    assert json.loads(result.output) == {"name": "Pair", "cards": ["A♦", "A♠"]}


@pytest.mark.parametrize("cards", [
    ["As", "Ks", "Qs", "Js"],
    ["As", "Ks", "Qs", "Js", "Ts", "9s"],
    ["As", "Ks", "Qs", "Js", "Xx"],
])
def test_classify_bad_hand(runner, cards):
    result = invoke(runner, 'classify', *cards)
    assert result.exit_code == 2
    assert "Invalid value for CARDS" in result.output


def test_classify_requires_cards(runner):
    result = invoke(runner, 'classify')
    assert result.exit_code == 2


def test_rules(runner):
    result = invoke(runner, 'rules')
    assert result.exit_code == 0
    lines = result.output.strip().splitlines()
    assert lines[0] == "1: Straight Flush / Flush Royal"
    assert lines[-1] == "3: High card"


def test_play_rounds(runner):
    result = invoke(runner, 'play', '--rounds', '3', '--seed', '7', '--no-pause')
    assert result.exit_code == 0, result.output
    assert "=== Round 1 ===" in result.output
    assert "=== Round 3 ===" in result.output
    assert "=== Round 4 ===" not in result.output
    assert "=== Summary (3 rounds) ===" in result.output


def test_play_is_reproducible_with_seed(runner):
    first = invoke(runner, 'play', '--rounds', '5', '--seed', '7', '--no-pause')
    second = invoke(runner, 'play', '--rounds', '5', '--seed', '7', '--no-pause')
    assert first.output == second.output


def test_play_reused_deck_runs_until_exhausted(runner):
    result = invoke(runner, 'play', '--rounds', '0', '--seed', '1', '--no-pause', '--reuse-deck')
    assert result.exit_code == 0, result.output
    assert "=== Round 10 ===" in result.output
    assert "=== Round 11 ===" not in result.output
    assert "=== Summary (10 rounds) ===" in result.output


def test_play_with_testing_config(runner):
    result = runner.invoke(cli, ['--config', 'testing', '--log-level', 'ERROR', 'play'])
    assert result.exit_code == 0, result.output
    assert "=== Summary (5 rounds) ===" in result.output


def test_play_rejects_negative_rounds(runner):
    result = invoke(runner, 'play', '--rounds', '-1', '--no-pause')
    assert result.exit_code == 2


def test_play_pauses_between_rounds_only(runner):
    result = runner.invoke(cli, ['--log-level', 'ERROR', 'play', '--rounds', '3', '--seed', '7', '--pause'],
                           input="\n\n")
    assert result.exit_code == 0, result.output
    assert result.output.count(PAUSE_PROMPT) == 2
    last_prompt = result.output.rindex(PAUSE_PROMPT)
    assert result.output.index("=== Round 2 ===") < last_prompt < result.output.index("=== Round 3 ===")
    assert "=== Summary (3 rounds) ===" in result.output


def test_play_stops_at_end_of_input_with_summary(runner):
    result = runner.invoke(cli, ['--log-level', 'ERROR', 'play', '--rounds', '0', '--seed', '7', '--pause'],
                           input="\n")
    assert result.exit_code == 0, result.output
    assert "=== Round 2 ===" in result.output
    assert "=== Round 3 ===" not in result.output
    assert "=== Summary (2 rounds) ===" in result.output
    assert "Aborted!" not in result.output


def test_play_interrupted_still_prints_summary(runner, monkeypatch):
    shown = []

    def interrupt_on_second(result):
        shown.append(result.number)
        if result.number == 2:
            raise KeyboardInterrupt

    monkeypatch.setattr(cli_module, "display_round", interrupt_on_second)
    result = invoke(runner, 'play', '--rounds', '0', '--seed', '7', '--no-pause')
    assert result.exit_code == 0, result.output
    assert shown == [1, 2]
    assert "=== Summary (2 rounds) ===" in result.output


class GivesUpAfter(HighCardRule):
    """Matches a fixed number of hands, then declines everything."""

    def __init__(self, limit):
        self.remaining = limit

    def evaluate(self, hand):
        if not self.remaining:
            return None
        self.remaining -= 1
        return super().evaluate(hand)


def test_play_evaluation_error_exits_with_summary(runner, monkeypatch):
    monkeypatch.setattr(cli_module, "RulePipeline", lambda: RulePipeline([GivesUpAfter(2)]))
    result = invoke(runner, 'play', '--rounds', '5', '--seed', '7', '--no-pause')
    assert result.exit_code == 1
    assert "=== Round 2 ===" in result.output
    assert "=== Round 3 ===" not in result.output
    assert "=== Summary (2 rounds) ===" in result.output
    assert "High card: 2 (100.0%)" in result.output
