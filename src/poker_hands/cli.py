"""Command-line interface for dealing and classifying poker hands."""

import json
import logging
import sys

import click

from .config import config as config_map, get_config
from .core.exceptions import PokerHandsError
from .core.hand import Hand
from .display import display_round, display_rules, display_summary
from .evaluation.evaluator import RulePipeline
from .game.session import GameSession

logger = logging.getLogger(__name__)

LOG_LEVELS = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']
PAUSE_PROMPT = 'Press Enter to deal the next hand...'


def setup_logging(level: str, fmt: str) -> None:
    """Configure root logging to stderr."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format=fmt,
        handlers=[
            logging.StreamHandler(sys.stderr)
        ],
        force=True
    )


@click.group()
@click.option('--config', 'config_name', type=click.Choice(sorted(config_map)), default=None,
              help='Configuration to use')
@click.option('--log-level', type=click.Choice(LOG_LEVELS, case_sensitive=False), default=None,
              help='Override the configured log level')
@click.pass_context
def cli(ctx, config_name, log_level):
    """Deal five-card poker hands and name their combinations."""
    settings = get_config(config_name)
    setup_logging(log_level or settings.LOG_LEVEL, settings.LOG_FORMAT)
    ctx.obj = settings


@cli.command()
@click.option('--rounds', type=click.IntRange(min=0), default=None,
              help='Rounds to play (0 plays until interrupted)')
@click.option('--seed', type=int, default=None, help='Seed for shuffling')
@click.option('--pause/--no-pause', default=None, help='Wait for a key between rounds')
@click.option('--reuse-deck/--fresh-deck', default=None,
              help='Keep dealing from one deck instead of reshuffling every round')
@click.pass_obj
def play(settings, rounds, seed, pause, reuse_deck):
    """Deal, classify and display hands round after round."""
    rounds = settings.ROUNDS if rounds is None else rounds
    seed = settings.SEED if seed is None else seed
    pause = settings.PAUSE if pause is None else pause
    reuse_deck = settings.REUSE_DECK if reuse_deck is None else reuse_deck

    session = GameSession(pipeline=RulePipeline(), seed=seed, reuse_deck=reuse_deck)
    try:
        for result in session.play(rounds):
            display_round(result)
            if pause and (rounds <= 0 or result.number < rounds):
                click.prompt(PAUSE_PROMPT, default='', show_default=False, prompt_suffix='')
    except (KeyboardInterrupt, click.Abort):
        # click.prompt turns Ctrl-C and end of input into Abort
        logger.info("Interrupted, stopping")
    except PokerHandsError as e:
        logger.error(f"Session stopped: {e}")
        display_summary(session.summary())
        sys.exit(1)

    display_summary(session.summary())


@cli.command()
@click.argument('cards', nargs=-1, required=True)
@click.option('--json', 'as_json', is_flag=True, help='Print the combination as JSON')
def classify(cards, as_json):
    """Classify a hand given as cards, e.g. As Ks Qs Js Ts."""
    try:
        hand = Hand.from_string(' '.join(cards))
    except ValueError as e:
        raise click.BadParameter(str(e), param_hint='CARDS')

    combination = RulePipeline().evaluate_hand(hand)
    if as_json:
        click.echo(json.dumps(combination.to_json(), ensure_ascii=False))
    else:
        click.echo(str(combination))


@cli.command()
def rules():
    """List the classification rules in priority order."""
    display_rules(RulePipeline().rules)


if __name__ == '__main__':
    cli()
