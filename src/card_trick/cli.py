"""Command-line interface for the five card trick."""

import logging
from itertools import islice
from typing import Sequence

import click

from card_trick.config import get_config
from card_trick.core.card import Card, Rank, Suit
from card_trick.core.deck import Deck
from card_trick.display import card_name, trick_lines
from card_trick.errors import CardTrickError
from card_trick.trick.decoder import decode
from card_trick.trick.encoder import HAND_SIZE, encode
from card_trick.trick.verify import TOTAL_HANDS, all_hands, verify_hands

logger = logging.getLogger(__name__)

LOG_LEVELS = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']

SAMPLE_HAND = (
    Card(Rank.ACE, Suit.CLUBS),
    Card(Rank.FIVE, Suit.HEARTS),
    Card(Rank.JACK, Suit.DIAMONDS),
    Card(Rank.QUEEN, Suit.CLUBS),
    Card(Rank.KING, Suit.SPADES),
)


class CardParam(click.ParamType):
    """Card given in short form, such as 'Qc' or 'Td'."""

    name = "card"

    def convert(self, value, param, ctx):
        if isinstance(value, Card):
            return value
        try:
            return Card.from_string(value)
        except ValueError as e:
            self.fail(str(e), param, ctx)


CARD = CardParam()


def run_trick(hand: Sequence[Card]) -> None:
    """Encode a hand, decode the shown cards and print every step."""
    try:
        encoded = encode(hand)
        guess = decode(encoded.visible)
    except CardTrickError as e:
        raise click.ClickException(str(e))

    for line in trick_lines(hand, encoded, guess):
        click.echo(line)

    if guess != encoded.hidden:
        raise click.ClickException(f"Guessed {guess} but {encoded.hidden} was hidden")


@click.group()
@click.option('--config', 'config_name', default=None, help='Configuration to use')
@click.option('--log-level', default=None,
              type=click.Choice(LOG_LEVELS, case_sensitive=False),
              help='Override the configured log level')
@click.pass_context
def cli(ctx, config_name, log_level):
    """Five card trick: hide one card, name it from the other four."""
    config = get_config(config_name)
    logging.basicConfig(
        level=(log_level or config.LOG_LEVEL).upper(),
        format=config.LOG_FORMAT,
    )
    ctx.obj = config


@cli.command()
def demo():
    """Run the trick on the sample hand."""
    click.echo("Five Card Puzzle!\n")
    run_trick(SAMPLE_HAND)


@cli.command()
@click.option('--seed', type=int, default=None, help='Seed for a reproducible hand')
@click.pass_obj
def deal(config, seed):
    """Run the trick on a randomly dealt hand."""
    if seed is None:
        seed = config.DEAL_SEED
    deck = Deck.seeded(seed)
    deck.shuffle()
    hand = deck.deal_cards(HAND_SIZE)
    logger.info(f"Dealt {' '.join(str(c) for c in hand)} (seed {seed})")
    run_trick(hand)


@cli.command('encode')
@click.argument('cards', nargs=HAND_SIZE, type=CARD)
def encode_command(cards):
    """Choose the hidden card for five CARDS and print the order to show."""
    try:
        encoded = encode(cards)
    except CardTrickError as e:
        raise click.ClickException(str(e))
    click.echo(f"Hidden: {encoded.hidden}")
    click.echo(f"Shown:  {' '.join(str(c) for c in encoded.visible)}")


@cli.command('decode')
@click.argument('cards', nargs=4, type=CARD)
def decode_command(cards):
    """Name the hidden card from four CARDS in the order shown."""
    try:
        guess = decode(cards)
    except CardTrickError as e:
        raise click.ClickException(str(e))
    click.echo(f"{guess}\t{card_name(guess)}")


@cli.command()
@click.option('--limit', type=click.IntRange(min=0), default=None,
              help='Only check the first N hands')
@click.pass_context
def verify(ctx, limit):
    """Check that the trick works for every five card hand."""
    config = ctx.obj
    hands = all_hands()
    if limit is not None:
        hands = islice(hands, limit)

    total = TOTAL_HANDS if limit is None else min(limit, TOTAL_HANDS)
    click.echo(f"Checking {total} hands...")
    report = verify_hands(hands, progress_every=config.VERIFY_PROGRESS_EVERY)

    for hand, problem in report.failures:
        click.echo(f"FAIL {' '.join(str(c) for c in hand)}: {problem}", err=True)
    click.echo(f"Checked {report.checked} hands, {len(report.failures)} failures")
    if not report.ok:
        ctx.exit(1)
