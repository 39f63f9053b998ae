"""Command line entry point for fg-notation."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from typing import TypeVar

import click

from fg_notation import __version__, abbreviated, numpad
from fg_notation.convert import abbreviated_from_numpad, numpad_from_abbreviated
from fg_notation.errors import CreationError

_LOGGER = logging.getLogger(__name__)

_SourceT = TypeVar("_SourceT")
_TargetT = TypeVar("_TargetT")


def convert_all(
    moves: Iterable[str],
    parse: Callable[[str], _SourceT],
    convert: Callable[[_SourceT], _TargetT],
) -> str:
    """Parse and convert every move, joined by ``->`` in input order.

    The first parse or conversion error aborts the whole batch.
    """
    converted: list[str] = []
    for text in moves:
        try:
            converted.append(str(convert(parse(text))))
        except CreationError as exc:
            _LOGGER.debug("Rejected %r", text, exc_info=True)
            raise click.ClickException(f"{exc} (in move {text!r})") from exc
    return " -> ".join(converted)


@click.group()
@click.version_option(__version__, prog_name="fg-notation")
@click.option("--verbose", is_flag=True, help="Log parsing details to stderr.")
def cli(verbose: bool) -> None:
    """fg-notation - convert fighting-game moves between notations."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@cli.command(name="numpad")
@click.argument("moves", nargs=-1, required=True)
def numpad_cmd(moves: tuple[str, ...]) -> None:
    """Convert abbreviated MOVES (e.g. 'cr.mk' 'qcf HP') to numpad."""
    click.echo(convert_all(moves, abbreviated.Move.parse, numpad_from_abbreviated))


@cli.command(name="abbreviate")
@click.argument("moves", nargs=-1, required=True)
def abbreviate_cmd(moves: tuple[str, ...]) -> None:
    """Convert numpad MOVES (e.g. '2MK' '236HP') to abbreviated notation."""
    click.echo(convert_all(moves, numpad.Move.parse, abbreviated_from_numpad))


def main() -> None:
    cli()
