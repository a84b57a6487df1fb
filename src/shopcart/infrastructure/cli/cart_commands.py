"""CLI commands for the Cart aggregate.

Both commands drive a single in-memory cart with the same little
operation language, one operation per line::

    add CODE DESCRIPTION PRICE QUANTITY
    remove CODE
    remove-at POSITION
    show
"""

from __future__ import annotations

import logging
import shlex

import click

from shopcart.application.dto import CartDTO, ItemSpec
from shopcart.domain.exceptions import DomainException
from shopcart.infrastructure.bootstrap import CartSession, new_session

logger = logging.getLogger(__name__)

QUIT_WORDS = ("quit", "exit")


def _parse_int(raw: str, what: str) -> int:
    try:
        return int(raw)
    except ValueError:
        raise click.BadParameter(f"Invalid {what} '{raw}'.")


def _tokenize(line: str) -> list[str]:
    """Split a script line shell-style; '#' starts a comment."""
    try:
        return shlex.split(line, comments=True)
    except ValueError as exc:
        raise click.BadParameter(f"Cannot parse '{line.strip()}': {exc}")


def _expect_args(op: str, args: list[str], names: tuple[str, ...]) -> None:
    if len(args) != len(names):
        usage = " ".join(n.upper() for n in names)
        raise click.UsageError(f"Usage: {op} {usage}".rstrip())


def _display_cart(dto: CartDTO) -> None:
    """Shared formatting for displaying a cart."""
    if not dto.lines:
        click.echo("Cart is empty.")
        return

    click.echo(
        f"  {'#':>3} {'Code':>6} {'Product':<20} {'Qty':>5} {'Price':>10} {'Total':>10}"
    )
    click.echo(f"  {'-'*58}")
    for line in dto.lines:
        click.echo(
            f"  {line.position:>3} {line.code:>6} {line.description:<20} "
            f"{line.quantity:>5} {line.unit_price:>10} {line.line_total:>10}"
        )
    click.echo(f"  {'-'*58}")
    click.echo(f"  {'Cart Total':<27} {dto.total:>31}")


def _execute(session: CartSession, tokens: list[str]) -> None:
    """Apply one parsed operation to *session*'s cart."""
    op, args = tokens[0].lower(), tokens[1:]

    if op == "add":
        _expect_args(op, args, ("code", "description", "price", "quantity"))
        spec = ItemSpec(
            code=_parse_int(args[0], "product code"),
            description=args[1],
            unit_price=args[2],
            quantity=_parse_int(args[3], "quantity"),
        )
        line = session.add_item.handle(spec)
        click.echo(
            f"Added #{line.code} '{line.description}': "
            f"qty {line.quantity} at {line.unit_price}"
        )
    elif op == "remove":
        _expect_args(op, args, ("code",))
        code = _parse_int(args[0], "product code")
        if session.remove_item.handle(code=code):
            click.echo(f"Removed product #{code}.")
        else:
            click.echo(f"Product #{code} is not in the cart.")
    elif op == "remove-at":
        _expect_args(op, args, ("position",))
        position = _parse_int(args[0], "position")
        if session.remove_item.handle(position=position):
            click.echo(f"Removed line at position {position}.")
        else:
            click.echo(f"No line at position {position}.")
    elif op == "show":
        _expect_args(op, args, ())
        _display_cart(session.show_cart.handle())
    else:
        raise click.UsageError(
            f"Unknown operation '{op}'. Expected add, remove, remove-at or show."
        )


@click.command("run")
@click.argument("script", type=click.File("r"))
def cart_run(script) -> None:
    """Apply the operations in SCRIPT ('-' for stdin) and print the cart."""
    session = new_session()

    for lineno, raw in enumerate(script, start=1):
        try:
            tokens = _tokenize(raw)
            if not tokens:
                continue
            _execute(session, tokens)
        except DomainException as exc:
            logger.warning("Script line %d rejected: %s", lineno, exc)
            raise click.ClickException(f"line {lineno}: {exc}")
        except click.UsageError as exc:
            raise click.UsageError(f"line {lineno}: {exc.format_message()}")

    click.echo()
    _display_cart(session.show_cart.handle())


@click.command("session")
def cart_session() -> None:
    """Edit a cart interactively until 'quit' or end of input."""
    session = new_session()

    while True:
        try:
            raw = click.prompt("cart", default="", show_default=False, prompt_suffix="> ")
        except click.Abort:
            break
        try:
            tokens = _tokenize(raw)
            if not tokens:
                continue
            if tokens[0].lower() in QUIT_WORDS:
                break
            _execute(session, tokens)
        except DomainException as exc:
            logger.warning("Operation rejected: %s", exc)
            click.echo(f"Error: {exc}", err=True)
        except click.UsageError as exc:
            click.echo(f"Error: {exc.format_message()}", err=True)

    click.echo()
    _display_cart(session.show_cart.handle())
