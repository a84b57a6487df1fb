import click

from shopcart.infrastructure.cli.cart_commands import cart_run, cart_session
from shopcart.infrastructure.logging import LOG_LEVELS, configure_logging


@click.group()
@click.option(
    "--log-level",
    envvar="SHOPCART_LOG_LEVEL",
    default="WARNING",
    show_default=True,
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    help="Logging verbosity (env: SHOPCART_LOG_LEVEL).",
)
def cli(log_level: str) -> None:
    """shopcart — in-memory shopping cart"""
    configure_logging(log_level)


# Register subcommands
cli.add_command(cart_run)
cli.add_command(cart_session)
