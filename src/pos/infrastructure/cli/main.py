import logging

import click

from pos.domain.exceptions import DomainException
from pos.infrastructure.cli.catalog_commands import discount_list, product_list
from pos.infrastructure.cli.checkout_commands import checkout_quote, checkout_sell
from pos.infrastructure.config import Settings


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Log debug output to stderr.")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """POS — point-of-sale checkout"""
    try:
        settings = Settings.from_env()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    logging.basicConfig(
        level=logging.DEBUG if verbose else settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    ctx.obj = settings


@cli.group()
def product() -> None:
    """Browse the product catalog."""


@cli.group()
def discount() -> None:
    """Browse active discounts."""


@cli.group()
def checkout() -> None:
    """Price and sell a cart."""


# Register subcommands
product.add_command(product_list)
discount.add_command(discount_list)
checkout.add_command(checkout_quote)
checkout.add_command(checkout_sell)
