"""CLI commands for the product catalog and the discount list."""

from __future__ import annotations

import click

from pos.application.search_products import SearchProductsHandler
from pos.domain.exceptions import DomainException
from pos.infrastructure.bootstrap import open_gateways
from pos.infrastructure.config import Settings


@click.command("list")
@click.option("--search", default="", help="Match on name, SKU or barcode.")
@click.pass_obj
def product_list(settings: Settings, search: str) -> None:
    """List active products."""
    handler = SearchProductsHandler(catalog=open_gateways(settings).catalog)

    try:
        products = handler.handle(search)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<6} {'Name':<24} {'SKU':<12} {'Price':>10} {'Stock':>7}")
    click.echo("-" * 63)
    for p in products:
        click.echo(f"{p.id:<6} {p.name:<24} {p.sku:<12} {p.price:>10} {p.stock_quantity:>7}")


@click.command("list")
@click.pass_obj
def discount_list(settings: Settings) -> None:
    """List discounts that can be applied at checkout."""
    try:
        discounts = open_gateways(settings).discounts.list_active_discounts()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not discounts:
        click.echo("No active discounts.")
        return

    for d in discounts:
        line = f"{d.id:<6} {d.label()}"
        if d.minimum_amount is not None and d.minimum_amount.amount > 0:
            line += f"  (minimum {d.minimum_amount})"
        click.echo(line)
