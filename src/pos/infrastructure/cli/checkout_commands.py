"""CLI commands for pricing and selling a cart."""

from __future__ import annotations

import click

from pos.application.add_to_cart import AddToCartHandler
from pos.application.complete_transaction import CompleteTransactionHandler
from pos.application.dto import CartItemSpec, CheckoutSummaryDTO
from pos.application.show_summary import ShowSummaryHandler
from pos.application.start_checkout import StartCheckoutHandler
from pos.domain.exceptions import DomainException
from pos.domain.model.checkout_session import CheckoutSession, CheckoutState
from pos.domain.model.value_objects import PaymentMethod
from pos.infrastructure.bootstrap import Gateways, open_gateways
from pos.infrastructure.config import Settings


def _parse_items(raw: str) -> list[CartItemSpec]:
    """Parse '3:2,7:1' (product ID : quantity) into CartItemSpec list."""
    specs: list[CartItemSpec] = []
    for pair in raw.split(","):
        pair = pair.strip()
        if ":" in pair:
            id_str, qty_str = pair.split(":", 1)
        else:
            id_str, qty_str = pair, "1"
        try:
            specs.append(CartItemSpec(product_id=int(id_str), quantity=int(qty_str)))
        except ValueError:
            raise click.BadParameter(
                f"Invalid item '{pair}'. Expected 'ProductID:Quantity'."
            )
    return specs


def _ring_up(
    wiring: Gateways, items: str, discount_id: int | None
) -> CheckoutSession:
    session = StartCheckoutHandler(wiring.discounts).handle()
    AddToCartHandler(wiring.catalog).handle_many(session, _parse_items(items))
    session.select_discount(discount_id)
    return session


def _display_summary(dto: CheckoutSummaryDTO, with_payment: bool) -> None:
    """Shared formatting for displaying a priced cart."""
    click.echo(f"  {'Product':<24} {'Qty':>5} {'Price':>10} {'Total':>10}")
    click.echo(f"  {'-'*52}")
    for item in dto.items:
        click.echo(
            f"  {item.product_name:<24} {item.quantity:>5} {item.unit_price:>10} {item.line_total:>10}"
        )
    click.echo(f"  {'-'*52}")
    click.echo(f"  {'Subtotal':<30} {dto.subtotal:>22}")
    if dto.has_discount:
        click.echo(f"  {'Discount':<30} {'-' + dto.discount:>22}")
    click.echo(f"  {'Tax (8%)':<30} {dto.tax:>22}")
    click.echo(f"  {'Total':<30} {dto.total:>22}")
    if with_payment:
        click.echo(f"  {'Paid':<30} {dto.amount_paid:>22}")
        click.echo(f"  {'Change':<30} {dto.change:>22}")


@click.command("quote")
@click.option("--items", required=True, help="Items as 'ProductID:Qty,ProductID:Qty'.")
@click.option("--discount", "discount_id", type=int, default=None, help="Discount ID.")
@click.option("--paid", default=None, help="Amount tendered, to show the change.")
@click.pass_obj
def checkout_quote(
    settings: Settings, items: str, discount_id: int | None, paid: str | None
) -> None:
    """Price a cart without selling it."""
    try:
        session = _ring_up(open_gateways(settings), items, discount_id)
        if paid is not None:
            session.proceed_to_payment()
            session.set_payment(PaymentMethod.CASH, paid)
        dto = ShowSummaryHandler().handle(session)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_summary(dto, with_payment=paid is not None)


@click.command("sell")
@click.option("--items", required=True, help="Items as 'ProductID:Qty,ProductID:Qty'.")
@click.option("--paid", required=True, help="Amount tendered.")
@click.option(
    "--method",
    type=click.Choice([m.value for m in PaymentMethod]),
    default=PaymentMethod.CASH.value,
    show_default=True,
    help="Payment method.",
)
@click.option("--discount", "discount_id", type=int, default=None, help="Discount ID.")
@click.option("--customer", default=None, help="Customer name (optional).")
@click.option("--email", default=None, help="Customer email (optional).")
@click.pass_obj
def checkout_sell(
    settings: Settings,
    items: str,
    paid: str,
    method: str,
    discount_id: int | None,
    customer: str | None,
    email: str | None,
) -> None:
    """Ring up a cart, take payment and record the transaction."""
    wiring = open_gateways(settings)

    try:
        session = _ring_up(wiring, items, discount_id)
        session.set_customer(customer, email)
        session.proceed_to_payment()
        session.set_payment(PaymentMethod.parse(method), paid)
        summary = ShowSummaryHandler().handle(session)
        outcome = CompleteTransactionHandler(wiring.transactions).handle(session)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if outcome.status != CheckoutState.COMPLETED.value:
        raise click.ClickException(outcome.message)

    _display_summary(summary, with_payment=True)
    click.echo()
    click.echo(f"Transaction {outcome.transaction_number} completed.")
