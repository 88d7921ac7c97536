"""Add transaction command."""

import click
from budgetboard.cli.error_handling import handle_domain_error
from budgetboard.domain.category import CategoryService
from budgetboard.domain.entities import TransactionStatus
from budgetboard.domain.errors import DomainError
from budgetboard.domain.transaction import TransactionService
from budgetboard.utils.amount_parser import parse_amount
from budgetboard.utils.date_parser import parse_date

STATUSES = [s.value for s in TransactionStatus]


@click.command("add")
@click.option("--category", required=True, help="Category name or ID")
@click.option("--item", "item_name", required=True, help="Item name (created if it doesn't exist)")
@click.option(
    "--date",
    required=True,
    help="Due date; any day of the month (YYYY-MM-DD or 'this month', 'next month')",
)
@click.option("--amount", default="0", show_default=True, help="Actual amount")
@click.option("--projected", help="Projected amount")
@click.option(
    "--status",
    type=click.Choice(STATUSES, case_sensitive=False),
    default=TransactionStatus.ESTIMATED.value,
    show_default=True,
)
@click.option("--installments", type=int, default=1, show_default=True, help="Number of monthly installments")
@click.option("--description", help="Free-text note")
@click.pass_context
def add_transaction(
    ctx,
    category: str,
    item_name: str,
    date: str,
    amount: str,
    projected: str | None,
    status: str,
    installments: int,
    description: str | None,
):
    """Add a transaction for an item, reusing the item if it already exists.

    Examples:
        budgetboard add --category Salary --item Paycheck --date 2024-03-15 --amount 1000000
        budgetboard add --category Shopping --item Laptop --date "next month" --amount 250 --installments 6
    """
    db = ctx.obj["db"]
    category_service = CategoryService(db)
    transaction_service = TransactionService(db)

    try:
        due_date = parse_date(date)
    except ValueError as e:
        click.echo(f"Error: Invalid date format: {e}", err=True)
        ctx.exit(1)

    try:
        txn_amount = parse_amount(amount)
        projected_amount = parse_amount(projected) if projected is not None else None
    except ValueError as e:
        click.echo(f"Error: Invalid amount format: {e}", err=True)
        ctx.exit(1)

    try:
        category_obj = category_service.resolve_category(category)
        item, created = category_service.get_or_create_item(category_obj.id, item_name)
        rows = transaction_service.create_transaction(
            item_id=item.id,
            due_date=due_date,
            amount=txn_amount,
            projected_amount=projected_amount,
            status=status,
            total_installments=installments,
            description=description,
        )
    except DomainError as e:
        handle_domain_error(ctx, e)

    if created:
        click.echo(f"Created item '{item.name}' (ID: {item.id})")
    click.echo(f"Created {len(rows)} transaction(s) for '{item.name}' in '{category_obj.name}'")
    for txn in rows:
        suffix = f"  [{txn.installment_number}/{txn.total_installments}]" if len(rows) > 1 else ""
        click.echo(f"  ID {txn.id}: {txn.due_date:%Y-%m}  ${txn.amount:,.2f}{suffix}")


def register_commands(cli):
    """Register add command with main CLI."""
    cli.add_command(add_transaction)
