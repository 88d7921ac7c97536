"""Transaction management commands."""

import click
from budgetboard.cli.error_handling import handle_domain_error
from budgetboard.domain.entities import TransactionStatus
from budgetboard.domain.errors import DomainError
from budgetboard.domain.transaction import TransactionService
from budgetboard.utils.amount_parser import parse_amount, parse_optional_amount
from budgetboard.utils.date_parser import parse_date

STATUSES = [s.value for s in TransactionStatus]


@click.group()
def transaction_group():
    """Manage transactions."""
    pass


@transaction_group.command("list")
@click.option("--from", "start_date", help="First due date to include (YYYY-MM-DD or 'this month')")
@click.option("--to", "end_date", help="Last due date to include")
@click.pass_context
def list_transactions(ctx, start_date: str | None, end_date: str | None):
    """List transactions with their item and category."""
    db = ctx.obj["db"]
    service = TransactionService(db)

    start = None
    end = None
    try:
        if start_date:
            start = parse_date(start_date)
        if end_date:
            end = parse_date(end_date)
    except ValueError as e:
        click.echo(f"Error: Invalid date: {e}", err=True)
        ctx.exit(1)

    details = service.list_transactions(start_date=start, end_date=end)
    if not details:
        click.echo("No transactions found.")
        return

    click.echo(f"\nFound {len(details)} transaction(s):")
    click.echo("-" * 96)
    click.echo(
        f"{'ID':<6} {'Month':<8} {'Amount':>14} {'Status':<10} {'Inst.':<6} {'Category':<20} {'Item':<24}"
    )
    click.echo("-" * 96)
    for detail in details:
        txn = detail.transaction
        installment = ""
        if txn.total_installments and txn.total_installments > 1:
            installment = f"{txn.installment_number}/{txn.total_installments}"
        amount_str = f"${txn.amount:,.2f}"
        click.echo(
            f"{txn.id:<6} {txn.due_date:%Y-%m}  {amount_str:>14} {txn.status.value:<10} {installment:<6} "
            f"{detail.category.name[:20]:<20} {detail.item.name[:24]:<24}"
        )


@transaction_group.command("update")
@click.argument("transaction_id", type=int)
@click.option("--amount", help="Actual amount")
@click.option("--projected", help="Projected amount, or empty string to clear")
@click.option("--status", type=click.Choice(STATUSES, case_sensitive=False))
@click.option("--date", help="Due date (stored as the first of its month)")
@click.option("--description", help="Description, or empty string to clear")
@click.pass_context
def update_transaction(
    ctx,
    transaction_id: int,
    amount: str | None,
    projected: str | None,
    status: str | None,
    date: str | None,
    description: str | None,
) -> None:
    """Update a transaction.

    Updates only the fields that are provided. Use --projected "" or
    --description "" to clear those fields.

    Examples:
        budgetboard transaction update 1 --amount 950000 --status PAID
        budgetboard transaction update 1 --description ""
    """
    db = ctx.obj["db"]
    service = TransactionService(db)

    try:
        txn_amount = parse_amount(amount) if amount is not None else None
        projected_amount, clear_projected = parse_optional_amount(projected)
    except ValueError as e:
        click.echo(f"Error: Invalid amount format: {e}", err=True)
        ctx.exit(1)

    due_date = None
    if date is not None:
        try:
            due_date = parse_date(date)
        except ValueError as e:
            click.echo(f"Error: Invalid date format: {e}", err=True)
            ctx.exit(1)

    clear_description = description == ""
    try:
        service.update_transaction(
            transaction_id=transaction_id,
            amount=txn_amount,
            projected_amount=projected_amount,
            status=status,
            due_date=due_date,
            description=None if clear_description else description,
            clear_projected_amount=clear_projected,
            clear_description=clear_description,
        )
    except DomainError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Updated transaction {transaction_id}")


@transaction_group.command("delete")
@click.argument("transaction_id", type=int)
@click.option("--yes", is_flag=True, help="Skip confirmation prompt")
@click.pass_context
def delete_transaction(ctx, transaction_id: int, yes: bool) -> None:
    """Delete a transaction."""
    db = ctx.obj["db"]
    service = TransactionService(db)

    if not yes and not click.confirm(f"Delete transaction {transaction_id}?"):
        click.echo("Cancelled.")
        return

    deleted = service.delete_transaction(transaction_id)
    if deleted is None:
        click.echo(f"Error: Transaction {transaction_id} not found", err=True)
        ctx.exit(1)
    click.echo(f"Deleted transaction {transaction_id}")


def register_commands(cli):
    """Register transaction commands with main CLI."""
    cli.add_command(transaction_group, name="transaction")
