"""Board command: the month-by-month projection matrix."""

from decimal import Decimal

import click
from budgetboard.cli.error_handling import handle_domain_error
from budgetboard.domain.board import BoardService, DEFAULT_MONTHS_BACK, DEFAULT_MONTHS_FORWARD
from budgetboard.domain.board_view import BoardCell, BoardView, build_board_view
from budgetboard.domain.entities import CategoryType
from budgetboard.domain.errors import DomainError
from budgetboard.utils.date_parser import parse_date

NAME_WIDTH = 24
CELL_WIDTH = 16

BAND_COLORS = {
    "red": "red",
    "orange": "yellow",
    "light-green": "green",
    "green": "bright_green",
}

SECTION_TITLES = {
    CategoryType.INCOME: "INCOME",
    CategoryType.EXPENSE: "EXPENSES",
    CategoryType.SAVINGS: "SAVINGS",
}


def format_money(amount: Decimal) -> str:
    return f"${amount:,.0f}" if amount == amount.to_integral_value() else f"${amount:,.2f}"


def format_cell(cell: BoardCell) -> str:
    """Render one cell, padded to CELL_WIDTH and colored by status band."""
    if not cell.is_existing:
        return f"{'-':>{CELL_WIDTH}}"

    text = format_money(cell.amount)
    if cell.shows_projection:
        text += "*"
    if cell.installment:
        text += f" {cell.installment}"
    if cell.hidden_duplicates:
        text += "+"
    return click.style(f"{text:>{CELL_WIDTH}}", fg=BAND_COLORS[cell.status_band])


def render_board(view: BoardView) -> None:
    """Print summary figures for the current month followed by the matrix."""
    totals = view.current_totals
    click.echo(f"\n{view.current_month:%B %Y}")
    click.echo(f"  Income:      {format_money(totals.income):>16}")
    click.echo(f"  Expenses:    {format_money(totals.expense):>16}")
    click.echo(f"  Net balance: {format_money(totals.balance):>16}")

    header = f"{'Concept':<{NAME_WIDTH}}" + "".join(f"{m:%b %Y}".rjust(CELL_WIDTH) for m in view.months)
    rule = "-" * len(header)
    click.echo()
    click.echo(header)
    click.echo(rule)

    for section in view.sections:
        if not section.categories:
            continue
        click.echo(click.style(SECTION_TITLES[section.category_type], bold=True))
        for row in section.categories:
            totals_str = "".join(f"{format_money(t):>{CELL_WIDTH}}" for t in row.totals)
            click.echo(click.style(f"{row.category.name[:NAME_WIDTH]:<{NAME_WIDTH}}", bold=True) + totals_str)
            for item_row in row.items:
                name = f"  {item_row.item.name}"[:NAME_WIDTH]
                click.echo(f"{name:<{NAME_WIDTH}}" + "".join(format_cell(c) for c in item_row.cells))
        click.echo(rule)

    balance_str = "".join(f"{format_money(b):>{CELL_WIDTH}}" for b in view.net_balance)
    click.echo(click.style(f"{'NET BALANCE':<{NAME_WIDTH}}", bold=True) + balance_str)
    click.echo("\n* projected amount differs   + more rows hidden for that month")


@click.command("board")
@click.option(
    "--months-back",
    type=click.IntRange(min=0),
    default=DEFAULT_MONTHS_BACK,
    envvar="BUDGETBOARD_MONTHS_BACK",
    show_default=True,
    help="Months shown before the current month",
)
@click.option(
    "--months-forward",
    type=click.IntRange(min=0),
    default=DEFAULT_MONTHS_FORWARD,
    envvar="BUDGETBOARD_MONTHS_FORWARD",
    show_default=True,
    help="Months shown after the current month",
)
@click.option("--as-of", help="Treat this date as today (YYYY-MM-DD)")
@click.pass_context
def show_board(ctx, months_back: int, months_forward: int, as_of: str | None):
    """Show the projection board.

    Examples:
        budgetboard board
        budgetboard board --months-back 3 --months-forward 12
        budgetboard board --as-of 2024-03-01
    """
    db = ctx.obj["db"]
    service = BoardService(db)

    today = None
    if as_of is not None:
        try:
            today = parse_date(as_of)
        except ValueError as e:
            click.echo(f"Error: Invalid date: {e}", err=True)
            ctx.exit(1)

    try:
        board = service.get_board_data(months_back=months_back, months_forward=months_forward, today=today)
        view = build_board_view(board.categories, months_back, months_forward, today=today)
    except DomainError as e:
        handle_domain_error(ctx, e)

    if not board.categories:
        click.echo("No categories found. Create one with 'category create'.")
        return
    render_board(view)


def register_commands(cli):
    """Register board command with main CLI."""
    cli.add_command(show_board)
