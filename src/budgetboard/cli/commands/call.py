"""Call a named procedure with a JSON payload."""

import json

import click
from budgetboard.api.router import ProjectionRouter
from budgetboard.cli.error_handling import handle_domain_error
from budgetboard.domain.errors import DomainError
from budgetboard.utils.date_parser import parse_date


@click.command("call")
@click.argument("procedure")
@click.argument("payload", required=False)
@click.option("--as-of", help="Treat this date as today for board procedures")
@click.pass_context
def call_procedure(ctx, procedure: str, payload: str | None, as_of: str | None):
    """Run PROCEDURE with an optional JSON PAYLOAD and print the JSON result.

    Examples:
        budgetboard call getCategories
        budgetboard call createCategory '{"name": "Salary", "type": "income", "userId": "me"}'
        budgetboard call getBoardData '{"monthsBack": 1, "monthsForward": 8}'
    """
    try:
        data = json.loads(payload) if payload else None
    except json.JSONDecodeError as e:
        click.echo(f"Error: Invalid JSON payload: {e}", err=True)
        ctx.exit(1)
    if data is not None and not isinstance(data, dict):
        click.echo("Error: Payload must be a JSON object", err=True)
        ctx.exit(1)

    today = None
    if as_of is not None:
        try:
            today = parse_date(as_of)
        except ValueError as e:
            click.echo(f"Error: Invalid date: {e}", err=True)
            ctx.exit(1)

    router = ProjectionRouter(ctx.obj["db"], today=today)
    try:
        result = router.call(procedure, data)
    except DomainError as e:
        handle_domain_error(ctx, e)
    click.echo(json.dumps(result, indent=2, ensure_ascii=False))


def register_commands(cli):
    """Register call command with main CLI."""
    cli.add_command(call_procedure)
