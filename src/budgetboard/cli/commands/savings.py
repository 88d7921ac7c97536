"""Savings config commands."""

import click
from budgetboard.cli.error_handling import handle_domain_error
from budgetboard.domain.errors import DomainError
from budgetboard.domain.savings import SavingsService


@click.group()
def savings_group():
    """Manage savings allocation rules."""
    pass


@savings_group.command("add")
@click.argument("name")
@click.argument("percentage", type=float)
@click.option("--user", "user_id", envvar="BUDGETBOARD_USER", default="default", help="Owning user ID")
@click.pass_context
def add_savings_config(ctx, name: str, percentage: float, user_id: str):
    """Add a savings rule; PERCENTAGE is a fraction (0.2 = 20%)."""
    service = SavingsService(ctx.obj["db"])
    try:
        config = service.create_savings_config(name=name, percentage=percentage, user_id=user_id)
    except DomainError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Created savings config '{config.name}' at {config.percentage:.0%} (ID: {config.id})")


@savings_group.command("list")
@click.option("--user", "user_id", help="Only show rules for this user")
@click.pass_context
def list_savings_configs(ctx, user_id: str | None):
    """List savings rules."""
    service = SavingsService(ctx.obj["db"])
    configs = service.list_savings_configs(user_id=user_id)
    if not configs:
        click.echo("No savings configs found.")
        return
    for config in configs:
        click.echo(f"ID: {config.id:3d} | {config.name:20s} | {config.percentage:6.1%} | User: {config.user_id}")


@savings_group.command("delete")
@click.argument("config_id", type=int)
@click.pass_context
def delete_savings_config(ctx, config_id: int):
    """Delete a savings rule."""
    service = SavingsService(ctx.obj["db"])
    try:
        service.delete_savings_config(config_id)
    except DomainError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Deleted savings config {config_id}")


def register_commands(cli):
    """Register savings commands with main CLI."""
    cli.add_command(savings_group, name="savings")
