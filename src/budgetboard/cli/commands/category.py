"""Category and item management commands."""

import click
from budgetboard.cli.error_handling import handle_domain_error
from budgetboard.domain.category import CategoryService
from budgetboard.domain.entities import CategoryType
from budgetboard.domain.errors import DomainError

CATEGORY_TYPES = [t.value for t in CategoryType]


@click.group()
def category_group():
    """Manage categories."""
    pass


@category_group.command("list")
@click.pass_context
def list_categories(ctx):
    """List all categories with their items, grouped by type."""
    db = ctx.obj["db"]
    service = CategoryService(db)

    entries = service.list_categories()
    if not entries:
        click.echo("No categories found. Create one with 'category create'.")
        return

    for category_type in CategoryType:
        group = [e for e in entries if e.category.category_type == category_type]
        if not group:
            continue
        click.echo(f"\n{category_type.value.upper()}")
        for entry in group:
            click.echo(f"  {entry.category.name} (ID: {entry.category.id})")
            for item in entry.items:
                click.echo(f"    - {item.name} (ID: {item.id})")


@category_group.command("create")
@click.argument("name")
@click.option(
    "--type",
    "category_type",
    type=click.Choice(CATEGORY_TYPES, case_sensitive=False),
    default="expense",
    show_default=True,
    help="Category type",
)
@click.option("--user", "user_id", envvar="BUDGETBOARD_USER", default="default", help="Owning user ID")
@click.pass_context
def create_category(ctx, name: str, category_type: str, user_id: str):
    """Create a new category."""
    db = ctx.obj["db"]
    service = CategoryService(db)

    try:
        category = service.create_category(name=name, category_type=category_type, user_id=user_id)
    except DomainError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Created {category.category_type.value} category '{category.name}' (ID: {category.id})")


@click.group()
def item_group():
    """Manage items within categories."""
    pass


@item_group.command("create")
@click.argument("name")
@click.option("--category", required=True, help="Category name or ID")
@click.option("--one-off", is_flag=True, help="Mark the item as non-recurring")
@click.pass_context
def create_item(ctx, name: str, category: str, one_off: bool):
    """Create an item inside a category.

    Examples:
        budgetboard item create "Paycheck" --category Salary
        budgetboard item create "New laptop" --category 3 --one-off
    """
    db = ctx.obj["db"]
    service = CategoryService(db)

    try:
        category_obj = service.resolve_category(category)
        item = service.create_item(name=name, category_id=category_obj.id, is_recurring=not one_off)
    except DomainError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Created item '{item.name}' in '{category_obj.name}' (ID: {item.id})")


def register_commands(cli):
    """Register category and item commands with main CLI."""
    cli.add_command(category_group, name="category")
    cli.add_command(item_group, name="item")
