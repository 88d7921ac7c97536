"""Main CLI entry point."""

import click
from budgetboard.cli.logging_config import configure_logging
from budgetboard.database.factories import create_sqlite_database

# Import and register all commands at module level
from budgetboard.cli.commands import (
    category,
    add,
    transaction,
    board,
    savings,
    call,
)


@click.group()
@click.option(
    "--db-path",
    type=click.Path(),
    help="Path to database file (overrides BUDGETBOARD_DB_PATH environment variable)",
    envvar="BUDGETBOARD_DB_PATH",
)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default="WARNING",
    envvar="BUDGETBOARD_LOG_LEVEL",
    show_default=True,
    help="Logging level for diagnostic output on stderr",
)
@click.pass_context
def cli(ctx, db_path: str | None, log_level: str):
    """Budgetboard - Monthly finance projection board.

    Define income, expense and savings categories, plan transactions month by
    month (including installments), and view the projection matrix.
    """
    ctx.ensure_object(dict)
    configure_logging(log_level)

    # Initialize database connection only when actually running a command
    # (not when showing help)
    if ctx.invoked_subcommand is not None:
        db = create_sqlite_database(database_path=db_path)
        db.connect()
        db.initialize_schema()
        ctx.obj["db"] = db
        ctx.call_on_close(db.disconnect)


# Register all commands
category.register_commands(cli)
add.register_commands(cli)
transaction.register_commands(cli)
board.register_commands(cli)
savings.register_commands(cli)
call.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
