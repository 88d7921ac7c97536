"""Logging setup for the command line."""

import logging.config

from rich.console import Console
from rich.logging import RichHandler


def stderr_rich_handler(**kwargs) -> RichHandler:
    """RichHandler bound to stderr so command output on stdout stays clean."""
    return RichHandler(console=Console(stderr=True), **kwargs)


def build_logging_config(level: str) -> dict:
    """Return a dictConfig routing budgetboard logs through a RichHandler."""
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "default": {
                "format": "%(name)s - %(message)s",
                "datefmt": "%Y-%m-%d %H:%M:%S",
            },
        },
        "handlers": {
            "default": {
                "()": stderr_rich_handler,
                "formatter": "default",
                "show_path": False,
                "rich_tracebacks": True,
            },
        },
        "loggers": {
            "budgetboard": {
                "handlers": ["default"],
                "level": level.upper(),
                "propagate": False,
            },
            "sqlalchemy": {
                "handlers": ["default"],
                "level": "WARNING",
                "propagate": False,
            },
        },
    }


def configure_logging(level: str = "WARNING") -> None:
    """Apply the CLI logging configuration."""
    logging.config.dictConfig(build_logging_config(level))
