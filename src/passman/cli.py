"""CLI using Typer."""

import logging
import sys
from typing import List, Optional, Tuple

import click
import typer
from rich.logging import RichHandler
from typer.core import TyperGroup

from . import commands, operations, ui
from .config import Config, config
from .messages import (
    ERROR_CANCELLED,
    ERROR_GENERIC,
    ERROR_NO_COMMAND,
    ERROR_UNKNOWN_COMMAND,
)
from .passwordgen import ClipboardError
from .store import RecordStore, StoreError

logger = logging.getLogger(__name__)


class CommandGroup(TyperGroup):
    """Top-level group: command names match case-insensitively, and an
    unknown name prints a message instead of failing with a usage error.

    Only the first token selects the command; anything after it is ignored.
    """

    def resolve_command(
        self, ctx: click.Context, args: List[str]
    ) -> Tuple[Optional[str], Optional[click.Command], List[str]]:
        token = args[0]
        name = commands.resolve_command_name(token)
        cmd = self.get_command(ctx, name) if name else None
        if cmd is None:
            ui.error(ERROR_UNKNOWN_COMMAND.format(command=token))
            ctx.exit(0)
        return name, cmd, []


# No help option and unknown options left in place: a leading "-x" or
# "--help" is just another unknown command token.
app = typer.Typer(
    name="passman",
    cls=CommandGroup,
    help="Plaintext command-line password manager",
    add_completion=False,
    no_args_is_help=False,
    context_settings={"help_option_names": [], "ignore_unknown_options": True},
)


def _describe(name: str) -> str:
    cmd = commands.get_command(name)
    return cmd.description if cmd else ""


@app.callback(invoke_without_command=True)
def main_callback(ctx: typer.Context):
    """Check a command was given, then make sure the database exists."""
    if ctx.invoked_subcommand is None:
        ui.error(ERROR_NO_COMMAND)
        raise typer.Exit(1)

    store = RecordStore(config.database_path)
    store.ensure_initialized()
    ctx.obj = store


@app.command("help", help=_describe("help"))
def show_help_command(ctx: typer.Context):
    operations.show_help()


@app.command("add", help=_describe("add"))
def add_account_command(ctx: typer.Context):
    operations.add_account(ctx.obj)


@app.command("list", help=_describe("list"))
def list_accounts_command(ctx: typer.Context):
    operations.list_accounts(ctx.obj)


@app.command("get", help=_describe("get"))
def get_account_command(ctx: typer.Context):
    operations.get_account(ctx.obj)


@app.command("delete", help=_describe("delete"))
def delete_account_command(ctx: typer.Context):
    operations.delete_account(ctx.obj)


def configure_logging(level: int = Config.LOG_LEVEL) -> None:
    """Send passman diagnostics to stderr through rich."""
    package_logger = logging.getLogger("passman")
    if not package_logger.handlers:
        package_logger.addHandler(
            RichHandler(console=ui.err_console, show_path=False, markup=False)
        )
    package_logger.setLevel(level)


def main() -> None:
    """Main entry point."""
    configure_logging()
    try:
        exit_code = app(standalone_mode=False)
    except click.Abort:
        ui.error(ERROR_CANCELLED)
        sys.exit(1)
    except click.ClickException as e:
        e.show()
        sys.exit(e.exit_code)
    except (StoreError, ClipboardError) as e:
        logger.debug("Aborting on fatal error", exc_info=True)
        ui.error(ERROR_GENERIC.format(error=e))
        sys.exit(1)
    sys.exit(exit_code if isinstance(exit_code, int) else 0)


if __name__ == "__main__":
    main()
