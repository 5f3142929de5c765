"""UI utilities."""

from typing import List

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from .messages import SUCCESS_COPIED
from .models import AccountEntry

console = Console()
err_console = Console(stderr=True)


def success(message: str) -> None:
    """Display success message."""
    console.print(f"[green]✓[/green] {escape(message)}")


def error(message: str) -> None:
    """Display error message on stderr."""
    err_console.print(f"[red]✗[/red] {escape(message)}")


def info(message: str) -> None:
    """Display info message."""
    console.print(f"[blue]i[/blue] {escape(message)}")


def warning(message: str) -> None:
    """Display warning message."""
    console.print(f"[yellow]![/yellow] {escape(message)}")


def plain(text: str) -> None:
    """Print text verbatim, with no markup or highlighting."""
    console.print(text, markup=False, highlight=False)


def prompt_text(message: str = "") -> str:
    """Print message (if any), read one line from stdin and strip it.

    End of input reads as an empty line.
    """
    if message:
        plain(message)
    try:
        return console.input().strip()
    except EOFError:
        return ""


def prompt_yes_no(message: str) -> bool:
    """Ask a yes/no question. Only an answer of exactly "y" counts as yes."""
    return prompt_text(message).lower() == "y"


def _accounts_table(entries: List[AccountEntry]) -> Table:
    table = Table(show_lines=False)
    table.add_column("Account", style="cyan bold", no_wrap=True)
    table.add_column("Username", style="green")
    table.add_column("Email", style="blue")

    for entry in entries:
        table.add_row(escape(entry.account), escape(entry.username), escape(entry.email))
    return table


def show_accounts_table(entries: List[AccountEntry]) -> None:
    """Display entries as a table. Passwords are never shown here."""
    console.print(_accounts_table(entries))


def show_account_table(entry: AccountEntry) -> None:
    """Display a single entry as a table."""
    console.print(_accounts_table([entry]))


def copy_password_with_feedback(password: str) -> None:
    """Copy password to clipboard and confirm. Clipboard failures propagate."""
    from .passwordgen import copy_to_clipboard

    copy_to_clipboard(password)
    success(SUCCESS_COPIED)
