"""Command handlers.

Each handler receives the RecordStore explicitly, runs load -> mutate ->
save against it and returns what it ended up with, so handlers can be
called and checked as plain functions.
"""

from typing import List, Optional

import typer

from . import ui
from .commands import generate_help_text
from .messages import (
    ERROR_NOT_FOUND,
    INFO_NO_ACCOUNTS,
    INFO_NOTHING_TO_DELETE,
    INFO_PASSWORD,
    PROMPT_ACCOUNT,
    PROMPT_COPY,
    PROMPT_DELETE_ACCOUNT,
    PROMPT_EMAIL,
    PROMPT_GENERATE,
    PROMPT_GET_ACCOUNT,
    PROMPT_PASSWORD,
    PROMPT_USERNAME,
    SUCCESS_ADDED,
    SUCCESS_DELETED,
)
from .models import AccountEntry
from .passwordgen import generate_password
from .store import RecordStore, find_account


def show_help() -> None:
    """Print usage text."""
    ui.plain(generate_help_text())


def add_account(store: RecordStore) -> List[AccountEntry]:
    """Prompt for a new account and append it to the store."""
    entries = store.load()

    account = ui.prompt_text(PROMPT_ACCOUNT)
    username = ui.prompt_text(PROMPT_USERNAME)
    email = ui.prompt_text(PROMPT_EMAIL)

    if ui.prompt_yes_no(PROMPT_GENERATE):
        password = generate_password()
    else:
        password = ui.prompt_text(PROMPT_PASSWORD)

    entries.append(
        AccountEntry(account=account, username=username, email=email, password=password)
    )
    store.save(entries)
    ui.success(SUCCESS_ADDED)
    return entries


def list_accounts(store: RecordStore) -> List[AccountEntry]:
    """List all entries."""
    entries = store.load()
    if entries:
        ui.show_accounts_table(entries)
    else:
        ui.info(INFO_NO_ACCOUNTS)
    return entries


def get_account(store: RecordStore) -> Optional[AccountEntry]:
    """Look up one account and disclose its password on request."""
    name = ui.prompt_text(PROMPT_GET_ACCOUNT)
    entries = store.load()

    index = find_account(entries, name)
    if index is None:
        ui.warning(ERROR_NOT_FOUND.format(name=name))
        return None

    entry = entries[index]
    ui.show_account_table(entry)

    if ui.prompt_yes_no(PROMPT_COPY):
        ui.copy_password_with_feedback(entry.password)
    else:
        ui.plain(INFO_PASSWORD.format(account=entry.account, password=entry.password))
    return entry


def delete_account(store: RecordStore) -> List[AccountEntry]:
    """Remove the first account matching the name the user enters.

    Exits with status 0 straight away when there is nothing to delete.
    """
    entries = store.load()
    if not entries:
        ui.info(INFO_NOTHING_TO_DELETE)
        raise typer.Exit(0)

    ui.show_accounts_table(entries)
    name = ui.prompt_text(PROMPT_DELETE_ACCOUNT)

    index = find_account(entries, name)
    if index is None:
        ui.warning(ERROR_NOT_FOUND.format(name=name))
        return entries

    del entries[index]
    store.save(entries)
    ui.success(SUCCESS_DELETED)
    return entries
