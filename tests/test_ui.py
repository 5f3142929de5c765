"""Tests for the prompt and output layer."""

import pytest

from passman import ui
from passman.models import AccountEntry


class TestPromptText:
    def test_prints_message_and_strips_input(self, feed_input, capsys):
        feed_input("   github  ")

        assert ui.prompt_text("Enter account:") == "github"
        assert "Enter account:" in capsys.readouterr().out

    def test_empty_message_prints_nothing(self, feed_input, capsys):
        feed_input("value")

        assert ui.prompt_text("") == "value"
        assert capsys.readouterr().out == ""

    def test_end_of_input_reads_as_empty(self, feed_input):
        feed_input()
        assert ui.prompt_text("Anything?") == ""

    def test_reads_one_line_at_a_time(self, feed_input):
        feed_input("first", "second")
        assert ui.prompt_text() == "first"
        assert ui.prompt_text() == "second"

    def test_message_with_brackets_is_printed_verbatim(self, feed_input, capsys):
        feed_input("n")
        ui.prompt_text("Generate password? [y/n]:")
        assert "Generate password? [y/n]:" in capsys.readouterr().out


class TestPromptYesNo:
    @pytest.mark.parametrize("answer", ["y", "Y", " y ", "Y "])
    def test_yes(self, feed_input, answer):
        feed_input(answer)
        assert ui.prompt_yes_no("Continue?") is True

    @pytest.mark.parametrize("answer", ["n", "N", "", "yes", "no", "y es", "garbage"])
    def test_everything_else_is_no(self, feed_input, answer):
        feed_input(answer)
        assert ui.prompt_yes_no("Continue?") is False


class TestTables:
    def test_table_omits_password(self, capsys, sample_entries):
        ui.show_accounts_table(sample_entries)
        out = capsys.readouterr().out

        assert "Account" in out and "Username" in out and "Email" in out
        assert "github" in out and "Gmail" in out
        assert "alice@gmail.com" in out
        assert "Password" not in out
        assert "gh-secret" not in out
        assert "mail-secret" not in out

    def test_single_entry_table(self, capsys):
        ui.show_account_table(AccountEntry("Bank", "user123", "u@bank.com", "hunter2"))
        out = capsys.readouterr().out

        assert "Bank" in out
        assert "user123" in out
        assert "hunter2" not in out

    def test_markup_in_values_is_not_interpreted(self, capsys):
        ui.show_account_table(AccountEntry("[bold]x[/bold]", "u", "e", "p"))
        assert "[bold]x[/bold]" in capsys.readouterr().out


class TestMessages:
    def test_error_goes_to_stderr(self, capsys):
        ui.error("Something broke")
        captured = capsys.readouterr()
        assert "Something broke" in captured.err
        assert "Something broke" not in captured.out

    def test_success_goes_to_stdout(self, capsys):
        ui.success("Done")
        assert "Done" in capsys.readouterr().out

    def test_copy_password_with_feedback(self, clipboard, capsys):
        ui.copy_password_with_feedback("s3cret")

        assert clipboard == ["s3cret"]
        out = capsys.readouterr().out
        assert "Password copied to clipboard!" in out
        assert "s3cret" not in out
