"""
Tests for the strict y/n confirmation prompts.
"""

import click
import pytest

from shredder.constants import CONFIRM_DELETE_PROMPT, CONFIRM_FILL_PROMPT
from shredder.prompts import confirm_delete, confirm_fill, get_user_choice, wait_enter


class TestGetUserChoice:
    @pytest.mark.parametrize("answer", ["y", "Y", "yes", "  y"])
    def test_yes(self, stdin, answer):
        stdin(f"{answer}\n")
        assert get_user_choice("Proceed? ") is True

    @pytest.mark.parametrize("answer", ["n", "N", "no"])
    def test_no(self, stdin, answer):
        stdin(f"{answer}\n")
        assert get_user_choice("Proceed? ") is False

    def test_invalid_then_valid(self, stdin, capsys):
        """Invalid input is rejected with an error before y is accepted."""
        stdin("x\ny\n")
        assert get_user_choice("Proceed? ") is True

        out = capsys.readouterr().out
        assert out.count("Invalid choice. Please enter 'y' or 'n'.") == 1
        assert out.count("Proceed?") == 2

    def test_empty_is_not_yes(self, stdin, capsys):
        """Enter alone is never taken as a yes."""
        stdin("\n\nn\n")
        assert get_user_choice("Proceed? ") is False
        assert capsys.readouterr().out.count("Invalid choice") == 2

    def test_end_of_input_aborts(self, stdin):
        stdin("")
        with pytest.raises(click.Abort):
            get_user_choice("Proceed? ")


class TestConfirmations:
    def test_confirm_fill_prompt(self, stdin, capsys):
        stdin("y\n")
        assert confirm_fill() is True
        assert CONFIRM_FILL_PROMPT.strip() in capsys.readouterr().out

    def test_confirm_delete_prompt(self, stdin, capsys):
        stdin("N\n")
        assert confirm_delete() is False
        assert CONFIRM_DELETE_PROMPT.strip() in capsys.readouterr().out


class TestWaitEnter:
    def test_consumes_one_line(self, stdin, capsys):
        stdin("\nleftover\n")
        wait_enter()
        assert "Press Enter to exit..." in capsys.readouterr().out

    def test_end_of_input(self, stdin):
        """Closed stdin does not block or raise."""
        stdin("")
        wait_enter()
