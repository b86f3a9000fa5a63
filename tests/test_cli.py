"""Tests for the interactive menu."""

import pytest

from cli import menu, prompts
from core.store import CredentialStore


def feed(monkeypatch, *answers):
    """Answer input() calls in order."""
    it = iter(answers)
    monkeypatch.setattr("builtins.input", lambda prompt="": next(it))


def feed_secret(monkeypatch, secret):
    monkeypatch.setattr(menu.getpass, "getpass", lambda prompt="": secret)


@pytest.fixture
def store(tmp_path):
    return CredentialStore(str(tmp_path / "passwords.json"))


class TestPrompts:
    """Test input parsing helpers."""

    def test_int_default_on_empty(self, monkeypatch):
        """Empty input gives the default."""
        feed(monkeypatch, "")
        assert prompts.prompt_int("Length", 12) == 12

    def test_int_reprompts_on_garbage(self, monkeypatch, capsys):
        """Non-numeric input asks again."""
        feed(monkeypatch, "abc", "-3", "20")
        assert prompts.prompt_int("Length", 12) == 20
        out = capsys.readouterr().out
        assert "Invalid input" in out
        assert "at least 0" in out

    def test_int_without_minimum(self, monkeypatch):
        """Negative numbers pass when no minimum is set."""
        feed(monkeypatch, "-1")
        assert prompts.prompt_int("Index", 0, minimum=None) == -1

    @pytest.mark.parametrize("answer,expected", [("y", True), ("YES", True), ("n", False), ("", True), ("?", True)])
    def test_yes_no(self, monkeypatch, answer, expected):
        """y/n answers win, anything else gives the default."""
        feed(monkeypatch, answer)
        assert prompts.prompt_yes_no("Use digits?", default=True) is expected

    def test_text_default(self, monkeypatch):
        """Blank text falls back to the default."""
        feed(monkeypatch, "   ")
        assert prompts.prompt_text("Separator", "-") == "-"

    def test_confirm_with_word(self, monkeypatch):
        """Keyword confirmation is exact."""
        feed(monkeypatch, "delete")
        assert prompts.confirm_action("Sure?", require_word="DELETE") is False

    def test_confirm_yes(self, monkeypatch):
        """Plain confirmation accepts y and yes."""
        feed(monkeypatch, "Yes")
        assert prompts.confirm_action("Sure?") is True

    def test_text_keeps_whitespace_when_asked(self, monkeypatch):
        """A lone space survives when stripping is off."""
        feed(monkeypatch, " ")
        assert prompts.prompt_text("Separator", "-", strip=False) == " "


class TestFlows:
    """Test individual menu actions."""

    def test_generate_random_defaults(self, monkeypatch, capsys):
        """Empty answers give a 12-character password."""
        feed(monkeypatch, "", "", "", "")
        password = menu.generate_random_flow()
        assert len(password) == 12
        assert password in capsys.readouterr().out

    def test_generate_memorable_defaults(self, monkeypatch):
        """Empty answers give four capitalized words joined by dashes."""
        feed(monkeypatch, "", "", "")
        password = menu.generate_memorable_flow()
        assert len(password[:-3].split("-")) == 4
        assert password[-3:].isdigit()

    def test_generate_memorable_space_separator(self, monkeypatch):
        """A space typed as separator is used, not replaced by the default."""
        feed(monkeypatch, "3", " ", "n")
        password = menu.generate_memorable_flow()
        assert len(password[:-3].split(" ")) == 3
        assert "-" not in password

    def test_check_strength(self, monkeypatch, capsys):
        """Strength check prints tier, score and suggestions."""
        feed_secret(monkeypatch, "abc")
        report = menu.check_strength_flow()
        out = capsys.readouterr().out
        assert report.strength == "Weak"
        assert "Score: 1/6" in out
        assert "Add digits" in out

    def test_save_and_list(self, monkeypatch, capsys, store):
        """Saving a strong password stores it and the list shows it."""
        feed(monkeypatch, "GitHub", "alice")
        feed_secret(monkeypatch, "Abcdefgh12!@")
        assert menu.save_password_flow(store) is True

        menu.list_passwords_flow(store)
        out = capsys.readouterr().out
        assert "Password saved (hashed)" in out
        assert "0. GitHub - alice (Created:" in out
        assert "Abcdefgh12!@" not in out

    def test_save_weak_password_can_be_declined(self, monkeypatch, store):
        """Weak passwords need confirmation."""
        feed(monkeypatch, "GitHub", "alice", "n")
        feed_secret(monkeypatch, "abc")
        assert menu.save_password_flow(store) is False
        assert store.list() == []

    def test_save_requires_service(self, monkeypatch, store):
        """An empty service name is rejected before anything else."""
        feed(monkeypatch, "")
        assert menu.save_password_flow(store) is False
        assert store.list() == []

    def test_search(self, monkeypatch, capsys, store):
        """Search prints matches or a not-found message."""
        store.append("GitHub", "alice", "p@ss")
        feed(monkeypatch, "git")
        menu.search_passwords_flow(store)
        feed(monkeypatch, "zzz")
        menu.search_passwords_flow(store)
        out = capsys.readouterr().out
        assert "GitHub - alice" in out
        assert "No passwords found" in out

    def test_delete(self, monkeypatch, store):
        """Delete removes the chosen index."""
        store.append("GitHub", "alice", "p@ss")
        feed(monkeypatch, "0", "DELETE")
        assert menu.delete_password_flow(store) is True
        assert store.list() == []

    def test_delete_needs_keyword(self, monkeypatch, capsys, store):
        """Anything but the exact keyword cancels the delete."""
        store.append("GitHub", "alice", "p@ss")
        feed(monkeypatch, "0", "y")
        assert menu.delete_password_flow(store) is False
        assert "Deletion canceled." in capsys.readouterr().out
        assert len(store.list()) == 1

    def test_delete_bad_index(self, monkeypatch, capsys, store):
        """Bad indices are reported, not raised."""
        store.append("GitHub", "alice", "p@ss")
        feed(monkeypatch, "3", "DELETE")
        assert menu.delete_password_flow(store) is False
        assert "No password at index 3" in capsys.readouterr().out
        assert len(store.list()) == 1

    def test_empty_list(self, capsys, store):
        """An empty store says so."""
        menu.list_passwords_flow(store)
        assert "No saved passwords" in capsys.readouterr().out


class TestMainMenu:
    """Test the menu loop."""

    def test_invalid_then_exit(self, monkeypatch, capsys, store):
        """Unknown choices are reported and 8 exits."""
        feed(monkeypatch, "42", "8")
        menu.main_menu(store)
        out = capsys.readouterr().out
        assert "Invalid choice" in out
        assert "Goodbye." in out

    def test_main_exits_on_eof(self, monkeypatch, tmp_path):
        """End of input ends the program cleanly."""
        def eof(prompt=""):
            raise EOFError

        monkeypatch.setattr("builtins.input", eof)
        monkeypatch.setattr(menu, "configure_logging", lambda log_dir: None)
        assert menu.main(str(tmp_path / "passwords.json"), str(tmp_path / "logs")) == 0
