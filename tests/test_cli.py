import subprocess
import threading
from pathlib import Path
from unittest import mock

import pytest

from gitcontrib.app import App, AppState, AuthorSummary
from gitcontrib.cli import handle_key, load_repositories, parse_args
from gitcontrib.git import Contribution


@pytest.fixture
def app():
    a = App()
    a.state = AppState.MAIN
    a.repositories = ["alpha"]
    a.contributions = {
        "alpha": [
            Contribution("Ann", "ann@example.com", 2, 5, 1, 60.0, "alpha"),
            Contribution("Bob", "bob@example.com", 1, 3, 1, 40.0, "alpha"),
        ]
    }
    a.author_summaries = [
        AuthorSummary("Ann", "ann@example.com", 2, 5, 1, 60.0, "alpha", 60.0)
    ]
    a.selected_in_tab = [None, None]
    return a


def test_parse_args_defaults():
    args = parse_args(["--path", "repos"])
    assert args.path == Path("repos")
    assert args.pattern == "*"


def test_parse_args_pattern():
    args = parse_args(["-p", "repos", "--pattern", "bwt-*"])
    assert args.pattern == "bwt-*"


def test_parse_args_requires_path():
    with pytest.raises(SystemExit):
        parse_args([])


def test_keys_ignored_while_loading():
    a = App()
    handle_key(a, "q")
    assert a.quit is False


def test_quit_and_help(app):
    handle_key(app, "?")
    assert app.show_help is True
    handle_key(app, "?")
    assert app.show_help is False
    handle_key(app, "q")
    assert app.quit is True


def test_tab_navigation(app):
    handle_key(app, "tab")
    assert app.current_tab == 1
    handle_key(app, "tab")
    assert app.current_tab == 0
    handle_key(app, "tab", shift=True)
    assert app.current_tab == 1


def test_row_navigation(app):
    handle_key(app, "down")
    assert app.selected_in_tab[0] == 0
    handle_key(app, "down")
    assert app.selected_in_tab[0] == 1
    handle_key(app, "down")
    assert app.selected_in_tab[0] == 0
    handle_key(app, "up")
    assert app.selected_in_tab[0] == 1


def test_export_key_writes_report(app, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    handle_key(app, "h")
    report = tmp_path / "git_contribution_report.html"
    assert report.exists()
    assert "ann@example.com" in report.read_text(encoding="utf-8")
    assert app.loading_message == "Report exported to git_contribution_report.html"


def test_load_without_repositories(tmp_path):
    a = App()
    with mock.patch("gitcontrib.cli.time.sleep") as sleep:
        load_repositories(a, threading.Lock(), tmp_path, "*")
    assert a.state is AppState.MAIN
    assert a.loading_message == "No Git repositories found!"
    assert a.repositories == []
    sleep.assert_called_once()


def test_load_with_repositories(tmp_path):
    for name in ("beta", "alpha"):
        (tmp_path / name / ".git").mkdir(parents=True)
    (tmp_path / "plain").mkdir()
    a = App()
    empty = subprocess.CompletedProcess([], 0, stdout=b"")
    with mock.patch("gitcontrib.git.subprocess.run", return_value=empty):
        load_repositories(a, threading.Lock(), tmp_path, "*")
    assert a.state is AppState.MAIN
    assert a.repositories == ["alpha", "beta"]
    assert a.contributions == {"alpha": [], "beta": []}
    assert a.selected_in_tab == [None, None, None]
    assert a.loading_message.startswith("Analyzing repository 2/2")


def test_load_reports_failing_repository(tmp_path, capsys):
    (tmp_path / "alpha" / ".git").mkdir(parents=True)
    a = App()
    with mock.patch("gitcontrib.git.subprocess.run", side_effect=FileNotFoundError("git")):
        load_repositories(a, threading.Lock(), tmp_path, "*")
    assert a.repositories == []
    assert a.state is AppState.MAIN
    assert "Error analyzing repository alpha" in capsys.readouterr().err