"""Command line entry point: analyse repositories and browse the results."""

from __future__ import annotations

import argparse
import sys
import threading
import time
from pathlib import Path

from blessed import Terminal
from rich.console import Console
from rich.live import Live

from gitcontrib.app import App, AppState
from gitcontrib.export import export_html_report
from gitcontrib.git import analyze_repository, calculate_author_summaries, find_repositories
from gitcontrib.ui import render_loading_screen, render_main_view

REPORT_PATH = Path("git_contribution_report.html")
TICK_SECONDS = 0.1
EMPTY_PAUSE_SECONDS = 2.0

_SEQUENCES = {
    "KEY_UP": ("up", False),
    "KEY_DOWN": ("down", False),
    "KEY_TAB": ("tab", False),
    "KEY_BTAB": ("tab", True),
}


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse the command line."""
    parser = argparse.ArgumentParser(
        prog="gitcontrib",
        description="Analyse git repository contributions with detailed statistics",
    )
    parser.add_argument("-p", "--path", type=Path, required=True,
                        help="Directory holding the repositories")
    parser.add_argument("--pattern", default="*",
                        help='Repository pattern to match (e.g., "bwt-*")')
    return parser.parse_args(argv)


def load_repositories(app: App, lock: threading.Lock, parent_path, pattern: str) -> None:
    """Find and analyse the repositories, filling *app* as work progresses."""
    with lock:
        app.loading_message = "Finding Git repositories"

    repositories = find_repositories(parent_path, pattern)

    if not repositories:
        with lock:
            app.loading_message = "No Git repositories found!"
            time.sleep(EMPTY_PAUSE_SECONDS)
            app.selected_in_tab = [None]
            app.state = AppState.MAIN
        return

    count = len(repositories)
    names: list[str] = []
    contributions_map = {}

    for index, repo_path in enumerate(repositories):
        repo_name = Path(repo_path).name
        with lock:
            app.loading_message = f"Analyzing repository {index + 1}/{count}: {repo_name}"
            app.loading_progress = int(index / count * 100.0)
        try:
            name, contributions = analyze_repository(repo_path)
        except (OSError, ValueError) as exc:
            print(f"Error analyzing repository {repo_name}: {exc}", file=sys.stderr)
            continue
        names.append(name)
        contributions_map[name] = contributions

    names.sort()
    summaries = calculate_author_summaries(contributions_map)

    with lock:
        app.repositories = names
        app.contributions = contributions_map
        app.author_summaries = summaries
        app.selected_in_tab = [None] * (len(names) + 1)
        app.state = AppState.MAIN


def handle_key(app: App, key: str, shift: bool = False) -> None:
    """Apply a key press to *app*.

    *key* is a single character or one of "up", "down" and "tab"; keys are
    ignored until loading has finished.
    """
    if app.state is not AppState.MAIN:
        return
    if key == "q":
        app.quit = True
    elif key == "?":
        app.toggle_help()
    elif key == "h":
        try:
            export_html_report(app, REPORT_PATH)
        except OSError as exc:
            app.loading_message = f"Error exporting report: {exc}"
        else:
            app.loading_message = f"Report exported to {REPORT_PATH}"
    elif key == "down":
        app.next()
    elif key == "up":
        app.previous()
    elif key == "tab":
        if shift:
            app.previous_tab()
        else:
            app.next_tab()


def _translate(key) -> tuple[str | None, bool]:
    if key.is_sequence:
        return _SEQUENCES.get(key.name, (None, False))
    text = str(key)
    if text == "\t":
        return "tab", False
    return text, False


def _load_safely(app: App, lock: threading.Lock, parent_path, pattern: str) -> None:
    try:
        load_repositories(app, lock, parent_path, pattern)
    except Exception as exc:  # reported, the view keeps running
        print(f"Loading thread error: {exc}", file=sys.stderr)


def main(argv: list[str] | None = None) -> int:
    """Run the interactive analyser."""
    args = parse_args(argv)
    app = App()
    lock = threading.Lock()
    loader = threading.Thread(
        target=_load_safely, args=(app, lock, args.path, args.pattern), daemon=True
    )
    loader.start()

    term = Terminal()
    console = Console()
    loader_done = False
    last_tick = time.monotonic()

    with term.cbreak(), term.hidden_cursor(), Live(
        console=console, screen=True, auto_refresh=False
    ) as live:
        while True:
            with lock:
                loading = app.state is AppState.LOADING
                view = render_loading_screen(app) if loading else render_main_view(app)
            live.update(view, refresh=True)

            if not loader_done and not loading:
                loader.join()
                loader_done = True

            timeout = max(0.0, TICK_SECONDS - (time.monotonic() - last_tick))
            key = term.inkey(timeout=timeout)
            if key:
                name, shift = _translate(key)
                if name:
                    with lock:
                        handle_key(app, name, shift)

            with lock:
                if app.quit:
                    break

            if time.monotonic() - last_tick >= TICK_SECONDS:
                with lock:
                    if app.state is AppState.LOADING:
                        app.loading_progress = (app.loading_progress + 1) % 100
                last_tick = time.monotonic()

    return 0