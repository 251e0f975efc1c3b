"""Terminal views of the analyser state, built as rich renderables."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from rich.align import Align
from rich.console import Group, RenderableType
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from gitcontrib.app import App, AuthorSummary
from gitcontrib.git import Contribution

TITLE = "Git Contribution Analyzer"
SELECTED_STYLE = "reverse"
HEADER_STYLE = "yellow"

_REPO_COLUMNS = (
    ("Author", 20),
    ("Email", 30),
    ("Commits", 10),
    ("Lines Added", 13),
    ("Lines Deleted", 13),
    ("Contribution %", 14),
)

_SUMMARY_COLUMNS = (
    ("Author", 15),
    ("Email", 20),
    ("Total Commits", 10),
    ("Lines Added", 10),
    ("Lines Deleted", 10),
    ("Overall %", 10),
    ("Preferred Repo", 15),
    ("Preferred %", 10),
)


@dataclass(frozen=True)
class Rect:
    """A rectangular area of the screen, in character cells."""

    x: int
    y: int
    width: int
    height: int


def _split(start: int, length: int, percents: Sequence[int]) -> list[tuple[int, int]]:
    """Split a span into parts by percentage; the last part takes what remains."""
    parts = []
    offset = start
    for index, percent in enumerate(percents):
        if index == len(percents) - 1:
            size = start + length - offset
        else:
            size = min(length * percent // 100, start + length - offset)
        parts.append((offset, size))
        offset += size
    return parts


def centered_rect(percent_x: int, percent_y: int, r: Rect) -> Rect:
    """Return the area of *r* that is *percent_x* wide, *percent_y* high, centred."""
    margin_y = (100 - percent_y) // 2
    margin_x = (100 - percent_x) // 2
    y, height = _split(r.y, r.height, (margin_y, percent_y, margin_y))[1]
    x, width = _split(r.x, r.width, (margin_x, percent_x, margin_x))[1]
    return Rect(x, y, width, height)


def _loading_text(app: App) -> str:
    return f"{app.loading_message} {'.' * ((app.loading_progress % 4) + 1)}"


def render_loading_screen(app: App) -> RenderableType:
    """The screen shown while repositories are being analysed."""
    message = Text(_loading_text(app), style="cyan", justify="center")
    return Panel(Align.center(message, vertical="middle"), title=TITLE, expand=True)


def _table(title: str, columns: Sequence[tuple[str, int]]) -> Table:
    table = Table(title=title, header_style=HEADER_STYLE, expand=True)
    for header, ratio in columns:
        table.add_column(header, ratio=ratio)
    return table


def render_repository_tab(
    repo_name: str,
    contributions: Sequence[Contribution],
    selected: int | None,
) -> Table:
    """Table of the contributions to one repository."""
    table = _table(f"Repository: {repo_name}", _REPO_COLUMNS)
    for index, c in enumerate(contributions):
        table.add_row(
            c.author,
            c.email,
            str(c.commits),
            str(c.lines_added),
            str(c.lines_deleted),
            f"{c.contribution_percent:.2f}%",
            style=SELECTED_STYLE if index == selected else None,
        )
    return table


def render_summary_tab(
    summaries: Sequence[AuthorSummary],
    selected: int | None,
) -> Table:
    """Table of the per-author totals across all repositories."""
    table = _table("Summary Across All Repositories", _SUMMARY_COLUMNS)
    for index, s in enumerate(summaries):
        table.add_row(
            s.author,
            s.email,
            str(s.total_commits),
            str(s.total_lines_added),
            str(s.total_lines_deleted),
            f"{s.overall_contribution_percent:.2f}%",
            s.preferred_repo,
            f"{s.preferred_repo_percent:.2f}%",
            style=SELECTED_STYLE if index == selected else None,
        )
    return table


def render_help_shortcut() -> Panel:
    """One-line hint on how to open the help."""
    return Panel(Text("Press '?' to show help", style="grey70", justify="center"))


def render_help() -> Panel:
    """The key bindings."""
    lines = Text(
        "↑/↓: Navigate entries | Tab/Shift+Tab: Switch repositories\n"
        "?: Toggle help | q: Quit | h: Export HTML report",
        justify="center",
    )
    return Panel(lines, title="Help")


def _tabs(app: App) -> Panel:
    titles = [*app.repositories, "Summary"]
    text = Text()
    for index, title in enumerate(titles):
        if index:
            text.append(" │ ")
        text.append(title, style="bold yellow" if index == app.current_tab else None)
    return Panel(text, title="Repositories")


def render_main_view(app: App) -> RenderableType:
    """The tab bar, the current tab's table and the help area."""
    tab = app.current_tab
    selected = app.selected_in_tab[tab] if tab < len(app.selected_in_tab) else None

    content: RenderableType = Text("")
    if tab < len(app.repositories):
        repo_name = app.repositories[tab]
        contributions = app.contributions.get(repo_name)
        if contributions is not None:
            content = render_repository_tab(repo_name, contributions, selected)
    else:
        content = render_summary_tab(app.author_summaries, selected)

    footer = render_help() if app.show_help else render_help_shortcut()
    return Panel(Group(_tabs(app), content, footer), title=TITLE)