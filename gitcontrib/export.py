"""HTML report of the analysed contributions."""

from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime
from pathlib import Path

from gitcontrib.app import App

_TITLE = "Git Contribution Analysis Report"
_INDENT = "    "

_STYLE_RULES: tuple[tuple[str, tuple[tuple[str, str], ...]], ...] = (
    (
        "body",
        (
            ("font-family", "Arial, sans-serif"),
            ("line-height", "1.6"),
            ("margin", "0"),
            ("padding", "20px"),
            ("color", "#333"),
        ),
    ),
    ("h1, h2", (("color", "#2c3e50"),)),
    (
        "table",
        (
            ("border-collapse", "collapse"),
            ("width", "100%"),
            ("margin-bottom", "20px"),
        ),
    ),
    (
        "th, td",
        (
            ("text-align", "left"),
            ("padding", "12px"),
            ("border-bottom", "1px solid #ddd"),
        ),
    ),
    ("th", (("background-color", "#f2f2f2"), ("font-weight", "bold"))),
    ("tr:hover", (("background-color", "#f5f5f5"),)),
    (
        ".report-date",
        (
            ("color", "#7f8c8d"),
            ("font-style", "italic"),
            ("margin-bottom", "30px"),
        ),
    ),
    (".container", (("max-width", "1200px"), ("margin", "0 auto"))),
    (
        ".repo-section",
        (
            ("margin-bottom", "40px"),
            ("border", "1px solid #eee"),
            ("padding", "20px"),
            ("border-radius", "5px"),
        ),
    ),
)

_SUMMARY_HEADERS = (
    "Author",
    "Email",
    "Total Commits",
    "Lines Added",
    "Lines Deleted",
    "Overall %",
    "Preferred Repo",
    "Preferred %",
)

_REPO_HEADERS = (
    "Author",
    "Email",
    "Commits",
    "Lines Added",
    "Lines Deleted",
    "Contribution %",
)


def _line(depth: int, text: str) -> str:
    return _INDENT * depth + text + "\n"


def _percent(value: float) -> str:
    return f"{value:.2f}%"


def _head() -> str:
    lines = [
        _line(0, "<!DOCTYPE html>"),
        _line(0, '<html lang="en">'),
        _line(0, "<head>"),
        _line(1, '<meta charset="UTF-8">'),
        _line(1, '<meta name="viewport" content="width=device-width, initial-scale=1.0">'),
        _line(1, f"<title>{_TITLE}</title>"),
        _line(1, "<style>"),
    ]
    for selector, declarations in _STYLE_RULES:
        lines.append(_line(2, f"{selector} {{"))
        lines.extend(_line(3, f"{prop}: {value};") for prop, value in declarations)
        lines.append(_line(2, "}"))
    lines += [
        _line(1, "</style>"),
        _line(0, "</head>"),
        _line(0, "<body>"),
        _line(1, '<div class="container">'),
        _line(2, f"<h1>{_TITLE}</h1>"),
        _INDENT * 2 + '<p class="report-date">Generated on: ',
    ]
    return "".join(lines)


def _section_open(heading: str, headers: Iterable[str]) -> str:
    lines = [
        _line(2, '<div class="repo-section">'),
        _line(3, f"<h2>{heading}</h2>"),
        _line(3, "<table>"),
        _line(4, "<thead>"),
        _line(5, "<tr>"),
    ]
    lines.extend(_line(6, f"<th>{header}</th>") for header in headers)
    lines += [_line(5, "</tr>"), _line(4, "</thead>"), _line(4, "<tbody>")]
    return "".join(lines)


def _section_close() -> str:
    return "\n" + _line(4, "</tbody>") + _line(3, "</table>") + _line(2, "</div>")


def _row(cells: Iterable[object]) -> str:
    body = "".join(_line(6, f"<td>{cell}</td>") for cell in cells)
    return "\n" + _line(5, "<tr>") + body + _line(5, "</tr>")


def _tail() -> str:
    return "\n" + _line(1, "</div>") + _line(0, "</body>") + _line(0, "</html>")


def _render(app: App) -> str:
    parts = [
        _head(),
        datetime.now().strftime("%Y-%m-%d %H:%M:%S"),
        "</p>\n",
        _line(2, ""),
        _section_open("Summary Across All Repositories", _SUMMARY_HEADERS),
    ]
    parts.extend(
        _row(
            (
                s.author,
                s.email,
                s.total_commits,
                s.total_lines_added,
                s.total_lines_deleted,
                _percent(s.overall_contribution_percent),
                s.preferred_repo,
                _percent(s.preferred_repo_percent),
            )
        )
        for s in app.author_summaries
    )
    parts.append(_section_close())

    for repo_name in app.repositories:
        parts.append("\n")
        parts.append(_section_open(f"Repository: {repo_name}", _REPO_HEADERS))
        parts.extend(
            _row(
                (
                    c.author,
                    c.email,
                    c.commits,
                    c.lines_added,
                    c.lines_deleted,
                    _percent(c.contribution_percent),
                )
            )
            for c in app.contributions.get(repo_name, [])
        )
        parts.append(_section_close())

    parts.append(_tail())
    return "".join(parts)


def export_html_report(app: App, output_path: str | Path) -> None:
    """Write an HTML report of *app*'s data to *output_path*."""
    Path(output_path).write_text(_render(app), encoding="utf-8")