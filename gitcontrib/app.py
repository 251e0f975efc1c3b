"""Application state shared between the loader and the terminal view."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from gitcontrib.git import Contribution


class AppState(enum.Enum):
    """Which screen the application is showing."""

    LOADING = "loading"
    MAIN = "main"


@dataclass
class AuthorSummary:
    """Totals for one author across every analysed repository."""

    author: str
    email: str
    total_commits: int
    total_lines_added: int
    total_lines_deleted: int
    overall_contribution_percent: float
    preferred_repo: str
    preferred_repo_percent: float


@dataclass
class App:
    """State of the analyser: data, selection and display flags.

    Tabs are numbered from 0; one tab per repository, followed by the
    summary tab.
    """

    state: AppState = AppState.LOADING
    repositories: list[str] = field(default_factory=list)
    contributions: dict[str, list[Contribution]] = field(default_factory=dict)
    author_summaries: list[AuthorSummary] = field(default_factory=list)
    current_tab: int = 0
    selected_in_tab: list[int | None] = field(default_factory=list)
    loading_message: str = "Initializing..."
    loading_progress: int = 0
    show_help: bool = False
    quit: bool = False

    @property
    def tab_count(self) -> int:
        """Number of tabs: one per repository plus the summary."""
        return len(self.repositories) + 1

    def _row_count(self) -> int | None:
        """Rows shown in the current tab, or None if the tab has no data."""
        if self.current_tab >= len(self.repositories):
            return len(self.author_summaries)
        rows = self.contributions.get(self.repositories[self.current_tab])
        return None if rows is None else len(rows)

    def next(self) -> None:
        """Move the selection down one row, wrapping to the top."""
        count = self._row_count()
        if count is None:
            return
        tab = self.current_tab
        selected = self.selected_in_tab[tab]
        if selected is None:
            if count:
                self.selected_in_tab[tab] = 0
        else:
            self.selected_in_tab[tab] = 0 if selected >= count - 1 else selected + 1

    def previous(self) -> None:
        """Move the selection up one row, wrapping to the bottom."""
        count = self._row_count()
        if count is None:
            return
        tab = self.current_tab
        selected = self.selected_in_tab[tab]
        if selected is None:
            if count:
                self.selected_in_tab[tab] = count - 1
        elif selected == 0:
            self.selected_in_tab[tab] = count - 1 if count else None
        else:
            self.selected_in_tab[tab] = selected - 1

    def next_tab(self) -> None:
        """Switch to the following tab, wrapping around."""
        self.current_tab = (self.current_tab + 1) % self.tab_count

    def previous_tab(self) -> None:
        """Switch to the preceding tab, wrapping around."""
        count = self.tab_count
        self.current_tab = (self.current_tab + count - 1) % count

    def toggle_help(self) -> None:
        """Show or hide the help panel."""
        self.show_help = not self.show_help