"""Discovery of git repositories and per-author contribution statistics."""

from __future__ import annotations

import glob
import re
import subprocess
from dataclasses import dataclass
from pathlib import Path

from gitcontrib.app import AuthorSummary

_U32 = re.compile(r"\+?[0-9]+")


@dataclass
class Contribution:
    """What one author contributed to one repository."""

    author: str
    email: str
    commits: int
    lines_added: int
    lines_deleted: int
    contribution_percent: float
    repository: str


def is_git_repository(path: str | Path) -> bool:
    """Return True if *path* has a .git directory."""
    return (Path(path) / ".git").is_dir()


def find_repositories(parent_path: str | Path, pattern: str) -> list[Path]:
    """Return the git repositories under *parent_path* matching *pattern*."""
    full_pattern = str(Path(parent_path) / pattern)
    return [
        path
        for path in map(Path, sorted(glob.glob(full_pattern)))
        if path.is_dir() and is_git_repository(path)
    ]


def _git(repo_path: Path, *args: str) -> str:
    result = subprocess.run(
        ["git", *args], cwd=repo_path, capture_output=True, check=False
    )
    return result.stdout.decode("utf-8", errors="replace")


def _numstat_counts(text: str):
    """Yield (added, deleted) for each numstat line with numeric counts."""
    for line in text.splitlines():
        parts = line.split()
        if len(parts) != 3:
            continue
        added, deleted, _ = parts
        if _U32.fullmatch(added) and _U32.fullmatch(deleted):
            yield int(added), int(deleted)


def _authors(text: str) -> dict[str, str]:
    """Map each e-mail to the first name seen with it."""
    authors: dict[str, str] = {}
    for line in text.splitlines():
        email, sep, name = line.partition("|")
        if sep:
            authors.setdefault(email, name)
    return authors


def analyze_repository(repo_path: str | Path) -> tuple[str, list[Contribution]]:
    """Collect per-author statistics for one repository.

    Returns the repository name and its contributions, largest share first.
    Raises ValueError if the path has no final component and OSError if git
    cannot be run.
    """
    repo_path = Path(repo_path)
    repo_name = repo_path.name
    if not repo_name:
        raise ValueError("Invalid repository path")

    total_changed = sum(
        a + d for a, d in _numstat_counts(_git(repo_path, "log", "--no-merges", "--numstat"))
    )
    authors = _authors(_git(repo_path, "log", "--no-merges", "--format=%ae|%an"))

    contributions = []
    for email, name in authors.items():
        hashes = _git(repo_path, "log", "--no-merges", "--author", email, "--format=%H")
        commit_count = len(hashes.splitlines())
        stats = _git(
            repo_path, "log", "--no-merges", "--author", email, "--numstat", "--pretty=format:"
        )
        lines_added = lines_deleted = 0
        for added, deleted in _numstat_counts(stats):
            lines_added += added
            lines_deleted += deleted
        changed = lines_added + lines_deleted
        percent = changed / total_changed * 100.0 if total_changed > 0 else 0.0
        contributions.append(
            Contribution(
                author=name,
                email=email,
                commits=commit_count,
                lines_added=lines_added,
                lines_deleted=lines_deleted,
                contribution_percent=percent,
                repository=repo_name,
            )
        )

    contributions.sort(key=lambda c: c.contribution_percent, reverse=True)
    return repo_name, contributions


@dataclass
class _AuthorTotals:
    author: str
    commits: int = 0
    lines_added: int = 0
    lines_deleted: int = 0

    def __post_init__(self) -> None:
        self.repo_percentages: dict[str, float] = {}


def calculate_author_summaries(
    contributions_map: dict[str, list[Contribution]],
) -> list[AuthorSummary]:
    """Combine per-repository contributions into per-author summaries."""
    totals: dict[str, _AuthorTotals] = {}
    all_changed = 0

    for repo_name, contributions in contributions_map.items():
        for contrib in contributions:
            all_changed += contrib.lines_added + contrib.lines_deleted
            entry = totals.setdefault(contrib.email, _AuthorTotals(contrib.author))
            entry.commits += contrib.commits
            entry.lines_added += contrib.lines_added
            entry.lines_deleted += contrib.lines_deleted
            entry.repo_percentages[repo_name] = contrib.contribution_percent

    summaries = []
    for email, entry in totals.items():
        changed = entry.lines_added + entry.lines_deleted
        overall = changed / all_changed * 100.0 if all_changed > 0 else 0.0

        preferred_repo = ""
        highest = 0.0
        for repo, percent in entry.repo_percentages.items():
            if percent > highest:
                highest = percent
                preferred_repo = repo

        summaries.append(
            AuthorSummary(
                author=entry.author,
                email=email,
                total_commits=entry.commits,
                total_lines_added=entry.lines_added,
                total_lines_deleted=entry.lines_deleted,
                overall_contribution_percent=overall,
                preferred_repo=preferred_repo,
                preferred_repo_percent=highest,
            )
        )

    summaries.sort(key=lambda s: s.overall_contribution_percent, reverse=True)
    return summaries