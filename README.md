# gitcontrib

An interactive terminal tool that scans a directory for git repositories and
shows who contributed what. For every repository it lists each author's commit
count, lines added, lines deleted and share of all changed lines. A summary tab
adds up every author's work across all repositories and names the repository
each author contributed to most.

## Installation

```
pip install .
```

`git` has to be installed and on your `PATH`.

## Usage

```
gitcontrib --path ~/projects
gitcontrib --path ~/projects --pattern "service-*"
```

- `-p`, `--path`: the directory that holds the repositories. This option is required.
- `-P`, `--pattern`: a glob pattern, matched inside `--path`, that selects repositories. The default is `*`.

Only directories that contain a `.git` directory are analyzed. Merge commits
are not counted.

### Keys

| Key         | Action                                             |
|-------------|----------------------------------------------------|
| Up / Down   | Move the selection in the current table            |
| Tab         | Go to the next repository tab                      |
| Shift+Tab   | Go to the previous repository tab                  |
| `h`         | Export an HTML report to `git_contribution_report.html` |
| `?`         | Show or hide the help bar                          |
| `q`         | Quit                                               |

## Library use

The analysis functions can be used without the interface:

```python
from pathlib import Path
from gitcontrib.git import find_repositories, analyze_repository, calculate_author_summaries

contributions = {}
for repo in find_repositories(Path("~/projects").expanduser(), "*"):
    name, contribs = analyze_repository(repo)
    contributions[name] = contribs

for summary in calculate_author_summaries(contributions):
    print(summary.author, summary.email, f"{summary.overall_contribution_percent:.2f}%")
```

To write a report from a populated `gitcontrib.app.App`, call
`gitcontrib.export.export_html_report(app, path)`.

## Development

```
pip install -e ".[test]"
pytest
```