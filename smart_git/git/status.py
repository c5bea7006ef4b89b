"""Working-tree status, staging and commit helpers."""

from .core import run


def _runner(runner):
    return runner or run


def get_status(runner=None):
    """
    Return NUL-separated `git status --porcelain -z` output ("" when clean).

    The -z form leaves paths unquoted, so spaces and non-ASCII names come
    through verbatim.
    """
    return _runner(runner)("git status --porcelain -z")


def parse_status_files(status):
    """
    Extract file paths from `git status --porcelain -z` output.

    Each record is a two-character status code, a space and the path. The
    first record may have lost its leading blank when the output was
    trimmed. Renames and copies are followed by an extra record holding the
    source path, which is skipped so only the new path is kept.
    """
    files = []
    records = status.split("\0")
    i = 0
    while i < len(records):
        record = records[i]
        i += 1
        if not record.strip():
            continue
        if len(record) > 2 and record[2] == " ":
            code, path = record[:2], record[3:]
        else:
            code, path = " " + record[0], record[2:]
        if "R" in code or "C" in code:
            i += 1
        files.append(path)
    return files


def stage_all(runner=None):
    """Stage every change in the working tree, wherever the command runs from."""
    _runner(runner)("git add -A")


def get_staged_files(runner=None):
    """Get list of staged file paths."""
    out = _runner(runner)("git diff --cached --name-only -z")
    return [f for f in out.split("\0") if f.strip()]


def get_current_branch(runner=None):
    """Get the current git branch name ("" on a detached HEAD)."""
    return _runner(runner)("git branch --show-current")


def create_branch(name, runner=None):
    """Create a branch and switch to it."""
    _runner(runner)(["git", "checkout", "-b", name])


def commit(message, runner=None):
    """Commit the staged changes with `message`."""
    return _runner(runner)(["git", "commit", "-m", message])


def push(runner=None):
    """Push the current branch to its configured remote."""
    return _runner(runner)("git push")
