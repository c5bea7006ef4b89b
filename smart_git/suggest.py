"""Heuristic commit message suggestions from changed file paths."""

import re

EMPTY_MESSAGE = "chore: empty commit (no changes?)"
AUTH_MESSAGE = "feat: implement authentication system"
DOCS_MESSAGE = "docs: update documentation"
STYLE_MESSAGE = "style: update stylesheets"
TEST_MESSAGE = "test: update/add tests"
FEATURE_MESSAGE = "feat: implement new feature"
MANY_CHANGES_MESSAGE = "chore: multiple changes across project"
FALLBACK_MESSAGE = "chore: minor updates"

MANY_CHANGES_THRESHOLD = 5

_STYLE_RE = re.compile(r"\.(css|scss|sass)$")
_TEST_FILE_RE = re.compile(r"\.(test|spec)\.(js|ts)$")
_SOURCE_RE = re.compile(r"\.(js|ts|py|java|cpp)$")


def _is_auth(path):
    return "auth" in path


def _is_docs(path):
    return "readme" in path or path.endswith(".md")


def _is_style(path):
    return bool(_STYLE_RE.search(path))


def _is_test(path):
    return bool(_TEST_FILE_RE.search(path)) or path.startswith("test/") or "/test/" in path


def _is_source(path):
    return bool(_SOURCE_RE.search(path))


# Order matters: the first rule with a matching file wins.
FILE_RULES = [
    (_is_auth, AUTH_MESSAGE),
    (_is_docs, DOCS_MESSAGE),
    (_is_style, STYLE_MESSAGE),
    (_is_test, TEST_MESSAGE),
    (_is_source, FEATURE_MESSAGE),
]


def suggest_commit_message(files):
    """
    Suggest a conventional commit message for a list of changed files.

    Paths are matched case-insensitively against FILE_RULES in order; the
    first rule matched by any file decides the message. With no rule
    matching, large change sets get a generic multi-change message.

    Args:
        files: Sequence of repository-relative paths

    Returns:
        Commit message string
    """
    if not files:
        return EMPTY_MESSAGE

    paths = [f.lower() for f in files]
    for matches, message in FILE_RULES:
        if any(matches(p) for p in paths):
            return message

    if len(paths) > MANY_CHANGES_THRESHOLD:
        return MANY_CHANGES_MESSAGE
    return FALLBACK_MESSAGE
