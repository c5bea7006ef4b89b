"""Configuration constants and settings for smart-git."""

import re

__version__ = "0.1.0"

PROTECTED_BRANCHES = ("main", "master")

GUARD_ABORT = "abort"
GUARD_CREATE_BRANCH = "create-branch"
GUARD_CONTINUE = "continue"

GUARD_CHOICES = [
    {"label": "Abort commit (recommended)", "value": GUARD_ABORT},
    {"label": "Create a new branch and switch", "value": GUARD_CREATE_BRANCH},
    {"label": "Continue committing to {branch} (dangerous)", "value": GUARD_CONTINUE},
]

COMMIT_SUBJECT_RE = re.compile(
    r"^(feat|fix|docs|style|refactor|perf|test|build|ci|chore|revert)(\(.+\))?!?: .+$"
)

SPINNER_FRAMES = "|/-\\"
SPINNER_CYCLES = 10
SPINNER_DELAY = 0.05
