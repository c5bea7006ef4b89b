"""Validators for prompt input and commit subjects."""

from .config import COMMIT_SUBJECT_RE
from .errors import ValidationError


def validate_branch_name(name):
    """
    Validate a new branch name entered at a prompt.

    Returns the name with surrounding whitespace removed.
    Raises ValidationError if the name is empty.
    """
    name = (name or "").strip()
    if not name:
        raise ValidationError("Branch name cannot be empty.")
    return name


def lint_commit_subject(message):
    """
    Validate the subject line of a commit message.

    Raises ValidationError if it does not match `<type>(<scope>): <subject>`.
    """
    lines = (message or "").strip().splitlines()
    subject = lines[0] if lines else ""
    if not COMMIT_SUBJECT_RE.match(subject):
        raise ValidationError("Commit subject should match the format: <type>(<scope>): <subject>")
