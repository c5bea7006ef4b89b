"""Protected branch check run before committing."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .config import (
    GUARD_ABORT,
    GUARD_CHOICES,
    GUARD_CONTINUE,
    GUARD_CREATE_BRANCH,
    PROTECTED_BRANCHES,
)
from .validation import validate_branch_name


class GuardAction(Enum):
    ABORT = GUARD_ABORT
    CREATE_BRANCH = GUARD_CREATE_BRANCH
    CONTINUE = GUARD_CONTINUE


@dataclass(frozen=True)
class GuardDecision:
    """Outcome of the branch guard; `branch_name` is set only for CREATE_BRANCH."""

    action: GuardAction
    branch_name: Optional[str] = None

    @classmethod
    def abort(cls):
        return cls(GuardAction.ABORT)

    @classmethod
    def create_branch(cls, name):
        if not name:
            raise ValueError("A new branch needs a non-empty name")
        return cls(GuardAction.CREATE_BRANCH, name)

    @classmethod
    def proceed(cls):
        return cls(GuardAction.CONTINUE)


def is_protected_branch(branch):
    return branch in PROTECTED_BRANCHES


def guard_choices(branch):
    """Guard menu entries with the branch name filled into the labels."""
    return [
        {"label": c["label"].format(branch=branch), "value": c["value"]}
        for c in GUARD_CHOICES
    ]


def run_branch_guard(current_branch, prompter):
    """
    Decide what to do when about to commit on `current_branch`.

    Unprotected branches continue without asking anything. On a protected
    branch the user picks abort, create-branch or continue; create-branch
    asks for a non-empty name. The caller is responsible for actually
    creating the branch.

    Args:
        current_branch: Name of the checked out branch
        prompter: Object providing `select` and `input`

    Returns:
        GuardDecision
    """
    if not is_protected_branch(current_branch):
        return GuardDecision.proceed()

    choice = prompter.select("What would you like to do?", guard_choices(current_branch))
    if choice == GUARD_ABORT:
        return GuardDecision.abort()
    if choice == GUARD_CREATE_BRANCH:
        name = prompter.input(
            "Enter a name for your new branch",
            validator=validate_branch_name,
        )
        # The prompter only returns names validate_branch_name accepted and stripped.
        return GuardDecision.create_branch(name)
    if choice == GUARD_CONTINUE:
        return GuardDecision.proceed()
    raise ValueError(f"Unknown branch guard choice: {choice}")
