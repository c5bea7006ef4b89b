"""Smart-git: an interactive assistant for staging, committing and pushing."""

# Re-export the public API for library-style usage (and tests).
from .cli import cli, main
from .config import __version__
from .errors import CommandExecutionError, SmartGitError, ValidationError
from .git import (
    commit,
    create_branch,
    get_current_branch,
    get_staged_files,
    get_status,
    parse_status_files,
    push,
    run,
    stage_all,
)
from .guard import GuardAction, GuardDecision, is_protected_branch, run_branch_guard
from .prompts import ClickPrompter
from .suggest import suggest_commit_message
from .ui import ProgressReporter, display_spinning_animation, format_file_list
from .validation import lint_commit_subject, validate_branch_name
from .wizard import Proceed, Terminate, Wizard, WizardState, run_wizard

__all__ = [
    "__version__",
    # CLI
    "cli",
    "main",
    # Errors
    "SmartGitError",
    "CommandExecutionError",
    "ValidationError",
    # Git
    "run",
    "get_status",
    "parse_status_files",
    "stage_all",
    "get_staged_files",
    "get_current_branch",
    "create_branch",
    "commit",
    "push",
    # Core decisions
    "suggest_commit_message",
    "GuardAction",
    "GuardDecision",
    "is_protected_branch",
    "run_branch_guard",
    # Validation/UI
    "validate_branch_name",
    "lint_commit_subject",
    "ClickPrompter",
    "ProgressReporter",
    "display_spinning_animation",
    "format_file_list",
    # Wizard
    "Wizard",
    "WizardState",
    "Proceed",
    "Terminate",
    "run_wizard",
]
