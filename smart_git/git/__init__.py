"""Git utilities package."""

from .core import format_command, run
from .status import (
    commit,
    create_branch,
    get_current_branch,
    get_staged_files,
    get_status,
    parse_status_files,
    push,
    stage_all,
)

__all__ = [
    "run",
    "format_command",
    "get_status",
    "parse_status_files",
    "stage_all",
    "get_staged_files",
    "get_current_branch",
    "create_branch",
    "commit",
    "push",
]
