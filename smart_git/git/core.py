"""Core git utilities and subprocess wrappers."""

import shlex
import subprocess

from ..errors import CommandExecutionError


def format_command(cmd):
    """Render a command (string or argv list) for display."""
    if isinstance(cmd, (list, tuple)):
        return shlex.join(cmd)
    return cmd


def _decode(data):
    return (data or b"").decode("utf-8", errors="ignore").strip()


def run(cmd):
    """
    Run a command and return stripped output.

    Accepts either a string (split using shlex) or an argv list. We avoid invoking
    a shell so file paths and commit messages containing quotes are passed through
    untouched. Only stdout is returned; stderr (git warnings, progress) is kept
    out of parsed output and only used to describe failures.

    Raises CommandExecutionError if the command exits non-zero or the executable
    is missing.
    """
    args = cmd if isinstance(cmd, (list, tuple)) else shlex.split(cmd)
    try:
        out = subprocess.check_output(args, stderr=subprocess.PIPE)
    except subprocess.CalledProcessError as exc:
        details = [part for part in (_decode(exc.stderr), _decode(exc.output)) if part]
        message = "\n".join(details) or f"exited with status {exc.returncode}"
        raise CommandExecutionError(format_command(cmd), message, exc.returncode) from exc
    except FileNotFoundError as exc:
        raise CommandExecutionError(format_command(cmd), f"command not found: {args[0]}") from exc
    return _decode(out)
