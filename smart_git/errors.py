"""Exceptions raised by smart-git."""


class SmartGitError(Exception):
    """Base exception for all smart-git errors."""


class CommandExecutionError(SmartGitError):
    """Raised when an external command exits non-zero or cannot be started."""

    def __init__(self, command, message, returncode=None):
        self.command = command
        self.message = message
        self.returncode = returncode
        super().__init__(f"{command}: {message}")


class ValidationError(SmartGitError):
    """Raised when user input is rejected by a prompt validator."""

    def __init__(self, message):
        self.message = message
        super().__init__(message)
