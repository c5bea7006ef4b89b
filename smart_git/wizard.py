"""Guided stage, branch check, commit and push flow."""

from dataclasses import dataclass, field
from typing import List

from .errors import CommandExecutionError, ValidationError
from .git import (
    commit,
    create_branch,
    get_current_branch,
    get_staged_files,
    get_status,
    parse_status_files,
    push,
    stage_all,
)
from .guard import GuardAction, is_protected_branch, run_branch_guard
from .suggest import suggest_commit_message
from .validation import lint_commit_subject

EXIT_OK = 0
EXIT_FAILURE = 1


@dataclass
class WizardState:
    changed_files: List[str] = field(default_factory=list)
    branch: str = ""
    staged_files: List[str] = field(default_factory=list)
    suggestion: str = ""
    message: str = ""


@dataclass(frozen=True)
class Proceed:
    state: WizardState


@dataclass(frozen=True)
class Terminate:
    exit_code: int = EXIT_OK


class Wizard:
    """
    Run the commit wizard as a fixed sequence of steps.

    Every step takes the current WizardState and returns either Proceed
    (carry on with the state) or Terminate (stop with an exit code). A
    CommandExecutionError escaping a step is fatal and ends the run with
    status 1; the final commit/push step handles its own failures.

    Args:
        prompter: Object providing `confirm`, `select` and `input`
        reporter: ProgressReporter-like object for console output
        runner: Command runner; defaults to `smart_git.git.run`
    """

    def __init__(self, prompter, reporter, runner=None):
        self.prompter = prompter
        self.reporter = reporter
        self.runner = runner
        self.steps = [
            self.check_status,
            self.confirm_staging,
            self.stage_changes,
            self.guard_branch,
            self.suggest_message,
            self.edit_message,
            self.confirm_commit,
            self.commit_and_push,
        ]

    def run(self):
        """Run all steps and return the process exit code."""
        state = WizardState()
        try:
            for step in self.steps:
                result = step(state)
                if isinstance(result, Terminate):
                    return result.exit_code
                state = result.state
        except CommandExecutionError as exc:
            self.reporter.fail(f"Error running command: {exc.command}", exc.message)
            return EXIT_FAILURE
        return EXIT_OK

    def check_status(self, state):
        self.reporter.clear()
        self.reporter.start("Checking for changes...")
        status = get_status(self.runner)
        if not status.strip():
            self.reporter.succeed("No changes to commit. Exiting.")
            return Terminate(EXIT_OK)

        state.changed_files = parse_status_files(status)
        self.reporter.info("Files with changes:")
        self.reporter.files(state.changed_files)
        return Proceed(state)

    def confirm_staging(self, state):
        if not self.prompter.confirm("Stage all changes?", default=True):
            self.reporter.abort("Aborted staging. Exiting.")
            return Terminate(EXIT_OK)
        return Proceed(state)

    def stage_changes(self, state):
        self.reporter.clear()
        self.reporter.start("Staging changes...")
        stage_all(self.runner)
        self.reporter.succeed("Changes staged successfully!")
        return Proceed(state)

    def guard_branch(self, state):
        self.reporter.clear()
        state.branch = get_current_branch(self.runner)
        protected = is_protected_branch(state.branch)
        if protected:
            self.reporter.highlight(f"WARNING: You are on the '{state.branch}' branch!")

        decision = run_branch_guard(state.branch, self.prompter)
        if decision.action is GuardAction.ABORT:
            # Staged changes stay staged.
            self.reporter.abort(f"Commit aborted to protect '{state.branch}' branch.")
            return Terminate(EXIT_OK)

        if decision.action is GuardAction.CREATE_BRANCH:
            self.reporter.start(f"Creating branch '{decision.branch_name}'...")
            create_branch(decision.branch_name, self.runner)
            self.reporter.succeed(f"Switched to new branch '{decision.branch_name}'!")
            state.branch = decision.branch_name
        elif protected:
            self.reporter.warn(f"Continuing on '{state.branch}' as requested...")
        return Proceed(state)

    def suggest_message(self, state):
        self.reporter.clear()
        state.staged_files = get_staged_files(self.runner)
        state.suggestion = suggest_commit_message(state.staged_files)
        self.reporter.succeed("Suggested commit message:")
        self.reporter.highlight(f'"{state.suggestion}"')
        return Proceed(state)

    def edit_message(self, state):
        message = self.prompter.input(
            "Edit commit message (or press Enter to accept)",
            default=state.suggestion,
        )
        state.message = (message or "").strip() or state.suggestion
        try:
            lint_commit_subject(state.message)
        except ValidationError as exc:
            self.reporter.warn(exc.message)
        return Proceed(state)

    def confirm_commit(self, state):
        self.reporter.clear()
        self.reporter.succeed(f"Files staged for commit ({len(state.staged_files)}):")
        self.reporter.files(state.staged_files)
        self.reporter.succeed("Final commit message:")
        self.reporter.highlight(f'"{state.message}"')

        if not self.prompter.confirm("Ready to commit and push?", default=True):
            self.reporter.abort("Commit aborted by user.")
            return Terminate(EXIT_OK)
        return Proceed(state)

    def commit_and_push(self, state):
        self.reporter.clear()
        self.reporter.start("Committing and pushing...")
        try:
            commit(state.message, self.runner)
        except CommandExecutionError as exc:
            self.reporter.fail("Failed to commit.", exc.message)
            return Terminate(EXIT_FAILURE)

        try:
            push(self.runner)
        except CommandExecutionError as exc:
            # No rollback: the commit stays in the local history.
            self.reporter.fail("Committed locally, but failed to push.", exc.message)
            return Terminate(EXIT_FAILURE)

        self.reporter.succeed("Successfully committed and pushed!")
        return Proceed(state)


def run_wizard(prompter, reporter, runner=None):
    """Run the commit wizard and return its exit code."""
    return Wizard(prompter, reporter, runner=runner).run()
