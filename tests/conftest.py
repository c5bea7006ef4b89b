import subprocess
from pathlib import Path

import pytest

import smart_git as sg


@pytest.fixture
def tmp_git_repo(tmp_path):
    """
    Create a temporary git repository on `main` with one pushed commit.

    The repository has a bare `origin` remote and `main` tracks origin/main.
    """
    repo = tmp_path / "repo"
    remote = tmp_path / "remote.git"
    repo.mkdir()

    def git(cmd):
        subprocess.check_call(f"git -C {repo} {cmd}", shell=True)

    subprocess.check_call(f"git init --bare -q {remote}", shell=True)
    git("init -q -b main")
    git('config user.email "test@example.com"')
    git('config user.name "Test User"')
    git("config commit.gpgsign false")
    git("config push.autoSetupRemote false")
    (repo / "initial.txt").write_text("initial")
    git("add initial.txt")
    git('commit -q -m "chore: initial commit"')
    git(f"remote add origin {remote}")
    git("push -q -u origin main")
    return repo, remote, git


@pytest.fixture
def write_file():
    def _write(base: Path, name: str, content: str = "sample"):
        path = base / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content)
        return path

    return _write


class FakePrompter:
    """Scripted answers for confirm/select/input, consumed in order."""

    def __init__(self, confirms=(), selects=(), inputs=()):
        self.confirms = list(confirms)
        self.selects = list(selects)
        self.inputs = list(inputs)
        self.asked = []
        self.rejected = []

    def confirm(self, message, default=True):
        self.asked.append(("confirm", message))
        return self.confirms.pop(0)

    def select(self, message, choices):
        self.asked.append(("select", message))
        value = self.selects.pop(0)
        assert value in [c["value"] for c in choices]
        return value

    def input(self, message, default=None, validator=None):
        self.asked.append(("input", message))
        while True:
            value = self.inputs.pop(0)
            if value == "" and default is not None:
                value = default
            if validator is None:
                return value
            try:
                normalized = validator(value)
            except sg.ValidationError as exc:
                self.rejected.append(exc.message)
                continue
            return value if normalized is None else normalized


class FakeRunner:
    """Command runner returning canned output keyed by the rendered command."""

    def __init__(self, outputs=None, failures=None):
        self.outputs = dict(outputs or {})
        self.failures = dict(failures or {})
        self.calls = []

    def __call__(self, cmd):
        rendered = sg.git.format_command(cmd)
        self.calls.append(rendered)
        if rendered in self.failures:
            raise sg.CommandExecutionError(rendered, self.failures[rendered], 1)
        return self.outputs.get(rendered, "")


@pytest.fixture
def fake_prompter():
    return FakePrompter


@pytest.fixture
def fake_runner():
    return FakeRunner
