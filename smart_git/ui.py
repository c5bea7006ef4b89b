"""Display utilities and UI helpers."""

import time

import click

from .config import SPINNER_CYCLES, SPINNER_DELAY, SPINNER_FRAMES


def display_spinning_animation(message, cycles=SPINNER_CYCLES, delay=SPINNER_DELAY):
    """Display a spinning animation with a message."""
    for i in range(cycles):
        frame = SPINNER_FRAMES[i % len(SPINNER_FRAMES)]
        click.echo(f"\r{message} {frame}", nl=False)
        time.sleep(delay)
    click.echo(f"\r{message}  ", nl=False)
    click.echo()


def format_file_list(files, bullet="•"):
    """Format file paths one per line."""
    return "\n".join(f"{bullet} {f}" for f in files)


class ProgressReporter:
    """
    Presentation side effects of the wizard.

    Screen clearing and spinner animation only happen when `interactive` is
    true, so piping the output or running under a test runner yields plain
    text.
    """

    def __init__(self, interactive=False):
        self.interactive = interactive

    def clear(self):
        if self.interactive:
            click.clear()

    def start(self, message):
        if self.interactive:
            display_spinning_animation(message)
        else:
            click.echo(message)

    def succeed(self, message):
        click.secho(message, fg="green")

    def fail(self, message, detail=None):
        click.secho(message, fg="red", err=True)
        if detail:
            click.echo(detail, err=True)

    def info(self, message):
        click.secho(message, fg="blue")

    def warn(self, message):
        click.secho(message, fg="yellow")

    def highlight(self, message):
        click.secho(message, fg="yellow", bold=True)

    def files(self, files):
        click.secho(format_file_list(files), fg="yellow")

    def abort(self, message):
        click.secho(message, fg="red")
