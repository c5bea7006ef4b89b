"""Interactive prompts backed by click."""

import click

from .errors import ValidationError


class ClickPrompter:
    """Ask the user questions on the terminal."""

    def confirm(self, message, default=True):
        return click.confirm(message, default=default)

    def select(self, message, choices):
        """
        Show a numbered menu and return the `value` of the chosen entry.

        Args:
            message: Question shown above the menu
            choices: Ordered list of {"label": ..., "value": ...} dicts; the
                first entry is the default
        """
        click.echo(message)
        for idx, choice in enumerate(choices, start=1):
            click.echo(f"  {idx}) {choice['label']}")
        picked = click.prompt(
            "Select an option",
            type=click.IntRange(1, len(choices)),
            default=1,
        )
        return choices[picked - 1]["value"]

    def input(self, message, default=None, validator=None):
        """
        Prompt for free text, re-asking until `validator` accepts it.

        The validator raises ValidationError to reject a value; its message is
        shown before asking again. A validator returning a value (for example
        the stripped input) replaces what was typed.
        """
        while True:
            value = click.prompt(message, default=default)
            if validator is None:
                return value
            try:
                normalized = validator(value)
            except ValidationError as exc:
                click.secho(exc.message, fg="red", err=True)
                continue
            return value if normalized is None else normalized
