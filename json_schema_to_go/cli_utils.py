"""
Command line shown in the "generated by" header of the output.
"""

from pathlib import Path

import click

PROGRAM_NAME = "json_schema_to_go"


def _display_value(value) -> str:
    """Existing files are shown by name only, so the header does not depend on the working directory."""
    text = str(value)
    path = Path(text)
    return path.name if path.exists() else text


def reconstruct_command_line(command: click.Command) -> str:
    """
    Rebuild the command line of the running click command.

    Positional arguments come first, followed by the options whose value
    differs from their default. Without an active click context only the
    program name is returned.
    """
    ctx = click.get_current_context(silent=True)
    if ctx is None:
        return PROGRAM_NAME

    positional = []
    flags = []
    for param in command.params:
        value = ctx.params.get(param.name)
        if not value:
            continue
        if isinstance(param, click.Argument):
            positional.append(_display_value(value))
        elif value != param.default:
            option = param.opts[0]
            flags.append(option if param.is_flag else f"{option} {_display_value(value)}")

    return " ".join([PROGRAM_NAME, *positional, *flags])
