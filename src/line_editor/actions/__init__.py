"""Command-line verbs that drive an editing session."""

from .command import HELP_LINES, CommandResult, submit_command_line

__all__ = ["CommandResult", "HELP_LINES", "submit_command_line"]
