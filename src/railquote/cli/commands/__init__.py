"""CLI command implementations for the railquote application.

This package contains subcommands for the railquote CLI:
- validate: Validate a configuration file
"""

from railquote.cli.commands.validate import display_load_error, validate_command

__all__ = ["display_load_error", "validate_command"]
