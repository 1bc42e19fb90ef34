# topmark:header:start
#
#   project      : envexport
#   file         : options.py
#   file_relpath : src/envexport/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Common CLI option utilities.

This module centralizes reusable options (verbosity, color, tag key) and their
resolution logic, so commands and groups can stay thin.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Callable, ParamSpec, TypeVar

import click

from envexport.cli.errors import EnvExportUsageError
from envexport.config.logging import TRACE_LEVEL
from envexport.constants import ENV_TAG_KEY

P = ParamSpec("P")
R = TypeVar("R")


class OutputFormat(str, Enum):
    """Output formats of the listing commands."""

    TEXT = "text"
    JSON = "json"


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Resolve the final logging level based on verbose and quiet counts.

    Args:
        verbose_count: Number of times the verbose flag (-v) is passed.
        quiet_count: Number of times the quiet flag (-q) is passed.

    Returns:
        The logging level as an integer.

    Raises:
        EnvExportUsageError: If both verbose and quiet flags are used simultaneously.

    Behavior:
        Three or more -v flags set TRACE level, two set DEBUG, one sets INFO.
        One or more -q flags set ERROR level. Default level is WARNING.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise EnvExportUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")

    if verbose_count >= 3:  # -vvv
        return TRACE_LEVEL
    if verbose_count == 2:  # -vv
        return logging.DEBUG
    if verbose_count == 1:  # -v
        return logging.INFO
    if quiet_count >= 1:  # -q
        return logging.ERROR
    return logging.WARNING


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add --verbose and --quiet options to a command.

    Args:
        f: The Click command function to decorate.

    Returns:
        The decorated function with verbosity options added.
    """
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase verbosity. Specify up to three times for more detail.",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Only log errors.",
    )(f)
    return f


def common_color_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add the --no-color option to a command."""
    return click.option(
        "--no-color",
        "no_color",
        is_flag=True,
        default=False,
        help="Disable ANSI colors in program output.",
    )(f)


def tag_key_option(f: Callable[P, R]) -> Callable[P, R]:
    """Add the --tag-key option to a command."""
    return click.option(
        "--tag-key",
        "tag_key",
        default=ENV_TAG_KEY,
        show_default=True,
        help="Dataclass field metadata key holding the export tags.",
    )(f)


def output_format_option(f: Callable[P, R]) -> Callable[P, R]:
    """Add the --format option to a command."""
    return click.option(
        "--format",
        "output_format",
        type=click.Choice([fmt.value for fmt in OutputFormat], case_sensitive=False),
        default=OutputFormat.TEXT.value,
        show_default=True,
        help="Output format.",
    )(f)
