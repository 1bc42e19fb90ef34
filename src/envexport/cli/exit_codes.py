# topmark:header:start
#
#   project      : envexport
#   file         : exit_codes.py
#   file_relpath : src/envexport/cli/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exit codes for the envexport CLI.

envexport aligns with the BSD `sysexits` convention so that shell scripts sourcing
its output can tell a bad invocation from a record that cannot be exported.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the envexport CLI.

    Attributes:
        SUCCESS: Successful execution with no errors.
        FAILURE: Generic failure (non-specific error).
        USAGE_ERROR: Command-line invocation error, including a RECORD spec that
            does not resolve to a dataclass. Mirrors BSD ``EX_USAGE (64)``.
        DATA_ERROR: The record cannot be built from the values document, or holds
            a reachable field of unsupported type. Mirrors BSD ``EX_DATAERR (65)``.
        FILE_NOT_FOUND: Input path does not exist. Mirrors BSD ``EX_NOINPUT (66)``.
        IO_ERROR: I/O error reading/writing a file. Mirrors BSD ``EX_IOERR (74)``.
        CONFIG_ERROR: The values document is not valid TOML. Mirrors BSD
            ``EX_CONFIG (78)``.
        UNEXPECTED_ERROR: Unhandled/unknown error (last-resort).
    """

    SUCCESS = 0
    FAILURE = 1

    # sysexits-aligned values for better interoperability
    USAGE_ERROR = 64  # EX_USAGE
    DATA_ERROR = 65  # EX_DATAERR
    FILE_NOT_FOUND = 66  # EX_NOINPUT
    IO_ERROR = 74  # EX_IOERR
    CONFIG_ERROR = 78  # EX_CONFIG

    UNEXPECTED_ERROR = 255
