# topmark:header:start
#
#   project      : CallSpacing
#   file         : exit_codes.py
#   file_relpath : src/callspacing/cli/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exit codes for the CallSpacing CLI.

CallSpacing aligns with the BSD `sysexits` convention where practical, so that
other tooling can interpret failures consistently. ``VIOLATIONS = 1`` follows
the usual linter convention: the run completed and problems remain.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the CallSpacing CLI.

    Attributes:
        SUCCESS: No violations remain.
        VIOLATIONS: At least one violation remains (after fixing, with ``--apply``).
        USAGE_ERROR: Command-line invocation error. Mirrors BSD ``EX_USAGE (64)``.
        DATA_ERROR: A file could not be decoded or parsed as JavaScript.
            Mirrors BSD ``EX_DATAERR (65)``.
        FILE_NOT_FOUND: Input path does not exist. Mirrors BSD ``EX_NOINPUT (66)``.
        IO_ERROR: I/O error reading/writing a file. Mirrors BSD ``EX_IOERR (74)``.
        CONFIG_ERROR: Configuration error (missing/invalid/malformed config).
            Mirrors BSD ``EX_CONFIG (78)``.
        UNEXPECTED_ERROR: Unhandled/unknown error (last-resort).
    """

    SUCCESS = 0
    VIOLATIONS = 1

    # sysexits-aligned values
    USAGE_ERROR = 64  # EX_USAGE
    DATA_ERROR = 65  # EX_DATAERR
    FILE_NOT_FOUND = 66  # EX_NOINPUT
    IO_ERROR = 74  # EX_IOERR
    CONFIG_ERROR = 78  # EX_CONFIG

    UNEXPECTED_ERROR = 255
