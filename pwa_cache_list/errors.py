"""Application errors and exit codes."""

from __future__ import annotations

from enum import IntEnum


class ExitCode(IntEnum):
    """Process exit codes.

    - 0: Success (including `--help`)
    - 2: Execution failure: invalid arguments, unreadable config, invalid
      output or a failed write. Matches argparse's usage-error status.
    """

    SUCCESS = 0
    EXEC_FAILURE = 2


class PwaCacheListError(Exception):
    """Base application error."""


class ExecFailureError(PwaCacheListError):
    """Execution failed due to invalid input or runtime failure."""
