"""Process exit codes.

Each failure class of a release run maps to one stable exit status so that
wrapping scripts can tell a typo in the arguments from a failed push.
"""

from enum import IntEnum

__all__ = ["ErrorCode"]


class ErrorCode(IntEnum):
    """Exit codes for the pkgrel command.

    - 0: Success
    - 1: User error (missing or malformed package name / version)
    - 2: Environment error (unreadable config, repository path missing)
    - 3: Command error (a git step exited non-zero)
    """

    OK = 0
    USER_ERROR = 1
    ENV_ERROR = 2
    COMMAND_ERROR = 3
