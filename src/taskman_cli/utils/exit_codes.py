"""
Exit codes for taskman.

Semantic exit codes so scripts can tell a missing task apart from a broken
task file.
"""

# Success
SUCCESS = 0

# General error (unspecified)
ERROR_GENERAL = 1

# Invalid arguments or usage error (Click's own usage errors exit with 2)
ERROR_INVALID_ARGS = 2

# Task not found
ERROR_NOT_FOUND = 5

# Permission denied on the task file
ERROR_PERMISSION_DENIED = 6

# Task file could not be read or written
ERROR_STORAGE = 7


def get_exit_code_name(code: int) -> str:
    """Get the name of an exit code for display purposes."""
    code_names = {
        SUCCESS: "SUCCESS",
        ERROR_GENERAL: "ERROR_GENERAL",
        ERROR_INVALID_ARGS: "ERROR_INVALID_ARGS",
        ERROR_NOT_FOUND: "ERROR_NOT_FOUND",
        ERROR_PERMISSION_DENIED: "ERROR_PERMISSION_DENIED",
        ERROR_STORAGE: "ERROR_STORAGE",
    }
    return code_names.get(code, f"UNKNOWN({code})")
