"""
Exit codes for PomoTask CLI.

Each failure class gets its own code so scripts wrapping the CLI can tell
a bad invocation apart from a crash.
"""

# Success
SUCCESS = 0

# General error (unspecified)
ERROR_GENERAL = 1

# Invalid arguments or validation error
ERROR_INVALID_ARGS = 2

# Allocation failure while creating a task record
ERROR_FATAL = 3

# Interrupted by the user (Ctrl-C outside a countdown)
ERROR_INTERRUPTED = 130


def get_exit_code_name(code: int) -> str:
    """Get the name of an exit code for display purposes."""
    code_names = {
        SUCCESS: "SUCCESS",
        ERROR_GENERAL: "ERROR_GENERAL",
        ERROR_INVALID_ARGS: "ERROR_INVALID_ARGS",
        ERROR_FATAL: "ERROR_FATAL",
        ERROR_INTERRUPTED: "ERROR_INTERRUPTED",
    }
    return code_names.get(code, f"UNKNOWN({code})")


def get_exit_code_description(code: int) -> str:
    """Get a human-readable description of an exit code."""
    descriptions = {
        SUCCESS: "Command executed successfully",
        ERROR_GENERAL: "A general error occurred",
        ERROR_INVALID_ARGS: "Invalid arguments or validation error",
        ERROR_FATAL: "Memory allocation failed",
        ERROR_INTERRUPTED: "Interrupted by user",
    }
    return descriptions.get(code, "Unknown error")
