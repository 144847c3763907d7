"""Custom exceptions for PomoTask CLI."""


class PomotaskError(Exception):
    """Base exception with the exit code the CLI should terminate with."""

    def __init__(self, message: str, exit_code: int = 1):
        super().__init__(message)
        self.exit_code = exit_code


class InvalidChoiceError(PomotaskError):
    """Raised when menu input is not one of the offered choices."""

    def __init__(self, raw: str):
        super().__init__(f"Invalid choice: {raw!r}", exit_code=2)
        self.raw = raw


class InvalidSessionCountError(PomotaskError):
    """Raised when the session count is not an integer."""

    def __init__(self, raw: str):
        super().__init__(f"Invalid session count: {raw!r}", exit_code=2)
        self.raw = raw
