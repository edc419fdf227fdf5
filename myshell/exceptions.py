"""
Custom exceptions for the shell.
"""

import os


class ShellError(Exception):
    """Base exception class for shell errors."""

    pass


class ConfigurationError(ShellError):
    """Exception raised for configuration errors."""

    pass


class FileSystemError(ShellError):
    """Exception raised when a filesystem primitive fails."""

    def __init__(self, message: str, os_error: OSError):
        super().__init__(message)
        self.os_error = os_error

    @property
    def errno(self) -> int | None:
        """Error number reported by the operating system."""
        return self.os_error.errno

    @property
    def reason(self) -> str:
        """Operating system description of the failure, as strerror renders it."""
        if self.os_error.errno is not None:
            return os.strerror(self.os_error.errno)
        return self.os_error.strerror or str(self.os_error)


class CommandError(ShellError):
    """Exception describing why a built-in command failed."""

    def __init__(self, context: str, reason: str):
        self.context = context
        self.reason = reason
        super().__init__(self.diagnostic)

    @property
    def diagnostic(self) -> str:
        """Line written to the error stream."""
        return f"{self.context}: {self.reason}"


class UnknownCommandError(CommandError):
    """Exception raised for a line that matches no built-in command."""

    def __init__(self, line: str, program_name: str = "myshell"):
        self.line = line
        super().__init__(f"{program_name}: {line}", "No such file or directory")
