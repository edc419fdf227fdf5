"""
Console port interface for terminal input and output.
"""

from abc import ABC, abstractmethod


class ConsolePort(ABC):
    """Port interface for the interactive terminal."""

    @abstractmethod
    def read_line(self) -> str | None:
        """
        Read one line of input.

        Returns:
            The line without its newline, or None at end of input
        """
        pass

    @abstractmethod
    def write_prompt(self, text: str) -> None:
        """Write the prompt, without a newline, and make it visible."""
        pass

    @abstractmethod
    def write_line(self, text: str) -> None:
        """Write one line of text to standard output."""
        pass

    @abstractmethod
    def write_bytes(self, data: bytes) -> None:
        """Write raw bytes to standard output, unchanged."""
        pass

    @abstractmethod
    def write_error(self, text: str) -> None:
        """Write one diagnostic line to the error stream."""
        pass

    @abstractmethod
    def flush(self) -> None:
        """Flush both output streams."""
        pass

    def is_terminal(self) -> bool:
        """Whether standard output is attached to a terminal."""
        return False
