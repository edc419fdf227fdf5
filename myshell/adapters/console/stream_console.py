"""
Console adapter over standard streams.
"""

import logging
from typing import BinaryIO, TextIO

from typing_extensions import override

from myshell.ports.console.console_port import ConsolePort


class StreamConsole(ConsolePort):
    """Console reading text lines and writing to a binary stdout and a text stderr.

    Standard output is binary so that ``cat`` can pass file contents through
    byte for byte; text is encoded with ``surrogateescape`` so undecodable file
    names round-trip to the terminal unchanged.
    """

    def __init__(
        self,
        stdin: TextIO,
        stdout: BinaryIO,
        stderr: TextIO,
        max_line_length: int = 256,
        encoding: str = "utf-8",
        logger: logging.Logger | None = None,
    ):
        """
        Initialize the console.

        Args:
            stdin: Text stream commands are read from
            stdout: Binary stream for results and the prompt
            stderr: Text stream for diagnostics
            max_line_length: Line bound including the newline; longer input is truncated
            encoding: Encoding used for text written to stdout
            logger: Logger instance to use for logging
        """
        self._stdin = stdin
        self._stdout = stdout
        self._stderr = stderr
        self._max_line_length = max_line_length
        self._encoding = encoding
        self._logger = logger or logging.getLogger(__name__)

    @override
    def read_line(self) -> str | None:
        line = self._stdin.readline(self._max_line_length)
        if not line:
            return None
        if not line.endswith("\n"):
            discarded = self._discard_rest_of_line()
            if discarded:
                self._logger.debug(f"Input line truncated, {discarded} characters discarded")
        line = line.rstrip("\n")
        return line[: self._max_line_length - 1]

    def _discard_rest_of_line(self) -> int:
        """Skip input up to and including the next newline, one bounded chunk at a time."""
        discarded = 0
        while True:
            chunk = self._stdin.readline(self._max_line_length)
            discarded += len(chunk)
            if not chunk or chunk.endswith("\n"):
                return discarded

    @override
    def write_prompt(self, text: str) -> None:
        self._stdout.write(self._encode(text))
        self._stdout.flush()

    @override
    def write_line(self, text: str) -> None:
        self._stdout.write(self._encode(text + "\n"))

    @override
    def write_bytes(self, data: bytes) -> None:
        self._stdout.write(data)

    @override
    def write_error(self, text: str) -> None:
        # Keep diagnostics ordered after any output already produced
        self._stdout.flush()
        self._stderr.write(text + "\n")
        self._stderr.flush()

    @override
    def flush(self) -> None:
        self._stdout.flush()
        self._stderr.flush()

    @override
    def is_terminal(self) -> bool:
        isatty = getattr(self._stdout, "isatty", None)
        return bool(isatty and isatty())

    def _encode(self, text: str) -> bytes:
        return text.encode(self._encoding, "surrogateescape")
