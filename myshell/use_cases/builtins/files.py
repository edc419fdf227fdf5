"""
File commands: cat, stat and rm.
"""

import logging

from typing_extensions import override

from myshell.entities.command import CommandResult
from myshell.exceptions import FileSystemError
from myshell.ports.console.console_port import ConsolePort
from myshell.ports.files.filesystem_port import FileSystemPort
from myshell.ui.formatting import PlainFormatter
from myshell.use_cases.builtins.base import FileSystemCommand


class CatCommand(FileSystemCommand):
    """cat <path>: stream a file to standard output in fixed-size chunks."""

    name = "cat"
    requires_argument = True

    def __init__(
        self,
        file_system: FileSystemPort,
        console: ConsolePort,
        chunk_size: int = 2048,
        logger: logging.Logger | None = None,
    ):
        super().__init__(file_system, console, logger)
        self._chunk_size = chunk_size

    @override
    def execute(self, argument: str | None) -> CommandResult:
        try:
            handle = self._file_system.open_for_reading(argument)
        except FileSystemError as e:
            return self._fail(f"unable to open {argument}", e)

        copied = 0
        with handle:
            try:
                # Only the bytes each read returns are written; b"" ends the loop
                for chunk in iter(lambda: handle.read(self._chunk_size), b""):
                    self._console.write_bytes(chunk)
                    copied += len(chunk)
            except OSError as e:
                return self._fail(
                    f"error reading {argument}",
                    FileSystemError(f"Cannot read {argument}", e),
                )
        self._console.flush()
        self._logger.debug(f"cat {argument}: {copied} bytes")
        return CommandResult.ok()


class StatCommand(FileSystemCommand):
    """stat <path>: print name, size, mtime, permissions, link count and inode."""

    name = "stat"
    requires_argument = True

    def __init__(
        self,
        file_system: FileSystemPort,
        console: ConsolePort,
        formatter: PlainFormatter | None = None,
        logger: logging.Logger | None = None,
    ):
        super().__init__(file_system, console, logger)
        self._formatter = formatter or PlainFormatter()

    @override
    def execute(self, argument: str | None) -> CommandResult:
        try:
            info = self._file_system.stat(argument)
        except FileSystemError as e:
            return self._fail(f"error getting stats for {argument}", e)
        self._console.write_line(self._formatter.format_stat(info))
        return CommandResult.ok()


class RemoveFileCommand(FileSystemCommand):
    name = "rm"
    requires_argument = True

    @override
    def execute(self, argument: str | None) -> CommandResult:
        try:
            self._file_system.remove_file(argument)
        except FileSystemError as e:
            return self._fail(f"error unlinking file {argument}", e)
        return CommandResult.ok()
