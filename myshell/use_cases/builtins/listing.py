"""
Directory listing command: ls.
"""

import logging

from typing_extensions import override

from myshell.entities.command import CommandResult
from myshell.exceptions import FileSystemError
from myshell.ports.console.console_port import ConsolePort
from myshell.ports.files.filesystem_port import FileSystemPort
from myshell.ui.formatting import PlainFormatter
from myshell.use_cases.builtins.base import FileSystemCommand


class ListDirectoryCommand(FileSystemCommand):
    """
    ls [path]: list directory entries one per line, tagging directories.

    Entries keep the directory's enumeration order. Each entry is looked up
    relative to the listed directory, so the working directory is never touched.
    """

    name = "ls"

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
        path = argument if argument is not None else "."
        try:
            entries = self._file_system.list_directory(path)
        except FileSystemError as e:
            return self._fail(f"could not open directory {path}", e)

        for entry in entries:
            if entry.error is not None:
                # Reported, but the listing goes on
                self._console.write_error(f"stat: {entry.name}: {entry.error.reason}")
            self._console.write_line(self._formatter.format_entry(entry))
        self._logger.debug(f"ls {path}: {len(entries)} entries")
        return CommandResult.ok()
