"""
Dependency injection container for managing shell dependencies.
"""

import io
import logging
import sys
from typing import BinaryIO, TextIO

from myshell.adapters.console.stream_console import StreamConsole
from myshell.adapters.files.posix_fs_adapter import PosixFileSystemAdapter
from myshell.config.settings import Settings
from myshell.ports.builtins.builtin_command_port import BuiltinCommandPort
from myshell.ports.console.console_port import ConsolePort
from myshell.ports.files.filesystem_port import FileSystemPort
from myshell.ui.formatting import PlainFormatter, RichFormatter
from myshell.use_cases.builtins.directories import (
    MakeDirectoryCommand,
    RemoveDirectoryCommand,
)
from myshell.use_cases.builtins.files import CatCommand, RemoveFileCommand, StatCommand
from myshell.use_cases.builtins.listing import ListDirectoryCommand
from myshell.use_cases.builtins.navigation import (
    ChangeDirectoryCommand,
    PrintWorkingDirectoryCommand,
)
from myshell.use_cases.builtins.session import ExitCommand
from myshell.use_cases.dispatcher import CommandDispatcher
from myshell.use_cases.interpreter import Interpreter


class DependencyContainer:
    """
    Container for managing shell dependencies using dependency injection.
    """

    def __init__(
        self,
        settings: Settings | None = None,
        stdin: TextIO | None = None,
        stdout: BinaryIO | None = None,
        stderr: TextIO | None = None,
        pretty: bool = False,
        show_prompt: bool = True,
    ):
        """
        Initialize the container.

        Args:
            settings: Settings to use; read from the environment when None
            stdin: Input stream, sys.stdin when None
            stdout: Binary output stream, sys.stdout.buffer when None
            stderr: Diagnostic stream, sys.stderr when None
            pretty: Render stat and ls output with rich
            show_prompt: Whether the interpreter prints a prompt
        """
        self._instances = {}
        self._logger = logging.getLogger(__name__)
        self._settings = settings
        self._stdin = stdin
        self._stdout = stdout
        self._stderr = stderr
        self._pretty = pretty
        self._show_prompt = show_prompt

    def get_settings(self) -> Settings:
        if self._settings is None:
            self._settings = Settings()
        return self._settings

    def get_console(self) -> ConsolePort:
        """
        Get console adapter instance.

        Returns:
            ConsolePort implementation
        """
        if "console" not in self._instances:
            self._instances["console"] = StreamConsole(
                stdin=self._stdin or self._system_stdin(),
                stdout=self._stdout or sys.stdout.buffer,
                stderr=self._stderr or sys.stderr,
                max_line_length=self.get_settings().max_line_length,
                logger=self._logger,
            )
        return self._instances["console"]

    def _system_stdin(self) -> TextIO:
        """
        Standard input decoding undecodable bytes to surrogates instead of failing.

        Returns:
            Text stream over the process stdin
        """
        buffer = getattr(sys.stdin, "buffer", None)
        if buffer is None:
            return sys.stdin
        return io.TextIOWrapper(
            buffer,
            encoding=sys.stdin.encoding or "utf-8",
            errors="surrogateescape",
        )

    def get_file_system(self) -> FileSystemPort:
        """
        Get filesystem adapter instance.

        Returns:
            FileSystemPort implementation
        """
        if "file_system" not in self._instances:
            self._instances["file_system"] = PosixFileSystemAdapter(self._logger)
        return self._instances["file_system"]

    def get_formatter(self) -> PlainFormatter:
        if "formatter" not in self._instances:
            width = self.get_settings().ls_column_width
            if self._pretty:
                self._instances["formatter"] = RichFormatter(
                    width, color=self.get_console().is_terminal()
                )
            else:
                self._instances["formatter"] = PlainFormatter(width)
        return self._instances["formatter"]

    def get_builtin_commands(self) -> list[BuiltinCommandPort]:
        """
        Get the built-in commands in lookup order.

        Returns:
            List of configured built-in commands
        """
        if "builtin_commands" not in self._instances:
            fs = self.get_file_system()
            console = self.get_console()
            formatter = self.get_formatter()
            self._instances["builtin_commands"] = [
                ChangeDirectoryCommand(fs, console, self._logger),
                ExitCommand(),
                CatCommand(
                    fs, console, self.get_settings().cat_chunk_size, logger=self._logger
                ),
                StatCommand(fs, console, formatter, self._logger),
                MakeDirectoryCommand(fs, console, self._logger),
                RemoveDirectoryCommand(fs, console, self._logger),
                RemoveFileCommand(fs, console, self._logger),
                ListDirectoryCommand(fs, console, formatter, self._logger),
                PrintWorkingDirectoryCommand(fs, console, self._logger),
            ]
        return self._instances["builtin_commands"]

    def get_dispatcher(self) -> CommandDispatcher:
        """
        Get command dispatcher with injected built-ins.

        Returns:
            Configured CommandDispatcher
        """
        if "dispatcher" not in self._instances:
            self._instances["dispatcher"] = CommandDispatcher(
                self.get_builtin_commands(),
                program_name=self.get_settings().program_name,
                logger=self._logger,
            )
        return self._instances["dispatcher"]

    def get_interpreter(self) -> Interpreter:
        """
        Get interpreter with injected dependencies.

        Returns:
            Configured Interpreter
        """
        if "interpreter" not in self._instances:
            self._instances["interpreter"] = Interpreter(
                console=self.get_console(),
                file_system=self.get_file_system(),
                dispatcher=self.get_dispatcher(),
                prompt_delimiter=self.get_settings().prompt_delimiter,
                show_prompt=self._show_prompt,
                logger=self._logger,
            )
        return self._instances["interpreter"]

    def reset(self):
        """Reset all instances (useful for testing)."""
        self._instances.clear()
