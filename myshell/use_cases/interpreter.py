"""
Interactive read-parse-dispatch-execute loop.
"""

import logging
from enum import Enum

from myshell.entities.command import CommandResult, ParsedCommand
from myshell.exceptions import FileSystemError
from myshell.ports.builtins.builtin_command_port import BuiltinCommandPort
from myshell.ports.console.console_port import ConsolePort
from myshell.ports.files.filesystem_port import FileSystemPort
from myshell.use_cases.dispatcher import CommandDispatcher


class InterpreterState(Enum):
    AWAITING_INPUT = "awaiting_input"
    PARSING = "parsing"
    DISPATCHING = "dispatching"
    EXECUTING = "executing"
    TERMINATED = "terminated"


class Interpreter:
    """
    Runs commands one at a time until exit or end of input.

    Each cycle renders the prompt, reads a line, parses it and hands it to the
    dispatcher. A command completes, output included, before the next prompt.
    """

    def __init__(
        self,
        console: ConsolePort,
        file_system: FileSystemPort,
        dispatcher: CommandDispatcher,
        prompt_delimiter: str = ">",
        show_prompt: bool = True,
        logger: logging.Logger | None = None,
    ):
        """
        Initialize the interpreter.

        Args:
            console: Terminal input and output
            file_system: Used to resolve the working directory for the prompt
            dispatcher: Command table
            prompt_delimiter: Text printed after the working directory
            show_prompt: Whether to render a prompt at all
            logger: Logger instance to use for logging
        """
        self._console = console
        self._file_system = file_system
        self._dispatcher = dispatcher
        self._prompt_delimiter = prompt_delimiter
        self._show_prompt = show_prompt
        self._logger = logger or logging.getLogger(__name__)
        self.state = InterpreterState.AWAITING_INPUT

    def render_prompt(self) -> None:
        """Print the working directory as the prompt; skip it if the cwd is gone."""
        if not self._show_prompt:
            return
        try:
            cwd = self._file_system.current_directory()
        except FileSystemError as e:
            self._logger.debug(f"Prompt omitted: {e.reason}")
            return
        self._console.write_prompt(f"{cwd}{self._prompt_delimiter}")

    def execute_line(self, line: str) -> CommandResult | None:
        """
        Parse and run one input line, reporting any failure.

        Args:
            line: Raw input line

        Returns:
            The command's result, or None for a blank line
        """
        self.state = InterpreterState.PARSING
        command = ParsedCommand.parse(line.rstrip())
        if command is None:
            self.state = InterpreterState.AWAITING_INPUT
            return None

        self.state = InterpreterState.DISPATCHING
        result = self._dispatcher.dispatch(command, on_execute=self._enter_executing)
        if not result.succeeded:
            self._logger.info(f"Command failed: {command.line!r}")
            if result.error is not None:
                self._console.write_error(result.error.diagnostic)
        self._console.flush()

        self.state = (
            InterpreterState.TERMINATED if result.should_exit else InterpreterState.AWAITING_INPUT
        )
        return result

    def _enter_executing(self, builtin: BuiltinCommandPort) -> None:
        self.state = InterpreterState.EXECUTING

    def run(self) -> int:
        """
        Loop until exit or end of input.

        Returns:
            Process exit code
        """
        self._logger.info("Interpreter started")
        while True:
            self.state = InterpreterState.AWAITING_INPUT
            self.render_prompt()
            line = self._console.read_line()
            if line is None:
                self._logger.info("End of input")
                self.state = InterpreterState.TERMINATED
                self._console.flush()
                return 0

            result = self.execute_line(line)
            if result is not None and result.should_exit:
                self._logger.info("Exit requested")
                return result.exit_code
