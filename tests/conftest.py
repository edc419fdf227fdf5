"""
Pytest configuration and shared fixtures.
"""

import io
import os
from dataclasses import dataclass
from unittest.mock import MagicMock

import pytest

from myshell.adapters.console.stream_console import StreamConsole
from myshell.config.settings import Settings
from myshell.container import DependencyContainer


@dataclass
class ConsoleCapture:
    """In-memory console plus the streams behind it."""

    console: StreamConsole
    stdout: io.BytesIO
    stderr: io.StringIO

    @property
    def out(self) -> str:
        return self.stdout.getvalue().decode("utf-8", "surrogateescape")

    @property
    def err(self) -> str:
        return self.stderr.getvalue()


@dataclass
class SessionOutcome:
    exit_code: int
    out: str
    err: str
    raw_out: bytes


@pytest.fixture
def temp_directory(tmp_path):
    """
    Create a temporary directory tree for testing filesystem commands.

    Layout: notes.txt (file), script.py (file), subdir/ (directory) holding inner.md.

    Returns:
        Path to the temporary directory, as a string
    """
    with open(tmp_path / "notes.txt", "w") as f:
        f.write("This is a test file.\n")

    with open(tmp_path / "script.py", "w") as f:
        f.write("print('Hello, world!')\n")

    subdir = tmp_path / "subdir"
    os.makedirs(subdir)
    with open(subdir / "inner.md", "w") as f:
        f.write("# Test Markdown\n")

    yield str(tmp_path)


@pytest.fixture
def mock_logger():
    """
    Create a mock logger for testing.

    Returns:
        Mock logger instance
    """
    return MagicMock()


@pytest.fixture
def make_console():
    """
    Factory building a StreamConsole over in-memory streams.

    Returns:
        Callable taking the text to feed on stdin
    """

    def _make(input_text: str = "", max_line_length: int = 256) -> ConsoleCapture:
        stdout = io.BytesIO()
        stderr = io.StringIO()
        console = StreamConsole(
            stdin=io.StringIO(input_text),
            stdout=stdout,
            stderr=stderr,
            max_line_length=max_line_length,
        )
        return ConsoleCapture(console=console, stdout=stdout, stderr=stderr)

    return _make


@pytest.fixture
def run_session(monkeypatch):
    """
    Factory running a whole interpreter session over the given input.

    Returns:
        Callable taking the session input and returning a SessionOutcome
    """
    for key in list(os.environ):
        if key.startswith("MYSHELL_"):
            monkeypatch.delenv(key)

    def _run(input_text: str, show_prompt: bool = False, pretty: bool = False) -> SessionOutcome:
        stdout = io.BytesIO()
        stderr = io.StringIO()
        container = DependencyContainer(
            settings=Settings(),
            stdin=io.StringIO(input_text),
            stdout=stdout,
            stderr=stderr,
            pretty=pretty,
            show_prompt=show_prompt,
        )
        exit_code = container.get_interpreter().run()
        raw = stdout.getvalue()
        return SessionOutcome(
            exit_code=exit_code,
            out=raw.decode("utf-8", "surrogateescape"),
            err=stderr.getvalue(),
            raw_out=raw,
        )

    return _run


@pytest.fixture
def dependency_container(mock_logger):
    """
    Create a dependency container over in-memory streams for testing.

    Returns:
        DependencyContainer instance with mocked logger
    """
    container = DependencyContainer(
        settings=Settings(),
        stdin=io.StringIO(""),
        stdout=io.BytesIO(),
        stderr=io.StringIO(),
        show_prompt=False,
    )
    # Replace the logger with our mock
    container._logger = mock_logger
    return container
