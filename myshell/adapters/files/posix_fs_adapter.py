"""
POSIX filesystem adapter implementation: each method is one direct system call.
"""

import logging
import os
import pwd
from typing import BinaryIO

from typing_extensions import override

from myshell.entities.file_info import DirectoryEntry, FileInfo
from myshell.exceptions import FileSystemError
from myshell.ports.files.filesystem_port import FileSystemPort


class PosixFileSystemAdapter(FileSystemPort):
    """Local filesystem implementation of the filesystem port."""

    def __init__(self, logger: logging.Logger | None = None):
        """
        Initialize the adapter with an optional logger.

        Args:
            logger: Logger instance to use for logging. If None, a default logger will be created.
        """
        self._logger: logging.Logger = logger or logging.getLogger(__name__)

    @override
    def current_directory(self) -> str:
        try:
            return os.getcwd()
        except OSError as e:
            raise FileSystemError("Cannot resolve working directory", e) from e

    @override
    def change_directory(self, path: str) -> None:
        self._logger.debug(f"chdir {path}")
        try:
            os.chdir(path)
        except OSError as e:
            raise FileSystemError(f"Cannot change directory to {path}", e) from e

    @override
    def home_directory(self) -> str:
        try:
            return pwd.getpwuid(os.getuid()).pw_dir
        except KeyError:
            # No password database entry for this uid
            self._logger.warning(f"No passwd entry for uid {os.getuid()}, using HOME")
            return os.path.expanduser("~")

    @override
    def list_directory(self, path: str) -> list[DirectoryEntry]:
        self._logger.debug(f"Listing directory: {path}")
        entries: list[DirectoryEntry] = []
        try:
            with os.scandir(path) as it:
                for item in it:
                    entries.append(self._describe_entry(path, item.name))
        except OSError as e:
            raise FileSystemError(f"Cannot open directory {path}", e) from e
        return entries

    def _describe_entry(self, directory: str, name: str) -> DirectoryEntry:
        """
        Look up one entry relative to its directory, never the working directory.

        Args:
            directory: Directory being listed
            name: Entry name inside that directory

        Returns:
            DirectoryEntry, carrying the lookup error if stat() failed
        """
        try:
            info = FileInfo(name, os.stat(os.path.join(directory, name)))
        except OSError as e:
            self._logger.debug(f"stat failed for {name} in {directory}: {e}")
            return DirectoryEntry(
                name=name,
                is_dir=False,
                error=FileSystemError(f"Cannot stat {name}", e),
            )
        return DirectoryEntry(name=name, is_dir=info.is_dir)

    @override
    def open_for_reading(self, path: str) -> BinaryIO:
        try:
            return open(path, "rb")
        except OSError as e:
            raise FileSystemError(f"Cannot open {path}", e) from e

    @override
    def make_directory(self, path: str, mode: int = 0o755) -> None:
        self._logger.debug(f"mkdir {path} mode={mode:o}")
        try:
            os.mkdir(path, mode)
        except OSError as e:
            raise FileSystemError(f"Cannot create directory {path}", e) from e

    @override
    def remove_directory(self, path: str) -> None:
        self._logger.debug(f"rmdir {path}")
        try:
            os.rmdir(path)
        except OSError as e:
            raise FileSystemError(f"Cannot remove directory {path}", e) from e

    @override
    def remove_file(self, path: str) -> None:
        self._logger.debug(f"unlink {path}")
        try:
            os.unlink(path)
        except OSError as e:
            raise FileSystemError(f"Cannot unlink {path}", e) from e

    @override
    def stat(self, path: str) -> FileInfo:
        try:
            return FileInfo(path, os.stat(path))
        except OSError as e:
            raise FileSystemError(f"Cannot stat {path}", e) from e
