"""
Filesystem port interface defining the primitives the built-in commands rely on.
"""

from abc import ABC, abstractmethod
from typing import BinaryIO

from myshell.entities.file_info import DirectoryEntry, FileInfo


class FileSystemPort(ABC):
    """Port interface for direct filesystem operations.

    Every method raises FileSystemError when the underlying primitive fails.
    Relative paths resolve against the process working directory.
    """

    @abstractmethod
    def current_directory(self) -> str:
        """
        Get the process working directory.

        Returns:
            Absolute path of the working directory
        """
        pass

    @abstractmethod
    def change_directory(self, path: str) -> None:
        """
        Change the process working directory.

        Args:
            path: Directory to change to
        """
        pass

    @abstractmethod
    def home_directory(self) -> str:
        """
        Get the home directory of the invoking user.

        Returns:
            Absolute path of the home directory
        """
        pass

    @abstractmethod
    def list_directory(self, path: str) -> list[DirectoryEntry]:
        """
        List the entries of a directory in enumeration order.

        Args:
            path: Directory to list

        Returns:
            List of DirectoryEntry, excluding '.' and '..'. Metadata failures
            are recorded on the entry rather than raised.
        """
        pass

    @abstractmethod
    def open_for_reading(self, path: str) -> BinaryIO:
        """
        Open a file read-only in binary mode.

        Args:
            path: File to open

        Returns:
            An open binary file object; the caller closes it
        """
        pass

    @abstractmethod
    def make_directory(self, path: str, mode: int = 0o755) -> None:
        """
        Create a directory.

        Args:
            path: Directory to create
            mode: Permission bits, before the umask is applied
        """
        pass

    @abstractmethod
    def remove_directory(self, path: str) -> None:
        """
        Remove an empty directory.

        Args:
            path: Directory to remove
        """
        pass

    @abstractmethod
    def remove_file(self, path: str) -> None:
        """
        Unlink a file.

        Args:
            path: File to remove
        """
        pass

    @abstractmethod
    def stat(self, path: str) -> FileInfo:
        """
        Retrieve metadata for a path, following symbolic links.

        Args:
            path: Path to inspect

        Returns:
            FileInfo entity
        """
        pass
