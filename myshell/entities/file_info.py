"""
File metadata domain entities.
"""

import stat
import time
from dataclasses import dataclass
from typing import Any

from myshell.exceptions import FileSystemError


class FileInfo:
    """
    Metadata of a filesystem entry as reported by stat().
    """

    def __init__(self, path: str, stat_result: Any):
        """
        Initialize the FileInfo entity.

        Args:
            path: Path exactly as the user named it
            stat_result: Result of os.stat() for that path
        """
        self.path = path
        self.size: int = stat_result.st_size
        self.modified: float = stat_result.st_mtime
        self.mode: int = stat_result.st_mode
        self.hard_links: int = stat_result.st_nlink
        self.inode: int = stat_result.st_ino

    @property
    def is_dir(self) -> bool:
        return stat.S_ISDIR(self.mode)

    @property
    def permission_bits(self) -> str:
        """Permission bits in octal, e.g. '0644'."""
        return f"{stat.S_IMODE(self.mode):04o}"

    @property
    def symbolic_mode(self) -> str:
        """Mode rendered the way ls -l shows it, e.g. '-rw-r--r--'."""
        return stat.filemode(self.mode)

    @property
    def modified_display(self) -> str:
        """Last modification time in ctime() form."""
        return time.ctime(self.modified)

    def get_details(self) -> dict[str, Any]:
        """
        Get the labelled fields printed by the stat command.

        Returns:
            Ordered mapping of label to display value
        """
        return {
            "File Name": self.path,
            "Total Size": self.size,
            "Last Modified": self.modified_display,
            "Protection": f"{self.permission_bits} ({self.symbolic_mode})",
            "Number of hardlinks": self.hard_links,
            "Inode": self.inode,
        }

    def __str__(self) -> str:
        return f"FileInfo(path='{self.path}', size={self.size}, mode={self.symbolic_mode})"

    def __repr__(self) -> str:
        return f"FileInfo(path='{self.path}')"


@dataclass(frozen=True)
class DirectoryEntry:
    """One entry of a directory listing.

    ``error`` holds the metadata lookup failure, if any; ``is_dir`` is then False.
    """

    name: str
    is_dir: bool
    error: FileSystemError | None = None
