"""
Rendering of command output: plain text by default, rich markup with --pretty.
"""

import io

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from myshell.entities.file_info import DirectoryEntry, FileInfo

DIR_TAG = "<dir>"


class PlainFormatter:
    """Fixed-width text output matching the classic interpreter."""

    def __init__(self, column_width: int = 30):
        self.column_width = column_width

    def format_entry(self, entry: DirectoryEntry) -> str:
        name = entry.name.ljust(self.column_width)
        if entry.is_dir:
            return f"{name}\t{DIR_TAG}"
        return name

    def format_stat(self, info: FileInfo) -> str:
        return "\n".join(f"{label}: {value}" for label, value in info.get_details().items())


class RichFormatter(PlainFormatter):
    """Colored output rendered through rich, captured to a string."""

    def __init__(self, column_width: int = 30, color: bool = True, width: int = 100):
        super().__init__(column_width)
        self._color = color
        self._width = width

    def _render(self, renderable: object) -> str:
        buffer = io.StringIO()
        console = Console(
            file=buffer,
            force_terminal=self._color,
            color_system="standard" if self._color else None,
            no_color=not self._color,
            width=self._width,
            soft_wrap=True,
        )
        console.print(renderable, end="")
        return buffer.getvalue()

    def format_entry(self, entry: DirectoryEntry) -> str:
        text = Text(entry.name.ljust(self.column_width))
        if entry.is_dir:
            text.stylize("bold blue")
            text.append(f"\t{DIR_TAG}", style="dim")
        elif entry.error is not None:
            text.stylize("red")
        return self._render(text)

    def format_stat(self, info: FileInfo) -> str:
        table = Table(box=box.ROUNDED, show_header=False, border_style="magenta")
        table.add_column(style="bold")
        table.add_column()
        for label, value in info.get_details().items():
            table.add_row(label, str(value))
        return self._render(table)
