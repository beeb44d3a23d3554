"""File-backed line writer."""

from pathlib import Path
from typing import Union

from surrogate.core.dispatch import Dispatchable
from surrogate.core.exceptions import ResourceClosed


class SimpleWriter(Dispatchable):
    """
    Writes lines to a file, each terminated by a newline.

    The file is truncated on construction. Once closed, every operation
    (including a second close) raises ResourceClosed.
    """

    exposed_operations = ("write_line", "rewind", "pos", "close")

    def __init__(self, path: Union[str, Path]):
        self._path = Path(path)
        self._file = open(self._path, "w", encoding="utf-8")

    @property
    def path(self) -> Path:
        return self._path

    @property
    def closed(self) -> bool:
        return self._file.closed

    def write_line(self, line: str) -> None:
        self._ensure_open("write_line")
        self._file.write(line)
        self._file.write("\n")

    def pos(self) -> int:
        self._ensure_open("pos")
        return self._file.tell()

    def rewind(self) -> None:
        self._ensure_open("rewind")
        self._file.seek(0)

    def close(self) -> None:
        self._ensure_open("close")
        self._file.close()

    def _ensure_open(self, operation: str) -> None:
        if self._file.closed:
            raise ResourceClosed(operation, str(self._path))
