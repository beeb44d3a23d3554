"""Writer subject protocol."""

from typing import Protocol


class WriterSubject(Protocol):
    """Interface shared by line writers and writer decorators."""

    def write_line(self, line: str) -> None:
        """Append one line."""
        ...

    def rewind(self) -> None:
        """Move the cursor back to the start."""
        ...

    def pos(self) -> int:
        """Return the current cursor offset."""
        ...

    def close(self) -> None:
        """Release the underlying resource."""
        ...
