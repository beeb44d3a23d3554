"""Writer decorator that numbers lines."""

from surrogate.decorators.writer_decorator import WriterDecorator
from surrogate.protocols import WriterSubject


class NumberingWriter(WriterDecorator):
    """Prefixes each line with its 1-based sequence number."""

    def __init__(self, real_writer: WriterSubject):
        super().__init__(real_writer)
        self._line_number = 1

    @property
    def line_number(self) -> int:
        """Number the next line will get."""
        return self._line_number

    def write_line(self, line: str) -> None:
        self._real_writer.write_line(f"{self._line_number}: {line}")
        self._line_number += 1
