"""Writer decorator that keeps a running checksum."""

from surrogate.decorators.writer_decorator import WriterDecorator
from surrogate.protocols import WriterSubject

NEWLINE_BYTE = ord("\n")


class CheckSummingWriter(WriterDecorator):
    """
    Sums every byte written, modulo 256.

    Each line counts its UTF-8 bytes plus the newline the sink appends.
    The line itself is forwarded unchanged.
    """

    def __init__(self, real_writer: WriterSubject):
        super().__init__(real_writer)
        self._checksum = 0

    @property
    def checksum(self) -> int:
        return self._checksum

    def write_line(self, line: str) -> None:
        for byte in line.encode("utf-8"):
            self._checksum = (self._checksum + byte) % 256
        self._checksum = (self._checksum + NEWLINE_BYTE) % 256
        self._real_writer.write_line(line)
