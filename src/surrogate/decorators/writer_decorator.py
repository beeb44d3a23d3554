"""Base class for writer decorators."""

from surrogate.core.dispatch import Dispatchable
from surrogate.core.exceptions import ValidationError
from surrogate.protocols import WriterSubject


class WriterDecorator(Dispatchable):
    """
    Pass-through writer wrapper.

    Subclasses override the operations they intercept and forward the rest
    as-is. The wrapped writer may be another decorator.
    """

    exposed_operations = ("write_line", "rewind", "pos", "close")

    def __init__(self, real_writer: WriterSubject):
        if real_writer is None:
            raise ValidationError(f"{type(self).__name__} requires a writer")
        self._real_writer = real_writer

    @property
    def real_writer(self) -> WriterSubject:
        return self._real_writer

    def write_line(self, line: str) -> None:
        self._real_writer.write_line(line)

    def rewind(self) -> None:
        self._real_writer.rewind()

    def pos(self) -> int:
        return self._real_writer.pos()

    def close(self) -> None:
        self._real_writer.close()
