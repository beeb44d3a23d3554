"""Writer decorators."""

from surrogate.decorators.writer_decorator import WriterDecorator
from surrogate.decorators.numbering import NumberingWriter
from surrogate.decorators.checksumming import CheckSummingWriter
from surrogate.decorators.timestamping import TimeStampingWriter

__all__ = [
    "WriterDecorator",
    "NumberingWriter",
    "CheckSummingWriter",
    "TimeStampingWriter",
]
