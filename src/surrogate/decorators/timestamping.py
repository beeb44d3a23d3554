"""Writer decorator that stamps lines with the current time."""

from typing import Optional

from surrogate.config.settings import get_settings
from surrogate.core.timezone import Clock, format_timestamp, get_clock
from surrogate.decorators.writer_decorator import WriterDecorator
from surrogate.protocols import WriterSubject


class TimeStampingWriter(WriterDecorator):
    """
    Prefixes each line with "<timestamp>: ".

    Args:
        real_writer: Writer to forward to
        clock: Zero-argument callable returning an aware datetime;
            defaults to the configured clock
        timestamp_format: strftime pattern; defaults to the
            `timestamp_format` setting, then ISO-8601
    """

    def __init__(
        self,
        real_writer: WriterSubject,
        clock: Optional[Clock] = None,
        timestamp_format: Optional[str] = None,
    ):
        super().__init__(real_writer)
        self._clock = clock or get_clock()
        self._timestamp_format = timestamp_format or get_settings().timestamp_format

    def write_line(self, line: str) -> None:
        stamp = format_timestamp(self._clock(), self._timestamp_format)
        self._real_writer.write_line(f"{stamp}: {line}")
