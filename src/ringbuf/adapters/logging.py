"""Python logging handler adapter for ringbuf.

This adapter bridges Python's standard library logging module to a
BoundedQueuePort, keeping only the most recent records in memory.
"""

import logging
import traceback

from ringbuf.core.models import LogEntry
from ringbuf.core.ports import BoundedQueuePort
from ringbuf.core.ring_buffer import RingBuffer

DEFAULT_HANDLER_CAPACITY = 1000

# Standard LogRecord attributes that should not be treated as extra fields
_STANDARD_LOGRECORD_ATTRS = frozenset(
    {
        "args",
        "asctime",
        "created",
        "exc_info",
        "exc_text",
        "filename",
        "funcName",
        "levelname",
        "levelno",
        "lineno",
        "message",
        "module",
        "msecs",
        "msg",
        "name",
        "pathname",
        "process",
        "processName",
        "relativeCreated",
        "stack_info",
        "taskName",
        "thread",
        "threadName",
    }
)


# Default attributes to extract from LogRecord
_DEFAULT_INCLUDE_ATTRS = ("module", "funcName", "lineno", "pathname")


class RingBufferHandler(logging.Handler):
    """Logging handler that keeps the newest records in a ring buffer.

    Once the buffer is full every new record evicts the oldest one, so
    memory use stays fixed no matter how much is logged.

    Example:
        ```python
        from ringbuf import RingBufferHandler

        handler = RingBufferHandler(capacity=500)
        logging.getLogger().addHandler(handler)
        ...
        recent = handler.drain()
        ```
    """

    def __init__(
        self,
        buffer: BoundedQueuePort[LogEntry] | None = None,
        capacity: int = DEFAULT_HANDLER_CAPACITY,
        include_attrs: list[str] | None = None,
        level: int = logging.NOTSET,
    ) -> None:
        """Initialize the handler with a bounded queue.

        Args:
            buffer: Queue implementing BoundedQueuePort. When omitted a
                RingBuffer of the given capacity is created.
            capacity: Capacity of the created RingBuffer. Ignored when
                buffer is given.
            include_attrs: List of LogRecord attributes to include. Defaults to
                ["module", "funcName", "lineno", "pathname"].
            level: Minimum level handled.
        """
        super().__init__(level)
        self._buffer: BoundedQueuePort[LogEntry] = (
            buffer if buffer is not None else RingBuffer(capacity)
        )
        self._include_attrs = list(
            _DEFAULT_INCLUDE_ATTRS if include_attrs is None else include_attrs
        )

    @property
    def buffer(self) -> BoundedQueuePort[LogEntry]:
        """The queue records are written to."""
        return self._buffer

    def emit(self, record: logging.LogRecord) -> None:
        """Add a log record to the buffer.

        Args:
            record: The log record to emit.
        """
        try:
            self._buffer.add(self._to_entry(record))
        except Exception:
            self.handleError(record)

    def peek(self) -> LogEntry | None:
        """Return the oldest held entry without removing it."""
        self.acquire()
        try:
            return self._buffer.peek()
        finally:
            self.release()

    def drain(self) -> list[LogEntry]:
        """Remove and return all held entries, oldest first."""
        entries: list[LogEntry] = []
        self.acquire()
        try:
            while not self._buffer.is_empty():
                entry = self._buffer.remove()
                if entry is not None:
                    entries.append(entry)
        finally:
            self.release()
        return entries

    def size(self) -> int:
        """Return the number of held entries."""
        self.acquire()
        try:
            return self._buffer.size()
        finally:
            self.release()

    def _to_entry(self, record: logging.LogRecord) -> LogEntry:
        # Map of attribute names to their values from LogRecord
        attr_mapping: dict[str, str | int | float | bool] = {
            "module": record.module,
            "funcName": record.funcName or "",
            "lineno": record.lineno,
            "pathname": record.pathname,
        }

        attributes: dict[str, str | int | float | bool] = {
            key: attr_mapping[key] for key in self._include_attrs if key in attr_mapping
        }

        # Add any extra attributes passed via logging call
        for key, value in record.__dict__.items():
            if key not in _STANDARD_LOGRECORD_ATTRS and isinstance(
                value, (str, int, float, bool)
            ):
                attributes[key] = value

        if record.exc_info:
            exc_type, exc_value, exc_tb = record.exc_info
            if exc_type is not None:
                attributes["exc_type"] = exc_type.__name__
            if exc_value is not None:
                attributes["exc_message"] = str(exc_value)
            if exc_tb is not None:
                attributes["exc_traceback"] = "".join(
                    traceback.format_exception(exc_type, exc_value, exc_tb)
                )

        return LogEntry(
            timestamp=record.created,
            level=record.levelname,
            message=record.getMessage(),
            logger=record.name,
            attributes=attributes,
        )
