"""Domain models held by ring buffer adapters."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class LogEntry:
    """A structured log entry captured from a logging record.

    Attributes:
        timestamp: Unix timestamp in seconds.
        level: Log level name (e.g., INFO, ERROR, DEBUG).
        message: The formatted log message.
        logger: Name of the logger that produced the record.
        attributes: Additional structured fields.
    """

    timestamp: float
    level: str
    message: str
    logger: str = ""
    attributes: dict[str, str | int | float | bool] = field(default_factory=dict)
