"""ringbuf - fixed-capacity ring buffer with overwrite-on-full semantics."""

from ringbuf.adapters.logging import DEFAULT_HANDLER_CAPACITY, RingBufferHandler
from ringbuf.core.models import LogEntry
from ringbuf.core.ports import BoundedQueuePort
from ringbuf.core.ring_buffer import RingBuffer

__all__ = [
    "DEFAULT_HANDLER_CAPACITY",
    "BoundedQueuePort",
    "LogEntry",
    "RingBuffer",
    "RingBufferHandler",
]
