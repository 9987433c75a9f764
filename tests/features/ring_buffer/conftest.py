"""BDD step definitions for ring buffer features."""

from dataclasses import dataclass

import pytest
from pytest_bdd import given, parsers, then, when
from tests.helpers import drain

from ringbuf.core.ring_buffer import RingBuffer


@dataclass
class RingBufferScenarioContext:
    """Shared state between steps in a ring buffer scenario."""

    buffer: RingBuffer[int] | None = None
    removed: int | None = None

    @property
    def ring(self) -> RingBuffer[int]:
        assert self.buffer is not None, "no buffer created by a Given step"
        return self.buffer


def _parse_items(text: str) -> list[int]:
    return [int(part) for part in text.split(",")]


@pytest.fixture
def ctx() -> RingBufferScenarioContext:
    """Fresh scenario context for each test."""
    return RingBufferScenarioContext()


# === Given ===
@given(parsers.parse("an empty ring buffer with capacity {capacity:d}"))
def step_empty_buffer(ctx: RingBufferScenarioContext, capacity: int) -> None:
    ctx.buffer = RingBuffer(capacity)


@given(parsers.parse("a ring buffer built from the items {items}"))
def step_buffer_from_items(ctx: RingBufferScenarioContext, items: str) -> None:
    ctx.buffer = RingBuffer.from_sequence(_parse_items(items))


# === When ===
@when(parsers.parse("I add the item {item:d}"))
def step_add_item(ctx: RingBufferScenarioContext, item: int) -> None:
    ctx.ring.add(item)


@when(parsers.parse("I add the items {items}"))
def step_add_items(ctx: RingBufferScenarioContext, items: str) -> None:
    ctx.ring.add_sequence(_parse_items(items))


@when("I remove an item")
def step_remove(ctx: RingBufferScenarioContext) -> None:
    ctx.removed = ctx.ring.remove()


# === Then ===
@then(parsers.parse("the size is {size:d}"))
def step_size_is(ctx: RingBufferScenarioContext, size: int) -> None:
    assert ctx.ring.size() == size


@then("the buffer is empty")
def step_is_empty(ctx: RingBufferScenarioContext) -> None:
    assert ctx.ring.is_empty()


@then("the buffer is not empty")
def step_is_not_empty(ctx: RingBufferScenarioContext) -> None:
    assert not ctx.ring.is_empty()


@then(parsers.parse("peek returns {value:d}"))
def step_peek_returns(ctx: RingBufferScenarioContext, value: int) -> None:
    assert ctx.ring.peek() == value


@then("peek returns nothing")
def step_peek_returns_nothing(ctx: RingBufferScenarioContext) -> None:
    assert ctx.ring.peek() is None


@then("remove returns nothing")
def step_remove_returns_nothing(ctx: RingBufferScenarioContext) -> None:
    assert ctx.ring.remove() is None


@then(parsers.parse("the removed item is {value:d}"))
def step_removed_item(ctx: RingBufferScenarioContext, value: int) -> None:
    assert ctx.removed == value


@then(parsers.parse("draining the buffer yields {items}"))
def step_drain_yields(ctx: RingBufferScenarioContext, items: str) -> None:
    assert drain(ctx.ring) == _parse_items(items)
