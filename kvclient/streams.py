"""Asynchronous streams driven by a state-transition function."""

from __future__ import annotations

from typing import AsyncIterator, Awaitable, Callable, Optional, Tuple, TypeVar

S = TypeVar("S")
T = TypeVar("T")


async def stream_fn(
    initial_state: S,
    func: Callable[[S], Awaitable[Optional[Tuple[S, T]]]],
) -> AsyncIterator[T]:
    """Yield items produced by repeatedly awaiting func on a threaded state.

    func returns None to end the stream, or a (next_state, item) pair.
    An exception raised by func propagates to the consumer and ends the stream.
    """
    state = initial_state
    while True:
        step = await func(state)
        if step is None:
            return
        state, item = step
        yield item