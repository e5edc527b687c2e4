from unittest.mock import AsyncMock, patch

import pytest

from kvclient.retry import (
    LEADER_CHANGE_RETRY,
    MAX_REQUEST_COUNT,
    Reconnector,
    RetryError,
    retry,
)


class _ReconnectFailed(Exception):
    pass


@pytest.mark.asyncio
async def test_reconnect_failures_give_up_after_max_request_count():
    reconnects = []

    async def failing_reconnect(interval_sec):
        reconnects.append(interval_sec)
        raise _ReconnectFailed("unimplemented")

    async def call_err():
        raise RuntimeError("whoops")

    with patch("asyncio.sleep", new=AsyncMock()) as fake_sleep:
        with pytest.raises(_ReconnectFailed):
            await retry(call_err, failing_reconnect)
    assert len(reconnects) == MAX_REQUEST_COUNT
    assert fake_sleep.await_count == MAX_REQUEST_COUNT - 1


@pytest.mark.asyncio
async def test_success_needs_no_reconnect():
    reconnects = []

    async def failing_reconnect(interval_sec):
        reconnects.append(interval_sec)
        raise _ReconnectFailed("unimplemented")

    async def call_ok():
        return "done"

    assert await retry(call_ok, failing_reconnect) == "done"
    assert reconnects == []


def _counting_call(max_retries):
    state = {"calls": 0, "left": max_retries}

    async def call():
        state["calls"] += 1
        state["left"] -= 1
        if state["left"] == 0:
            return None
        raise RuntimeError("whoops")

    return state, call


async def _ok_reconnect(interval_sec):
    return None


@pytest.mark.asyncio
async def test_retry_stops_after_leader_change_retry_attempts():
    state, call = _counting_call(1000)
    with pytest.raises(RetryError) as info:
        await retry(call, _ok_reconnect)
    assert state["calls"] == LEADER_CHANGE_RETRY
    assert info.value.attempts == LEADER_CHANGE_RETRY
    assert isinstance(info.value.__cause__, RuntimeError)
    assert str(info.value.last_error) == "whoops"


@pytest.mark.asyncio
async def test_retry_succeeds_on_second_attempt():
    state, call = _counting_call(2)
    assert await retry(call, _ok_reconnect) is None
    assert state["calls"] == 2


@pytest.mark.asyncio
async def test_reconnector_skips_within_interval():
    now = [100.0]
    connects = []

    async def connect():
        connects.append(now[0])

    reconnector = Reconnector(connect, clock=lambda: now[0])
    assert reconnector.last_connected == 100.0

    await reconnector.reconnect(1)
    assert connects == []
    assert reconnector.last_connected == 100.0

    now[0] = 100.5
    await reconnector.reconnect(1)
    assert connects == []
    assert reconnector.last_connected == 100.0


@pytest.mark.asyncio
async def test_reconnector_connects_after_interval_and_records_time():
    now = [100.0]
    connects = []

    async def connect():
        connects.append(now[0])

    reconnector = Reconnector(connect, clock=lambda: now[0])
    now[0] = 102.0
    await reconnector.reconnect(1)
    assert connects == [102.0]
    assert reconnector.last_connected == 102.0

    await reconnector.reconnect(1)
    assert connects == [102.0]


@pytest.mark.asyncio
async def test_reconnector_error_leaves_time_unchanged():
    now = [0.0]

    async def connect():
        raise _ReconnectFailed("down")

    reconnector = Reconnector(connect, clock=lambda: now[0])
    now[0] = 5.0
    with pytest.raises(_ReconnectFailed):
        await reconnector.reconnect(1)
    assert reconnector.last_connected == 0.0


@pytest.mark.asyncio
async def test_retry_with_reconnector_recovers():
    now = [0.0]
    connects = []

    async def connect():
        connects.append(now[0])

    reconnector = Reconnector(connect, clock=lambda: now[0])
    attempts = []

    async def call():
        attempts.append(1)
        now[0] += 10
        if len(attempts) < 3:
            raise RuntimeError("leader changed")
        return "value"

    assert await retry(call, reconnector.reconnect) == "value"
    assert len(connects) == 2