"""
Unit tests for the countdown stream
"""
import asyncio
from unittest.mock import patch

import pytest

from linkfeed.services.countdown import Countdown, DEFAULT_INTERVAL_MS

pytestmark = pytest.mark.asyncio


async def _drain(stream):
    return [value async for value in stream]


class TestCountdownValues:
    """Test the produced sequence"""

    async def test_counts_down_to_zero(self):
        assert await _drain(Countdown(3, 10)) == [3, 2, 1, 0]

    async def test_zero_yields_single_value(self):
        assert await _drain(Countdown(0, 10)) == [0]

    async def test_no_value_after_zero(self):
        stream = Countdown(1, 1)
        assert await stream.next() == (1, False)
        assert await stream.next() == (0, False)
        assert await stream.next() == (None, True)
        assert await stream.next() == (None, True)
        assert stream.done

    async def test_zero_interval(self):
        assert await _drain(Countdown(2, 0)) == [2, 1, 0]


class TestCountdownTiming:
    """Test waiting between values"""

    async def test_default_interval(self):
        assert Countdown(1).interval == DEFAULT_INTERVAL_MS
        assert Countdown(1, None).interval == 1000

    async def test_first_value_waits_one_interval(self):
        loop = asyncio.get_running_loop()
        started = loop.time()
        value, _ = await Countdown(2, 50).next()
        assert value == 2
        assert loop.time() - started >= 0.04

    async def test_values_are_lazy(self):
        stream = Countdown(5, 10)
        await asyncio.sleep(0.1)
        # nothing was produced while nobody was asking
        assert await stream.next() == (5, False)


class TestCountdownCancel:
    """Test stopping the stream early"""

    async def test_cancel_wakes_pending_next(self):
        stream = Countdown(3, 10_000)
        pending = asyncio.ensure_future(stream.next())
        await asyncio.sleep(0.01)
        stream.cancel()
        result = await asyncio.wait_for(pending, timeout=1)
        assert result == (None, True)
        assert stream.cancelled

    async def test_cancel_after_values(self):
        stream = Countdown(3, 1)
        assert await stream.next() == (3, False)
        stream.cancel()
        assert await stream.next() == (None, True)
        assert await _drain(stream) == []

    async def test_cancel_is_idempotent(self):
        stream = Countdown(3, 1)
        stream.cancel()
        stream.cancel()
        assert stream.done

    async def test_aclose_cancels(self):
        stream = Countdown(3, 1)
        await stream.aclose()
        assert stream.cancelled

    async def test_cancelling_consumer_task_ends_stream(self):
        stream = Countdown(3, 10_000)
        consumer = asyncio.ensure_future(_drain(stream))
        await asyncio.sleep(0.01)
        consumer.cancel()
        with pytest.raises(asyncio.CancelledError):
            await consumer
        assert stream.done
        assert await stream.next() == (None, True)

    async def test_concurrent_next_is_rejected(self):
        stream = Countdown(3, 10_000)
        pending = asyncio.ensure_future(stream.next())
        await asyncio.sleep(0.01)
        with pytest.raises(RuntimeError):
            await stream.next()
        stream.cancel()
        assert await pending == (None, True)


class TestCountdownLogging:
    """Only streams stopped with values left are reported as cancelled"""

    async def test_finished_stream_is_not_reported(self):
        stream = Countdown(1, 1)
        assert await _drain(stream) == [1, 0]
        with patch("linkfeed.services.countdown.logger") as mock_logger:
            stream.cancel()
        assert stream.done
        assert not mock_logger.debug.called

    async def test_stopped_stream_is_reported(self):
        stream = Countdown(3, 1)
        assert await stream.next() == (3, False)
        with patch("linkfeed.services.countdown.logger") as mock_logger:
            stream.cancel()
        mock_logger.debug.assert_called_once_with("Countdown from 3 cancelled at 2")


class TestCountdownInput:
    """Test rejected arguments"""

    async def test_negative_start_is_rejected(self):
        with pytest.raises(ValueError):
            Countdown(-1, 10)

    async def test_negative_interval_is_rejected(self):
        with pytest.raises(ValueError):
            Countdown(3, -5)
