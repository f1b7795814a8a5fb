import asyncio

import pytest

from prettyscatter.api.debounce import Debouncer


def test_only_last_scheduled_action_runs():
    calls = []

    async def scenario():
        debouncer = Debouncer(0.05)
        for i in range(3):
            debouncer.schedule(lambda i=i: _record(calls, i))
        await asyncio.sleep(0.2)
        assert not debouncer.pending

    asyncio.run(scenario())
    assert calls == [2]


def test_cancel_drops_pending_action():
    calls = []

    async def scenario():
        debouncer = Debouncer(0.05)
        debouncer.schedule(lambda: _record(calls, "x"))
        assert debouncer.pending
        debouncer.cancel()
        await asyncio.sleep(0.1)

    asyncio.run(scenario())
    assert calls == []


def test_negative_delay_is_rejected():
    with pytest.raises(ValueError):
        Debouncer(-1.0)


async def _record(calls, value):
    calls.append(value)


def test_failed_action_is_reported():
    errors = []

    async def scenario():
        debouncer = Debouncer(0.0, on_error=errors.append)
        debouncer.schedule(_fail)
        await asyncio.sleep(0.05)

    asyncio.run(scenario())
    assert len(errors) == 1
    assert isinstance(errors[0], RuntimeError)


def test_cancelled_action_is_not_reported():
    errors = []

    async def scenario():
        debouncer = Debouncer(0.05, on_error=errors.append)
        debouncer.schedule(_fail)
        debouncer.cancel()
        await asyncio.sleep(0.1)

    asyncio.run(scenario())
    assert errors == []


async def _fail():
    raise RuntimeError("falhou")
