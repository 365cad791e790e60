import asyncio
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from pastebin.adapter.services.expiration_sweeper import ExpirationSweeper
from pastebin.libs.result import Return


def _session_factory():
    session = MagicMock()
    session.__aenter__ = AsyncMock(return_value=session)
    session.__aexit__ = AsyncMock(return_value=False)
    return MagicMock(return_value=session)


@pytest.fixture
def sweep_mocks():
    with patch(
        "pastebin.adapter.services.expiration_sweeper.ExpirePastesUseCase"
    ) as pastes_cls, patch(
        "pastebin.adapter.services.expiration_sweeper.SessionUseCase"
    ) as sessions_cls:
        pastes_cls.return_value.execute = AsyncMock(
            return_value=Return.ok(MagicMock(removed=3))
        )
        sessions_cls.return_value.expire_sweep = AsyncMock(
            return_value=Return.ok(MagicMock(removed=1))
        )
        yield pastes_cls, sessions_cls


@pytest.mark.asyncio
async def test_run_once_runs_both_sweeps(sweep_mocks):
    pastes_cls, sessions_cls = sweep_mocks
    sweeper = ExpirationSweeper(_session_factory())

    result = await sweeper.run_once()

    assert result.pastes_removed == 3
    assert result.sessions_removed == 1
    pastes_cls.return_value.execute.assert_called_once()
    sessions_cls.return_value.expire_sweep.assert_called_once()


@pytest.mark.asyncio
async def test_loop_runs_each_interval_and_stops(sweep_mocks):
    pastes_cls, _ = sweep_mocks
    sweeper = ExpirationSweeper(_session_factory(), interval_seconds=0.01)

    sweeper.start()
    assert sweeper.running
    await asyncio.sleep(0.1)
    await sweeper.stop()

    assert not sweeper.running
    assert pastes_cls.return_value.execute.call_count >= 2


@pytest.mark.asyncio
async def test_loop_survives_failed_pass(sweep_mocks):
    pastes_cls, _ = sweep_mocks
    calls = []

    async def flaky():
        calls.append(1)
        if len(calls) == 1:
            raise RuntimeError("database is locked")
        return Return.ok(MagicMock(removed=0))

    pastes_cls.return_value.execute = AsyncMock(side_effect=flaky)
    sweeper = ExpirationSweeper(_session_factory(), interval_seconds=0.01)

    sweeper.start()
    await asyncio.sleep(0.1)
    await sweeper.stop()

    assert len(calls) >= 2


@pytest.mark.asyncio
async def test_stop_without_start_is_noop():
    sweeper = ExpirationSweeper(_session_factory())
    await sweeper.stop()
    assert not sweeper.running
