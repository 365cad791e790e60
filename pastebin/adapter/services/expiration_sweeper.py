"""
Expiration Sweeper

Periodic background purge of expired pastes and sessions. Runs as an
asyncio task owned by the application lifespan and shares nothing with
request handlers except the session factory.
"""

import asyncio
import logging
from contextlib import suppress
from typing import Callable, Optional

from pydantic import BaseModel
from sqlmodel.ext.asyncio.session import AsyncSession

from pastebin.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from pastebin.app.use_cases.auth import SessionUseCase
from pastebin.app.use_cases.pastes import ExpirePastesUseCase

logger = logging.getLogger(__name__)


class SweepResult(BaseModel):
    pastes_removed: int
    sessions_removed: int


class ExpirationSweeper:
    """
    Cancellable scheduled task running both expiration sweeps.

    Each pass opens its own database session. Sweeps are idempotent, so an
    extra or overlapping pass is harmless.
    """

    def __init__(self, session_factory: Callable[[], AsyncSession], interval_seconds: float = 3600):
        self.session_factory = session_factory
        self.interval_seconds = interval_seconds
        self._stop_event: Optional[asyncio.Event] = None
        self._task: Optional[asyncio.Task] = None

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    async def run_once(self) -> SweepResult:
        """Run one pass of both sweeps and return what was removed"""
        async with self.session_factory() as session:
            paste_result = await ExpirePastesUseCase(SqlAlchemyUnitOfWork(session)).execute()
            session_result = await SessionUseCase(SqlAlchemyUnitOfWork(session)).expire_sweep()

        result = SweepResult(
            pastes_removed=paste_result.value.removed,
            sessions_removed=session_result.value.removed,
        )
        if result.pastes_removed or result.sessions_removed:
            logger.info(
                "Expiration sweep removed %d pastes and %d sessions",
                result.pastes_removed,
                result.sessions_removed,
            )
        return result

    def start(self) -> None:
        if self.running:
            return
        self._stop_event = asyncio.Event()
        self._task = asyncio.create_task(self._loop(self._stop_event))
        logger.info("Expiration sweeper started (interval=%ss)", self.interval_seconds)

    async def stop(self) -> None:
        if self._task is None:
            return
        self._stop_event.set()
        self._task.cancel()
        with suppress(asyncio.CancelledError):
            await self._task
        self._task = None
        logger.info("Expiration sweeper stopped")

    async def _loop(self, stop_event: asyncio.Event) -> None:
        while not stop_event.is_set():
            try:
                await asyncio.wait_for(stop_event.wait(), timeout=self.interval_seconds)
            except asyncio.TimeoutError:
                pass
            if stop_event.is_set():
                break
            try:
                await self.run_once()
            except Exception:
                # Keep the loop alive; the next interval retries
                logger.exception("Expiration sweep failed")
