"""RealtimeDriver — 이벤트 루프에서 엔진 스케줄러를 주기적으로 실행"""

import asyncio
import contextlib
from typing import Optional

from adventure_deck.core.logging import get_logger
from adventure_deck.engine.adventure_engine import AdventureEngine

logger = get_logger(__name__)


class RealtimeDriver:
    """asyncio 태스크 하나로 engine.run_pending()을 tick 간격마다 호출

    엔진 락은 API 스레드풀과 공유하므로 run_pending()은 워커 스레드에서 실행한다.
    """

    def __init__(self, engine: AdventureEngine, interval: Optional[float] = None):
        self._engine = engine
        self.interval = interval or 1.0 / engine.config.tick_rate
        self._task: Optional[asyncio.Task] = None

    @property
    def is_running(self) -> bool:
        return self._task is not None and not self._task.done()

    def start(self) -> None:
        if self.is_running:
            return
        self._task = asyncio.get_running_loop().create_task(self._run())
        logger.info("Realtime driver started (interval=%.4fs)", self.interval)

    async def stop(self) -> None:
        if self._task is None:
            return
        self._task.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await self._task
        self._task = None
        logger.info("Realtime driver stopped")

    async def _run(self) -> None:
        while True:
            await asyncio.to_thread(self._engine.run_pending)
            await asyncio.sleep(self.interval)
