"""
Adventure Deck Core - Scheduler
===============================
지연 실행 / 주기 실행 작업 큐 (단조 시계 기준)

이동 틱, 스캔 결과 공개, 미션 등장/소멸, 주변 이벤트 소멸이
모두 여기 예약됩니다. 콜백은 run_due()를 부른 실행 컨텍스트에서
fire_at 순서대로 하나씩 실행되므로 서로 겹치지 않습니다.

    scheduler = Scheduler(ManualClock())
    task = scheduler.call_later(1.5, reveal_scan, name="scan_reveal")
    scheduler.clock.advance(2.0)
    scheduler.run_due()

콜백 안에서 now()는 해당 작업의 예정 시각을 돌려주므로,
시계가 크게 건너뛰어도 연쇄 예약 시각이 밀리지 않습니다.
"""

import heapq
import time
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Callable, Optional

from adventure_deck.core.logging import get_logger

logger = get_logger(__name__)

TaskCallback = Callable[[], None]


class Clock(ABC):
    """초 단위 단조 시계"""

    @abstractmethod
    def now(self) -> float: ...


class MonotonicClock(Clock):
    def now(self) -> float:
        return time.monotonic()


class ManualClock(Clock):
    """테스트용 수동 시계"""

    def __init__(self, start: float = 0.0):
        self._now = start

    def now(self) -> float:
        return self._now

    def advance(self, seconds: float) -> float:
        if seconds < 0:
            raise ValueError("clock cannot go backwards")
        self._now += seconds
        return self._now

    def set(self, value: float) -> None:
        if value < self._now:
            raise ValueError("clock cannot go backwards")
        self._now = value


@dataclass(order=True)
class ScheduledTask:
    """큐에 들어간 작업 한 건. fire_at → 등록 순서로 정렬."""

    fire_at: float
    _seq: int = field(compare=True, repr=False)
    callback: TaskCallback = field(compare=False, repr=False)
    name: str = field(compare=False, default="")
    interval: Optional[float] = field(compare=False, default=None)
    cancelled: bool = field(compare=False, default=False)
    fired: bool = field(compare=False, default=False)

    @property
    def is_periodic(self) -> bool:
        return self.interval is not None

    @property
    def is_pending(self) -> bool:
        return not self.cancelled and (self.is_periodic or not self.fired)

    def cancel(self) -> bool:
        """취소. 이미 취소됐거나 실행을 마친 1회성 작업이면 False (멱등)."""
        if not self.is_pending:
            return False
        self.cancelled = True
        return True


class Scheduler:
    """우선순위 큐 기반 작업 스케줄러"""

    def __init__(
        self,
        clock: Optional[Clock] = None,
        after_task: Optional[TaskCallback] = None,
    ) -> None:
        self.clock = clock or MonotonicClock()
        # 콜백 하나가 끝날 때마다 호출 (예: EventBus.reset_chain)
        self.after_task = after_task
        self._queue: list[ScheduledTask] = []
        self._seq = 0
        self._dispatch_time: Optional[float] = None
        self.tasks_run = 0

    def now(self) -> float:
        if self._dispatch_time is not None:
            return self._dispatch_time
        return self.clock.now()

    # === 예약 ===

    def call_later(
        self, delay: float, callback: TaskCallback, name: str = ""
    ) -> ScheduledTask:
        """delay초 뒤 1회 실행"""
        return self._push(self.now() + max(0.0, delay), callback, name, None)

    def call_every(
        self, interval: float, callback: TaskCallback, name: str = ""
    ) -> ScheduledTask:
        """interval초마다 반복 실행 (첫 실행은 interval초 뒤)"""
        if interval <= 0:
            raise ValueError(f"interval must be positive: {interval}")
        return self._push(self.now() + interval, callback, name, interval)

    def _push(
        self,
        fire_at: float,
        callback: TaskCallback,
        name: str,
        interval: Optional[float],
    ) -> ScheduledTask:
        self._seq += 1
        task = ScheduledTask(
            fire_at=fire_at,
            _seq=self._seq,
            callback=callback,
            name=name,
            interval=interval,
        )
        heapq.heappush(self._queue, task)
        logger.debug("작업 예약: %s @ %.3f", name or "<anonymous>", fire_at)
        return task

    # === 취소 ===

    def cancel(self, task: Optional[ScheduledTask]) -> bool:
        """None이나 이미 끝난 작업도 허용"""
        if task is None:
            return False
        cancelled = task.cancel()
        if cancelled:
            logger.debug("작업 취소: %s", task.name or "<anonymous>")
        return cancelled

    def clear(self) -> None:
        for task in self._queue:
            task.cancelled = True
        self._queue.clear()

    # === 실행 ===

    def peek_time(self) -> float:
        """다음 작업 예정 시각. 없으면 inf."""
        self._drop_cancelled()
        if self._queue:
            return self._queue[0].fire_at
        return float("inf")

    @property
    def pending_count(self) -> int:
        return sum(1 for task in self._queue if not task.cancelled)

    def run_due(self, now: Optional[float] = None) -> int:
        """now(기본: 시계 현재값)까지 도래한 작업을 순서대로 실행.

        주기 작업은 fire_at + interval로 다시 넣으므로,
        시계가 여러 주기를 건너뛰었으면 그만큼 반복 실행된다.

        Returns:
            실행한 콜백 수
        """
        if self._dispatch_time is not None:
            # 콜백 안에서의 재진입은 무시
            return 0

        limit = self.clock.now() if now is None else now
        count = 0

        while True:
            self._drop_cancelled()
            if not self._queue or self._queue[0].fire_at > limit:
                break

            task = heapq.heappop(self._queue)
            self._dispatch_time = task.fire_at
            try:
                task.callback()
            except Exception:
                logger.exception("작업 실행 에러: %s", task.name or "<anonymous>")
            finally:
                self._dispatch_time = None
                if self.after_task is not None:
                    self.after_task()

            count += 1
            self.tasks_run += 1

            if task.is_periodic and not task.cancelled:
                task.fire_at += task.interval
                heapq.heappush(self._queue, task)
            else:
                task.fired = True

        return count

    def _drop_cancelled(self) -> None:
        while self._queue and self._queue[0].cancelled:
            heapq.heappop(self._queue)
