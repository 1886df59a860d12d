"""RealtimeDriver 테스트"""

import asyncio
import threading

from adventure_deck.engine.driver import RealtimeDriver


def test_driver_runs_due_tasks(engine):
    fired = []
    engine.scheduler.call_later(0, lambda: fired.append("tick"))

    async def scenario():
        driver = RealtimeDriver(engine, interval=0.001)
        driver.start()
        assert driver.is_running
        await asyncio.sleep(0.05)
        await driver.stop()
        return driver

    driver = asyncio.run(scenario())
    assert fired == ["tick"]
    assert not driver.is_running


def test_default_interval_follows_tick_rate(engine):
    assert RealtimeDriver(engine).interval == 1.0 / 60.0


def test_stop_without_start_is_noop(engine):
    asyncio.run(RealtimeDriver(engine).stop())


def test_loop_stays_responsive_while_engine_locked(engine):
    """API 스레드가 엔진 락을 잡고 있어도 이벤트 루프는 멈추지 않는다"""
    holding = threading.Event()
    release = threading.Event()

    def hold_lock():
        with engine._lock:
            holding.set()
            release.wait(2.0)

    worker = threading.Thread(target=hold_lock)
    worker.start()
    assert holding.wait(1.0)

    async def scenario():
        loop = asyncio.get_running_loop()
        driver = RealtimeDriver(engine, interval=0.001)
        driver.start()
        started = loop.time()
        await asyncio.sleep(0.02)
        elapsed = loop.time() - started
        release.set()
        await driver.stop()
        return elapsed

    try:
        elapsed = asyncio.run(scenario())
    finally:
        release.set()
        worker.join()
    assert elapsed < 0.2
