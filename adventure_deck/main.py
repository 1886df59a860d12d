"""FastAPI application entrypoint."""

import random
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI

from adventure_deck.api.adventure import router as adventure_router
from adventure_deck.api.discoveries import router as discoveries_router
from adventure_deck.api.health import router as health_router
from adventure_deck.config import settings
from adventure_deck.core.event_bus import EventBus
from adventure_deck.core.geometry import Size
from adventure_deck.core.logging import get_logger, setup_logging
from adventure_deck.core.map_generator import GenerationConfig, MapGenerator
from adventure_deck.core.scheduler import Scheduler
from adventure_deck.db.database import SessionLocal, engine as db_engine
from adventure_deck.db.models import Base
from adventure_deck.engine.adventure_engine import AdventureEngine, EngineConfig
from adventure_deck.engine.driver import RealtimeDriver
from adventure_deck.services.audio import get_audio_player
from adventure_deck.services.discovery_service import DiscoveryService

setup_logging(settings.LOG_LEVEL)
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler for startup and shutdown events."""
    # DB 테이블 생성
    logger.info("Creating database tables...")
    Base.metadata.create_all(bind=db_engine)
    logger.info("Database tables created.")

    # 발견물 컬렉션 로드
    db_session = SessionLocal()
    discovery_service = DiscoveryService(db_session)
    discovery_service.load()

    # 엔진 초기화
    logger.info("Initializing adventure engine...")
    rng = random.Random()
    audio = get_audio_player()
    engine = AdventureEngine(
        discovery_service=discovery_service,
        audio=audio,
        scheduler=Scheduler(),
        event_bus=EventBus(),
        map_generator=MapGenerator(
            GenerationConfig(search_step_budget=settings.SEARCH_STEP_BUDGET),
            rng=rng,
        ),
        rng=rng,
        config=EngineConfig.from_settings(settings),
    )
    canvas = Size(settings.DEFAULT_CANVAS_WIDTH, settings.DEFAULT_CANVAS_HEIGHT)
    if not canvas.is_empty:
        engine.set_canvas_size(canvas)
    app.state.engine = engine
    app.state.discovery_service = discovery_service
    logger.info("Adventure engine initialized (audio=%s).", audio.name)

    # 실시간 구동
    driver = RealtimeDriver(engine)
    if settings.REALTIME_DRIVER:
        driver.start()
    app.state.driver = driver

    yield

    # 종료 시 정리
    logger.info("Shutting down...")
    await driver.stop()
    db_session.close()


app = FastAPI(title="Adventure Deck", lifespan=lifespan)

app.include_router(health_router)
app.include_router(adventure_router)
app.include_router(discoveries_router)
