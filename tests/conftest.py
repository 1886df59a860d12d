"""Shared test fixtures."""

import os
import random
import tempfile

# 앱 모듈 import 전에 설정 (lifespan이 작업 디렉터리에 DB를 만들지 않도록)
_TEST_DIR = tempfile.mkdtemp(prefix="adventure_deck_test_")
os.environ["DATABASE_URL"] = f"sqlite:///{os.path.join(_TEST_DIR, 'app.db')}"
os.environ["REALTIME_DRIVER"] = "false"
os.environ["AUDIO_BACKEND"] = "log"

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy import create_engine  # noqa: E402
from sqlalchemy.orm import Session, sessionmaker  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from adventure_deck.core.geometry import Size  # noqa: E402
from adventure_deck.core.map_generator import MapGenerator  # noqa: E402
from adventure_deck.core.scheduler import ManualClock, Scheduler  # noqa: E402
from adventure_deck.core.themes import Theme  # noqa: E402
from adventure_deck.db.database import get_db  # noqa: E402
from adventure_deck.db.models import Base  # noqa: E402
from adventure_deck.engine.adventure_engine import AdventureEngine  # noqa: E402
from adventure_deck.main import app  # noqa: E402
from adventure_deck.services.audio import LoggingAudioPlayer  # noqa: E402
from adventure_deck.services.discovery_service import DiscoveryService  # noqa: E402

CANVAS = Size(1200, 800)


@pytest.fixture()
def db_engine():
    """테스트마다 새 in-memory SQLite (스레드 간 같은 연결 공유)"""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    try:
        yield engine
    finally:
        engine.dispose()


@pytest.fixture()
def db_session(db_engine) -> Session:
    """Raw database session for direct DB assertions."""
    session = sessionmaker(bind=db_engine, autocommit=False, autoflush=False)()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture()
def discovery_service(db_session) -> DiscoveryService:
    service = DiscoveryService(db_session)
    service.load()
    return service


@pytest.fixture()
def rng() -> random.Random:
    return random.Random(42)


@pytest.fixture()
def clock() -> ManualClock:
    return ManualClock()


@pytest.fixture()
def audio() -> LoggingAudioPlayer:
    return LoggingAudioPlayer()


@pytest.fixture()
def engine(discovery_service, audio, clock, rng) -> AdventureEngine:
    """ManualClock으로 구동하는 엔진 (테마 선택 전)"""
    return AdventureEngine(
        discovery_service=discovery_service,
        audio=audio,
        scheduler=Scheduler(clock),
        map_generator=MapGenerator(rng=rng),
        rng=rng,
    )


@pytest.fixture()
def ready_engine(engine) -> AdventureEngine:
    """1200×800 캔버스 + Space 테마, 맵 생성 완료 상태"""
    engine.set_canvas_size(CANVAS)
    engine.select_theme(Theme.SPACE)
    return engine


@pytest.fixture()
def client(engine, db_engine) -> TestClient:
    """FastAPI TestClient. lifespan 이후 엔진을 테스트 엔진으로 교체."""
    test_session = sessionmaker(bind=db_engine, autocommit=False, autoflush=False)

    def _override_get_db():
        db = test_session()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = _override_get_db
    with TestClient(app) as test_client:
        app.state.engine = engine
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture()
def advance(engine, clock):
    """advance(seconds): 시계를 진행하고 도래한 타이머 실행"""

    def _advance(seconds: float) -> int:
        clock.advance(seconds)
        return engine.run_pending()

    return _advance
