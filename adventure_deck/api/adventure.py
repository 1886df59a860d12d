"""Adventure API endpoints."""

from fastapi import APIRouter, Depends, HTTPException, Request

from adventure_deck.api.schemas import (
    ActionResponse,
    AdventureStateResponse,
    CanvasRequest,
    ErrorResponse,
    ScanRequest,
    SoundRequest,
    SpeedResponse,
    ThemeListResponse,
    ThemeRequest,
)
from adventure_deck.core.geometry import Point, Size
from adventure_deck.core.logging import get_logger
from adventure_deck.core.themes import THEME_PROFILES, parse_theme
from adventure_deck.engine.adventure_engine import AdventureEngine

logger = get_logger(__name__)

router = APIRouter(prefix="/adventure", tags=["adventure"])


def get_engine(request: Request) -> AdventureEngine:
    """엔진 인스턴스 반환 (의존성 주입)"""
    engine: AdventureEngine = request.app.state.engine
    return engine


def _result(engine: AdventureEngine, accepted: bool) -> ActionResponse:
    return ActionResponse(accepted=accepted, state=engine.state.value)


# === 조회 ===


@router.get("/themes", response_model=ThemeListResponse)
def list_themes() -> ThemeListResponse:
    """테마 카탈로그"""
    return ThemeListResponse(
        themes=[profile.to_dict() for profile in THEME_PROFILES.values()]
    )


@router.get("/state", response_model=AdventureStateResponse)
def get_state(engine: AdventureEngine = Depends(get_engine)) -> AdventureStateResponse:
    return AdventureStateResponse(**engine.snapshot())


# === 테마 / 맵 ===


@router.post(
    "/theme",
    response_model=ActionResponse,
    responses={400: {"model": ErrorResponse}},
)
def select_theme(
    body: ThemeRequest, engine: AdventureEngine = Depends(get_engine)
) -> ActionResponse:
    theme = parse_theme(body.theme)
    if theme is None:
        logger.warning("Unknown theme requested: %s", body.theme)
        raise HTTPException(status_code=400, detail=f"Unknown theme: {body.theme}")
    return _result(engine, engine.select_theme(theme))


@router.post("/map", response_model=ActionResponse)
def generate_map(engine: AdventureEngine = Depends(get_engine)) -> ActionResponse:
    return _result(engine, engine.generate_new_map())


@router.post("/canvas", response_model=ActionResponse)
def set_canvas(
    body: CanvasRequest, engine: AdventureEngine = Depends(get_engine)
) -> ActionResponse:
    return _result(engine, engine.set_canvas_size(Size(body.width, body.height)))


# === 이동 제어 ===


@router.post("/start", response_model=ActionResponse)
def start(engine: AdventureEngine = Depends(get_engine)) -> ActionResponse:
    return _result(engine, engine.start())


@router.post("/pause", response_model=ActionResponse)
def pause(engine: AdventureEngine = Depends(get_engine)) -> ActionResponse:
    return _result(engine, engine.pause())


@router.post("/toggle", response_model=ActionResponse)
def toggle(engine: AdventureEngine = Depends(get_engine)) -> ActionResponse:
    return _result(engine, engine.toggle_adventure())


@router.post("/stop", response_model=ActionResponse)
def stop(engine: AdventureEngine = Depends(get_engine)) -> ActionResponse:
    return _result(engine, engine.stop_adventure())


@router.post("/return", response_model=ActionResponse)
def return_to_theme_selection(
    engine: AdventureEngine = Depends(get_engine),
) -> ActionResponse:
    return _result(engine, engine.return_to_theme_selection())


@router.post("/speed", response_model=SpeedResponse)
def toggle_speed(engine: AdventureEngine = Depends(get_engine)) -> SpeedResponse:
    accepted = engine.toggle_speed()
    return SpeedResponse(
        accepted=accepted, state=engine.state.value, is_fast=engine.is_fast
    )


# === 스캐너 ===


@router.post("/scan", response_model=ActionResponse)
def scan(body: ScanRequest, engine: AdventureEngine = Depends(get_engine)) -> ActionResponse:
    accepted = engine.scan_at(
        Point(body.x, body.y),
        body.scannable_type,
        body.icon,
        zone_name=body.zone_name,
    )
    return _result(engine, accepted)


@router.post("/scan/dismiss", response_model=ActionResponse)
def dismiss_scan(engine: AdventureEngine = Depends(get_engine)) -> ActionResponse:
    return _result(engine, engine.dismiss_discovery_result())


# === 미션 ===


@router.post("/mission/accept", response_model=ActionResponse)
def accept_mission(engine: AdventureEngine = Depends(get_engine)) -> ActionResponse:
    return _result(engine, engine.accept_mission())


@router.post("/mission/dismiss", response_model=ActionResponse)
def dismiss_mission(engine: AdventureEngine = Depends(get_engine)) -> ActionResponse:
    return _result(engine, engine.dismiss_mission_celebration())


# === 사운드보드 ===


@router.post("/sound", response_model=ActionResponse)
def play_sound(
    body: SoundRequest, engine: AdventureEngine = Depends(get_engine)
) -> ActionResponse:
    return _result(engine, engine.play_action_sound(body.index))
