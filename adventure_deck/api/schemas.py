"""API request/response schemas."""

from typing import Any, Optional

from pydantic import BaseModel, Field

from adventure_deck.core.discovery import ScannableType


# === Request Schemas ===


class ThemeRequest(BaseModel):
    """테마 선택 요청"""

    theme: str = Field(..., min_length=1, description="Space, Ocean, City, Western")


class CanvasRequest(BaseModel):
    """캔버스 크기 통지"""

    width: float = Field(..., ge=0, description="canvas points")
    height: float = Field(..., ge=0, description="canvas points")


class ScanRequest(BaseModel):
    """스캔 요청 (히트 테스트는 클라이언트가 수행)"""

    x: float
    y: float
    scannable_type: ScannableType
    icon: str = Field(..., min_length=1)
    zone_name: Optional[str] = None


class SoundRequest(BaseModel):
    """사운드보드 버튼"""

    index: int = Field(..., ge=0)


# === Response Schemas ===


class ActionResponse(BaseModel):
    """엔진 액션 결과. 무시된 입력은 accepted=False."""

    accepted: bool
    state: str


class SpeedResponse(ActionResponse):
    is_fast: bool


class ThemeListResponse(BaseModel):
    themes: list[dict[str, Any]]


class AdventureStateResponse(BaseModel):
    """렌더링 레이어용 스냅샷"""

    state: str
    theme: Optional[str] = None
    canvas_size: dict[str, float]
    map: Optional[dict[str, Any]] = None
    agent: dict[str, Any]
    is_fast: bool
    speed: float
    active_events: list[dict[str, Any]] = []
    scanner: dict[str, Any]
    mission: dict[str, Any]
    completed_missions: list[dict[str, Any]] = []
    discovery_count: int


class DiscoveryListResponse(BaseModel):
    total: int
    by_rarity: dict[str, int]
    by_theme: dict[str, int]
    discoveries: list[dict[str, Any]]


class ErrorResponse(BaseModel):
    """에러 응답"""

    detail: str
