"""Discovery collection endpoints."""

from collections import Counter
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException

from adventure_deck.api.adventure import get_engine
from adventure_deck.api.schemas import (
    ActionResponse,
    DiscoveryListResponse,
    ErrorResponse,
)
from adventure_deck.core.discovery import Rarity
from adventure_deck.core.themes import parse_theme
from adventure_deck.engine.adventure_engine import AdventureEngine

router = APIRouter(prefix="/discoveries", tags=["discoveries"])


@router.get(
    "",
    response_model=DiscoveryListResponse,
    responses={400: {"model": ErrorResponse}},
)
def list_discoveries(
    theme: Optional[str] = None,
    rarity: Optional[str] = None,
    engine: AdventureEngine = Depends(get_engine),
) -> DiscoveryListResponse:
    """발견물 목록 + 희귀도/테마별 개수 (필터 적용 후)"""
    theme_filter = None
    if theme is not None:
        theme_filter = parse_theme(theme)
        if theme_filter is None:
            raise HTTPException(status_code=400, detail=f"Unknown theme: {theme}")

    rarity_filter = None
    if rarity is not None:
        try:
            rarity_filter = Rarity(rarity.lower())
        except ValueError:
            raise HTTPException(status_code=400, detail=f"Unknown rarity: {rarity}")

    discoveries = engine.list_discoveries(theme=theme_filter, rarity=rarity_filter)
    return DiscoveryListResponse(
        total=len(discoveries),
        by_rarity=dict(Counter(d.rarity.value for d in discoveries)),
        by_theme=dict(Counter(d.theme for d in discoveries)),
        discoveries=[d.to_dict() for d in discoveries],
    )


@router.delete("", response_model=ActionResponse)
def clear_discoveries(engine: AdventureEngine = Depends(get_engine)) -> ActionResponse:
    accepted = engine.clear_discoveries()
    return ActionResponse(accepted=accepted, state=engine.state.value)
