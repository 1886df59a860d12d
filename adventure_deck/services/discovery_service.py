"""Discovery Service — 발견물 컬렉션 ↔ DB

컬렉션은 메모리에 유지하고, 추가/삭제마다 DB에 반영한다.
저장된 행을 읽을 수 없으면 해당 행은 건너뛰고,
DB 자체를 읽을 수 없으면 빈 컬렉션으로 시작한다.
"""

from typing import Optional

from sqlalchemy import delete, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from adventure_deck.core.discovery import (
    Discovery,
    DiscoveryCollection,
    Rarity,
    ScannableType,
)
from adventure_deck.core.logging import get_logger
from adventure_deck.db.models import DiscoveryModel

logger = get_logger(__name__)


class DiscoveryService:
    """발견물 컬렉션 로드 / 추가 / 일괄 삭제"""

    def __init__(self, db: Session):
        self._db = db
        self._collection = DiscoveryCollection()
        # 저장 실패 후 DB가 메모리 컬렉션과 어긋난 상태. 다음 쓰기에서 전체 재기록.
        self._out_of_sync = False

    @property
    def collection(self) -> DiscoveryCollection:
        return self._collection

    # === 로드 ===

    def load(self) -> DiscoveryCollection:
        """DB → 메모리 컬렉션. 실패는 빈 컬렉션으로 취급."""
        try:
            rows = self._db.scalars(
                select(DiscoveryModel).order_by(DiscoveryModel.row_id)
            ).all()
        except SQLAlchemyError:
            logger.warning("발견물 로드 실패 → 빈 컬렉션으로 시작", exc_info=True)
            self._db.rollback()
            self._collection = DiscoveryCollection()
            return self._collection

        discoveries = []
        for row in rows:
            discovery = self._orm_to_discovery(row)
            if discovery is not None:
                discoveries.append(discovery)

        self._collection = DiscoveryCollection(discoveries)
        self._out_of_sync = False
        logger.info("발견물 %d건 로드", len(discoveries))
        return self._collection

    # === 변경 ===

    def add(self, discovery: Discovery) -> bool:
        """컬렉션에 추가 후 저장. DB 저장 실패 시에도 메모리에는 남는다.

        이전 저장이 실패했다면 새 행만 넣지 않고 컬렉션 전체를 다시 기록한다.
        """
        self._collection.add(discovery)
        if self._out_of_sync:
            logger.info(
                "이전 저장 실패 → 컬렉션 전체 재기록 (total=%d)",
                self._collection.count,
            )
            return self.save()

        try:
            self._db.add(self._discovery_to_orm(discovery))
            self._db.commit()
        except SQLAlchemyError:
            self._db.rollback()
            self._out_of_sync = True
            logger.exception("발견물 저장 실패: %s", discovery.id)
            return False
        logger.info(
            "발견물 추가: %s (%s) total=%d",
            discovery.name,
            discovery.rarity.value,
            self._collection.count,
        )
        return True

    def clear(self) -> bool:
        self._collection.clear()
        try:
            self._db.execute(delete(DiscoveryModel))
            self._db.commit()
        except SQLAlchemyError:
            self._db.rollback()
            self._out_of_sync = True
            logger.exception("발견물 일괄 삭제 실패")
            return False
        self._out_of_sync = False
        logger.info("발견물 컬렉션 초기화")
        return True

    def save(self) -> bool:
        """메모리 컬렉션 전체를 DB에 다시 기록"""
        try:
            self._db.execute(delete(DiscoveryModel))
            self._db.add_all(self._discovery_to_orm(d) for d in self._collection)
            self._db.commit()
        except SQLAlchemyError:
            self._db.rollback()
            self._out_of_sync = True
            logger.exception("발견물 컬렉션 저장 실패")
            return False
        self._out_of_sync = False
        return True

    # === 변환 ===

    @staticmethod
    def _discovery_to_orm(discovery: Discovery) -> DiscoveryModel:
        return DiscoveryModel(
            discovery_id=discovery.id,
            name=discovery.name,
            species=discovery.species,
            description=discovery.description,
            fun_fact=discovery.fun_fact,
            icon=discovery.icon,
            rarity=discovery.rarity.value,
            theme=discovery.theme,
            scannable_type=discovery.scannable_type.value,
            energy_level=discovery.energy_level,
            discovered_at=discovery.discovered_at,
        )

    @staticmethod
    def _orm_to_discovery(row: DiscoveryModel) -> Optional[Discovery]:
        try:
            return Discovery(
                id=row.discovery_id,
                name=row.name,
                species=row.species,
                description=row.description,
                fun_fact=row.fun_fact,
                icon=row.icon,
                rarity=Rarity(row.rarity),
                theme=row.theme,
                scannable_type=ScannableType(row.scannable_type),
                energy_level=row.energy_level,
                discovered_at=row.discovered_at,
            )
        except (TypeError, ValueError):
            logger.warning("읽을 수 없는 발견물 행 건너뜀: row_id=%s", row.row_id)
            return None
