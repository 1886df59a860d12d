"""EventBus - 엔진 내부 컴포넌트 간 도메인 이벤트 통신

규칙:
- 엔진 컴포넌트(미션 감시, 오디오 훅 등)는 서로를 직접 호출하지 않는다
- 이벤트 data에는 식별자와 원시 값만 담는다
- 전파 깊이 최대 MAX_DEPTH 단계
- 같은 처리 단계(입력 1건 / 타이머 콜백 1건) 안에서
  같은 source의 같은 이벤트는 한 번만 전파
"""

from collections import defaultdict
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Set

from adventure_deck.core.logging import get_logger

logger = get_logger(__name__)

MAX_DEPTH = 5  # 한 처리 단계 내 이벤트 전파 최대 깊이


@dataclass
class DomainEvent:
    """이벤트 데이터 컨테이너

    Args:
        event_type: 이벤트 유형 (예: "node_reached", "scan_completed")
        data: 이벤트 데이터 (ID/원시 값 위주)
        source: 발행한 컴포넌트 이름
    """

    event_type: str
    data: Dict[str, Any]
    source: str

    # 내부 추적용 (외부에서 설정하지 않음)
    _depth: int = field(default=0, repr=False)


EventHandler = Callable[[DomainEvent], None]


class EventBus:
    """동기식 이벤트 버스

    사용 패턴:
        bus = EventBus()
        bus.subscribe("node_reached", watcher.handle_node_reached)
        bus.emit(DomainEvent(event_type="node_reached", data={"route_index": 3}, source="engine"))
        bus.reset_chain()  # 처리 단계 종료
    """

    def __init__(self) -> None:
        self._handlers: Dict[str, List[EventHandler]] = defaultdict(list)
        self._current_depth: int = 0
        self._emitted_in_chain: Set[str] = set()  # "source:event_type"

    def subscribe(self, event_type: str, handler: EventHandler) -> None:
        self._handlers[event_type].append(handler)
        logger.debug("EventBus 구독: %s → %s", event_type, handler.__qualname__)

    def unsubscribe(self, event_type: str, handler: EventHandler) -> None:
        if event_type not in self._handlers:
            return
        try:
            self._handlers[event_type].remove(handler)
            logger.debug("EventBus 구독 해제: %s → %s", event_type, handler.__qualname__)
        except ValueError:
            logger.warning("핸들러 미등록: %s → %s", event_type, handler.__qualname__)

    def emit(self, event: DomainEvent) -> bool:
        """이벤트 발행. 등록된 핸들러를 순서대로 동기 호출.

        안전장치:
        1. 전파 깊이 MAX_DEPTH 초과 시 무시
        2. 같은 단계에서 같은 source:event_type 중복 발행 시 무시

        Returns:
            전파되었으면 True (구독자가 없어도 차단되지 않았으면 True)
        """
        if self._current_depth >= MAX_DEPTH:
            logger.warning(
                "EventBus 전파 깊이 초과 (%d): %s:%s 무시됨",
                MAX_DEPTH,
                event.source,
                event.event_type,
            )
            return False

        chain_key = f"{event.source}:{event.event_type}"
        if chain_key in self._emitted_in_chain:
            logger.warning("EventBus 중복 이벤트 차단: %s", chain_key)
            return False

        self._emitted_in_chain.add(chain_key)
        event._depth = self._current_depth

        handlers = list(self._handlers.get(event.event_type, []))
        if not handlers:
            logger.debug("EventBus: %s 구독자 없음", event.event_type)
            return True

        logger.debug(
            "EventBus 전파: %s (source=%s, depth=%d, handlers=%d)",
            event.event_type,
            event.source,
            self._current_depth,
            len(handlers),
        )

        self._current_depth += 1
        try:
            for handler in handlers:
                try:
                    handler(event)
                except Exception:
                    logger.exception(
                        "EventBus 핸들러 에러: %s (event=%s)",
                        handler.__qualname__,
                        event.event_type,
                    )
        finally:
            self._current_depth -= 1
        return True

    def reset_chain(self) -> None:
        """처리 단계 종료 시 호출. 중복 추적 초기화."""
        self._emitted_in_chain.clear()
        self._current_depth = 0

    def clear(self) -> None:
        """모든 구독 해제 (테스트용)"""
        self._handlers.clear()
        self.reset_chain()

    @property
    def handler_count(self) -> int:
        return sum(len(h) for h in self._handlers.values())
