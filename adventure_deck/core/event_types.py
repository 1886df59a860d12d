"""이벤트 유형 상수"""


class EventTypes:
    """이벤트 유형 문자열 상수"""

    # 테마 / 맵
    THEME_SELECTED = "theme_selected"
    MAP_GENERATED = "map_generated"

    # 이동
    TRAVEL_STARTED = "travel_started"
    TRAVEL_PAUSED = "travel_paused"
    TRAVEL_ARRIVED = "travel_arrived"
    NODE_REACHED = "node_reached"
    ZONE_ENTERED = "zone_entered"

    # 스캐너
    SCAN_STARTED = "scan_started"
    SCAN_COMPLETED = "scan_completed"

    # === Mission events ===
    MISSION_AVAILABLE = "mission_available"
    MISSION_ACCEPTED = "mission_accepted"
    MISSION_FADED = "mission_faded"
    MISSION_PROGRESSED = "mission_progressed"
    MISSION_COMPLETED = "mission_completed"
    MISSION_DISMISSED = "mission_dismissed"

    # 주변 이벤트 (렌더링용)
    AMBIENT_EVENT_SPAWNED = "ambient_event_spawned"
    AMBIENT_EVENT_EXPIRED = "ambient_event_expired"

    # 컬렉션
    DISCOVERIES_CLEARED = "discoveries_cleared"
