"""미션 관련 열거형"""

from enum import Enum


class MissionKind(str, Enum):
    VISIT_ZONE = "visit_zone"
    SCAN_ITEMS = "scan_items"
    REACH_NODE = "reach_node"
    TRAVEL_DISTANCE = "travel_distance"


class MissionStatus(str, Enum):
    """MissionState 태그"""

    NONE = "none"
    AVAILABLE = "available"
    ACTIVE = "active"
    CELEBRATING = "celebrating"
