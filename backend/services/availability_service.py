# services/availability_service.py
"""
Availability Service

잔여 주차면 비율 → 등급(High/Medium/Low) + 용량 바 너비/색상
"""

from typing import Dict

from models.facility_schema import Facility
from models.presentation_schema import AvailabilityLevel, AvailabilityStatus
from utils.errors import InvalidCapacityError
from utils.logger import logger

HIGH_THRESHOLD = 0.50    # ratio > 0.50 → High
MEDIUM_THRESHOLD = 0.20  # 0.20 < ratio <= 0.50 → Medium, 나머지 Low

AVAILABILITY_COLORS: Dict[AvailabilityLevel, str] = {
    AvailabilityLevel.HIGH: "#16a34a",    # green-600
    AvailabilityLevel.MEDIUM: "#eab308",  # yellow-500
    AvailabilityLevel.LOW: "#ef4444",     # red-500
}


def classify(ratio: float) -> AvailabilityLevel:
    """비율 → 등급 (경계값 0.5, 0.2 는 아래 등급)"""
    if ratio > HIGH_THRESHOLD:
        return AvailabilityLevel.HIGH
    if ratio > MEDIUM_THRESHOLD:
        return AvailabilityLevel.MEDIUM
    return AvailabilityLevel.LOW


def encode(available: int, total: int) -> AvailabilityStatus:
    """
    가용성 인코딩

    Args:
        available: 잔여 주차면 수
        total: 총 주차면 수 (양수)

    Returns:
        AvailabilityStatus (fill_fraction 은 [0, 1] 로 보정)

    Raises:
        InvalidCapacityError: total <= 0
    """
    if total <= 0:
        raise InvalidCapacityError(total)

    ratio = available / total
    fill = min(max(ratio, 0.0), 1.0)
    if fill != ratio:
        logger.warning(f"⚠️ 가용성 비율 보정: {available}/{total} → {fill}")

    level = classify(ratio)
    return AvailabilityStatus(
        level=level,
        ratio=ratio,
        fill_fraction=fill,
        fill_percent=fill * 100,
        color=AVAILABILITY_COLORS[level],
    )


def encode_facility(facility: Facility) -> AvailabilityStatus:
    """시설 단위 가용성 인코딩"""
    return encode(facility.available_spaces, facility.total_spaces)
