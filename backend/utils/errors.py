# utils/errors.py
"""
대시보드 예외 정의

- DataIntegrityError: 카탈로그 로드 시 기능 플래그/필드 불일치 (시작 중단)
- InvalidCapacityError: 총 주차면 수가 0 이하
- UnknownFacilityError: 카탈로그에 없는 시설 선택 (상태 유지)
- MissingPriceTierError: 플래그는 켜져 있는데 가격 티어 누락
"""


class ParkingDashboardError(Exception):
    """대시보드 예외 기본 클래스"""


class DataIntegrityError(ParkingDashboardError):
    """카탈로그 데이터 무결성 오류"""


class InvalidCapacityError(ParkingDashboardError):
    """총 수용량이 양수가 아님"""

    def __init__(self, total):
        self.total = total
        super().__init__(f"total capacity must be positive, got {total!r}")


class UnknownFacilityError(ParkingDashboardError):
    """카탈로그에 없는 시설 ID"""

    def __init__(self, facility_id):
        self.facility_id = facility_id
        super().__init__(f"unknown facility: {facility_id!r}")


class MissingPriceTierError(ParkingDashboardError):
    """기능 플래그가 켜진 시설에 해당 가격 티어가 없음"""

    def __init__(self, facility_id, tier: str):
        self.facility_id = facility_id
        self.tier = tier
        super().__init__(f"facility {facility_id!r} offers '{tier}' but has no price for it")
