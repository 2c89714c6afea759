# services/catalog_service.py
"""
Catalog Service

정적 주차장 카탈로그 로드 및 조회 (읽기 전용)
"""

from functools import lru_cache
from typing import Any, Dict, Iterable, Iterator, List, Tuple

from pydantic import ValidationError

from models.facility_schema import Facility, FacilityId, facility_integrity_problems
from utils.errors import DataIntegrityError, UnknownFacilityError
from utils.logger import logger


class ParkingCatalog:
    """선언 순서를 유지하는 불변 시설 컬렉션"""

    def __init__(self, facilities: Iterable[Facility]):
        self._facilities: Tuple[Facility, ...] = tuple(facilities)
        self._by_id: Dict[FacilityId, Facility] = {}

        if not self._facilities:
            raise DataIntegrityError("catalog is empty")

        for facility in self._facilities:
            # model_construct 로 만든 객체도 여기서 한 번 더 검사
            problems = facility_integrity_problems(facility)
            if problems:
                raise DataIntegrityError(f"facility {facility.id!r}: " + "; ".join(problems))
            if facility.id in self._by_id:
                raise DataIntegrityError(f"duplicate facility id: {facility.id!r}")
            self._by_id[facility.id] = facility

    def __iter__(self) -> Iterator[Facility]:
        return iter(self._facilities)

    def __len__(self) -> int:
        return len(self._facilities)

    def __contains__(self, facility_id) -> bool:
        return facility_id in self._by_id

    @property
    def facilities(self) -> Tuple[Facility, ...]:
        return self._facilities

    @property
    def ids(self) -> List[FacilityId]:
        return [f.id for f in self._facilities]

    def get(self, facility_id: FacilityId) -> Facility:
        """
        ID로 시설 조회

        Raises:
            UnknownFacilityError: 카탈로그에 없는 ID
        """
        try:
            return self._by_id[facility_id]
        except KeyError:
            raise UnknownFacilityError(facility_id) from None


def load_catalog(records: List[Dict[str, Any]]) -> ParkingCatalog:
    """
    원본 레코드(dict 리스트)를 검증해 카탈로그 생성

    Raises:
        DataIntegrityError: 스키마 또는 플래그/필드 불일치
    """
    facilities = []
    for index, record in enumerate(records):
        try:
            facilities.append(Facility.model_validate(record))
        except ValidationError as e:
            logger.error(f"❌ 카탈로그 검증 실패 (#{index}, id={record.get('id')!r}): {e}")
            raise DataIntegrityError(
                f"facility record #{index} (id={record.get('id')!r}) is invalid: {e}"
            ) from e

    catalog = ParkingCatalog(facilities)
    logger.info(f"🅿️ 주차장 카탈로그 로드 완료: {len(catalog)}개 시설")
    return catalog


@lru_cache
def get_catalog() -> ParkingCatalog:
    """싱글톤 패턴으로 카탈로그 반환"""
    from data.parking_lots import PARKING_LOTS

    return load_catalog(PARKING_LOTS)
