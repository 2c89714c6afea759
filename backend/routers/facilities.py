# routers/facilities.py
"""
Facilities Router - 주차장 카탈로그 조회
"""

from typing import List

from fastapi import APIRouter, HTTPException

from models.facility_schema import Facility
from models.presentation_schema import AvailabilityStatus, DetailView, SummaryView
from services.availability_service import encode_facility
from services.catalog_service import get_catalog
from services.presentation_service import project_detail, project_summary
from utils.errors import UnknownFacilityError
from utils.logger import logger

router = APIRouter(
    prefix="/facilities",
    tags=["Facilities"]
)


def _get_facility(facility_id: int) -> Facility:
    try:
        return get_catalog().get(facility_id)
    except UnknownFacilityError as e:
        logger.warning(f"⚠️ 알 수 없는 시설 조회: {facility_id}")
        raise HTTPException(status_code=404, detail=str(e))


@router.get(
    "",
    response_model=List[Facility],
    summary="주차장 목록"
)
async def list_facilities():
    """카탈로그 전체 (선언 순서)"""
    return list(get_catalog())


@router.get(
    "/{facility_id}",
    response_model=Facility,
    summary="주차장 단건 조회"
)
async def get_facility(facility_id: int):
    return _get_facility(facility_id)


@router.get(
    "/{facility_id}/summary",
    response_model=SummaryView,
    summary="리스트 카드 표시 항목"
)
async def get_facility_summary(facility_id: int):
    return project_summary(_get_facility(facility_id))


@router.get(
    "/{facility_id}/detail",
    response_model=DetailView,
    summary="팝업 상세 표시 항목"
)
async def get_facility_detail(facility_id: int):
    return project_detail(_get_facility(facility_id))


@router.get(
    "/{facility_id}/availability",
    response_model=AvailabilityStatus,
    summary="가용성 등급"
)
async def get_facility_availability(facility_id: int):
    return encode_facility(_get_facility(facility_id))
