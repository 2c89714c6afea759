# routers/map.py
"""
Map Router - 지도 표면 데이터
"""

from fastapi import APIRouter

from models.map_schema import MapView
from routers.dashboard import load_session_state
from services.catalog_service import get_catalog
from services.map_service import build_map_view

router = APIRouter(prefix="/map", tags=["Map"])


@router.get(
    "/{session_id}",
    response_model=MapView,
    summary="지도 데이터 (뷰포트 / 마커 / 팝업)"
)
async def get_map_view(session_id: str):
    """세션 상태 기준 지도 데이터"""
    return build_map_view(get_catalog(), load_session_state(session_id))
