# services/map_service.py

"""
Map Service

지도 표면에 넘길 뷰포트 / 마커 / 팝업 데이터 생성
"""

from typing import List, Optional

from models.dashboard_schema import DashboardState
from models.facility_schema import Facility
from models.map_schema import MapMarker, MapPopup, MapView
from services.availability_service import encode_facility
from services.catalog_service import ParkingCatalog
from services.presentation_service import project_detail
from utils.config import Settings, get_settings
from utils.logger import logger

PREMIUM_PIN_COLOR = "#eab308"   # yellow-500
STANDARD_PIN_COLOR = "#4f46e5"  # indigo-600


def build_marker(facility: Facility, selected: bool = False) -> MapMarker:
    """시설 하나의 마커 (프리미엄 시설은 금색 핀 + 왕관)"""
    premium = facility.features.premium_spots
    return MapMarker(
        facility_id=facility.id,
        name=facility.name,
        lat=facility.location.lat,
        lng=facility.location.lng,
        color=PREMIUM_PIN_COLOR if premium else STANDARD_PIN_COLOR,
        badge="crown" if premium else None,
        availability=encode_facility(facility).level,
        selected=selected,
    )


def get_map_markers(catalog: ParkingCatalog, selected_id: Optional[int] = None) -> List[MapMarker]:
    """
    카탈로그 전체 마커 리스트 (선언 순서 유지)

    Args:
        catalog: 시설 카탈로그
        selected_id: 현재 선택된 시설 ID

    Returns:
        MapMarker 리스트
    """
    return [build_marker(f, selected=(f.id == selected_id)) for f in catalog]


def build_popup(facility: Facility, settings: Optional[Settings] = None) -> MapPopup:
    """선택된 시설 위치에 붙는 상세 팝업"""
    return MapPopup(
        facility_id=facility.id,
        lat=facility.location.lat,
        lng=facility.location.lng,
        content=project_detail(facility, settings),
    )


def build_map_view(
    catalog: ParkingCatalog,
    state: DashboardState,
    settings: Optional[Settings] = None,
) -> MapView:
    """
    현재 상태 기준 지도 데이터 생성

    Returns:
        {
            "viewport": {"center": {"lat", "lng"}, "zoom"},
            "markers": [...],
            "popup": {...} 또는 None,
            "style_url": str,
            "access_token": str 또는 None
        }
    """
    settings = settings or get_settings()

    popup = None
    if state.selected_id is not None:
        popup = build_popup(catalog.get(state.selected_id), settings)

    markers = get_map_markers(catalog, state.selected_id)
    logger.debug(
        f"🗺️ 지도 데이터 생성: {len(markers)}개 마커, 중심({state.viewport.center.lat:.4f}, "
        f"{state.viewport.center.lng:.4f}) 줌 {state.viewport.zoom}"
    )

    return MapView(
        viewport=state.viewport,
        markers=markers,
        popup=popup,
        style_url=settings.MAP_STYLE_URL,
        access_token=settings.MAPBOX_ACCESS_TOKEN,
    )
