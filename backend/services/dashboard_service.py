# services/dashboard_service.py

"""
Dashboard Service

리스트 표면 데이터 + 전체 대시보드 스냅샷 조립
"""

from typing import Optional

from models.dashboard_schema import (
    DashboardHeader,
    DashboardSnapshot,
    DashboardState,
    ListItem,
    ListView,
)
from services.availability_service import encode_facility
from services.catalog_service import ParkingCatalog
from services.map_service import build_map_view
from services.presentation_service import project_summary
from utils.config import Settings, get_settings

HEADER_BADGES = ["Premium Facilities", "24/7 Secured"]


def build_list_view(
    catalog: ParkingCatalog,
    state: DashboardState,
    settings: Optional[Settings] = None,
) -> ListView:
    """카탈로그 순서대로 카드 요약 + 가용성 + 선택 여부"""
    items = [
        ListItem(
            facility_id=facility.id,
            summary=project_summary(facility, settings),
            availability=encode_facility(facility),
            selected=(facility.id == state.selected_id),
        )
        for facility in catalog
    ]
    return ListView(items=items, selected_id=state.selected_id)


def build_snapshot(
    session_id: str,
    catalog: ParkingCatalog,
    state: DashboardState,
    settings: Optional[Settings] = None,
) -> DashboardSnapshot:
    """헤더 / 상태 / 리스트 / 지도를 한 번에"""
    settings = settings or get_settings()
    return DashboardSnapshot(
        session_id=session_id,
        header=DashboardHeader(title=settings.APP_TITLE, badges=list(HEADER_BADGES)),
        state=state,
        list_view=build_list_view(catalog, state, settings),
        map_view=build_map_view(catalog, state, settings),
    )
