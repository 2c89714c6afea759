# models/dashboard_schema.py
"""대시보드 상태 / 이벤트 / 스냅샷 Pydantic 스키마"""

from typing import Annotated, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from models.map_schema import MapView, Viewport
from models.presentation_schema import AvailabilityStatus, SummaryView


# ============================================================
# 상태
# ============================================================

class DashboardState(BaseModel):
    """
    선택 상태 + 뷰포트

    selected_id 가 None 이면 Unselected, 아니면 Selected(id)
    """
    model_config = ConfigDict(frozen=True)

    selected_id: Optional[int] = None
    viewport: Viewport
    revision: int = 0                             # 선택이 바뀔 때마다 증가
    suppressed_interaction: Optional[str] = None  # 마커 클릭이 소비한 상호작용 ID

    @property
    def is_selected(self) -> bool:
        return self.selected_id is not None


# ============================================================
# 이벤트 (렌더 표면 → 컨트롤러)
# ============================================================

class SelectFromList(BaseModel):
    """리스트 카드 클릭"""
    type: Literal["select_from_list"] = "select_from_list"
    facility_id: int


class SelectFromMap(BaseModel):
    """지도 마커 클릭"""
    type: Literal["select_from_map"] = "select_from_map"
    facility_id: int
    interaction_id: Optional[str] = None


class ClearSelection(BaseModel):
    """팝업 닫기 (닫기 버튼 또는 지도 클릭)"""
    type: Literal["clear_selection"] = "clear_selection"
    source: Literal["close_button", "map_click"] = "close_button"
    interaction_id: Optional[str] = None


class ViewportChanged(BaseModel):
    """지도 이동 / 확대"""
    type: Literal["viewport_changed"] = "viewport_changed"
    viewport: Viewport


DashboardEvent = Annotated[
    Union[SelectFromList, SelectFromMap, ClearSelection, ViewportChanged],
    Field(discriminator="type"),
]


class DashboardEventRequest(BaseModel):
    event: DashboardEvent


# ============================================================
# 스냅샷 (컨트롤러 → 렌더 표면)
# ============================================================

class ListItem(BaseModel):
    """리스트 한 항목"""
    facility_id: int
    summary: SummaryView
    availability: AvailabilityStatus
    selected: bool


class ListView(BaseModel):
    items: List[ListItem]
    selected_id: Optional[int] = None


class DashboardHeader(BaseModel):
    title: str
    badges: List[str]


class DashboardSnapshot(BaseModel):
    session_id: str
    header: DashboardHeader
    state: DashboardState
    list_view: ListView
    map_view: MapView
