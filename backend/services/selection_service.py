# services/selection_service.py
"""
Selection Service

리스트 / 지도 상호작용 이벤트로 선택 상태와 뷰포트를 동기화합니다.

- 리스트 선택: 선택 + 해당 시설로 뷰포트 이동 (상세 줌)
- 마커 선택: 선택만 변경, 뷰포트 유지, 같은 클릭의 지도 닫기 이벤트 무시
- 팝업 닫기: 선택 해제
- 지도 이동: 뷰포트만 변경 (선택 유지)
"""

from typing import Optional

from models.dashboard_schema import (
    ClearSelection,
    DashboardEvent,
    DashboardState,
    SelectFromList,
    SelectFromMap,
    ViewportChanged,
)
from models.facility_schema import Coordinate, FacilityId
from models.map_schema import Viewport
from services.catalog_service import ParkingCatalog
from utils.config import Settings, get_settings
from utils.logger import logger

# interaction_id 없이 들어온 마커 클릭: 다음 지도 클릭 하나를 무시
ANY_INTERACTION = "*"


def default_viewport(settings: Optional[Settings] = None) -> Viewport:
    """서비스 지역 전체를 보여주는 기본 뷰포트"""
    settings = settings or get_settings()
    return Viewport(
        center=Coordinate(lat=settings.DEFAULT_CENTER_LAT, lng=settings.DEFAULT_CENTER_LNG),
        zoom=settings.DEFAULT_ZOOM,
    )


def _next_revision(state: DashboardState, selected_id: Optional[FacilityId]) -> int:
    """선택이 실제로 바뀔 때만 revision 증가"""
    if selected_id == state.selected_id:
        return state.revision
    return state.revision + 1


def _is_suppressed(state: DashboardState, interaction_id: Optional[str]) -> bool:
    """지도 클릭이 직전 마커 클릭에서 전파된 것인지"""
    suppressed = state.suppressed_interaction
    if suppressed is None:
        return False
    return suppressed == ANY_INTERACTION or interaction_id is None or interaction_id == suppressed


def initial_state(settings: Optional[Settings] = None) -> DashboardState:
    """초기 상태: Unselected + 기본 뷰포트"""
    return DashboardState(viewport=default_viewport(settings))


def apply_event(
    state: DashboardState,
    event: DashboardEvent,
    catalog: ParkingCatalog,
    settings: Optional[Settings] = None,
) -> DashboardState:
    """
    상태 전이 함수 (순수 함수, 입력 상태는 변경하지 않음)

    Args:
        state: 현재 상태
        event: 사용자 상호작용 이벤트
        catalog: 시설 카탈로그
        settings: 줌 레벨 설정 (없으면 전역 설정)

    Returns:
        다음 상태

    Raises:
        UnknownFacilityError: 카탈로그에 없는 시설 ID (상태 변화 없음)
    """
    settings = settings or get_settings()

    if isinstance(event, SelectFromList):
        facility = catalog.get(event.facility_id)
        return state.model_copy(update={
            "selected_id": facility.id,
            "viewport": Viewport(center=facility.location, zoom=settings.DETAIL_ZOOM),
            "revision": _next_revision(state, facility.id),
            "suppressed_interaction": None,
        })

    if isinstance(event, SelectFromMap):
        facility = catalog.get(event.facility_id)
        return state.model_copy(update={
            "selected_id": facility.id,
            "revision": _next_revision(state, facility.id),
            "suppressed_interaction": event.interaction_id or ANY_INTERACTION,
        })

    if isinstance(event, ClearSelection):
        if event.source == "map_click" and _is_suppressed(state, event.interaction_id):
            # 마커 클릭이 지도까지 전파된 것 → 무시 (한 번만)
            return state.model_copy(update={"suppressed_interaction": None})
        if not state.is_selected:
            return state
        return state.model_copy(update={
            "selected_id": None,
            "revision": state.revision + 1,
            "suppressed_interaction": None,
        })

    if isinstance(event, ViewportChanged):
        return state.model_copy(update={
            "viewport": event.viewport,
            "suppressed_interaction": None,
        })

    raise TypeError(f"unsupported dashboard event: {type(event).__name__}")


class SelectionController:
    """현재 상태를 들고 이벤트를 적용하는 컨트롤러"""

    def __init__(
        self,
        catalog: ParkingCatalog,
        state: Optional[DashboardState] = None,
        settings: Optional[Settings] = None,
    ):
        self.catalog = catalog
        self.settings = settings or get_settings()
        self._state = state or initial_state(self.settings)

    @property
    def state(self) -> DashboardState:
        return self._state

    def dispatch(self, event: DashboardEvent) -> DashboardState:
        """이벤트 적용 (실패 시 상태 유지)"""
        next_state = apply_event(self._state, event, self.catalog, self.settings)
        if next_state != self._state:
            logger.debug(
                f"🔀 {event.type}: selected {self._state.selected_id} → {next_state.selected_id} "
                f"(rev {next_state.revision})"
            )
        self._state = next_state
        return next_state

    def select_from_list(self, facility_id: FacilityId) -> DashboardState:
        return self.dispatch(SelectFromList(facility_id=facility_id))

    def select_from_map(self, facility_id: FacilityId, interaction_id: Optional[str] = None) -> DashboardState:
        return self.dispatch(SelectFromMap(facility_id=facility_id, interaction_id=interaction_id))

    def clear_selection(self, source: str = "close_button", interaction_id: Optional[str] = None) -> DashboardState:
        return self.dispatch(ClearSelection(source=source, interaction_id=interaction_id))

    def viewport_changed(self, viewport: Viewport) -> DashboardState:
        return self.dispatch(ViewportChanged(viewport=viewport))
