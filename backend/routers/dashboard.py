# routers/dashboard.py
"""
Dashboard Router - 세션별 선택/뷰포트 상태 관리
"""

from fastapi import APIRouter, HTTPException

from models.dashboard_schema import DashboardEventRequest, DashboardSnapshot, DashboardState
from services.catalog_service import get_catalog
from services.dashboard_service import build_snapshot
from services.selection_service import SelectionController, initial_state
from utils import session_manager
from utils.config import get_settings
from utils.errors import UnknownFacilityError
from utils.logger import logger

router = APIRouter(
    prefix="/dashboard",
    tags=["Dashboard"]
)


def load_session_state(session_id: str) -> DashboardState:
    """세션 상태 로드 (없으면 404)"""
    state = session_manager.get_state(session_id)
    if state is None:
        logger.warning(f"⚠️ 존재하지 않는 세션: {session_id}")
        raise HTTPException(status_code=404, detail=f"Session {session_id} not found")
    return state


@router.post(
    "/sessions",
    response_model=DashboardSnapshot,
    status_code=201,
    summary="대시보드 세션 생성"
)
async def create_dashboard_session():
    """Unselected + 기본 뷰포트로 시작"""
    settings = get_settings()
    state = initial_state(settings)
    session_id = session_manager.create_session(state)
    session_manager.cleanup_old_sessions(settings.MAX_SESSIONS)
    return build_snapshot(session_id, get_catalog(), state, settings)


@router.get(
    "/sessions/count",
    summary="활성 세션 수"
)
async def get_session_count():
    """활성 세션 개수 조회"""
    return {
        "active_sessions": session_manager.get_session_count()
    }


@router.get(
    "/{session_id}",
    response_model=DashboardSnapshot,
    summary="대시보드 스냅샷"
)
async def get_dashboard(session_id: str):
    state = load_session_state(session_id)
    return build_snapshot(session_id, get_catalog(), state)


@router.post(
    "/{session_id}/events",
    response_model=DashboardSnapshot,
    summary="상호작용 이벤트 처리",
    description="리스트 선택 / 마커 선택 / 팝업 닫기 / 지도 이동"
)
async def dispatch_event(session_id: str, request: DashboardEventRequest):
    """
    이벤트 처리 엔드포인트

    1. 세션 상태 로드
    2. 상태 전이
    3. 상태 저장
    4. 스냅샷 반환
    """
    state = load_session_state(session_id)
    catalog = get_catalog()
    controller = SelectionController(catalog, state=state)

    try:
        new_state = controller.dispatch(request.event)
    except UnknownFacilityError as e:
        # 상태는 그대로 유지
        logger.warning(f"⚠️ 알 수 없는 시설 선택 무시: {e.facility_id} (session={session_id})")
        raise HTTPException(status_code=404, detail=str(e))
    except Exception as e:
        logger.error(f"❌ 이벤트 처리 중 오류: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="이벤트 처리 중 오류가 발생했습니다.")

    session_manager.save_state(session_id, new_state)
    logger.info(f"✅ {request.event.type} 처리 완료 (selected={new_state.selected_id})")
    return build_snapshot(session_id, catalog, new_state)


@router.delete(
    "/{session_id}",
    summary="대시보드 세션 삭제"
)
async def delete_dashboard_session(session_id: str):
    if not session_manager.clear_session(session_id):
        raise HTTPException(status_code=404, detail=f"Session {session_id} not found")
    return {
        "status": "success",
        "message": f"Session {session_id} cleared"
    }
