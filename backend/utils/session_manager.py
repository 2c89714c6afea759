# utils/session_manager.py
"""
Dashboard Session Manager

대시보드 세션별 선택/뷰포트 상태를 메모리에 저장하고 관리합니다.
재시작 시 모든 세션은 초기 상태로 돌아갑니다.
"""

import uuid
from typing import Dict, Optional

from models.dashboard_schema import DashboardState
from utils.logger import logger


# 전역 세션 저장소 (In-memory)
_sessions: Dict[str, DashboardState] = {}


def create_session(state: DashboardState) -> str:
    """
    새 세션 생성

    Args:
        state: 초기 상태

    Returns:
        세션 ID (UUID)
    """
    session_id = str(uuid.uuid4())
    _sessions[session_id] = state
    logger.info(f"🆕 새 대시보드 세션 생성: {session_id}")
    return session_id


def get_state(session_id: str) -> Optional[DashboardState]:
    """세션 상태 조회 (없으면 None)"""
    return _sessions.get(session_id)


def save_state(session_id: str, state: DashboardState):
    """
    세션 상태 저장

    Args:
        session_id: 세션 ID
        state: 저장할 상태
    """
    _sessions[session_id] = state
    logger.debug(f"💾 상태 저장: {session_id} (selected={state.selected_id}, rev={state.revision})")


def clear_session(session_id: str) -> bool:
    """세션 삭제 (존재했으면 True)"""
    if session_id in _sessions:
        del _sessions[session_id]
        logger.info(f"🗑️  세션 삭제: {session_id}")
        return True
    return False


def get_session_count() -> int:
    """활성 세션 개수 반환"""
    return len(_sessions)


def cleanup_old_sessions(max_sessions: int = 100):
    """
    오래된 세션 정리 (메모리 관리)

    Args:
        max_sessions: 최대 유지 세션 수
    """
    if len(_sessions) > max_sessions:
        # 가장 오래된 세션부터 삭제
        sessions_to_delete = list(_sessions.keys())[:len(_sessions) - max_sessions]
        for session_id in sessions_to_delete:
            clear_session(session_id)

        logger.info(f"🧹 오래된 세션 정리: {len(sessions_to_delete)}개 삭제")
