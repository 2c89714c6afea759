# services/__init__.py
"""
services 패키지: 비즈니스 로직(카탈로그, 가용성, 선택, 표시, 지도) 모듈 모음
"""

__all__ = [
    "catalog_service",
    "availability_service",
    "selection_service",
    "presentation_service",
    "map_service",
    "dashboard_service",
]
