# models/__init__.py
"""
models 패키지: Pydantic 스키마 정의 모듈 모음
- facility_schema.py
- presentation_schema.py
- map_schema.py
- dashboard_schema.py
"""

__all__ = ["facility_schema", "presentation_schema", "map_schema", "dashboard_schema"]
