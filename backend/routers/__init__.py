# routers/__init__.py
"""
routers 패키지: API 엔드포인트 모듈 모음
- facilities.py
- dashboard.py
- map.py
"""

__all__ = ["facilities", "dashboard", "map"]
