# utils/__init__.py
"""
utils 패키지: 공통 유틸리티 모듈 모음
- config.py
- logger.py
- errors.py
- session_manager.py
"""

__all__ = ["config", "logger", "errors", "session_manager"]
