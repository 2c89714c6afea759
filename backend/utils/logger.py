# utils/logger.py
"""
공통 로거

from utils.logger import logger 로 사용
"""

import logging
import sys

from utils.config import get_settings

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s - %(message)s"


def setup_logger(name: str = "smart_parking") -> logging.Logger:
    """스트림 핸들러가 붙은 로거 생성 (중복 핸들러 방지)"""
    _logger = logging.getLogger(name)

    if not _logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        _logger.addHandler(handler)

    _logger.setLevel(get_settings().LOG_LEVEL.upper())
    return _logger


logger = setup_logger()
