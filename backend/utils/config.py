"""Environment config loader"""
from functools import lru_cache
from pydantic import model_validator
from pydantic_settings import BaseSettings
from typing import Optional


class Settings(BaseSettings):
    """환경변수 관리"""

    # App
    APP_TITLE: str = "Smart Parking Bangalore"
    LOG_LEVEL: str = "INFO"

    # Map - 기본 뷰포트 (서비스 지역 전체)
    DEFAULT_CENTER_LAT: float = 12.9716
    DEFAULT_CENTER_LNG: float = 77.5946
    DEFAULT_ZOOM: float = 12
    DETAIL_ZOOM: float = 15  # 리스트에서 선택 시 확대 레벨

    MAP_STYLE_URL: str = "mapbox://styles/mapbox/streets-v12"
    MAPBOX_ACCESS_TOKEN: Optional[str] = None

    # Presentation
    MISSING_PRICE_PLACEHOLDER: str = "N/A"
    STRICT_PRICE_TIERS: bool = False  # True면 가격 누락 시 예외 발생

    # Session
    MAX_SESSIONS: int = 100

    # Server
    DEBUG: bool = False
    PORT: int = 3001

    class Config:
        env_file = ".env"
        case_sensitive = True

    @model_validator(mode="after")
    def _check_map_defaults(self):
        if not -90 <= self.DEFAULT_CENTER_LAT <= 90:
            raise ValueError("DEFAULT_CENTER_LAT must be within [-90, 90]")
        if not -180 <= self.DEFAULT_CENTER_LNG <= 180:
            raise ValueError("DEFAULT_CENTER_LNG must be within [-180, 180]")
        if self.DEFAULT_ZOOM <= 0:
            raise ValueError("DEFAULT_ZOOM must be positive")
        if self.DETAIL_ZOOM <= self.DEFAULT_ZOOM:
            raise ValueError("DETAIL_ZOOM must be greater than DEFAULT_ZOOM")
        return self


@lru_cache
def get_settings() -> Settings:
    """싱글톤 패턴으로 Settings 반환"""
    return Settings()
