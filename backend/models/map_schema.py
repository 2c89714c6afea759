# models/map_schema.py
"""지도 표면 Pydantic 스키마"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from models.facility_schema import Coordinate
from models.presentation_schema import AvailabilityLevel, DetailView


class Viewport(BaseModel):
    """지도가 현재 보여주는 영역 (중심 + 줌)"""
    model_config = ConfigDict(frozen=True)

    center: Coordinate
    zoom: float = Field(..., gt=0, allow_inf_nan=False)


class MapMarker(BaseModel):
    """지도 마커 하나를 나타내는 모델"""
    facility_id: int
    name: str                         # 마커 이름
    lat: float                        # 위도
    lng: float                        # 경도
    anchor: str = "bottom"
    icon: str = "map-pin"
    color: str                        # 핀 색상
    badge: Optional[str] = None       # 프리미엄 시설은 "crown"
    availability: AvailabilityLevel
    selected: bool = False


class MapPopup(BaseModel):
    """선택된 시설의 팝업 (닫기 가능)"""
    facility_id: int
    lat: float
    lng: float
    anchor: str = "bottom"
    dismissible: bool = True
    content: DetailView


class MapView(BaseModel):
    """지도 데이터 구조"""
    viewport: Viewport
    markers: List[MapMarker]
    popup: Optional[MapPopup] = None
    style_url: str
    access_token: Optional[str] = None
