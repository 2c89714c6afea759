# models/presentation_schema.py
"""화면 표시용 Pydantic 스키마 (리스트 카드 / 팝업 상세)"""

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field


class AvailabilityLevel(str, Enum):
    """잔여 주차면 비율 등급"""
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class AvailabilityStatus(BaseModel):
    """가용성 등급 + 용량 바 정보"""
    level: AvailabilityLevel
    ratio: float                                  # available / total (보정 전)
    fill_fraction: float = Field(..., ge=0, le=1)  # 용량 바 너비 (0~1)
    fill_percent: float = Field(..., ge=0, le=100)
    color: str                                    # 용량 바 색상


class AmenityChip(BaseModel):
    """리스트 카드의 편의시설 칩"""
    key: str
    label: str
    icon: str


class SummaryView(BaseModel):
    """리스트 카드 표시 항목"""
    facility_id: int
    title: str
    premium_badge: bool
    capacity_text: str
    starting_price: str
    chips: List[AmenityChip]


class PriceRow(BaseModel):
    """요금표 한 줄"""
    tier: str
    label: str
    value: str
    missing: bool = False


class SecurityBlock(BaseModel):
    guarded: bool
    surveilled: bool
    patrolled: bool
    text: str


class PremiumBlock(BaseModel):
    text: str


class AmenityRow(BaseModel):
    """부가 서비스 (EV 충전, 세차, 카페)"""
    key: str
    label: str
    icon: str
    price: Optional[str] = None


class DetailView(BaseModel):
    """지도 팝업 상세 표시 항목"""
    facility_id: int
    title: str
    premium_badge: bool
    availability_text: str
    pricing: List[PriceRow]
    security: SecurityBlock
    premium: Optional[PremiumBlock] = None
    amenities: List[AmenityRow]
