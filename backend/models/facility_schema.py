# models/facility_schema.py
"""주차장(시설) 정보 Pydantic 스키마"""

from decimal import Decimal
from enum import Enum
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, computed_field, model_validator


FacilityId = int


class Coordinate(BaseModel):
    """위경도 좌표 (생성 후 불변)"""
    model_config = ConfigDict(frozen=True)

    lat: float = Field(..., ge=-90, le=90, allow_inf_nan=False)     # 위도
    lng: float = Field(..., ge=-180, le=180, allow_inf_nan=False)   # 경도


class PriceTierName(str, Enum):
    """요금 티어 이름"""
    STANDARD = "standard"
    VALET = "valet"
    PREMIUM = "premium"
    BIKE_PARKING = "bike_parking"


# 티어 → 해당 티어를 허용하는 기능 플래그 (standard는 항상 필수)
GOVERNED_TIERS: Dict[PriceTierName, str] = {
    PriceTierName.VALET: "valet",
    PriceTierName.PREMIUM: "premium_spots",
    PriceTierName.BIKE_PARKING: "bike_parking",
}

# 선택 필드 → 해당 필드를 요구하는 기능 플래그
OPTIONAL_DETAIL_FIELDS = (
    ("washing_price", "car_wash"),
    ("ev_charging_price", "ev_charging"),
    ("premium_details", "premium_spots"),
)


class PriceTier(BaseModel):
    """금액 + 과금 단위 (unit이 없으면 1회 요금)"""
    model_config = ConfigDict(frozen=True)

    amount: Decimal = Field(..., ge=0)
    currency: str = "₹"
    unit: Optional[str] = None   # 예: "hour"

    @computed_field
    @property
    def label(self) -> str:
        text = f"{self.currency}{self.amount}"
        if self.unit:
            text += f"/{self.unit}"
        return text


class SecurityProfile(BaseModel):
    """보안 정보 - 경비원 / CCTV / 순찰 + 상세 설명"""
    model_config = ConfigDict(frozen=True)

    guarded: bool = False      # 경비원 상주
    surveilled: bool = False   # CCTV
    patrolled: bool = False    # 정기 순찰
    summary: Optional[str] = None

    @property
    def has_measures(self) -> bool:
        return self.guarded or self.surveilled or self.patrolled


class FeatureSet(BaseModel):
    """시설 기능 플래그"""
    model_config = ConfigDict(frozen=True)

    ev_charging: bool = False
    car_wash: bool = False
    cafe: bool = False
    valet: bool = False
    wheelchair_access: bool = False
    bike_parking: bool = False
    premium_spots: bool = False
    security: SecurityProfile = SecurityProfile()


class Facility(BaseModel):
    """단일 주차장 정보 모델"""
    model_config = ConfigDict(frozen=True)

    id: FacilityId
    name: str = Field(..., min_length=1)
    location: Coordinate
    total_spaces: int = Field(..., gt=0)
    available_spaces: int = Field(..., ge=0)
    price: str                                   # 대표 요금 문구
    features: FeatureSet
    prices: Dict[PriceTierName, PriceTier]
    washing_price: Optional[PriceTier] = None    # car_wash 일 때만
    ev_charging_price: Optional[PriceTier] = None  # ev_charging 일 때만
    premium_details: Optional[str] = None        # premium_spots 일 때만

    @property
    def security_details(self) -> Optional[str]:
        return self.features.security.summary

    def price_for(self, tier: PriceTierName) -> Optional[PriceTier]:
        return self.prices.get(PriceTierName(tier))

    @model_validator(mode="after")
    def _check_integrity(self):
        problems = facility_integrity_problems(self)
        if problems:
            raise ValueError("; ".join(problems))
        return self


def facility_integrity_problems(facility: Facility) -> List[str]:
    """
    기능 플래그와 선택 필드의 짝이 맞는지 검사

    Returns:
        문제 설명 리스트 (비어 있으면 정상)
    """
    problems: List[str] = []
    features = facility.features

    if facility.available_spaces > facility.total_spaces:
        problems.append(
            f"available_spaces ({facility.available_spaces}) exceeds "
            f"total_spaces ({facility.total_spaces})"
        )

    if PriceTierName.STANDARD not in facility.prices:
        problems.append("'standard' price tier is required")

    for tier, flag in GOVERNED_TIERS.items():
        enabled = getattr(features, flag)
        present = tier in facility.prices
        if enabled and not present:
            problems.append(f"{flag} is set but '{tier.value}' price tier is missing")
        elif present and not enabled:
            problems.append(f"'{tier.value}' price tier is set but {flag} is not")

    for field_name, flag in OPTIONAL_DETAIL_FIELDS:
        enabled = getattr(features, flag)
        present = getattr(facility, field_name) is not None
        if enabled and not present:
            problems.append(f"{flag} is set but {field_name} is missing")
        elif present and not enabled:
            problems.append(f"{field_name} is set but {flag} is not")

    security = features.security
    if security.has_measures and not security.summary:
        problems.append("security measures are set but the security summary is missing")
    elif security.summary and not security.has_measures:
        problems.append("security summary is set but no security measure is")

    return problems
