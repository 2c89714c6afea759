# services/presentation_service.py
"""
Presentation Service

시설별로 어떤 항목을 보여줄지 결정하는 순수 함수 모음
- 리스트 카드 (summary)
- 지도 팝업 상세 (detail)

두 화면 모두 이 모듈의 결과만 사용하고 표시 규칙을 따로 계산하지 않습니다.
"""

from typing import List, Optional, Tuple

from models.facility_schema import Facility, PriceTierName
from models.presentation_schema import (
    AmenityChip,
    AmenityRow,
    DetailView,
    PremiumBlock,
    PriceRow,
    SecurityBlock,
    SummaryView,
)
from utils.config import Settings, get_settings
from utils.errors import MissingPriceTierError
from utils.logger import logger

NO_SECURITY_TEXT = "No on-site security"

# (key, label, icon) - 표시 순서 고정
SUMMARY_CHIPS: Tuple[Tuple[str, str, str], ...] = (
    ("security", "Security", "shield"),
    ("valet", "Valet", "user-check"),
    ("wheelchair_access", "Accessible", "wheelchair"),
    ("ev_charging", "EV", "zap"),
    ("bike_parking", "Bike", "bike"),
)

# (tier, label, 기능 플래그) - standard 는 항상 표시
PRICING_ROWS: Tuple[Tuple[PriceTierName, str, Optional[str]], ...] = (
    (PriceTierName.STANDARD, "Standard", None),
    (PriceTierName.VALET, "Valet", "valet"),
    (PriceTierName.PREMIUM, "Premium", "premium_spots"),
    (PriceTierName.BIKE_PARKING, "Bike Parking", "bike_parking"),
)


def _chip_enabled(facility: Facility, key: str) -> bool:
    if key == "security":
        return facility.features.security.guarded
    return getattr(facility.features, key)


def amenity_chips(facility: Facility) -> List[AmenityChip]:
    """켜진 플래그에 대해서만 칩 생성 (경비 → 발렛 → 휠체어 → EV → 자전거)"""
    return [
        AmenityChip(key=key, label=label, icon=icon)
        for key, label, icon in SUMMARY_CHIPS
        if _chip_enabled(facility, key)
    ]


def require_price(facility: Facility, tier: PriceTierName) -> str:
    """
    가격 티어 라벨 조회

    Raises:
        MissingPriceTierError: 티어 누락
    """
    price = facility.price_for(tier)
    if price is None:
        raise MissingPriceTierError(facility.id, tier.value)
    return price.label


def _price_row(facility: Facility, tier: PriceTierName, label: str, settings: Settings) -> PriceRow:
    try:
        return PriceRow(tier=tier.value, label=label, value=require_price(facility, tier))
    except MissingPriceTierError as e:
        if settings.STRICT_PRICE_TIERS:
            raise
        logger.warning(f"⚠️ 가격 정보 누락, 대체 문구 표시: {e}")
        return PriceRow(
            tier=tier.value,
            label=label,
            value=settings.MISSING_PRICE_PLACEHOLDER,
            missing=True,
        )


def pricing_rows(facility: Facility, settings: Optional[Settings] = None) -> List[PriceRow]:
    """요금표: standard + 플래그가 켜진 발렛/프리미엄/자전거"""
    settings = settings or get_settings()
    return [
        _price_row(facility, tier, label, settings)
        for tier, label, flag in PRICING_ROWS
        if flag is None or getattr(facility.features, flag)
    ]


def security_block(facility: Facility) -> SecurityBlock:
    security = facility.features.security
    return SecurityBlock(
        guarded=security.guarded,
        surveilled=security.surveilled,
        patrolled=security.patrolled,
        text=facility.security_details or NO_SECURITY_TEXT,
    )


def premium_block(facility: Facility) -> Optional[PremiumBlock]:
    if not facility.features.premium_spots:
        return None
    return PremiumBlock(text=facility.premium_details or "")


def amenity_rows(facility: Facility) -> List[AmenityRow]:
    """부가 서비스: EV 충전(요금), 세차(요금), 카페"""
    features = facility.features
    rows: List[AmenityRow] = []
    if features.ev_charging:
        price = facility.ev_charging_price
        rows.append(AmenityRow(
            key="ev_charging", label="EV Charging", icon="zap",
            price=price.label if price else None,
        ))
    if features.car_wash:
        price = facility.washing_price
        rows.append(AmenityRow(
            key="car_wash", label="Car Wash", icon="droplets",
            price=price.label if price else None,
        ))
    if features.cafe:
        rows.append(AmenityRow(key="cafe", label="Café Available", icon="coffee"))
    return rows


def project_summary(facility: Facility, settings: Optional[Settings] = None) -> SummaryView:
    """
    리스트 카드 표시 항목 계산

    Args:
        facility: 시설
        settings: 가격 누락 정책 (없으면 전역 설정)

    Returns:
        SummaryView
    """
    settings = settings or get_settings()
    starting = _price_row(facility, PriceTierName.STANDARD, "Standard", settings)
    return SummaryView(
        facility_id=facility.id,
        title=facility.name,
        premium_badge=facility.features.premium_spots,
        capacity_text=f"Available Spaces: {facility.available_spaces}/{facility.total_spaces}",
        starting_price=starting.value,
        chips=amenity_chips(facility),
    )


def project_detail(facility: Facility, settings: Optional[Settings] = None) -> DetailView:
    """
    지도 팝업 상세 표시 항목 계산

    Args:
        facility: 시설
        settings: 가격 누락 정책 (없으면 전역 설정)

    Returns:
        DetailView (premium 블록은 premium_spots 일 때만)

    Raises:
        MissingPriceTierError: STRICT_PRICE_TIERS 설정 시 가격 누락
    """
    settings = settings or get_settings()
    return DetailView(
        facility_id=facility.id,
        title=facility.name,
        premium_badge=facility.features.premium_spots,
        availability_text=f"Available: {facility.available_spaces}/{facility.total_spaces}",
        pricing=pricing_rows(facility, settings),
        security=security_block(facility),
        premium=premium_block(facility),
        amenities=amenity_rows(facility),
    )
