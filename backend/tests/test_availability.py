import logging

import pytest

from models.presentation_schema import AvailabilityLevel
from services.availability_service import AVAILABILITY_COLORS, classify, encode, encode_facility
from utils.errors import InvalidCapacityError


@pytest.mark.parametrize(
    "available,total,expected",
    [
        (85, 200, AvailabilityLevel.MEDIUM),   # 0.425
        (32, 150, AvailabilityLevel.MEDIUM),   # ~0.213, just above 0.2
        (20, 150, AvailabilityLevel.LOW),      # ~0.133
        (101, 200, AvailabilityLevel.HIGH),
        (100, 200, AvailabilityLevel.MEDIUM),  # exactly 0.5
        (30, 150, AvailabilityLevel.LOW),      # exactly 0.2
        (31, 150, AvailabilityLevel.MEDIUM),
        (0, 10, AvailabilityLevel.LOW),
        (10, 10, AvailabilityLevel.HIGH),
    ],
)
def test_encode_levels(available, total, expected):
    status = encode(available, total)
    assert status.level == expected
    assert status.color == AVAILABILITY_COLORS[expected]


def test_encode_fill_matches_ratio_exactly():
    status = encode(85, 200)
    assert status.ratio == 85 / 200
    assert status.fill_fraction == 0.425
    assert status.fill_percent == pytest.approx(42.5)


def test_levels_follow_thresholds_for_all_consistent_inputs():
    for total in range(1, 41):
        for available in range(0, total + 1):
            ratio = available / total
            status = encode(available, total)
            if ratio > 0.5:
                assert status.level == AvailabilityLevel.HIGH
            elif ratio > 0.2:
                assert status.level == AvailabilityLevel.MEDIUM
            else:
                assert status.level == AvailabilityLevel.LOW
            assert status.fill_fraction == ratio


@pytest.mark.parametrize("total", [0, -1, -150])
def test_non_positive_total_is_rejected(total):
    with pytest.raises(InvalidCapacityError) as excinfo:
        encode(10, total)
    assert excinfo.value.total == total


def test_fill_is_clamped_for_inconsistent_input(caplog):
    with caplog.at_level(logging.WARNING):
        over = encode(250, 200)
        under = encode(-5, 200)

    assert over.fill_fraction == 1.0
    assert over.ratio == 1.25
    assert over.level == AvailabilityLevel.HIGH
    assert under.fill_fraction == 0.0
    assert under.level == AvailabilityLevel.LOW
    assert "가용성 비율 보정" in caplog.text


def test_classify_boundaries():
    assert classify(0.5) == AvailabilityLevel.MEDIUM
    assert classify(0.2) == AvailabilityLevel.LOW
    assert classify(0.5000001) == AvailabilityLevel.HIGH


def test_encode_facility_uses_catalog_counts(catalog):
    assert encode_facility(catalog.get(1)).level == AvailabilityLevel.MEDIUM
    assert encode_facility(catalog.get(2)).ratio == pytest.approx(32 / 150)
