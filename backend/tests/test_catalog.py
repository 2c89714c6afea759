import pytest
from pydantic import ValidationError

from models.facility_schema import Facility, PriceTierName
from services.catalog_service import ParkingCatalog, get_catalog, load_catalog
from utils.errors import DataIntegrityError, UnknownFacilityError


def test_catalog_keeps_declaration_order(catalog):
    assert catalog.ids == [1, 2, 3]
    assert [f.id for f in catalog] == [f.id for f in get_catalog()]
    assert len(catalog) == 3


def test_get_unknown_facility(catalog):
    assert 99 not in catalog
    with pytest.raises(UnknownFacilityError) as excinfo:
        catalog.get(99)
    assert excinfo.value.facility_id == 99


def test_price_labels(catalog):
    phoenix = catalog.get(1)
    assert phoenix.price_for(PriceTierName.STANDARD).label == "₹60/hour"
    assert phoenix.washing_price.label == "₹399"
    assert phoenix.security_details.startswith("24/7 Armed Guards")


def test_facilities_are_immutable(catalog):
    with pytest.raises(ValidationError):
        catalog.get(1).name = "Renamed"


def test_valet_flag_without_tier_fails(lot_record):
    record = lot_record(0)
    del record["prices"]["valet"]
    with pytest.raises(DataIntegrityError) as excinfo:
        load_catalog([record])
    assert isinstance(excinfo.value.__cause__, ValidationError)
    assert "valet" in str(excinfo.value)


def test_tier_without_flag_fails(lot_record):
    record = lot_record(1)
    record["prices"]["premium"] = {"amount": 100, "unit": "hour"}
    with pytest.raises(DataIntegrityError):
        load_catalog([record])


def test_premium_details_without_flag_fails(lot_record):
    record = lot_record(1)
    record["premium_details"] = "VIP spots"
    with pytest.raises(DataIntegrityError):
        load_catalog([record])


def test_missing_wash_price_fails(lot_record):
    record = lot_record(0)
    del record["washing_price"]
    with pytest.raises(DataIntegrityError):
        load_catalog([record])


def test_missing_security_summary_fails(lot_record):
    record = lot_record(1)
    record["features"]["security"]["summary"] = None
    with pytest.raises(DataIntegrityError):
        load_catalog([record])


def test_missing_standard_tier_fails(lot_record):
    record = lot_record(1)
    del record["prices"]["standard"]
    with pytest.raises(DataIntegrityError):
        load_catalog([record])


@pytest.mark.parametrize(
    "field,value",
    [
        ("available_spaces", 500),
        ("available_spaces", -1),
        ("total_spaces", 0),
    ],
)
def test_capacity_rules(lot_record, field, value):
    record = lot_record(1)
    record[field] = value
    with pytest.raises(DataIntegrityError):
        load_catalog([record])


def test_coordinate_out_of_range_fails(lot_record):
    record = lot_record(1)
    record["location"]["lat"] = 91.0
    with pytest.raises(DataIntegrityError):
        load_catalog([record])


def test_duplicate_ids_fail(lot_record):
    with pytest.raises(DataIntegrityError, match="duplicate"):
        load_catalog([lot_record(0), lot_record(0)])


def test_empty_catalog_fails():
    with pytest.raises(DataIntegrityError):
        ParkingCatalog([])


def test_catalog_rechecks_unvalidated_facilities(catalog):
    # model_copy skips validation, the catalog must still catch it
    broken = catalog.get(1).model_copy(update={"premium_details": None})
    with pytest.raises(DataIntegrityError, match="premium_details"):
        ParkingCatalog([broken])


def test_facility_without_optional_features(lot_record):
    record = lot_record(1)
    record["features"].update(ev_charging=False, bike_parking=False)
    record["features"]["security"] = {}
    del record["ev_charging_price"]
    del record["prices"]["bike_parking"]

    facility = Facility.model_validate(record)
    assert facility.security_details is None
    assert list(facility.prices) == [PriceTierName.STANDARD]
