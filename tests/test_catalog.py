"""Tests for the I/O property catalog."""
import pytest

from avldecode.catalog import (
    ODOMETER_PROPERTY_ID,
    TRIP_EVENT_PROPERTY_ID,
    PropertyCatalog,
    PropertyDescriptor,
    default_catalog,
    load_property_table,
)


def test_packaged_catalog_size():
    catalog = PropertyCatalog()
    assert len(catalog) == 82


def test_get_din1():
    info = PropertyCatalog().get(1)
    assert info is not None
    assert info.label == "Din 1"
    assert info.unit == ""
    assert info.values == {0: "0", 1: "1"}
    assert info.is_enumerated is True


def test_get_with_unit():
    info = PropertyCatalog().get(66)
    assert info is not None
    assert info.label == "Ext Voltage"
    assert info.unit == "mV"
    assert info.is_enumerated is False


def test_get_unknown_returns_none():
    assert PropertyCatalog().get(2) is None


def test_describe_enumerated_value():
    catalog = PropertyCatalog()
    assert catalog.describe(239, 1) == ("Ignition", "", "Yes")
    assert catalog.describe(69, 2) == ("GNSS Status", "", "ON without fix")


def test_describe_unmapped_value_is_empty():
    assert PropertyCatalog().describe(239, 7) == ("Ignition", "", "")


def test_describe_non_enumerated():
    assert PropertyCatalog().describe(24, 90) == ("Speed", "km/h", "")


def test_describe_unknown_id():
    assert PropertyCatalog().describe(3, 1) == ("", "", "")


def test_well_known_ids_present():
    catalog = PropertyCatalog()
    assert catalog.get(ODOMETER_PROPERTY_ID).label == "Total Odometer"
    assert catalog.get(TRIP_EVENT_PROPERTY_ID).values[1] == "Trip Started"


def test_contains():
    catalog = PropertyCatalog()
    assert 250 in catalog
    assert 5 not in catalog


def test_all_sorted():
    ids = [d.id for d in PropertyCatalog().all()]
    assert ids == sorted(ids)
    assert ids[0] == 1


def test_from_dict():
    catalog = PropertyCatalog.from_dict({"7": {"label": "Door", "values": {"0": "Closed", "1": "Open"}}})
    assert len(catalog) == 1
    assert catalog.describe(7, 1) == ("Door", "", "Open")


def test_table_is_read_only():
    table = load_property_table()
    with pytest.raises(TypeError):
        table[999] = PropertyDescriptor(id=999, label="x")
    with pytest.raises(TypeError):
        table[1].values[5] = "five"


def test_descriptor_is_frozen():
    info = PropertyCatalog().get(1)
    with pytest.raises(AttributeError):
        info.label = "changed"


def test_default_catalog_is_shared():
    assert default_catalog() is default_catalog()
    assert load_property_table() is load_property_table()
