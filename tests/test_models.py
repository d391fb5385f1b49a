import pytest

from faithfinder.models import FaithGroup, SearchResult, safe_float


def make_group(**overrides):
    values = dict(id="g1", name="Grace", religion="Christianity", description="Church", latitude="37.5", longitude="-122.25")
    values.update(overrides)
    return FaithGroup(**values)


@pytest.mark.parametrize(
    "value,expected",
    [("37.77490000", 37.7749), (12, 12.0), (None, None), ("abc", None), ("inf", None), ("", None)],
)
def test_safe_float(value, expected):
    assert safe_float(value) == expected


def test_coordinates_parse_or_none():
    assert make_group().coordinates() == (37.5, -122.25)
    assert make_group(latitude="not-a-number").coordinates() is None
    assert make_group(longitude=None).coordinates() is None


def test_to_dict_uses_wire_names():
    data = make_group(zip_code="94103", review_count=3).to_dict()
    assert data["zipCode"] == "94103"
    assert data["reviewCount"] == 3
    assert data["isOpen"] == "unknown"
    assert "zip_code" not in data


def test_from_wire_maps_and_drops_unknown_keys():
    data = FaithGroup.from_wire({"zipCode": "1", "long_description": "x", "id": "nope", "extra": True})
    assert data == {"zip_code": "1", "long_description": "x"}


def test_search_result_distance_only_when_set():
    assert "distance" not in SearchResult(record=make_group()).to_dict()
    assert SearchResult(record=make_group(), distance=1.5).to_dict()["distance"] == 1.5
