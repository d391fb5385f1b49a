import pytest

from faithfinder.models import FaithGroup
from faithfinder.search.matcher import matches


def make_group(**overrides):
    values = dict(
        id="g1",
        name="Grace Church",
        religion="Christianity",
        description="A welcoming congregation",
        latitude="37.7749",
        longitude="-122.4194",
        denomination=None,
    )
    values.update(overrides)
    return FaithGroup(**values)


@pytest.mark.parametrize("query", [None, ""])
def test_empty_query_matches_everything(query):
    assert matches(make_group(), query) is True


@pytest.mark.parametrize(
    "query",
    ["christianity", "CHRIST", "grace", "welcoming"],
)
def test_matches_any_field_case_insensitively(query):
    assert matches(make_group(), query) is True


def test_matches_denomination():
    assert matches(make_group(denomination="Roman Catholic"), "catholic") is True


def test_null_denomination_never_matches():
    group = make_group(denomination=None)
    assert matches(group, "catholic") is False


def test_no_field_contains_query():
    assert matches(make_group(), "mosque") is False


def test_non_text_field_is_skipped():
    group = make_group(name=123)
    assert matches(group, "christ") is True
    assert matches(group, "123") is False
