"""
Tests for catalog helpers.
"""

import pytest

from evplanner.services.catalog import category_slug, normalize_sort_field, rating_value


def test_category_slug():
    assert category_slug("EV Charger") == "evcharger"
    assert category_slug("Battery  Storage\tUnit") == "batterystorageunit"


@pytest.mark.parametrize("rating,expected", [
    ("4.5/5", 4.5),
    ("4/5 stars", 4.0),
    ("rated 3.8", 3.8),
    ("unrated", 0.0),
    ("", 0.0),
    (None, 0.0),
])
def test_rating_value(rating, expected):
    assert rating_value(rating) == expected


def test_normalize_sort_field():
    assert normalize_sort_field(None) is None
    assert normalize_sort_field("cost") == "cost"
    assert normalize_sort_field("manufacturedIn") == "origin"
    assert normalize_sort_field("createdAt") == "created_at"

    with pytest.raises(ValueError):
        normalize_sort_field("documents")
