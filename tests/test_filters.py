"""
Unit tests for filter options and label helpers.
"""
import pytest

from app.core.filters import (
    ALL,
    ARTICLE_FILTERS,
    BOOK_FILTERS,
    DEFAULT_BADGE_COLOR,
    ENTITY_FILTERS,
    JOB_FILTERS,
    PAGINATION_OPTIONS,
    SCHOLARSHIP_FILTERS,
    USER_FILTERS,
    get_category_label,
    get_filter_options,
    get_status_badge_color,
    get_type_badge_color,
    get_type_label,
    is_filter_applied,
)


def test_every_filter_list_starts_with_all_sentinel():
    for entity, filters in ENTITY_FILTERS.items():
        for name, options in filters.items():
            assert options[0] == ALL, f"{entity}.{name} must start with 'All'"


def test_category_label_splits_on_underscores_only():
    assert get_category_label("need-based") == "Need-based"
    assert get_category_label("full_tuition") == "Full Tuition"
    assert get_category_label("academic") == "Academic"


def test_type_label_matches_category_label():
    assert get_type_label("partial_tuition") == "Partial Tuition"
    assert get_type_label("full-time") == "Full-time"


@pytest.mark.parametrize("value", [None, ""])
def test_labels_for_missing_values(value):
    assert get_category_label(value) == "N/A"
    assert get_type_label(value) == "N/A"


def test_status_badge_colors():
    assert get_status_badge_color("active") == "bg-green-100 text-green-800"
    assert get_status_badge_color("archived") == "bg-purple-100 text-purple-800"
    assert get_status_badge_color("unknown-status") == DEFAULT_BADGE_COLOR
    assert get_status_badge_color(None) == DEFAULT_BADGE_COLOR


def test_type_badge_colors():
    assert get_type_badge_color("fellowship") == "bg-indigo-100 text-indigo-800"
    assert get_type_badge_color("full-time") == "bg-green-100 text-green-800"
    assert get_type_badge_color("freelance") == DEFAULT_BADGE_COLOR


def test_entity_option_sets():
    assert "need-based" in SCHOLARSHIP_FILTERS["categories"]
    assert JOB_FILTERS["genders"] == [ALL, "male", "female", "any"]
    assert "pending_review" in BOOK_FILTERS["statuses"]
    assert ARTICLE_FILTERS["languages"] == [ALL, "English", "Pashto", "Dari"]
    assert "suspended" in USER_FILTERS["statuses"]
    assert PAGINATION_OPTIONS["default_rows_per_page"] in PAGINATION_OPTIONS["rows_per_page"]


def test_get_filter_options():
    assert get_filter_options("jobs") is JOB_FILTERS
    assert get_filter_options("Books") is BOOK_FILTERS
    assert get_filter_options("videos") is None
    assert get_filter_options("") is None


def test_is_filter_applied():
    assert is_filter_applied("active") is True
    assert is_filter_applied(ALL) is False
    assert is_filter_applied(None) is False
    assert is_filter_applied("") is False
