"""
Filter option endpoints consumed by list views and filter bars.
"""
from fastapi import APIRouter, HTTPException, status

from app.core.filters import (
    ALL,
    COMMON_STATUSES,
    ENTITY_FILTERS,
    PAGINATION_OPTIONS,
    SORT_OPTIONS,
    get_category_label,
    get_filter_options,
    get_status_badge_color,
    get_type_badge_color,
)

router = APIRouter(prefix="/filters", tags=["Filters"])


@router.get("")
def list_filters():
    """All filter option sets plus pagination and sort options."""
    return {
        "all": ALL,
        "entities": ENTITY_FILTERS,
        "common_statuses": COMMON_STATUSES,
        "pagination": PAGINATION_OPTIONS,
        "sort": SORT_OPTIONS,
    }


@router.get("/labels/{value}")
def describe_value(value: str):
    """Display label and badge colors for a filter value."""
    return {
        "value": value,
        "label": get_category_label(value),
        "status_color": get_status_badge_color(value),
        "type_color": get_type_badge_color(value),
    }


@router.get("/{entity}")
def entity_filters(entity: str):
    options = get_filter_options(entity)
    if options is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"No filters defined for '{entity}'"
        )
    return options
