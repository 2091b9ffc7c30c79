"""
Filter options configuration.

Single source of truth for the filter values offered by list views
(scholarships, jobs, books, articles, users) and the helpers that turn
those values into display labels and badge colors.
"""
from typing import Dict, List, Optional

# Sentinel meaning "no filter applied"
ALL = "All"

SCHOLARSHIP_FILTERS: Dict[str, List[str]] = {
    "categories": [
        ALL,
        "academic",
        "merit",
        "need-based",
        "athletic",
        "research",
        "international",
        "minority",
        "women",
    ],
    "types": [
        ALL,
        "full_tuition",
        "partial_tuition",
        "stipend",
        "grant",
        "fellowship",
    ],
    "statuses": [ALL, "active", "expired", "draft", "inactive"],
    "levels": [
        ALL,
        "Undergraduate",
        "Graduate",
        "Postgraduate",
        "Masters",
        "PhD",
        "Certificate",
        "Diploma",
    ],
}

JOB_FILTERS: Dict[str, List[str]] = {
    "types": [ALL, "full-time", "part-time", "contract", "internship", "temporary", "remote"],
    "experiences": [ALL, "entry-level", "1-3 years", "3-5 years", "5-10 years", "10+ years"],
    "statuses": [ALL, "active", "draft", "expired", "inactive"],
    "genders": [ALL, "male", "female", "any"],
    "contract_types": [ALL, "permanent", "temporary", "contract", "freelance"],
}

BOOK_FILTERS: Dict[str, List[str]] = {
    "formats": [ALL, "pdf", "epub", "mobi", "docx", "txt", "html"],
    "languages": [ALL, "English", "Pashto", "Dari", "Arabic", "Urdu", "Persian"],
    "statuses": [ALL, "published", "draft", "archived", "pending_review"],
}

ARTICLE_FILTERS: Dict[str, List[str]] = {
    "statuses": [ALL, "published", "draft", "archived"],
    "languages": [ALL, "English", "Pashto", "Dari"],
}

USER_FILTERS: Dict[str, List[str]] = {
    "roles": [ALL, "admin", "hr", "student", "teacher", "author"],
    "statuses": [ALL, "active", "inactive", "pending", "suspended"],
}

# Reusable across entities
COMMON_STATUSES: Dict[str, str] = {
    "all": ALL,
    "active": "active",
    "inactive": "inactive",
    "draft": "draft",
    "published": "published",
    "archived": "archived",
    "expired": "expired",
}

PAGINATION_OPTIONS = {
    "rows_per_page": [5, 10, 15, 20, 25, 50, 100],
    "default_rows_per_page": 10,
}

SORT_OPTIONS = {
    "orders": ["ASC", "DESC"],
    "common_fields": {
        "created_at": "created_at",
        "updated_at": "updated_at",
        "title": "title",
        "name": "name",
        "status": "status",
    },
}

ENTITY_FILTERS: Dict[str, Dict[str, List[str]]] = {
    "scholarships": SCHOLARSHIP_FILTERS,
    "jobs": JOB_FILTERS,
    "books": BOOK_FILTERS,
    "articles": ARTICLE_FILTERS,
    "users": USER_FILTERS,
}

DEFAULT_BADGE_COLOR = "bg-gray-100 text-gray-800"

STATUS_COLORS: Dict[str, str] = {
    "active": "bg-green-100 text-green-800",
    "expired": "bg-red-100 text-red-800",
    "draft": "bg-yellow-100 text-yellow-800",
    "inactive": "bg-gray-100 text-gray-800",
    "published": "bg-blue-100 text-blue-800",
    "archived": "bg-purple-100 text-purple-800",
    "pending": "bg-orange-100 text-orange-800",
}

TYPE_COLORS: Dict[str, str] = {
    "full_tuition": "bg-green-100 text-green-800",
    "partial_tuition": "bg-blue-100 text-blue-800",
    "stipend": "bg-purple-100 text-purple-800",
    "grant": "bg-orange-100 text-orange-800",
    "fellowship": "bg-indigo-100 text-indigo-800",
    "full-time": "bg-green-100 text-green-800",
    "part-time": "bg-blue-100 text-blue-800",
    "contract": "bg-yellow-100 text-yellow-800",
    "internship": "bg-purple-100 text-purple-800",
}


def _humanize(value: Optional[str]) -> str:
    if not value:
        return "N/A"
    return " ".join(word[:1].upper() + word[1:] for word in value.split("_"))


def get_category_label(category: Optional[str]) -> str:
    """
    Human-readable label for a category value.

    Words are split on underscores only, so "need-based" becomes "Need-based"
    and "full_tuition" becomes "Full Tuition".
    """
    return _humanize(category)


def get_type_label(type_value: Optional[str]) -> str:
    """Human-readable label for a type value."""
    return _humanize(type_value)


def get_status_badge_color(status: Optional[str]) -> str:
    """CSS classes for a status badge. Unknown statuses get the gray default."""
    return STATUS_COLORS.get(status, DEFAULT_BADGE_COLOR)


def get_type_badge_color(type_value: Optional[str]) -> str:
    """CSS classes for a type badge."""
    return TYPE_COLORS.get(type_value, DEFAULT_BADGE_COLOR)


def get_filter_options(entity: str) -> Optional[Dict[str, List[str]]]:
    """Get the filter option sets for an entity, or None if the entity is unknown."""
    return ENTITY_FILTERS.get(entity.lower()) if entity else None


def is_filter_applied(value: Optional[str]) -> bool:
    """A filter is applied unless it is missing or the "All" sentinel."""
    return bool(value) and value != ALL
