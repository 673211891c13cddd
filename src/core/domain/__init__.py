"""
Domain models and value objects.

Contains the MRZ date value type and the primitives for its components.
"""

from src.core.domain.date_fields import (
    DAY_MAX,
    DAY_MIN,
    FIELD_WIDTH,
    MONTH_MAX,
    MONTH_MIN,
    PARSE_FAILURE_SENTINEL,
    PARSED_VALUE_MAX,
    PARSED_VALUE_MIN,
    YEAR_MAX,
    YEAR_MIN,
    composite_key,
    format_field,
    invalid_reason,
    is_valid_triplet,
    parse_field,
)
from src.core.domain.mrz_date import MrzDate

__all__ = [
    # Date fields module
    "YEAR_MIN",
    "YEAR_MAX",
    "MONTH_MIN",
    "MONTH_MAX",
    "DAY_MIN",
    "DAY_MAX",
    "PARSE_FAILURE_SENTINEL",
    "FIELD_WIDTH",
    "PARSED_VALUE_MIN",
    "PARSED_VALUE_MAX",
    "parse_field",
    "format_field",
    "invalid_reason",
    "is_valid_triplet",
    "composite_key",
    # MrzDate model
    "MrzDate",
]
