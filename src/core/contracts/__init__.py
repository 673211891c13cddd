"""
Contract Validation Module

JSON контракт сериализованной MrzDate.
"""

from .validators import MrzDateValidator, mrz_date_schema, validate_mrz_date

__all__ = [
    "MrzDateValidator",
    "mrz_date_schema",
    "validate_mrz_date",
]
