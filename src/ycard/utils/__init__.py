"""Utility functions for yCard."""

from .exporters import DEFAULT_BASE_DN, ycard_to_csv, ycard_to_ldif
from .summary import (
    YCardSummary,
    get_summary,
    localize_person,
    localize_ycard,
)

__all__ = [
    'DEFAULT_BASE_DN',
    'ycard_to_csv',
    'ycard_to_ldif',
    'YCardSummary',
    'get_summary',
    'localize_person',
    'localize_ycard',
]
