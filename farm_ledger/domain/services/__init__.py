"""Domain services package."""

from .aggregation import (
    compute_category_totals,
    compute_monthly_totals,
    compute_sub_category_breakdown,
    compute_transaction_summary,
    group_top_categories,
)
from .filters import apply_filters, distinct_values
from .normalization import normalize_rows, resolve_field
from .pagination import PaginationState, paginate
from .sorting import sort_records, toggle_sort
from .validation import filter_valid_records, is_valid_record

__all__ = [
    "compute_category_totals",
    "compute_monthly_totals",
    "compute_sub_category_breakdown",
    "compute_transaction_summary",
    "group_top_categories",
    "apply_filters",
    "distinct_values",
    "normalize_rows",
    "resolve_field",
    "PaginationState",
    "paginate",
    "sort_records",
    "toggle_sort",
    "filter_valid_records",
    "is_valid_record",
]
