"""Domain constants for farm transactions."""

INCOME = "Income"
EXPENSE = "Expense"
TRANSACTION_KINDS = (INCOME, EXPENSE)

NO_DESCRIPTION_PLACEHOLDER = "No description"
OTHER_CATEGORY = "Other"
TOP_CATEGORY_LIMIT = 8
MONTHLY_WINDOW_MONTHS = 12

PAGE_SIZE_OPTIONS = (5, 10, 20, 50, 100)
DEFAULT_PAGE_SIZE = 10

ASCENDING = "asc"
DESCENDING = "desc"

IMPORT_DEFAULTS = {
    "description": "Imported transaction",
    "payer": "Unknown",
    "category": "Other",
    "sub_category": "General",
    "source": "Unknown",
    "notes": "",
}

# Canonical field -> export header, in export column order.
EXPORT_COLUMNS = (
    ("date", "Date"),
    ("kind", "Type"),
    ("description", "Description"),
    ("amount", "Amount"),
    ("payer", "Paid By"),
    ("category", "Category"),
    ("sub_category", "Sub-Category"),
    ("source", "Source"),
    ("notes", "Notes"),
)
EXPORT_HEADERS = tuple(header for _, header in EXPORT_COLUMNS)


__all__ = [
    "INCOME",
    "EXPENSE",
    "TRANSACTION_KINDS",
    "NO_DESCRIPTION_PLACEHOLDER",
    "OTHER_CATEGORY",
    "TOP_CATEGORY_LIMIT",
    "MONTHLY_WINDOW_MONTHS",
    "PAGE_SIZE_OPTIONS",
    "DEFAULT_PAGE_SIZE",
    "ASCENDING",
    "DESCENDING",
    "IMPORT_DEFAULTS",
    "EXPORT_COLUMNS",
    "EXPORT_HEADERS",
]
