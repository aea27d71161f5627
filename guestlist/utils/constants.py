class ResponseMessages:
    """Standard API response messages"""

    GUEST_NOT_FOUND = "Guest not found"
    QUERY_REQUIRED = "Query parameter required"
    COUNT_AT_ZERO = "Count is already at zero"
    INVITE_MISMATCH = "Invite does not belong to this function"


class AppConstants:
    # Groups
    DEFAULT_GROUP_NAME = "General"
    PREDEFINED_GROUPS = ["adnan", "tasneem", "zahra", "khozema", "dada&dadi"]

    # Spreadsheet import
    MAX_FILE_SIZE_MB = 10
    MAX_FILE_SIZE_BYTES = MAX_FILE_SIZE_MB * 1024 * 1024
    MAX_IMPORT_ROWS = 10_000
    MAX_IMPORT_ERRORS = 50
    IMPORT_HEADER_ROW_OFFSET = 2  # header row + 1-based numbering
    ALLOWED_IMPORT_EXTENSIONS = [".xlsx", ".xls", ".csv"]
    ALLOWED_IMPORT_CONTENT_TYPES = [
        "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
        "application/vnd.ms-excel",
        "text/csv",
        "application/csv",
        "text/plain",
        "application/octet-stream",
    ]

    # Headcounts per guest or invite category
    MAX_HEADCOUNT = 1000

    # Money
    CURRENCY_DECIMAL_PLACES = 2


# Headcount categories, in the order decrements are applied
DECREMENT_PRECEDENCE = ["children", "gents", "ladies"]

INVITE_COUNT_FIELDS = {
    "ladies": "ladies_invited",
    "gents": "gents_invited",
    "children": "children_invited",
}
