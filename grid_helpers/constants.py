"""
Common constants used across the grid helpers.
"""
from enum import Enum

class ColumnType(str, Enum):
    """Display kinds a table column can declare."""
    TEXT = 'text'
    NUMBER = 'number'
    BOOLEAN = 'boolean'
    DATE = 'date'
    TIME = 'time'
    TIMESPAN = 'timespan'
    CHECKBOX = 'checkbox'
    STATUS = 'status'
    ENUM = 'enum'
    CURRENCY = 'currency'

# Bucket used by group_by for records missing the grouping field
MISSING_GROUP_KEY = 'undefined'

# Accepted sort_dir values coming from table headers
SORT_DIRECTIONS = {'asc', 'desc'}
DEFAULT_SORT_DIR = 'asc'

CURRENCY_SYMBOL = '$'
