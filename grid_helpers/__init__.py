"""
Data-shaping helpers for table views.

Resolves column kinds, formats cell values, sorts records on one or more
keys and groups records by a field. All functions and classes are
re-exported here.
"""

# Column kinds and data structures
from .constants import ColumnType
from .data_structures import (
    ColumnDescriptor,
    SortSpec
)

# Type resolution
from .column_types import coerce_column_type, resolve_column_type

# Formatters
from .formatters import (
    CellFormatter,
    DEFAULT_FORMATTERS,
    format_cell,
    format_row,
    format_currency,
    format_number,
    format_time,
    format_timespan,
    format_date
)

# Sorting
from .sorting_helpers import (
    sort_by,
    compare_records,
    compare_values,
    normalize_sort_keys
)

# Grouping
from .grouping_helpers import (
    group_by,
    group_key
)

# Logging
from .logger import configure_logging

# Errors
from .error_handler import (
    GridHelpersError,
    CollaboratorError,
    ValidationError,
    ConfigurationError
)

__all__ = [
    # Column kinds and data structures
    'ColumnType',
    'ColumnDescriptor',
    'SortSpec',
    # Type resolution
    'coerce_column_type',
    'resolve_column_type',
    # Formatters
    'CellFormatter',
    'DEFAULT_FORMATTERS',
    'format_cell',
    'format_row',
    'format_currency',
    'format_number',
    'format_time',
    'format_timespan',
    'format_date',
    # Sorting
    'sort_by',
    'compare_records',
    'compare_values',
    'normalize_sort_keys',
    # Grouping
    'group_by',
    'group_key',
    # Logging
    'configure_logging',
    # Errors
    'GridHelpersError',
    'CollaboratorError',
    'ValidationError',
    'ConfigurationError',
]
