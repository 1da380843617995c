"""
Cell formatting for table columns.

Routes a cell's raw value to the formatter registered for the column's
static kind. The time/timespan/date formatters are placeholders for the
caller's locale-aware implementations and pass values through; supply
replacements through the ``formatters`` argument.
"""

import math
import numbers
from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional

from .column_types import coerce_column_type
from .constants import ColumnType, CURRENCY_SYMBOL
from .error_handler import CollaboratorError

Formatter = Callable[[Any], Any]


def is_numeric(value: Any) -> bool:
    """Return True for numbers, excluding booleans."""
    return isinstance(value, numbers.Number) and not isinstance(value, bool)


def format_number(value: Any) -> str:
    """
    Format a number as a plain decimal string.

    Integral floats drop their fractional part and non-finite floats use
    the names table clients expect.

    Example:
        >>> format_number(1234.5)
        '1234.5'
        >>> format_number(1234.0)
        '1234'
        >>> format_number(float('nan'))
        'NaN'
    """
    if isinstance(value, float):
        if math.isnan(value):
            return 'NaN'
        if math.isinf(value):
            return 'Infinity' if value > 0 else '-Infinity'
        if value.is_integer() and abs(value) < 1e21:
            return str(int(value))
        return repr(value)
    return str(value)


def format_currency(value: Any) -> str:
    """
    Format a numeric value as currency.

    No thousands separators and no locale handling: the symbol is simply
    prefixed to the decimal string.

    Example:
        >>> format_currency(1234.5)
        '$1234.5'
    """
    return CURRENCY_SYMBOL + format_number(value)


def format_time(value: Any) -> Any:
    """Time formatter placeholder; returns value unchanged."""
    return value


def format_timespan(value: Any) -> Any:
    """Timespan formatter placeholder; returns value unchanged."""
    return value


def format_date(value: Any) -> Any:
    """Date formatter placeholder; returns value unchanged."""
    return value


DEFAULT_FORMATTERS: Dict[ColumnType, Formatter] = {
    ColumnType.TIME: format_time,
    ColumnType.TIMESPAN: format_timespan,
    ColumnType.DATE: format_date,
    ColumnType.CURRENCY: format_currency,
}


def build_formatter_registry(overrides: Optional[Mapping[Any, Formatter]] = None) -> Dict[ColumnType, Formatter]:
    """
    Merge caller formatters over the defaults, keyed by ColumnType.

    Raises:
        ValidationError: If an override is keyed by an unknown kind
    """
    registry = dict(DEFAULT_FORMATTERS)
    if overrides:
        for kind, formatter in overrides.items():
            registry[coerce_column_type(kind)] = formatter
    return registry


class CellFormatter:
    """
    Formats the cells of a single column.

    The formatter for the column's static kind is looked up once, when the
    CellFormatter is built, and reused for every record.

    Args:
        column: ColumnDescriptor for the column being rendered
        formatters: Optional mapping of kind -> formatter overriding
            DEFAULT_FORMATTERS
    """

    def __init__(self, column, formatters: Optional[Mapping[Any, Formatter]] = None):
        self.column = column
        self.kind = column.type
        self.is_status = self.kind == ColumnType.STATUS
        self.formatter = build_formatter_registry(formatters).get(self.kind)

    def raw_value(self, record) -> Any:
        """Extract the unformatted value for this column from a record."""
        key = self.column.key
        value = record.get(key) if key else record

        if self.column.format:
            value = self.column.format(record, key)

        return value

    def format(self, record) -> Any:
        """
        Return the display value of this column for one record.

        Raises:
            CollaboratorError: If the column is a status column without a template
        """
        value = self.raw_value(record)

        if self.is_status:
            if self.column.template is None:
                raise CollaboratorError('template', self.column.key)
            return self.column.template(record)

        if self.formatter is not None and is_numeric(value):
            return self.formatter(value)

        return value


def format_cell(column, record, formatters: Optional[Mapping[Any, Formatter]] = None) -> Any:
    """
    Format one cell for display.

    Dispatch uses the column's static ``type``; a ``dynamic_type`` does not
    change which formatter runs.

    Args:
        column: ColumnDescriptor for the cell's column
        record: The row being rendered
        formatters: Optional mapping of kind -> formatter overriding the defaults

    Returns:
        The display value

    Raises:
        CollaboratorError: If a status column has no template

    Example:
        >>> format_cell(ColumnDescriptor('currency', key='price'), {'price': 1234.5})
        '$1234.5'
    """
    return CellFormatter(column, formatters).format(record)


def format_row(columns: Iterable, record, formatters: Optional[Mapping[Any, Formatter]] = None) -> List[Any]:
    """Format every column of one record, in column order."""
    return [format_cell(column, record, formatters) for column in columns]
