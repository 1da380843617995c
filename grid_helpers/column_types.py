"""
Column type resolution.
"""
from typing import Any, Optional, Union

from .constants import ColumnType
from .error_handler import ValidationError


def coerce_column_type(value: Union[str, ColumnType, None]) -> Optional[ColumnType]:
    """
    Convert a kind name to a ColumnType.

    Raises:
        ValidationError: If value does not name a known column kind
    """
    if value is None or isinstance(value, ColumnType):
        return value
    try:
        return ColumnType(value)
    except ValueError:
        valid = ', '.join(kind.value for kind in ColumnType)
        raise ValidationError(f"Unknown column type {value!r} (expected one of: {valid})") from None


def resolve_column_type(column, record) -> Union[ColumnType, Any, None]:
    """
    Return the effective kind of a column for one record.

    A column's ``dynamic_type`` wins whenever it returns a truthy value;
    otherwise the static ``type`` is used. Neither is required, so the
    result may be None, and a dynamic kind outside ColumnType is returned
    as-is for callers to treat as opaque text.

    Args:
        column: ColumnDescriptor (or any object with type/dynamic_type)
        record: The row being rendered

    Returns:
        The resolved column kind

    Example:
        >>> column = ColumnDescriptor('text', key='done',
        ...                           dynamic_type=lambda r: 'checkbox')
        >>> resolve_column_type(column, {'done': True})
        <ColumnType.CHECKBOX: 'checkbox'>
    """
    dynamic_type = getattr(column, 'dynamic_type', None)
    if dynamic_type is not None:
        kind = dynamic_type(record)
        if kind:
            try:
                return ColumnType(kind)
            except ValueError:
                return kind
    return getattr(column, 'type', None)
