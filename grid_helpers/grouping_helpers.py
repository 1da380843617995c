"""
Grouping helpers for table data.
"""
from typing import Any, Dict, Iterable, List, Mapping

from .constants import MISSING_GROUP_KEY
from .formatters import format_number, is_numeric


def group_key(value: Any) -> str:
    """
    Stringify a field value for use as a group key.

    Example:
        >>> group_key(None)
        'undefined'
        >>> group_key(True)
        'true'
        >>> group_key(2.0)
        '2'
    """
    if isinstance(value, str):
        return value
    if value is None:
        return MISSING_GROUP_KEY
    if isinstance(value, bool):
        return 'true' if value else 'false'
    if is_numeric(value):
        return format_number(value)
    return str(value)


def group_by(records: Iterable[Mapping[str, Any]], key: str) -> Dict[str, List[Mapping[str, Any]]]:
    """
    Group records by the value of one field.

    Groups appear in order of first occurrence and keep their records in
    input order. Records missing the field land in the 'undefined' group.

    Args:
        records: Records to group
        key: Field to group by

    Returns:
        Dict of group key -> list of records

    Example:
        >>> group_by([{'g': 'x'}, {'g': 'y'}, {'g': 'x'}], 'g')
        {'x': [{'g': 'x'}, {'g': 'x'}], 'y': [{'g': 'y'}]}
    """
    groups: Dict[str, List[Mapping[str, Any]]] = {}
    for record in records:
        groups.setdefault(group_key(record.get(key)), []).append(record)
    return groups
