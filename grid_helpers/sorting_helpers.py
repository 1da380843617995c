"""
Sorting helpers for table data.

``sort_by`` is the multi-key, stable sort used by every table.
"""
import math
from decimal import Decimal
from functools import cmp_to_key
from typing import Any, Callable, Iterable, List, Mapping, Optional, Tuple, Union

Record = Mapping[str, Any]


def normalize_sort_keys(keys: Union[str, Iterable[str]]) -> Tuple[str, ...]:
    """Treat a single key name and a sequence of names uniformly."""
    if isinstance(keys, str):
        return (keys,)
    return tuple(keys)


def _is_nan(value: Any) -> bool:
    if isinstance(value, float):
        return math.isnan(value)
    if isinstance(value, Decimal):
        return value.is_nan()
    return False


def _rank(value: Any) -> int:
    """Missing values first, then NaN, then everything else."""
    if value is None:
        return 0
    if _is_nan(value):
        return 1
    return 2


def compare_values(x: Any, y: Any) -> int:
    """
    Three-way compare two cell values.

    Missing values (None) sort before everything else, followed by NaN.
    Values that Python cannot order against each other are ordered by
    type name and then by their string form, so a mixed column never
    raises.

    Returns:
        -1, 0 or 1
    """
    x_rank, y_rank = _rank(x), _rank(y)
    if x_rank != y_rank or x_rank < 2:
        return (x_rank > y_rank) - (x_rank < y_rank)
    try:
        if x < y:
            return -1
        if x > y:
            return 1
        return 0
    except TypeError:
        x_key = (type(x).__name__, str(x))
        y_key = (type(y).__name__, str(y))
        return (x_key > y_key) - (x_key < y_key)


def compare_records(a: Record, b: Record, keys: Union[str, Iterable[str]], ascending: bool = True,
                    value_formatter: Optional[Callable[[Any], Any]] = None,
                    short_circuit: Optional[Callable[[Any, Any], bool]] = None) -> int:
    """
    Compare two records key by key, left to right.

    For each key the raw values are first offered to ``short_circuit``; a
    truthy answer skips the key for this pair. Otherwise both values go
    through ``value_formatter`` and are compared, and the first key that
    differs decides the order (flipped when ``ascending`` is False).

    Returns:
        Negative, zero or positive, like a cmp function
    """
    for key in normalize_sort_keys(keys):
        a_value = a.get(key)
        b_value = b.get(key)

        if short_circuit is not None and short_circuit(a_value, b_value):
            continue

        if value_formatter is not None:
            a_value = value_formatter(a_value)
            b_value = value_formatter(b_value)

        result = compare_values(a_value, b_value)
        if result:
            return result if ascending else -result

    return 0


def sort_by(records: Iterable[Record], keys: Union[str, Iterable[str]], ascending: bool = True,
            value_formatter: Optional[Callable[[Any], Any]] = None,
            short_circuit: Optional[Callable[[Any, Any], bool]] = None) -> List[Record]:
    """
    Sort records by one or more keys.

    Args:
        records: Records to sort (never modified)
        keys: A key name or an ordered sequence of key names
        ascending: Sort direction (default: True)
        value_formatter: Optional function applied to each value before comparing
        short_circuit: Optional ``fn(a_value, b_value)``; truthy skips that key

    Returns:
        A new, stably sorted list

    Example:
        >>> sort_by([{'n': 3}, {'n': 1}, {'n': 2}], 'n')
        [{'n': 1}, {'n': 2}, {'n': 3}]
    """
    keys = normalize_sort_keys(keys)

    def _cmp(a, b):
        return compare_records(a, b, keys, ascending, value_formatter, short_circuit)

    return sorted(records, key=cmp_to_key(_cmp))
