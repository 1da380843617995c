"""
Data structures describing table columns and sort requests.

Collaborator callables are optional; each documents the signature it is
called with.
"""

from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional, Set, Tuple, Union

from .column_types import coerce_column_type
from .constants import ColumnType, DEFAULT_SORT_DIR, SORT_DIRECTIONS
from .error_handler import ValidationError
from .logger import logger
from .sorting_helpers import normalize_sort_keys, sort_by

Record = Mapping[str, Any]


class ColumnDescriptor:
    """
    Describes how one table column resolves its type and renders its cells.

    Args:
        type: Static column kind (ColumnType or its string value)
        key: Field name read off each record; None means the whole record
        dynamic_type: Optional ``fn(record) -> kind``; a truthy result
            overrides ``type`` for that record
        format: Optional ``fn(record, key) -> value`` replacing direct field access
        template: Optional ``fn(record) -> value``; required for status columns
        label: Header text (defaults to key)
    """

    def __init__(self, type: Union[str, ColumnType, None] = None, key: Optional[str] = None,
                 dynamic_type: Optional[Callable[[Record], Any]] = None,
                 format: Optional[Callable[[Record, Optional[str]], Any]] = None,
                 template: Optional[Callable[[Record], Any]] = None,
                 label: Optional[str] = None):
        self.type = coerce_column_type(type)
        self.key = key
        self.dynamic_type = dynamic_type
        self.format = format
        self.template = template
        self.label = label if label is not None else key

    def __repr__(self) -> str:
        kind = self.type.value if self.type else None
        return f"ColumnDescriptor(type={kind!r}, key={self.key!r})"

    def to_dict(self) -> Dict[str, Any]:
        return {
            'key': self.key,
            'label': self.label,
            'type': self.type.value if self.type else None,
            'has_dynamic_type': self.dynamic_type is not None,
            'has_format': self.format is not None,
            'has_template': self.template is not None
        }


def _to_number(value: Any) -> Any:
    """Coerce a cell to a number for numeric columns; blanks become 0."""
    if value is None or value == '':
        return 0
    if isinstance(value, (int, float)):
        return value
    try:
        return float(value)
    except (TypeError, ValueError):
        return 0


def _fold_case(value: Any) -> Any:
    if isinstance(value, str):
        return value.lower()
    return value


class SortSpec:
    """
    A reusable sort request: keys, direction and optional collaborators.

    Args:
        keys: A field name or an ordered sequence of field names
        ascending: Sort direction (default: ascending)
        value_formatter: Optional ``fn(value) -> value`` applied to both
            values before they are compared
        short_circuit: Optional ``fn(a_value, b_value) -> bool`` called with
            the raw values; a truthy result skips that key for the pair
    """

    def __init__(self, keys: Union[str, Iterable[str]], ascending: bool = True,
                 value_formatter: Optional[Callable[[Any], Any]] = None,
                 short_circuit: Optional[Callable[[Any, Any], bool]] = None):
        self.keys: Tuple[str, ...] = normalize_sort_keys(keys)
        self.ascending = ascending
        self.value_formatter = value_formatter
        self.short_circuit = short_circuit

    @classmethod
    def from_request(cls, sort_column: Optional[str], sort_dir: Optional[str],
                     columns: Mapping[str, Union[str, Iterable[str]]],
                     numeric_keys: Set[str] = None,
                     case_insensitive: bool = True) -> 'SortSpec':
        """
        Build a spec from a table header's sort request.

        Args:
            sort_column: Header column the user clicked
            sort_dir: 'asc' or 'desc' (case-insensitive); anything else sorts ascending
            columns: Map of header column -> record key(s)
            numeric_keys: Record keys holding numbers stored as text; blanks sort as 0
            case_insensitive: Fold string case before comparing

        Returns:
            A SortSpec for the request

        Raises:
            ValidationError: If ``columns`` is empty

        Example:
            >>> spec = SortSpec.from_request('song', 'desc', {'song': 'title'})
            >>> spec.keys, spec.ascending
            (('title',), False)
        """
        if not columns:
            raise ValidationError("Sort request needs at least one sortable column")

        if sort_column in columns:
            keys = columns[sort_column]
        else:
            fallback = next(iter(columns))
            if sort_column:
                logger.warning(f"Unknown sort column '{sort_column}', falling back to '{fallback}'")
            keys = columns[fallback]
        keys = normalize_sort_keys(keys)

        direction = (sort_dir or '').lower()
        if direction not in SORT_DIRECTIONS:
            if sort_dir:
                logger.debug(f"Unknown sort_dir '{sort_dir}', using '{DEFAULT_SORT_DIR}'")
            direction = DEFAULT_SORT_DIR

        if numeric_keys and all(key in numeric_keys for key in keys):
            value_formatter = _to_number
        elif case_insensitive:
            value_formatter = _fold_case
        else:
            value_formatter = None

        logger.debug(f"Sort request {sort_column!r} {direction} -> keys {list(keys)}")
        return cls(keys, direction == 'asc', value_formatter)

    def apply(self, records: Iterable[Record]) -> List[Record]:
        """Return a new list of records ordered by this spec."""
        return sort_by(records, self.keys, self.ascending,
                       self.value_formatter, self.short_circuit)

    def reversed(self) -> 'SortSpec':
        """Return a copy of this spec with the direction flipped."""
        return SortSpec(self.keys, not self.ascending,
                        self.value_formatter, self.short_circuit)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'keys': list(self.keys),
            'sort_dir': 'asc' if self.ascending else 'desc'
        }
