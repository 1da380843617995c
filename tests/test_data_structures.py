"""
Tests for the column and sort data structures.
"""

import unittest

from grid_helpers import ColumnDescriptor, ColumnType, SortSpec, ValidationError


class TestColumnDescriptor(unittest.TestCase):
    """Test ColumnDescriptor construction."""

    def test_string_type_is_coerced(self):
        """Test that kind names become ColumnType members."""
        column = ColumnDescriptor('currency', key='price')
        self.assertIs(column.type, ColumnType.CURRENCY)

    def test_unknown_type_rejected(self):
        """Test that unknown kinds raise ValidationError."""
        with self.assertRaises(ValidationError):
            ColumnDescriptor('money', key='price')

    def test_defaults(self):
        """Test optional attributes default to None and label to key."""
        column = ColumnDescriptor(key='name')
        self.assertIsNone(column.type)
        self.assertIsNone(column.dynamic_type)
        self.assertIsNone(column.format)
        self.assertIsNone(column.template)
        self.assertEqual(column.label, 'name')

    def test_to_dict(self):
        """Test serialisation of a column."""
        column = ColumnDescriptor('status', key='state', label='State',
                                  template=lambda r: 'OK')
        self.assertEqual(column.to_dict(), {
            'key': 'state',
            'label': 'State',
            'type': 'status',
            'has_dynamic_type': False,
            'has_format': False,
            'has_template': True
        })


class TestSortSpec(unittest.TestCase):
    """Test SortSpec."""

    def test_keys_normalized(self):
        """Test that a single key becomes a one-element tuple."""
        self.assertEqual(SortSpec('n').keys, ('n',))
        self.assertEqual(SortSpec(['a', 'b']).keys, ('a', 'b'))

    def test_apply(self):
        """Test applying a spec to records."""
        records = [{'n': 2}, {'n': 1}, {'n': 3}]
        self.assertEqual(SortSpec('n').apply(records), [{'n': 1}, {'n': 2}, {'n': 3}])
        self.assertEqual(SortSpec('n', ascending=False).apply(records),
                         [{'n': 3}, {'n': 2}, {'n': 1}])

    def test_apply_with_formatter(self):
        """Test that the value formatter is forwarded."""
        spec = SortSpec('name', value_formatter=str.lower)
        records = [{'name': 'b'}, {'name': 'A'}]
        self.assertEqual(spec.apply(records), [{'name': 'A'}, {'name': 'b'}])

    def test_reversed(self):
        """Test flipping the direction."""
        spec = SortSpec(['a', 'b']).reversed()
        self.assertFalse(spec.ascending)
        self.assertEqual(spec.to_dict(), {'keys': ['a', 'b'], 'sort_dir': 'desc'})

    def test_from_request_maps_column_and_direction(self):
        """Test translating a header click into keys and direction."""
        spec = SortSpec.from_request('song', 'DESC', {'song': 'title', 'plays': 'count'})
        self.assertEqual(spec.keys, ('title',))
        self.assertFalse(spec.ascending)

    def test_from_request_case_insensitive_by_default(self):
        """Test that string columns ignore case unless asked not to."""
        records = [{'name': 'Zebra'}, {'name': 'apple'}, {'name': 'Banana'}]
        spec = SortSpec.from_request('name', 'asc', {'name': 'name'})
        self.assertEqual([r['name'] for r in spec.apply(records)], ['apple', 'Banana', 'Zebra'])
        spec = SortSpec.from_request('name', 'asc', {'name': 'name'}, case_insensitive=False)
        self.assertEqual([r['name'] for r in spec.apply(records)], ['Banana', 'Zebra', 'apple'])

    def test_from_request_numeric_keys(self):
        """Test that numeric keys compare as numbers, blanks as 0."""
        records = [{'id': 1, 'count': '10'}, {'id': 2}, {'id': 3, 'count': '9'}]
        spec = SortSpec.from_request('count', 'asc', {'count': 'count'}, numeric_keys={'count'})
        self.assertEqual([r['id'] for r in spec.apply(records)], [2, 3, 1])

    def test_from_request_multi_key_column(self):
        """Test a header column that sorts on several keys."""
        records = [{'a': 1, 'b': 2}, {'a': 1, 'b': 1}, {'a': 0, 'b': 5}]
        spec = SortSpec.from_request('ab', 'asc', {'ab': ['a', 'b']})
        self.assertEqual(spec.keys, ('a', 'b'))
        self.assertEqual(spec.apply(records), [{'a': 0, 'b': 5}, {'a': 1, 'b': 1}, {'a': 1, 'b': 2}])

    def test_from_request_unknown_column_falls_back(self):
        """Test that an unknown column uses the first mapped one and warns."""
        with self.assertLogs('grid_helpers', level='WARNING') as logs:
            spec = SortSpec.from_request('bogus', 'asc', {'first': 'a', 'second': 'b'})
        self.assertEqual(spec.keys, ('a',))
        self.assertIn('bogus', logs.output[0])

    def test_from_request_invalid_direction_sorts_ascending(self):
        """Test that an unrecognised sort_dir falls back to ascending."""
        self.assertTrue(SortSpec.from_request('n', 'sideways', {'n': 'n'}).ascending)
        self.assertTrue(SortSpec.from_request('n', None, {'n': 'n'}).ascending)

    def test_from_request_needs_columns(self):
        """Test that an empty column map is rejected."""
        with self.assertRaises(ValidationError):
            SortSpec.from_request('n', 'asc', {})


if __name__ == '__main__':
    unittest.main()
