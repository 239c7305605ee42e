"""
Unit tests for sequence flattening.
"""
import array
import datetime

import numpy as np
import pandas as pd
import pyarrow as pa
import pytest
from qparams.utils.sequence import append_sequence


class TestAppendSequence:
    """Test each flattening path appends in order."""

    @pytest.mark.parametrize('items', [
        [1, 'a', None],
        (1, 'a', None),
    ], ids=['list', 'tuple'])
    def test_bulk_paths(self, items):
        target = ['x']

        result = append_sequence(target, items, 3)

        assert result is target
        assert target == ['x', 1, 'a', None]

    @pytest.mark.parametrize('items', [
        [1, 2, 3],
        ['1', '2', '3'],
    ], ids=['ints', 'strings'])
    def test_typed_lists(self, items):
        assert append_sequence([], items, 3) == items

    def test_generic_path(self):
        """Test sequences without a bulk path are indexed."""
        items = array.array('i', [4, 5, 6])

        assert append_sequence([], items, 3) == [4, 5, 6]

    def test_numpy(self):
        result = append_sequence([], np.array([1.5, 2.5]), 2)

        assert result == [1.5, 2.5]
        assert all(type(v) is float for v in result)

    def test_numpy_datetime(self):
        """Test datetime64 elements become Python datetimes."""
        items = np.array(['2025-01-01T00:00:00', '2025-03-11T12:30:00'], dtype='datetime64[us]')

        assert append_sequence([], items, 2) == [
            datetime.datetime(2025, 1, 1),
            datetime.datetime(2025, 3, 11, 12, 30),
        ]

    def test_pandas_series_ignores_index(self):
        """Test Series values are appended in position order."""
        items = pd.Series(['b', 'a'], index=[10, 5])

        assert append_sequence([], items, 2) == ['b', 'a']

    def test_pyarrow(self):
        items = pa.array(['x', None, 'z'])

        assert append_sequence([], items, 3) == ['x', None, 'z']
