"""
Unit tests for string list utility functions.
"""
import pytest
from qparams import clean_strings, string_in_list


class TestCleanStrings:
    """Test whitespace trimming of string lists."""

    @pytest.mark.parametrize(('values', 'expected'), [
        ([' a ', '\tb\t', 'c'], ['a', 'b', 'c']),
        (['', ' ', '\t \t', 'x'], ['x']),
        (['a b', ' a  b '], ['a b', 'a  b']),
        (['\na\n'], ['\na\n']),
        ([], []),
    ], ids=['trims', 'drops_blank', 'inner_space_kept', 'newlines_kept', 'empty'])
    def test_clean_strings(self, values, expected):
        assert clean_strings(values) == expected

    def test_accepts_generator(self):
        assert clean_strings(s for s in [' id ', 'name']) == ['id', 'name']


class TestStringInList:
    """Test exact string membership."""

    def test_found(self):
        assert string_in_list('id', ['name', 'id'])

    def test_not_found(self):
        assert not string_in_list('ID', ['name', 'id'])

    def test_empty_list(self):
        assert not string_in_list('', [])
