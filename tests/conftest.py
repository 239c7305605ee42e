"""
Shared fixtures for qparams tests.
"""
import pytest
from qparams import ExpandOptions, Valuer


class NullString(Valuer):
    """Nullable string wrapper, bound as None when not valid."""

    def __init__(self, string='', valid=False):
        self.string = string
        self.valid = valid

    def __eq__(self, other):
        return (isinstance(other, NullString)
                and (self.string, self.valid) == (other.string, other.valid))

    def __repr__(self):
        return f'NullString({self.string!r}, valid={self.valid})'

    def value(self):
        return self.string if self.valid else None


class ListValuer(Valuer):
    """Wrapper whose driver value is a list of ids."""

    def __init__(self, *ids):
        self.ids = list(ids)

    def value(self):
        return self.ids


class BrokenValuer(Valuer):
    """Wrapper whose accessor always fails."""

    def value(self):
        raise RuntimeError('no value')


@pytest.fixture
def null_string():
    return NullString


@pytest.fixture
def list_valuer():
    return ListValuer


@pytest.fixture
def broken_valuer():
    return BrokenValuer()


@pytest.fixture
def strict_options():
    return ExpandOptions(strict=True)
