"""
Validator combinators for filter values.

A validator takes one value and raises NotInScopeError when the value is
rejected. Usage:

    check = multi(min_value(10), max_value(100))
    check(50)   # passes
    check(5)    # raises NotInScopeError
"""
from collections.abc import Callable
from typing import Any

from qparams.exceptions import NotInScopeError

__all__ = [
    'ValidationFunc',
    'Validations',
    'multi',
    'is_in',
    'min_value',
    'max_value',
    'min_max',
    'not_empty',
]

ValidationFunc = Callable[[Any], None]

# Field name -> validator
Validations = dict[str, ValidationFunc]


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def multi(*validators: ValidationFunc) -> ValidationFunc:
    """Combine validators; the first failure propagates.
    """
    def validate(value: Any) -> None:
        for validator in validators:
            validator(value)
    return validate


def is_in(*valid_values: Any) -> ValidationFunc:
    """Check that the value equals one of `valid_values`.
    """
    def validate(value: Any) -> None:
        if not any(valid == value for valid in valid_values):
            raise NotInScopeError(value)
    return validate


def min_value(minimum: int) -> ValidationFunc:
    def validate(value: Any) -> None:
        if not _is_int(value) or value < minimum:
            raise NotInScopeError(value)
    return validate


def max_value(maximum: int) -> ValidationFunc:
    def validate(value: Any) -> None:
        if not _is_int(value) or value > maximum:
            raise NotInScopeError(value)
    return validate


def min_max(minimum: int, maximum: int) -> ValidationFunc:
    """Check that the value is an int in [minimum, maximum].
    """
    def validate(value: Any) -> None:
        if not _is_int(value) or not minimum <= value <= maximum:
            raise NotInScopeError(value)
    return validate


def not_empty() -> ValidationFunc:
    """Check that the value is a non-empty string.
    """
    def validate(value: Any) -> None:
        if not isinstance(value, str) or not value:
            raise NotInScopeError(value)
    return validate
