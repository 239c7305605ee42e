"""
String list helpers.
"""
from collections.abc import Iterable


def clean_strings(values: Iterable[str]) -> list[str]:
    """Strip spaces and tabs from each string, dropping the empty ones.
    """
    return [v for v in (s.strip(' \t') for s in values) if v]


def string_in_list(value: str, values: Iterable[str]) -> bool:
    return any(v == value for v in values)
