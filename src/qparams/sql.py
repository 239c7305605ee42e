"""
Expansion of sequence arguments in `?` parameterized queries.

    >>> expand('SELECT * FROM users WHERE id IN (?) AND status = ?', [1, 2, 3], 'active')
    ('SELECT * FROM users WHERE id IN (?, ?, ?) AND status = ?', (1, 2, 3, 'active'))

The query is scanned once, left to right. Each `?` consumes the next
classified argument: scalars are bound unchanged, sequences become one `?`
per element. The query is not parsed as SQL, so a `?` inside a string
literal or comment counts as a placeholder.
"""
import logging
from typing import Any

from qparams.exceptions import TooFewPlaceholdersError
from qparams.exceptions import TooManyParametersError
from qparams.exceptions import TooManyPlaceholdersError
from qparams.options import ExpandOptions
from qparams.types import ArgRecord, ScalarArg, classify_arguments
from qparams.utils.sequence import append_sequence

logger = logging.getLogger(__name__)

__all__ = ['PLACEHOLDER', 'expand', 'count_placeholders']

PLACEHOLDER = '?'

_EXTRA_PLACEHOLDER = f', {PLACEHOLDER}'


def count_placeholders(sql: str) -> int:
    return sql.count(PLACEHOLDER)


def expand(sql: str, *args: Any, options: ExpandOptions | None = None) -> tuple[str, tuple]:
    """Expand sequence arguments into one placeholder per element.

    When no argument is a sequence the query and arguments are returned
    unchanged. In that case placeholder and argument counts are only
    checked with `ExpandOptions(strict=True)`.

    Parameters
        sql: Query using `?` placeholders
        *args: Positional arguments, scalars or sequences
        options: Expansion options (default: ExpandOptions())

    Returns
        Tuple of the rewritten query and the flattened arguments

    Raises
        EmptySequenceError: A sequence argument has no elements
        TooManyPlaceholdersError: More placeholders than arguments
        TooFewPlaceholdersError: Fewer placeholders than arguments
        TooManyParametersError: Flattened arguments exceed options.max_params
    """
    options = options or ExpandOptions()

    records, any_sequence, flat_count = classify_arguments(args)

    if options.max_params is not None and flat_count > options.max_params:
        raise TooManyParametersError(flat_count, options.max_params)

    if not any_sequence:
        if options.strict:
            _check_placeholder_count(count_placeholders(sql), len(args))
        return sql, args

    new_sql, new_args = _rewrite(sql, records, flat_count)
    logger.debug(f'Expanded {len(args)} arguments to {len(new_args)} parameters')
    return new_sql, new_args


def _check_placeholder_count(placeholders: int, arguments: int) -> None:
    if placeholders > arguments:
        raise TooManyPlaceholdersError
    if placeholders < arguments:
        raise TooFewPlaceholdersError


def _rewrite(sql: str, records: list[ArgRecord], flat_count: int) -> tuple[str, tuple]:
    """Single forward pass over the query and the argument records.

    Text before a scalar placeholder is copied lazily, together with the
    next chunk that ends at a sequence placeholder or the end of the query.
    """
    parts = []
    new_args = []
    copied = 0
    consumed = 0

    pos = sql.find(PLACEHOLDER)
    while pos != -1:
        if consumed >= len(records):
            raise TooManyPlaceholdersError
        record = records[consumed]
        consumed += 1

        if isinstance(record, ScalarArg):
            new_args.append(record.value)
        else:
            parts.append(sql[copied:pos + 1])
            parts.append(_EXTRA_PLACEHOLDER * (record.length - 1))
            append_sequence(new_args, record.items, record.length)
            copied = pos + 1

        pos = sql.find(PLACEHOLDER, pos + 1)

    if consumed < len(records):
        raise TooFewPlaceholdersError

    parts.append(sql[copied:])
    assert len(new_args) == flat_count, f'Flattened {len(new_args)} of {flat_count} arguments'
    return ''.join(parts), tuple(new_args)
