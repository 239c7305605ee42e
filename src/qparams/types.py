"""
Argument classification for query expansion.

Every argument passed to `expand` is classified exactly once, before the query
text is scanned, into one of two records:

- ScalarArg: bound to a single placeholder as-is
- SequenceArg: expanded into one placeholder per element

Classification rules, in order:
1. Arguments implementing `Valuer` are replaced by the result of `value()`
2. A `weakref.ref` is resolved one level to its referent. A `weakref.proxy`
   is left in place; it reports its referent's class, so it is classified
   and flattened like the referent
3. Byte sequences (bytes, bytearray, memoryview) and strings (str, UserString)
   are scalars
4. Lists, tuples, other `collections.abc.Sequence` types and NumPy, Pandas
   (including extension arrays) and PyArrow arrays are sequences
5. Everything else is a scalar
"""
import logging
import weakref
from abc import ABC, abstractmethod
from collections import UserString
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

import numpy as np
import pandas as pd
import pyarrow as pa
from qparams.exceptions import EmptySequenceError

logger = logging.getLogger(__name__)

__all__ = [
    'Valuer',
    'ScalarArg',
    'SequenceArg',
    'ArgRecord',
    'BYTE_SEQUENCE_TYPES',
    'STRING_TYPES',
    'ARRAY_TYPES',
    'unwrap',
    'is_sequence_argument',
    'classify_argument',
    'classify_arguments',
]

# Byte sequences are valid scalar driver values and are never expanded
BYTE_SEQUENCE_TYPES = (bytes, bytearray, memoryview)

# String-like types are single values even though they are sequences
STRING_TYPES = (str, UserString)

ARRAY_TYPES = (np.ndarray, pd.Series, pd.Index, pd.api.extensions.ExtensionArray,
               pa.Array, pa.ChunkedArray)


class Valuer(ABC):
    """Value accessor capability.

    Argument types that stand in for a driver value (nullable wrappers,
    enums with a database representation, ...) subclass this, or call
    `Valuer.register(cls)`, and implement `value()`. The expander binds what
    `value()` returns instead of the wrapper itself.
    """

    @abstractmethod
    def value(self) -> Any:
        """Return the driver-level value for this object.
        """


@dataclass(frozen=True, slots=True)
class ScalarArg:
    """Argument bound to exactly one placeholder.
    """
    value: Any


@dataclass(frozen=True, slots=True)
class SequenceArg:
    """Argument expanded to `length` placeholders.
    """
    items: Any
    length: int


ArgRecord = ScalarArg | SequenceArg


def unwrap(arg: Any) -> Any:
    """Resolve the value accessor and one level of reference indirection.

    Errors raised by `Valuer.value()` are discarded and the argument
    becomes None.
    """
    if isinstance(arg, Valuer):
        try:
            arg = arg.value()
        except Exception as e:
            logger.debug(f'Discarding {type(arg).__name__}.value() failure: {e}')
            arg = None
    if isinstance(arg, weakref.ref):
        arg = arg()
    return arg


def is_sequence_argument(arg: Any) -> bool:
    """Check if an (already unwrapped) argument expands to several placeholders.
    """
    if isinstance(arg, BYTE_SEQUENCE_TYPES) or isinstance(arg, STRING_TYPES):
        return False
    if isinstance(arg, np.ndarray):
        return arg.ndim >= 1
    return isinstance(arg, (Sequence, *ARRAY_TYPES))


def classify_argument(arg: Any) -> ArgRecord:
    """Classify a single argument.

    Raises EmptySequenceError for a sequence without elements.
    """
    arg = unwrap(arg)
    if not is_sequence_argument(arg):
        return ScalarArg(arg)
    length = len(arg)
    if length == 0:
        raise EmptySequenceError
    return SequenceArg(arg, length)


def classify_arguments(args: tuple | list) -> tuple[list[ArgRecord], bool, int]:
    """Classify all arguments in order.

    Returns
        Tuple of the records, whether any record is a sequence and the total
        number of flattened arguments
    """
    records = []
    any_sequence = False
    flat_count = 0
    for arg in args:
        record = classify_argument(arg)
        if isinstance(record, SequenceArg):
            any_sequence = True
            flat_count += record.length
        else:
            flat_count += 1
        records.append(record)
    return records, any_sequence, flat_count
