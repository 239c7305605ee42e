"""
Query parameter helpers: sequence expansion for `?` queries and validators.

    from qparams import expand
    sql, args = expand('SELECT * FROM t WHERE id IN (?)', [1, 2])
    cursor.execute(sql, args)

Nothing here talks to a database; `expand` only produces the query string
and argument tuple a driver executes.
"""
__version__ = '0.1.0'

from qparams.exceptions import EmptySequenceError, ExpansionError
from qparams.exceptions import NotInScopeError, QueryParamError
from qparams.exceptions import TooFewPlaceholdersError, TooManyParametersError
from qparams.exceptions import TooManyPlaceholdersError, ValidationError
from qparams.options import ExpandOptions
from qparams.sql import expand
from qparams.types import Valuer
from qparams.utils.strings import clean_strings, string_in_list
from qparams.validation import ValidationFunc, Validations, is_in, max_value
from qparams.validation import min_max, min_value, multi, not_empty

__all__ = [
    'expand',
    'ExpandOptions',
    'Valuer',
    'ValidationFunc',
    'Validations',
    'multi',
    'is_in',
    'min_value',
    'max_value',
    'min_max',
    'not_empty',
    'clean_strings',
    'string_in_list',
    'QueryParamError',
    'ExpansionError',
    'EmptySequenceError',
    'TooManyPlaceholdersError',
    'TooFewPlaceholdersError',
    'TooManyParametersError',
    'ValidationError',
    'NotInScopeError',
]
