"""
Exception classes for query parameter expansion and validation.
"""


class QueryParamError(Exception):
    """Base class for all qparams errors.
    """


class ExpansionError(QueryParamError, ValueError):
    """Error expanding sequence arguments into a query.
    """


class EmptySequenceError(ExpansionError):
    """A sequence argument had no elements.
    """

    def __init__(self, message: str = "empty sequence passed to 'in' query"):
        super().__init__(message)


class TooManyPlaceholdersError(ExpansionError):
    """The query has more placeholders than arguments.
    """

    def __init__(self, message: str = 'number of placeholders exceeds arguments'):
        super().__init__(message)


class TooFewPlaceholdersError(ExpansionError):
    """The query has fewer placeholders than arguments.
    """

    def __init__(self, message: str = 'number of placeholders less than number of arguments'):
        super().__init__(message)


class TooManyParametersError(ExpansionError):
    """The flattened argument list exceeds the configured parameter limit.
    """

    def __init__(self, count: int, limit: int):
        self.count = count
        self.limit = limit
        super().__init__(f'{count} parameters exceeds limit of {limit}')


class ValidationError(QueryParamError, ValueError):
    """Error in input validation.
    """


class NotInScopeError(ValidationError):
    """Value rejected by a validator.
    """

    def __init__(self, value):
        self.value = value
        super().__init__(f'{value}: not in scope')
