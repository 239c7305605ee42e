from dataclasses import dataclass

__all__ = ['ExpandOptions']


@dataclass
class ExpandOptions:
    """Options

    - strict: Also validate placeholder/argument counts when no argument
      needs expansion (default: False, the query is returned untouched)
    - max_params: Maximum number of flattened parameters a single query may
      carry, e.g. 2100 for SQL Server (default: None, unlimited)
    """
    strict: bool = False
    max_params: int | None = None

    def __post_init__(self):
        if not isinstance(self.strict, bool):
            raise ValueError(f'strict must be a bool (not {self.strict!r})')
        if self.max_params is not None:
            if isinstance(self.max_params, bool) or not isinstance(self.max_params, int):
                raise ValueError(f'max_params must be an int (not {self.max_params!r})')
            if self.max_params < 1:
                raise ValueError(f'max_params must be positive (not {self.max_params})')
