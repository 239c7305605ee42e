"""
Sequence flattening for expanded arguments.
"""
from typing import Any

import numpy as np
import pandas as pd
import pyarrow as pa


def append_sequence(target: list, items: Any, length: int) -> list:
    """Append the elements of a sequence argument to `target` in order.

    Lists and tuples are appended in bulk. NumPy and Pandas arrays go through
    `tolist()` (extension arrays included) and PyArrow arrays through `to_pylist()`, so their elements
    arrive as native Python values. Any other sequence is indexed element by
    element up to `length`.

    Parameters
        target: Output argument list, modified in place
        items: Sequence argument
        length: Number of elements in `items`

    Returns
        The target list
    """
    if isinstance(items, list | tuple):
        target.extend(items)
    elif isinstance(items, np.ndarray | pd.Series | pd.Index | pd.api.extensions.ExtensionArray):
        target.extend(items.tolist())
    elif isinstance(items, pa.Array | pa.ChunkedArray):
        target.extend(items.to_pylist())
    else:
        for i in range(length):
            target.append(items[i])
    return target
