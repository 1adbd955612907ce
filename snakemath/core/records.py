"""
Conversion of result records to plain Python values.

The presentation layer caches results and encodes them into URLs, so it
needs JSON-safe structures: dicts, lists, floats, ints, strings, None.
"""

import dataclasses
from collections.abc import Mapping
from enum import Enum
from typing import Any

import numpy as np


def to_record(obj: Any) -> Any:
    """
    Recursively convert dataclasses, numpy arrays and numpy scalars to
    dicts, lists and Python numbers.
    """
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return {
            f.name.lstrip('_'): to_record(getattr(obj, f.name))
            for f in dataclasses.fields(obj)
        }
    if isinstance(obj, Enum):
        return obj.value
    if isinstance(obj, np.ndarray):
        return [to_record(v) for v in obj.tolist()]
    if isinstance(obj, np.generic):
        return obj.item()
    if isinstance(obj, Mapping):
        return {str(k): to_record(v) for k, v in obj.items()}
    if isinstance(obj, (list, tuple)):
        return [to_record(v) for v in obj]
    return obj
