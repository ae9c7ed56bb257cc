"""
Structural diff of two plain dict records.

Only the keys of the first record are walked, so keys that exist only in
the second record are never reported.
"""

import logging
import math
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)

# Marks a key absent from the second record; unequal to any real value
_MISSING = object()


def _is_equal(left: Any, right: Any) -> bool:
    """Structural equality for numbers, strings, bools, lists and nested dicts."""
    if left is _MISSING or right is _MISSING:
        return left is right
    if isinstance(left, bool) or isinstance(right, bool):
        return isinstance(left, bool) and isinstance(right, bool) and left == right
    if isinstance(left, float) and isinstance(right, float) and math.isnan(left) and math.isnan(right):
        return True
    if isinstance(left, dict) or isinstance(right, dict):
        if not (isinstance(left, dict) and isinstance(right, dict)) or left.keys() != right.keys():
            return False
        return all(_is_equal(value, right[key]) for key, value in left.items())
    if isinstance(left, (list, tuple)) or isinstance(right, (list, tuple)):
        if type(left) is not type(right) or len(left) != len(right):
            return False
        return all(_is_equal(a, b) for a, b in zip(left, right))
    return left == right


def diff(obj1: Optional[dict] = None, obj2: Optional[dict] = None) -> Dict[Any, Any]:
    """
    Calculate the differences between two dicts.

    Example:
      diff({"a": 1}, {"a": 2})                  -> {"a": (1, 2)}
      diff({"a": 1}, {"b": 2})                  -> {"a": (1, None)}
      diff({"a": {"a1": 1}}, {"a": {"a1": 2}})  -> {"a": {"a1": (1, 2)}}

    Nested dicts are diffed recursively (a missing or non-dict counterpart
    counts as an empty dict) and dropped when nothing differs. Other values
    are compared structurally and reported as (left, right) tuples; a key
    absent from ``obj2`` never equals a present value, not even None,
    and is reported as None.
    """
    if not isinstance(obj1, dict):
        if obj1 is not None:
            logger.debug(f"Cannot diff non-dict {type(obj1).__name__}, treating it as empty")
        return {}
    if not isinstance(obj2, dict):
        if obj2 is not None:
            logger.debug(f"Comparing against non-dict {type(obj2).__name__}, treating it as empty")
        obj2 = {}

    result = {}
    for key, value in obj1.items():
        other = obj2.get(key, _MISSING)
        if isinstance(value, dict):
            nested = diff(value, other if isinstance(other, dict) else None)
            if nested:
                result[key] = nested
        elif not _is_equal(value, other):
            result[key] = (value, None if other is _MISSING else other)

    return result
