"""
Utility functions for numeric and byte-size formatting.

- format_floats: round every value of a list/dict for display, non-finite values become 0.
- format_number: thousands-grouped integer string with optional zero padding.
- to_bytes: convert a value expressed in a unit (kb, mb, ...) to raw bytes.
- format_bytes: pick the most readable unit for a byte count.
"""

import logging
import math
import re
from collections.abc import Mapping
from decimal import Context, Decimal, ROUND_HALF_DOWN
from types import MappingProxyType
from typing import Any, Dict, Iterable, List, Optional, Union

logger = logging.getLogger(__name__)

NumberLike = Union[float, int, Decimal]

UNITS = ("b", "kb", "mb", "gb", "tb", "pb", "eb")

# Decimal: 10³ = 1000, binary: 2¹⁰ = 1024
DECIMAL_MULTIPLES = MappingProxyType({unit: 1000 ** i for i, unit in enumerate(UNITS)})
BINARY_MULTIPLES = MappingProxyType({unit: 1024 ** i for i, unit in enumerate(UNITS)})

# Comma before every run of three digits that ends a digit sequence
THOUSANDS_RE = re.compile(r"\B(?=(\d{3})+(?!\d))")

VALUE_TABLE_OPTIONS = ("base_unit", "decimal", "precision")


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float, Decimal)) and not isinstance(value, bool)


def _is_finite(value: Any) -> bool:
    if not _is_number(value):
        return False
    if isinstance(value, Decimal):
        return value.is_finite()
    if isinstance(value, int):
        return True
    return math.isfinite(value)


def _round_display(value: NumberLike, precision: int) -> float:
    """
    Round a number on its shortest decimal representation.

    Converts via str to avoid binary float artifacts, so 3.1415 is the exact
    tie 3.1415 and not 3.14150000000000018. Ties go towards zero:
    3.1415 -> 3.141 at precision 3, 2.5 -> 2.0 at precision 0. The context
    precision follows the magnitude so huge values never trip
    decimal.InvalidOperation.
    """
    d = value if isinstance(value, Decimal) else Decimal(str(value))
    ctx = Context(prec=max(d.adjusted(), 0) + max(precision, 0) + 2)
    rounded = d.quantize(Decimal(1).scaleb(-precision), rounding=ROUND_HALF_DOWN, context=ctx)
    val = float(rounded)
    if not math.isfinite(val):
        logger.debug(f"Rounded value {value!r} does not fit a float, using 0")
        return 0
    # Normalize negative zero to plain zero for prettier display
    if val == 0.0:
        val = 0.0
    return val


def _format_float(value: Any, precision: int) -> NumberLike:
    if not _is_finite(value):
        logger.debug(f"Non-finite value {value!r} replaced with 0")
        return 0
    return _round_display(value, precision)


def format_floats(
    floats: Union[Mapping, Iterable, None],
    precision: int = 0
) -> Union[Dict[Any, NumberLike], List[NumberLike]]:
    """
    Format a list or dict of floats for display.

    Every finite number is rounded to ``precision`` decimals; anything else
    (NaN, infinity, strings, None, bools) becomes 0. A new container of the
    same shape is returned, the input is left untouched.

    Example:
      format_floats({"foo": 3.14})                     -> {"foo": 3.0}
      format_floats([3.14])                            -> [3.0]
      format_floats({"bar": 10.00})                    -> {"bar": 10.0}
      format_floats({"foo": 3.1415, "bar": 10.00}, 2)  -> {"foo": 3.14, "bar": 10.0}
      format_floats({"foo": NaN, "bar": 3.1415}, 3)    -> {"foo": 0, "bar": 3.141}
    """
    if floats is None:
        return {}
    precision = int(precision or 0)
    if isinstance(floats, Mapping):
        return {key: _format_float(value, precision) for key, value in floats.items()}
    return [_format_float(value, precision) for value in floats]


def _number_to_str(value: NumberLike) -> str:
    # Integral floats render like integers: 1000.0 -> "1000".
    # Other floats keep Python's str(), so 1e-7 renders as "1e-07".
    if isinstance(value, float) and value.is_integer() and abs(value) < 1e21:
        return str(int(value))
    if isinstance(value, Decimal):
        return format(value, "f")
    return str(value)


def format_number(value: Any, padding: int = 0) -> str:
    """
    Format a number with thousands separators and optional zero padding.

    Example:
      format_number(1000)          -> "1,000"
      format_number(1, 2)          -> "01"
      format_number(1, 4)          -> "0001"
      format_number(0, 2)          -> "0"
      format_number(float("nan"))  -> "0"

    Padding only applies to positive values; a zero or negative value that
    is shorter than ``padding`` collapses to "0". Pad zeros are kept out of
    the thousands grouping.
    """
    if not _is_finite(value):
        return "0"

    number = _number_to_str(value)
    pad = ""

    if padding and len(number) < padding:
        if value <= 0:
            return "0"
        pad = "0" * (padding - len(number))

    return pad + THOUSANDS_RE.sub(",", number)


def get_byte_multiples(decimal: bool = False) -> Mapping:
    """Return the read-only unit -> multiplier table, decimal or binary."""
    return DECIMAL_MULTIPLES if decimal else BINARY_MULTIPLES


def to_bytes(value: Any, base_unit: str = "kb", decimal: bool = False) -> NumberLike:
    """
    Convert a value expressed in ``base_unit`` to bytes.

    Example:
      to_bytes(1)                -> 1024
      to_bytes(23, "mb")         -> 24117248
      to_bytes(23, "mb", True)   -> 23000000
      to_bytes(2.3, "mb", True)  -> 2300000.0

    No rounding is applied: fractional values in large units may produce a
    fractional byte count. Unknown units are treated as bytes. Non-numeric
    input yields NaN.
    """
    if not _is_number(value):
        logger.debug(f"Cannot convert non-numeric value {value!r} to bytes")
        return math.nan

    multiple = get_byte_multiples(decimal).get(base_unit)
    if multiple is None:
        logger.debug(f"Unknown byte unit {base_unit!r}, treating value as bytes")
        multiple = 1

    return value * multiple


def _per_unit(value: NumberLike, multiple: int) -> NumberLike:
    try:
        return value / multiple
    except OverflowError:
        # int quantities beyond float range
        logger.debug(f"Quantity {value!r} does not fit a float, using NaN")
        return math.nan


def bytes_to_values(
    value: Any,
    base_unit: str = "b",
    decimal: bool = False,
    precision: int = 2
) -> Dict[str, NumberLike]:
    """
    Express a quantity in every unit from bytes to exabytes.

    ``base_unit`` tells what the quantity is measured in: value=2 with
    base_unit="kb" is calculated as 2048 bytes (2000 in decimal mode).
    Every entry is rounded through format_floats at ``precision``.
    """
    if not _is_number(value):
        logger.debug(f"Non-numeric quantity {value!r}, all units set to 0")
        value = math.nan
    elif base_unit != "b":
        value = to_bytes(value, base_unit, decimal)

    multiples = get_byte_multiples(decimal)
    return format_floats({unit: _per_unit(value, multiple) for unit, multiple in multiples.items()}, precision)


def _value_table_options(options: Optional[Mapping]) -> Dict[str, Any]:
    if not options:
        return {}
    known = {key: options[key] for key in VALUE_TABLE_OPTIONS if key in options}
    ignored = sorted(str(key) for key in options if key not in VALUE_TABLE_OPTIONS)
    if ignored:
        logger.debug(f"Ignoring unknown byte format options: {', '.join(ignored)}")
    return known


def format_bytes(
    value: Any,
    lower: float = 1,
    upper: float = 1000,
    options: Optional[Mapping] = None
) -> Dict[str, Any]:
    """
    Pick the unit that displays a byte count best.

    The first unit (ascending from "b") whose value lies in [lower, upper)
    wins; if none does, bytes are used.

    Example:
      format_bytes(1000, options={"decimal": True})  -> {"key": "kb", "label": "KB", "value": 1.0, ...}
      format_bytes(1000, 10, 10000)                  -> {"key": "b", "label": "B", "value": 1000.0, ...}
      format_bytes(2000, options={"base_unit": "mb", "decimal": True})
                                                     -> {"key": "gb", "label": "GB", "value": 2.0, ...}

    Args:
        value: Quantity to display
        lower: Inclusive lower bound of the readable range
        upper: Exclusive upper bound of the readable range
        options: bytes_to_values options (base_unit, decimal, precision)

    Returns:
        dict with key, label, value and all_values (the full unit table)
    """
    values = bytes_to_values(value, **_value_table_options(options))
    key = next((unit for unit, amount in values.items() if lower <= amount < upper), "b")

    return {
        "key": key,
        "label": key.upper(),
        "value": values[key],
        "all_values": values,
    }
