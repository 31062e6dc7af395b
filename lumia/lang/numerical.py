"""Numbers in Lumia are 64-bit floats. Literals are digits and dots, unchecked until they are converted, and values are
displayed in plain positional notation: integral values have no fractional part and there is never an exponent.
"""

import math
from decimal import Decimal

from lumia.lang.error import MalformedLiteral


def number(text):
    """Returns float value of numeric literal text. Raises MalformedLiteral if text is not a valid float, e.g. '1.2.3'
    or '.'.
    """
    try:
        return float(text)
    except ValueError:
        raise MalformedLiteral("'{}' is not a valid number", text) from None


def display(value):
    """Returns str of value as Lumia prints it: 3.0 -> '3', 0.5 -> '0.5', 1.5e-07 -> '0.00000015'."""
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    if math.isnan(value):
        return "NaN"

    text = format(Decimal(repr(value)), "f")  # shortest round-trip digits, positional
    if value.is_integer():
        return text.partition(".")[0]
    return text
