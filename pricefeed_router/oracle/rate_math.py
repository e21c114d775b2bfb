"""
Fixed-point rate arithmetic.

Raw prices are integers carrying an implicit number of decimals (their
precision). Composing and rescaling them is done entirely in integers:

- A 10^36 scaling buffer is multiplied in before any division so that no
  significant digit is lost to an early truncation.
- Every division truncates toward zero. Requesting fewer decimals than the
  source carries drops the excess digits (never rounds up); requesting more
  pads with zeros exactly.
- Divisor exponents are checked: a negative power of ten would silently turn
  into a float, so it raises ScalingError instead.

Python integers never overflow, so unlike a 256-bit implementation there is
no intermediate range check; results are pinned by worked examples in tests.
"""

from .errors import ScalingError

SCALE_BUFFER_EXPONENT = 36
SCALE_BUFFER = 10**SCALE_BUFFER_EXPONENT


def _pow10(exponent: int) -> int:
    if exponent < 0:
        raise ScalingError(f"Divisor exponent would be negative ({exponent})")
    return 10**exponent


def rescale(*, value: int, precision: int, decimals: int) -> int:
    """
    Rescale a single price from its precision to the requested decimals.

    Formula: value * 10^36 / 10^(36 + precision - decimals)

    Args:
        value: Raw price at `precision` decimals
        precision: Decimals of the raw price
        decimals: Decimals of the result

    Returns:
        Price at `decimals` decimals
    """
    divisor = _pow10(SCALE_BUFFER_EXPONENT + precision - decimals)
    return value * SCALE_BUFFER // divisor


def compose_direct(
    *,
    base_value: int,
    base_precision: int,
    quote_value: int,
    quote_precision: int,
    decimals: int,
) -> int:
    """
    Compose BASE/THIRD with THIRD/QUOTE into BASE/QUOTE.

    Formula: base * quote * 10^36 / 10^(36 + bp + qp - decimals)

    Returns:
        BASE/QUOTE rate at `decimals` decimals
    """
    divisor = _pow10(SCALE_BUFFER_EXPONENT + base_precision + quote_precision - decimals)
    return base_value * quote_value * SCALE_BUFFER // divisor


def compose_inverted(
    *,
    base_value: int,
    base_precision: int,
    quote_value: int,
    quote_precision: int,
    decimals: int,
) -> int:
    """
    Compose BASE/THIRD with QUOTE/THIRD into BASE/QUOTE.

    The second hop is used as a divider, which is equivalent to multiplying
    by THIRD/QUOTE.

    Formula: (10^36 * base / quote) / 10^(36 + bp - qp - decimals)

    Returns:
        BASE/QUOTE rate at `decimals` decimals

    Raises:
        ScalingError: If the quote value is zero or the exponent goes negative
    """
    if quote_value == 0:
        raise ScalingError("Cannot divide by a zero quote price")
    divisor = _pow10(SCALE_BUFFER_EXPONENT + base_precision - quote_precision - decimals)
    return (SCALE_BUFFER * base_value // quote_value) // divisor
