"""Basic integer arithmetic."""

__all__ = ["add", "subtract", "multiply", "divide"]


def add(a: int, b: int) -> int:
    """Return the sum of ``a`` and ``b``."""
    return a + b


def subtract(a: int, b: int) -> int:
    """Return ``a`` minus ``b``."""
    return a - b


def multiply(a: int, b: int) -> int:
    """Return the product of ``a`` and ``b``."""
    return a * b


def divide(a: int, b: int) -> int:
    """Divide ``a`` by ``b``, truncating toward zero.

    Raises :class:`ZeroDivisionError` when ``b`` is zero.
    """
    if b == 0:
        raise ZeroDivisionError("cannot divide by zero")
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient