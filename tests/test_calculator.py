import pytest

from utilkit.calculator import add, divide, multiply, subtract


@pytest.mark.parametrize("a, b, expected", [(1, 2, 3), (-1, -2, -3), (0, 0, 0)])
def test_add(a, b, expected):
    assert add(a, b) == expected


def test_subtract():
    assert subtract(5, 3) == 2


@pytest.mark.parametrize(
    "a, b, expected",
    [(2, 3, 6), (1, 2, 2), (-1, -2, 2), (0, 0, 0), (1, 0, 0), (0, 1, 0)],
)
def test_multiply(a, b, expected):
    assert multiply(a, b) == expected


def test_divide():
    assert divide(6, 3) == 2


def test_divide_truncates_toward_zero():
    assert divide(-7, 2) == -3
    assert divide(7, -2) == -3
    assert divide(-7, -2) == 3


def test_divide_by_zero():
    with pytest.raises(ZeroDivisionError, match="cannot divide by zero"):
        divide(6, 0)