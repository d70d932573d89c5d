"""
Unit tests for the package exception hierarchy.
"""
import pytest

from pascals_triangle import DomainError, NonAdjacentError, OutOfBoundsError, PascalsTriangleError, Row


def test_exceptions_share_a_base_class():
    for exc in (DomainError("x"), NonAdjacentError(), OutOfBoundsError("x")):
        assert isinstance(exc, PascalsTriangleError)


def test_exceptions_keep_builtin_categories():
    """Callers catching builtin categories still see these errors."""
    assert isinstance(NonAdjacentError(), ArithmeticError)
    assert isinstance(DomainError("negative"), ValueError)


def test_exception_messages():
    assert str(OutOfBoundsError("no entry above")) == "OutOfBoundsError: no entry above"
    assert OutOfBoundsError("no entry above").msg == "no entry above"
    assert str(NonAdjacentError()) == "NonAdjacentError: entries not appropriately arranged"
    assert str(NonAdjacentError("custom")) == "NonAdjacentError: custom"


def test_domain_error_is_raised_for_negative_sizes():
    with pytest.raises(DomainError):
        Row(-3)
