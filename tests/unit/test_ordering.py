"""
Тесты для модуля Ordering

Проверяет:
1. Трёхзначное сравнение и равенство по порядку
2. Проверки диапазона и валидацию тройки
3. Clamp для разных упорядоченных типов
"""

from datetime import date
from decimal import Decimal
from fractions import Fraction

import pytest

from limitedvalue.core.ordering import (
    clamp,
    compare,
    differs,
    in_bounds,
    is_not_above,
    is_not_below,
    is_valid_triple,
)


# =============================================================================
# СРАВНЕНИЕ
# =============================================================================


class TestCompare:
    """Тесты для compare/differs"""

    @pytest.mark.parametrize(
        "a,b,expected",
        [
            (1, 2, -1),
            (2, 1, 1),
            (3, 3, 0),
            (2.0, 2, 0),
            ("a", "b", -1),
            (Decimal("1.10"), Decimal("1.1"), 0),
            (date(2024, 1, 2), date(2024, 1, 1), 1),
        ],
    )
    def test_compare(self, a, b, expected):
        """compare возвращает -1/0/1 для разных упорядоченных типов."""
        assert compare(a, b) == expected

    def test_differs_uses_ordering_not_identity(self):
        """Decimal('1.10') и Decimal('1.1') эквивалентны по порядку."""
        assert not differs(Decimal("1.10"), Decimal("1.1"))
        assert not differs(Fraction(1, 2), 0.5)
        assert differs(1, 2)

    def test_directional_predicates(self):
        """is_not_above / is_not_below включают границу."""
        assert is_not_above(5, 5)
        assert is_not_above(4, 5)
        assert not is_not_above(6, 5)
        assert is_not_below(5, 5)
        assert is_not_below(6, 5)
        assert not is_not_below(4, 5)


# =============================================================================
# ДИАПАЗОНЫ
# =============================================================================


class TestRanges:
    """Тесты для in_bounds/is_valid_triple/clamp"""

    def test_in_bounds_inclusive(self):
        """Обе границы входят в диапазон."""
        assert in_bounds(0, 0, 10)
        assert in_bounds(10, 0, 10)
        assert not in_bounds(-1, 0, 10)
        assert not in_bounds(11, 0, 10)

    @pytest.mark.parametrize(
        "value,lower,upper,expected",
        [
            (5, 0, 10, True),
            (0, 0, 0, True),
            (15, 0, 10, False),
            (-1, 0, 10, False),
            (5, 10, 0, False),
        ],
    )
    def test_is_valid_triple(self, value, lower, upper, expected):
        """Валидация тройки (value, min, max)."""
        assert is_valid_triple(value, lower, upper) is expected

    @pytest.mark.parametrize(
        "value,expected",
        [(-5, 0), (0, 0), (7, 7), (10, 10), (99, 10)],
    )
    def test_clamp(self, value, expected):
        """Clamp к [0, 10]."""
        assert clamp(value, 0, 10) == expected

    def test_clamp_strings(self):
        """Clamp работает для строк (лексикографический порядок)."""
        assert clamp("zebra", "b", "m") == "m"
        assert clamp("a", "b", "m") == "b"
        assert clamp("cat", "b", "m") == "cat"
