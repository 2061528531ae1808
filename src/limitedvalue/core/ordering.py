"""
Ordering — Сравнения в полном порядке (total order)

Единственный допустимый способ сравнивать value/min/max внутри пакета.
Использует только операторы `<` и `>` host-типа, поэтому работает для
int, float, Decimal, Fraction, str, date и любых классов с rich comparisons.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. "Равенство" определяется через порядок (compare == 0), а не через `==`/`is`
2. Валидация тройки (value, min, max) проверяет min ≤ max с обеих сторон
"""

from typing import Any, Protocol, TypeVar


class SupportsOrdering(Protocol):
    """Тип с полным порядком (достаточно `<` и `>`)."""

    def __lt__(self, other: Any) -> bool: ...

    def __gt__(self, other: Any) -> bool: ...


T = TypeVar("T", bound=SupportsOrdering)


# =============================================================================
# БАЗОВОЕ СРАВНЕНИЕ
# =============================================================================


def compare(a: T, b: T) -> int:
    """
    Трёхзначное сравнение в полном порядке.

    Returns:
        -1 если a < b
         0 если a и b эквивалентны по порядку
        +1 если a > b

    Examples:
        >>> compare(1, 2)
        -1
        >>> compare(2.0, 2)
        0
        >>> compare("b", "a")
        1
    """
    if a < b:
        return -1
    if a > b:
        return 1
    return 0


def differs(a: T, b: T) -> bool:
    """
    True если значения различаются по порядку.

    Examples:
        >>> differs(5, 5.0)
        False
        >>> differs(5, 6)
        True
    """
    return compare(a, b) != 0


def is_not_above(value: T, upper: T) -> bool:
    """value ≤ upper."""
    return compare(value, upper) <= 0


def is_not_below(value: T, lower: T) -> bool:
    """value ≥ lower."""
    return compare(value, lower) >= 0


# =============================================================================
# ДИАПАЗОНЫ
# =============================================================================


def in_bounds(value: T, lower: T, upper: T) -> bool:
    """
    Проверка lower ≤ value ≤ upper.

    Examples:
        >>> in_bounds(5, 0, 10)
        True
        >>> in_bounds(11, 0, 10)
        False
    """
    return is_not_below(value, lower) and is_not_above(value, upper)


def is_valid_triple(value: T, lower: T, upper: T) -> bool:
    """
    Валидация тройки (value, min, max) перед созданием bounded value.

    Порядок границ проверяется с обеих сторон (upper ≥ lower и lower ≤ upper):
    для нестандартных реализаций сравнения эти условия могут расходиться.

    Examples:
        >>> is_valid_triple(5, 0, 10)
        True
        >>> is_valid_triple(15, 0, 10)
        False
        >>> is_valid_triple(5, 10, 0)
        False
    """
    return (
        in_bounds(value, lower, upper)
        and is_not_below(upper, lower)
        and is_not_above(lower, upper)
    )


def clamp(value: T, lower: T, upper: T) -> T:
    """
    Ограничение значения диапазоном [lower, upper].

    Нижняя граница проверяется первой.

    Examples:
        >>> clamp(5, 0, 10)
        5
        >>> clamp(-1, 0, 10)
        0
        >>> clamp(15, 0, 10)
        10
    """
    if not is_not_below(value, lower):
        return lower
    if not is_not_above(value, upper):
        return upper
    return value
