"""
BoundedValue — Значение, ограниченное динамическим диапазоном [min, max]

Инвариантный движок:
- set_value: безусловный clamp (никогда не падает)
- try_set_min / try_set_max: условная запись границы (может быть отклонена)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. После любой мутации min ≤ value ≤ max и min ≤ max
2. Отклонённая запись границы не меняет ни одно поле
3. Сдвиг границы внутрь диапазона подтягивает value к новой границе
"""

import logging
from typing import Generic, Iterator, Protocol, TypeVar

from limitedvalue.core.events import BoundsSnapshot
from limitedvalue.core.ordering import (
    clamp,
    compare,
    in_bounds,
    is_not_above,
    is_not_below,
    is_valid_triple,
)
from limitedvalue.core.result import CreateResult

logger = logging.getLogger(__name__)

T = TypeVar("T")


# =============================================================================
# READ-ONLY PROTOCOL
# =============================================================================


class ReadOnlyBoundedValue(Protocol[T]):
    """Read surface bounded value: value/min/max + in_bounded."""

    @property
    def value(self) -> T: ...

    @property
    def min(self) -> T: ...

    @property
    def max(self) -> T: ...

    def in_bounded(self, value: T) -> bool: ...


# =============================================================================
# BOUNDED VALUE
# =============================================================================


class BoundedValue(Generic[T]):
    """
    Mutable значение с инвариантом min ≤ value ≤ max.

    Конструктор не валидирует вход: используйте фабрики create(),
    create_from_range() или create_from().

    Examples:
        >>> hp = BoundedValue.create(10, 0, 20).unwrap()
        >>> hp.set_value(25)
        >>> hp.value
        20
        >>> hp.try_set_max(5)
        True
        >>> hp.value
        5
    """

    __slots__ = ("_value", "_min", "_max")

    def __init__(self, value: T, min_value: T, max_value: T):
        self._value = value
        self._min = min_value
        self._max = max_value

    # -------------------------------------------------------------------------
    # Factories
    # -------------------------------------------------------------------------

    @classmethod
    def create(
        cls, value: T, min_value: T, max_value: T
    ) -> "CreateResult[BoundedValue[T]]":
        """
        Создание из тройки (value, min, max).

        Returns:
            CreateResult с экземпляром, либо failure если тройка невалидна
        """
        if not is_valid_triple(value, min_value, max_value):
            logger.debug(
                "Rejected bounded value: value=%r min=%r max=%r",
                value,
                min_value,
                max_value,
            )
            return CreateResult.failure(
                f"invalid bounds: value={value!r}, min={min_value!r}, max={max_value!r}"
            )
        return CreateResult.success(cls(value, min_value, max_value))

    @classmethod
    def create_from_range(
        cls, min_value: T, max_value: T
    ) -> "CreateResult[BoundedValue[T]]":
        """Создание из пары (min, max); value инициализируется значением max."""
        return cls.create(max_value, min_value, max_value)

    @classmethod
    def create_from(
        cls, origin: ReadOnlyBoundedValue[T]
    ) -> "CreateResult[BoundedValue[T]]":
        """
        Копия другого bounded value.

        Origin считается валидным, повторная проверка не выполняется.
        """
        return CreateResult.success(cls(origin.value, origin.min, origin.max))

    # -------------------------------------------------------------------------
    # Read surface
    # -------------------------------------------------------------------------

    @property
    def value(self) -> T:
        return self._value

    @property
    def min(self) -> T:
        return self._min

    @property
    def max(self) -> T:
        return self._max

    def in_bounded(self, value: T) -> bool:
        return in_bounds(value, self._min, self._max)

    def snapshot(self) -> BoundsSnapshot[T]:
        return BoundsSnapshot(value=self._value, min=self._min, max=self._max)

    # -------------------------------------------------------------------------
    # Write surface
    # -------------------------------------------------------------------------

    def set_value(self, value: T) -> None:
        """Запись value с clamp в [min, max]. Out-of-range не является ошибкой."""
        self._value = clamp(value, self._min, self._max)

    def try_set_max(self, max_value: T) -> bool:
        """
        Запись верхней границы.

        Returns:
            True если max_value ≥ min (value подтягивается вниз при необходимости),
            False иначе (состояние не меняется)
        """
        if not is_not_below(max_value, self._min):
            logger.debug("Rejected max=%r below min=%r", max_value, self._min)
            return False

        self._max = max_value
        if compare(self._value, self._max) > 0:
            self._value = max_value
        return True

    def try_set_min(self, min_value: T) -> bool:
        """
        Запись нижней границы.

        Returns:
            True если min_value ≤ max (value подтягивается вверх при необходимости),
            False иначе (состояние не меняется)
        """
        if not is_not_above(min_value, self._max):
            logger.debug("Rejected min=%r above max=%r", min_value, self._max)
            return False

        self._min = min_value
        if compare(self._value, self._min) < 0:
            self._value = min_value
        return True

    # -------------------------------------------------------------------------
    # Dunder
    # -------------------------------------------------------------------------

    def __iter__(self) -> Iterator[T]:
        # value, min, max = bounded
        return iter((self._value, self._min, self._max))

    def __str__(self) -> str:
        return f"value: {self._value}, min: {self._min}, max: {self._max}"

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(value={self._value!r}, "
            f"min={self._min!r}, max={self._max!r})"
        )
