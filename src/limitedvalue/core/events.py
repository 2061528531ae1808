"""
Events — Снапшоты состояния bounded value

Immutable Pydantic модели:
- BoundsSnapshot: атомарный снапшот {value, min, max}
- AnyChangeEvent: payload combined-канала (снапшот + вид изменения)
"""

from enum import Enum
from typing import Generic, TypeVar

from pydantic import BaseModel, Field

from limitedvalue.core.ordering import in_bounds

T = TypeVar("T")


# =============================================================================
# ENUMS
# =============================================================================


class ChangeKind(str, Enum):
    """Какая операция породила событие combined-канала."""

    VALUE = "value"
    MIN = "min"
    MAX = "max"


# =============================================================================
# SNAPSHOT MODELS
# =============================================================================


class BoundsSnapshot(BaseModel, Generic[T]):
    """
    Снапшот состояния bounded value.

    Immutable модель (frozen=True). Удовлетворяет ReadOnlyBoundedValue,
    поэтому может служить origin для create_from().
    """

    value: T = Field(..., description="Текущее значение")
    min: T = Field(..., description="Нижняя граница")
    max: T = Field(..., description="Верхняя граница")

    model_config = {"frozen": True, "arbitrary_types_allowed": True}

    def in_bounded(self, value: T) -> bool:
        return in_bounds(value, self.min, self.max)

    def as_tuple(self) -> tuple[T, T, T]:
        return (self.value, self.min, self.max)


class AnyChangeEvent(BoundsSnapshot[T], Generic[T]):
    """
    Payload combined-канала (observe_any).

    Снапшот берётся после мутации, до доставки подписчикам.
    """

    kind: ChangeKind = Field(..., description="Источник изменения (value/min/max)")
