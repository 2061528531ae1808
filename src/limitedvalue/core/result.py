"""
CreateResult — явный результат фабрик bounded value

Фабрика возвращает либо валидный экземпляр, либо маркер неудачи с причиной.
Отсутствие экземпляра отличается от валидного экземпляра с "нулевым" value
на уровне типа: bool(result) зависит только от успеха создания.
"""

from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

from limitedvalue.core.exceptions import InvalidBoundsError

X = TypeVar("X")


@dataclass(frozen=True)
class CreateResult(Generic[X]):
    """Результат фабрики: instance при успехе, reason при неудаче."""

    instance: Optional[X]
    reason: str = ""

    @classmethod
    def success(cls, instance: X) -> "CreateResult[X]":
        return cls(instance=instance)

    @classmethod
    def failure(cls, reason: str) -> "CreateResult[X]":
        return cls(instance=None, reason=reason)

    @property
    def ok(self) -> bool:
        return self.instance is not None

    def __bool__(self) -> bool:
        return self.ok

    def unwrap(self) -> X:
        """
        Извлечение экземпляра.

        Raises:
            InvalidBoundsError: Если создание не удалось
        """
        if self.instance is None:
            raise InvalidBoundsError(self.reason or "bounded value creation failed")
        return self.instance

    def unwrap_or(self, default: X) -> X:
        return self.instance if self.instance is not None else default
