"""
ReactiveBoundedValue — Bounded value с уведомлениями об изменениях

Композиция поверх BoundedValue (не наследование): все мутации сначала
выполняются во внутреннем экземпляре, затем сравниваются старое и новое
состояние, и только после этого принимается решение об уведомлении.

Каналы:
- value  (subscribe)   : replay-latest, новый подписчик сразу получает value
- min    (observe_min) : только будущие изменения
- max    (observe_max) : только будущие изменения
- any    (observe_any) : AnyChangeEvent на любое изменение

Lifecycle: ACTIVE → DISPOSED (терминальное, один переход, идемпотентно).

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Порядок доставки: специфичный канал, затем combined
2. Уведомление только если значение изменилось по порядку или force_notify
3. После dispose ни один канал не эмитит, каналы не пересоздаются
"""

import logging
from enum import Enum
from typing import Callable, Dict, Generic, Iterator, Optional, TypeVar

from limitedvalue.core.bounded_value import BoundedValue, ReadOnlyBoundedValue
from limitedvalue.core.events import AnyChangeEvent, BoundsSnapshot, ChangeKind
from limitedvalue.core.exceptions import DisposedError
from limitedvalue.core.ordering import differs
from limitedvalue.core.result import CreateResult
from limitedvalue.reactive.channel import (
    ChangeChannel,
    EmptyStream,
    ObserverLike,
    Stream,
    Subscription,
    as_observer,
)
from limitedvalue.reactive.config import PostDisposePolicy, ReactiveConfig

logger = logging.getLogger(__name__)

T = TypeVar("T")


class LifecycleState(str, Enum):
    """Состояние жизненного цикла reactive bounded value."""

    ACTIVE = "ACTIVE"
    DISPOSED = "DISPOSED"


class ReactiveBoundedValue(Generic[T]):
    """
    Reactive bounded value.

    Владеет внутренним BoundedValue (не отдаётся наружу).

    Examples:
        >>> hp = ReactiveBoundedValue.create(7, 0, 10).unwrap()
        >>> seen = []
        >>> sub = hp.subscribe(seen.append)
        >>> hp.set_value(12)
        >>> seen
        [7, 10]
    """

    def __init__(self, inner: BoundedValue[T], config: Optional[ReactiveConfig] = None):
        """
        Args:
            inner: Исходный bounded value (копируется, вызывающий не держит ссылку
                на внутреннее состояние)
            config: Конфигурация (default: ReactiveConfig())
        """
        self.config = config or ReactiveConfig()
        self._inner = BoundedValue.create_from(inner).unwrap()
        self._state = LifecycleState.ACTIVE

        label = self.config.name or type(self).__name__
        self._value_changed: ChangeChannel[T] = ChangeChannel(f"{label}.value")
        self._min_changed: ChangeChannel[T] = ChangeChannel(f"{label}.min")
        self._max_changed: ChangeChannel[T] = ChangeChannel(f"{label}.max")
        self._any_changed: ChangeChannel[AnyChangeEvent[T]] = ChangeChannel(f"{label}.any")

        self._channels: Dict[ChangeKind, ChangeChannel[T]] = {
            ChangeKind.VALUE: self._value_changed,
            ChangeKind.MIN: self._min_changed,
            ChangeKind.MAX: self._max_changed,
        }

    # =========================================================================
    # FACTORIES
    # =========================================================================

    @classmethod
    def create(
        cls,
        value: T,
        min_value: T,
        max_value: T,
        config: Optional[ReactiveConfig] = None,
    ) -> "CreateResult[ReactiveBoundedValue[T]]":
        """Создание из тройки (value, min, max) с валидацией BoundedValue."""
        return cls._wrap(BoundedValue.create(value, min_value, max_value), config)

    @classmethod
    def create_from_range(
        cls,
        min_value: T,
        max_value: T,
        config: Optional[ReactiveConfig] = None,
    ) -> "CreateResult[ReactiveBoundedValue[T]]":
        """Создание из пары (min, max); value = max."""
        return cls._wrap(BoundedValue.create_from_range(min_value, max_value), config)

    @classmethod
    def create_from(
        cls,
        origin: ReadOnlyBoundedValue[T],
        config: Optional[ReactiveConfig] = None,
    ) -> "CreateResult[ReactiveBoundedValue[T]]":
        """Копия состояния origin (без повторной валидации)."""
        return cls._wrap(BoundedValue.create_from(origin), config)

    @classmethod
    def _wrap(
        cls,
        result: "CreateResult[BoundedValue[T]]",
        config: Optional[ReactiveConfig],
    ) -> "CreateResult[ReactiveBoundedValue[T]]":
        if not result.ok:
            return CreateResult.failure(result.reason)
        return CreateResult.success(cls(result.unwrap(), config))

    # =========================================================================
    # READ SURFACE
    # =========================================================================

    @property
    def value(self) -> T:
        return self._inner.value

    @property
    def min(self) -> T:
        return self._inner.min

    @property
    def max(self) -> T:
        return self._inner.max

    @property
    def has_value(self) -> bool:
        return True

    @property
    def state(self) -> LifecycleState:
        return self._state

    @property
    def is_disposed(self) -> bool:
        return self._state is LifecycleState.DISPOSED

    def in_bounded(self, value: T) -> bool:
        return self._inner.in_bounded(value)

    def snapshot(self) -> BoundsSnapshot[T]:
        return self._inner.snapshot()

    # =========================================================================
    # WRITE SURFACE
    # =========================================================================

    def set_value(self, value: T, force_notify: bool = False) -> None:
        """
        Запись value с clamp.

        Args:
            value: Новое значение (out-of-range → ближайшая граница)
            force_notify: Эмитить даже если значение не изменилось
        """
        if not self._accepts_mutation("set_value"):
            return

        previous = self._inner.value
        self._inner.set_value(value)
        if force_notify or differs(previous, self._inner.value):
            self._notify(ChangeKind.VALUE)

    def try_set_max(self, max_value: T, force_notify: bool = False) -> bool:
        """
        Запись верхней границы.

        Returns:
            True при успехе; False если max_value < min (без уведомлений)
        """
        if not self._accepts_mutation("try_set_max"):
            return False

        previous = self._inner.max
        if not self._inner.try_set_max(max_value):
            return False
        if force_notify or differs(previous, self._inner.max):
            self._notify(ChangeKind.MAX)
        return True

    def try_set_min(self, min_value: T, force_notify: bool = False) -> bool:
        """
        Запись нижней границы.

        Returns:
            True при успехе; False если min_value > max (без уведомлений)
        """
        if not self._accepts_mutation("try_set_min"):
            return False

        previous = self._inner.min
        if not self._inner.try_set_min(min_value):
            return False
        if force_notify or differs(previous, self._inner.min):
            self._notify(ChangeKind.MIN)
        return True

    # =========================================================================
    # REACTIVE SURFACE
    # =========================================================================

    def subscribe(
        self,
        observer: "ObserverLike[T]",
        on_completed: Optional[Callable[[], None]] = None,
    ) -> Subscription:
        """
        Подписка на канал value с replay текущего значения.

        Новый подписчик синхронно получает текущее value до любых
        последующих изменений. После dispose сразу on_completed.
        """
        target = as_observer(observer, on_completed)

        if self.is_disposed:
            target.on_completed()
            return Subscription.empty()

        target.on_next(self._inner.value)
        return self._value_changed.subscribe(target)

    def observe_min(self) -> Stream[T]:
        if self.is_disposed:
            return EmptyStream()
        return self._min_changed

    def observe_max(self) -> Stream[T]:
        if self.is_disposed:
            return EmptyStream()
        return self._max_changed

    def observe_any(self) -> Stream[AnyChangeEvent[T]]:
        if self.is_disposed:
            return EmptyStream()
        return self._any_changed

    # =========================================================================
    # LIFECYCLE
    # =========================================================================

    def dispose(self) -> None:
        """Перевод в DISPOSED и завершение всех каналов. Повторный вызов: no-op."""
        if self.is_disposed:
            return

        self._state = LifecycleState.DISPOSED
        logger.debug("Disposing %r", self)

        self._value_changed.complete()
        self._min_changed.complete()
        self._max_changed.complete()
        self._any_changed.complete()

    def __enter__(self) -> "ReactiveBoundedValue[T]":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.dispose()

    # =========================================================================
    # INTERNAL
    # =========================================================================

    def _accepts_mutation(self, operation: str) -> bool:
        if not self.is_disposed:
            return True

        if self.config.post_dispose_policy is PostDisposePolicy.RAISE:
            raise DisposedError(f"{operation} called on disposed {self!r}")

        logger.warning("Ignored %s on disposed %r", operation, self)
        return False

    def _notify(self, kind: ChangeKind) -> None:
        """Единая точка диспетчеризации: специфичный канал, затем combined."""
        value, min_value, max_value = self._inner
        event = AnyChangeEvent(value=value, min=min_value, max=max_value, kind=kind)

        payload = {
            ChangeKind.VALUE: value,
            ChangeKind.MIN: min_value,
            ChangeKind.MAX: max_value,
        }[kind]

        self._channels[kind].emit(payload)
        self._any_changed.emit(event)

    # =========================================================================
    # DUNDER
    # =========================================================================

    def __iter__(self) -> Iterator[T]:
        return iter(self._inner)

    def __str__(self) -> str:
        return str(self._inner)

    def __repr__(self) -> str:
        label = f" name={self.config.name!r}" if self.config.name else ""
        return (
            f"<{type(self).__name__}{label} value={self.value!r} "
            f"min={self.min!r} max={self.max!r} state={self._state.value}>"
        )
