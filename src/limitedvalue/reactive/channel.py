"""
Channel — Канал уведомлений с fan-out на нескольких подписчиков

Минимальный observable-примитив для reactive bounded value:
- subscribe → Subscription (cancellation handle)
- emit → синхронная доставка всем текущим подписчикам
- complete → терминальное событие, канал закрыт навсегда

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. После complete() канал не доставляет on_next и не принимает подписчиков
2. Подписка на закрытый канал сразу получает on_completed
3. Отписка во время emit не ломает текущую доставку (итерация по копии)
4. Исключения наблюдателей пробрасываются вызывающему
"""

import logging
from dataclasses import dataclass
from typing import Callable, Generic, List, Optional, Protocol, TypeVar, Union

logger = logging.getLogger(__name__)

T = TypeVar("T")
T_contra = TypeVar("T_contra", contravariant=True)


# =============================================================================
# OBSERVER
# =============================================================================


class Observer(Protocol[T_contra]):
    """Наблюдатель: получает элементы и сигнал завершения."""

    def on_next(self, item: T_contra) -> None: ...

    def on_completed(self) -> None: ...


@dataclass
class CallbackObserver(Generic[T]):
    """Адаптер callables → Observer."""

    next_fn: Optional[Callable[[T], None]] = None
    completed_fn: Optional[Callable[[], None]] = None

    def on_next(self, item: T) -> None:
        if self.next_fn is not None:
            self.next_fn(item)

    def on_completed(self) -> None:
        if self.completed_fn is not None:
            self.completed_fn()


ObserverLike = Union[Observer[T], Callable[[T], None]]


def as_observer(
    observer: "ObserverLike[T]",
    on_completed: Optional[Callable[[], None]] = None,
) -> Observer[T]:
    """
    Нормализация аргумента subscribe().

    Принимает объект с on_next/on_completed либо callable для on_next.
    """
    if hasattr(observer, "on_next") and hasattr(observer, "on_completed"):
        if on_completed is not None:
            raise TypeError("on_completed must not be passed together with an observer object")
        return observer  # type: ignore[return-value]
    if callable(observer):
        return CallbackObserver(next_fn=observer, completed_fn=on_completed)
    raise TypeError(f"Expected an observer or a callable, got {type(observer).__name__}")


# =============================================================================
# SUBSCRIPTION
# =============================================================================


class Subscription:
    """
    Cancellation handle подписки.

    dispose() идемпотентен и отключает только своего наблюдателя.
    """

    __slots__ = ("_unsubscribe", "_disposed")

    def __init__(self, unsubscribe: Optional[Callable[[], None]] = None):
        self._unsubscribe = unsubscribe
        self._disposed = unsubscribe is None

    @classmethod
    def empty(cls) -> "Subscription":
        """No-op handle (уже отменён)."""
        return cls()

    @property
    def is_disposed(self) -> bool:
        return self._disposed

    def dispose(self) -> None:
        if self._disposed:
            return
        self._disposed = True
        unsubscribe, self._unsubscribe = self._unsubscribe, None
        if unsubscribe is not None:
            unsubscribe()

    def __enter__(self) -> "Subscription":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.dispose()


# =============================================================================
# STREAMS
# =============================================================================


class Stream(Protocol[T]):
    """Всё, на что можно подписаться."""

    def subscribe(
        self,
        observer: "ObserverLike[T]",
        on_completed: Optional[Callable[[], None]] = None,
    ) -> Subscription: ...


class ChangeChannel(Generic[T]):
    """
    Канал с fan-out на несколько подписчиков (hot, без replay).

    Examples:
        >>> channel = ChangeChannel()
        >>> received = []
        >>> sub = channel.subscribe(received.append)
        >>> channel.emit(1)
        >>> sub.dispose()
        >>> channel.emit(2)
        >>> received
        [1]
    """

    def __init__(self, name: str = "channel"):
        self.name = name
        self._observers: List[Observer[T]] = []
        self._completed = False

    @property
    def is_completed(self) -> bool:
        return self._completed

    @property
    def observer_count(self) -> int:
        return len(self._observers)

    def subscribe(
        self,
        observer: "ObserverLike[T]",
        on_completed: Optional[Callable[[], None]] = None,
    ) -> Subscription:
        target = as_observer(observer, on_completed)

        if self._completed:
            target.on_completed()
            return Subscription.empty()

        self._observers.append(target)
        logger.debug("Subscribed to %s (observers=%d)", self.name, len(self._observers))

        def unsubscribe() -> None:
            # Один и тот же observer мог быть подписан несколько раз
            for i, existing in enumerate(self._observers):
                if existing is target:
                    del self._observers[i]
                    logger.debug(
                        "Unsubscribed from %s (observers=%d)",
                        self.name,
                        len(self._observers),
                    )
                    return

        return Subscription(unsubscribe)

    def emit(self, item: T) -> None:
        if self._completed:
            return
        for observer in list(self._observers):
            # complete() мог быть вызван наблюдателем внутри on_next
            if self._completed:
                return
            observer.on_next(item)

    def complete(self) -> None:
        """Терминальное событие. Повторный вызов: no-op."""
        if self._completed:
            return
        self._completed = True
        observers, self._observers = self._observers, []
        logger.debug("Completed %s (notified=%d)", self.name, len(observers))
        for observer in observers:
            observer.on_completed()


class EmptyStream(Generic[T]):
    """Уже завершённый поток: on_completed сразу при подписке, без элементов."""

    def subscribe(
        self,
        observer: "ObserverLike[T]",
        on_completed: Optional[Callable[[], None]] = None,
    ) -> Subscription:
        as_observer(observer, on_completed).on_completed()
        return Subscription.empty()
