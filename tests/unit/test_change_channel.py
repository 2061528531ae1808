"""
Тесты для канала уведомлений (ChangeChannel / Subscription / EmptyStream)

Проверяет:
1. Fan-out на нескольких подписчиков
2. Отписку (только свой наблюдатель)
3. Завершение канала и подписку на закрытый канал
4. Завершение канала изнутри on_next
5. Адаптацию callables и проброс исключений
"""

import pytest

from limitedvalue.reactive.channel import (
    CallbackObserver,
    ChangeChannel,
    EmptyStream,
    Subscription,
)


class Recorder:
    """Наблюдатель, записывающий всё полученное (в порядке событий)"""

    def __init__(self):
        self.items: list = []
        self.completed = 0
        self.log: list = []

    def on_next(self, item):
        self.items.append(item)
        self.log.append(("next", item))

    def on_completed(self):
        self.completed += 1
        self.log.append(("completed",))


# =============================================================================
# FAN-OUT
# =============================================================================


class TestChangeChannel:
    """Тесты для ChangeChannel"""

    def test_emit_reaches_all_observers_in_order(self):
        """Каждый подписчик получает все элементы по порядку."""
        channel = ChangeChannel()
        first, second = Recorder(), Recorder()
        channel.subscribe(first)
        channel.subscribe(second)

        channel.emit(1)
        channel.emit(2)

        assert first.items == [1, 2]
        assert second.items == [1, 2]
        assert channel.observer_count == 2

    def test_no_replay_for_late_subscriber(self):
        """Поздний подписчик не получает прошлые элементы."""
        channel = ChangeChannel()
        channel.emit(1)
        late = Recorder()
        channel.subscribe(late)

        assert late.items == []

    def test_dispose_subscription_stops_only_that_observer(self):
        """Отписка отключает только своего наблюдателя."""
        channel = ChangeChannel()
        kept, dropped = Recorder(), Recorder()
        channel.subscribe(kept)
        subscription = channel.subscribe(dropped)

        subscription.dispose()
        channel.emit("x")

        assert kept.items == ["x"]
        assert dropped.items == []
        assert subscription.is_disposed

    def test_subscription_dispose_is_idempotent(self):
        """Повторный dispose подписки не снимает чужую подписку."""
        channel = ChangeChannel()
        observer = Recorder()
        channel.subscribe(observer)
        subscription = channel.subscribe(observer)

        subscription.dispose()
        subscription.dispose()
        channel.emit(1)

        # Первая подписка того же наблюдателя остаётся
        assert observer.items == [1]

    def test_unsubscribe_during_emit(self):
        """Отписка во время emit действует со следующего элемента."""
        channel = ChangeChannel()
        later = Recorder()
        subscriptions = []

        def drop_later(item):
            subscriptions[1].dispose()

        subscriptions.append(channel.subscribe(drop_later))
        subscriptions.append(channel.subscribe(later))

        channel.emit(1)
        channel.emit(2)

        assert later.items == [1]

    def test_callable_observer(self):
        """subscribe(on_next, on_completed) с callables."""
        channel = ChangeChannel()
        received, completions = [], []
        channel.subscribe(received.append, lambda: completions.append(True))

        channel.emit(5)
        channel.complete()

        assert received == [5]
        assert completions == [True]

    def test_observer_with_extra_on_completed_rejected(self):
        """Observer-объект + отдельный on_completed → TypeError."""
        with pytest.raises(TypeError):
            ChangeChannel().subscribe(Recorder(), lambda: None)

    def test_non_callable_rejected(self):
        """Не observer и не callable → TypeError."""
        with pytest.raises(TypeError):
            ChangeChannel().subscribe(42)

    def test_observer_exception_propagates(self):
        """Исключение наблюдателя доходит до вызывающего emit."""
        channel = ChangeChannel()

        def boom(item):
            raise RuntimeError("observer failed")

        channel.subscribe(boom)
        with pytest.raises(RuntimeError, match="observer failed"):
            channel.emit(1)


# =============================================================================
# ЗАВЕРШЕНИЕ
# =============================================================================


class TestCompletion:
    """Тесты complete() и закрытых потоков"""

    def test_complete_notifies_once_and_clears(self):
        """complete() уведомляет один раз и очищает подписчиков."""
        channel = ChangeChannel()
        observer = Recorder()
        channel.subscribe(observer)

        channel.complete()
        channel.complete()

        assert observer.completed == 1
        assert channel.is_completed
        assert channel.observer_count == 0

    def test_emit_after_complete_ignored(self):
        """emit после complete() ничего не доставляет."""
        channel = ChangeChannel()
        observer = Recorder()
        channel.subscribe(observer)
        channel.complete()

        channel.emit(1)

        assert observer.items == []

    def test_complete_from_on_next_stops_delivery(self):
        """complete() внутри on_next: остальные получают только on_completed."""
        channel = ChangeChannel()
        first, last = Recorder(), Recorder()
        channel.subscribe(first)
        channel.subscribe(lambda item: channel.complete())
        channel.subscribe(last)

        channel.emit(1)

        assert first.log == [("next", 1), ("completed",)]
        assert last.log == [("completed",)]
        assert channel.observer_count == 0

    def test_subscribe_after_complete_completes_immediately(self):
        """Подписка на закрытый канал сразу получает on_completed."""
        channel = ChangeChannel()
        channel.complete()
        observer = Recorder()

        subscription = channel.subscribe(observer)

        assert observer.completed == 1
        assert subscription.is_disposed
        assert channel.observer_count == 0

    def test_empty_stream(self):
        """EmptyStream: on_completed без элементов."""
        observer = Recorder()

        subscription = EmptyStream().subscribe(observer)

        assert observer.items == []
        assert observer.completed == 1
        assert subscription.is_disposed


class TestSubscription:
    """Тесты cancellation handle"""

    def test_empty_handle_is_noop(self):
        """Subscription.empty() уже отменена."""
        handle = Subscription.empty()

        handle.dispose()
        assert handle.is_disposed

    def test_context_manager_disposes(self):
        """with-блок отписывает на выходе."""
        channel = ChangeChannel()
        observer = CallbackObserver(next_fn=lambda item: None)

        with channel.subscribe(observer):
            assert channel.observer_count == 1

        assert channel.observer_count == 0
