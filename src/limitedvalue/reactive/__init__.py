"""Reactive bounded value — уведомления об изменениях value/min/max."""

from .channel import (
    CallbackObserver,
    ChangeChannel,
    EmptyStream,
    Observer,
    Stream,
    Subscription,
)
from .config import PostDisposePolicy, ReactiveConfig
from .property import LifecycleState, ReactiveBoundedValue

__all__ = [
    "ReactiveBoundedValue",
    "LifecycleState",
    "ReactiveConfig",
    "PostDisposePolicy",
    "ChangeChannel",
    "EmptyStream",
    "Subscription",
    "Observer",
    "CallbackObserver",
    "Stream",
]
