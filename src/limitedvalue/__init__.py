"""
limitedvalue — значение в динамическом диапазоне [min, max]

- core: BoundedValue (clamp + валидация границ)
- reactive: ReactiveBoundedValue (каналы value/min/max/any, dispose)
"""

from limitedvalue.core import (
    AnyChangeEvent,
    BoundedValue,
    BoundsSnapshot,
    ChangeKind,
    CreateResult,
    DisposedError,
    InvalidBoundsError,
    LimitedValueError,
    ReadOnlyBoundedValue,
    clamp,
    compare,
    differs,
    in_bounds,
    is_not_above,
    is_not_below,
    is_valid_triple,
)
from limitedvalue.reactive import (
    CallbackObserver,
    ChangeChannel,
    EmptyStream,
    LifecycleState,
    Observer,
    PostDisposePolicy,
    ReactiveBoundedValue,
    ReactiveConfig,
    Stream,
    Subscription,
)

__version__ = "0.1.0"

__all__ = [
    # Core
    "BoundedValue",
    "ReadOnlyBoundedValue",
    "CreateResult",
    "AnyChangeEvent",
    "BoundsSnapshot",
    "ChangeKind",
    "LimitedValueError",
    "InvalidBoundsError",
    "DisposedError",
    "compare",
    "differs",
    "is_not_above",
    "is_not_below",
    "in_bounds",
    "is_valid_triple",
    "clamp",
    # Reactive
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
