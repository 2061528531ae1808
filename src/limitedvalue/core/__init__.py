"""
Core bounded value: ordering, invariant engine, snapshots, results.

Не зависит от reactive-слоя.
"""

from limitedvalue.core.bounded_value import BoundedValue, ReadOnlyBoundedValue
from limitedvalue.core.events import AnyChangeEvent, BoundsSnapshot, ChangeKind
from limitedvalue.core.exceptions import (
    DisposedError,
    InvalidBoundsError,
    LimitedValueError,
)
from limitedvalue.core.ordering import (
    clamp,
    compare,
    differs,
    in_bounds,
    is_not_above,
    is_not_below,
    is_valid_triple,
)
from limitedvalue.core.result import CreateResult

__all__ = [
    # Bounded value
    "BoundedValue",
    "ReadOnlyBoundedValue",
    "CreateResult",
    # Snapshots
    "AnyChangeEvent",
    "BoundsSnapshot",
    "ChangeKind",
    # Exceptions
    "LimitedValueError",
    "InvalidBoundsError",
    "DisposedError",
    # Ordering
    "compare",
    "differs",
    "is_not_above",
    "is_not_below",
    "in_bounds",
    "is_valid_triple",
    "clamp",
]
