"""Конфигурация reactive bounded value."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class PostDisposePolicy(str, Enum):
    """
    Поведение мутаций после dispose().

    - IGNORE: мутация игнорируется (warning в лог), try_set_* возвращают False
    - RAISE: DisposedError
    """

    IGNORE = "IGNORE"
    RAISE = "RAISE"


@dataclass(frozen=True)
class ReactiveConfig:
    """
    Конфигурация ReactiveBoundedValue.

    - post_dispose_policy: реакция на set_value/try_set_* после dispose
    - name: метка экземпляра для логов и repr
    """

    post_dispose_policy: PostDisposePolicy = PostDisposePolicy.IGNORE
    name: Optional[str] = None
