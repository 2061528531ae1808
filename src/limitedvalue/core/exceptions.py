"""
Исключения пакета limitedvalue.

Основной контракт не использует исключения для control flow: фабрики
возвращают CreateResult, try_set_* возвращают bool. Исключения поднимаются
только на opt-in границах API (CreateResult.unwrap, PostDisposePolicy.RAISE).
"""


class LimitedValueError(Exception):
    """Базовое исключение пакета."""

    pass


class InvalidBoundsError(LimitedValueError, ValueError):
    """
    Тройка (value, min, max) не удовлетворяет min ≤ value ≤ max.

    Поднимается из CreateResult.unwrap() для неуспешной фабрики.
    """

    pass


class DisposedError(LimitedValueError, RuntimeError):
    """
    Мутация уже освобождённого (disposed) reactive bounded value.

    Поднимается только при PostDisposePolicy.RAISE.
    """

    pass
