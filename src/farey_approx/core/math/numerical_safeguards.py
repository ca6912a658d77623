"""
Numerical Safeguards — Safe Integer & Float Primitives

Модуль обеспечивает численную корректность mediant-поиска:
- Беззнаковый 64-битный диапазон и checked-сложение без wraparound
- NaN/Inf проверки для target
- Сравнение float с машинной точностью (критерий сходимости)
- Валидация target до инициализации границ

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Переполнение никогда не происходит молча (ArithmeticOverflow)
2. NaN/Inf и отрицательные target отклоняются до начала поиска (InvalidInput)
3. Все операции детерминированы и воспроизводимы
"""

import math
import numbers
import sys
from typing import Final

from farey_approx.core.errors import ArithmeticOverflow, InvalidInput

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Ширина беззнакового целого для числителя и знаменателя
U64_BITS: Final[int] = 64

# Максимальное значение u64: 2**64 - 1
U64_MAX: Final[int] = (1 << U64_BITS) - 1

# Машинный epsilon для float64 (2**-52)
MACHINE_EPSILON: Final[float] = sys.float_info.epsilon


def unsigned_limit(bits: int) -> int:
    """
    Максимальное значение беззнакового целого заданной ширины.

    Examples:
        >>> unsigned_limit(8)
        255
        >>> unsigned_limit(64) == U64_MAX
        True
    """
    if bits <= 0:
        raise ValueError(f"bits must be positive, got {bits}")
    return (1 << bits) - 1


# =============================================================================
# CHECKED ARITHMETIC
# =============================================================================


def validate_unsigned(value: int, name: str, limit: int = U64_MAX) -> int:
    """
    Проверка, что значение помещается в беззнаковый диапазон [0, limit].

    Args:
        value: Проверяемое целое
        name: Имя величины (для сообщения об ошибке)
        limit: Верхняя граница диапазона (default: U64_MAX)

    Returns:
        value без изменений

    Raises:
        ArithmeticOverflow: Если value > limit
        InvalidInput: Если value < 0
    """
    if value < 0:
        raise InvalidInput(f"{name} must be non-negative, got {value}")
    if value > limit:
        raise ArithmeticOverflow(name, value, limit)
    return value


def checked_add(a: int, b: int, name: str = "sum", limit: int = U64_MAX) -> int:
    """
    Сложение беззнаковых целых с обнаружением переполнения.

    Python int не переполняется, поэтому результат сравнивается с limit явно.

    Examples:
        >>> checked_add(2, 3)
        5
        >>> checked_add(U64_MAX, 1)  # doctest: +SKIP
        Traceback (most recent call last):
            ...
        ArithmeticOverflow: ...
    """
    return validate_unsigned(a + b, name, limit)


# =============================================================================
# FLOAT ПРОВЕРКИ И СРАВНЕНИЯ
# =============================================================================


def is_valid_float(value: float) -> bool:
    """True если значение конечное (не NaN, не Inf)."""
    return math.isfinite(value)


def is_within_epsilon(a: float, b: float, eps: float = MACHINE_EPSILON) -> bool:
    """
    Строгое сравнение |a - b| < eps.

    Критерий сходимости поиска. В отличие от math.isclose, допуск
    абсолютный и строгий: для |target| >= 2 фактически требуется точное
    совпадение float.

    Examples:
        >>> is_within_epsilon(0.5, 0.5)
        True
        >>> is_within_epsilon(1.0, 1.0 + 2 * MACHINE_EPSILON)
        False
    """
    return abs(a - b) < eps


def compare_float(a: float, b: float) -> int:
    """
    Сравнение двух float без допуска.

    Returns:
        -1 если a < b, 0 если a == b, +1 если a > b
    """
    if a < b:
        return -1
    if a > b:
        return 1
    return 0


# =============================================================================
# ВАЛИДАЦИЯ TARGET
# =============================================================================


def validate_target(value: float, limit: int = U64_MAX) -> float:
    """
    Валидация target до инициализации границ поиска.

    Args:
        value: Приближаемое число
        limit: Максимально допустимая целая часть (default: U64_MAX)

    Returns:
        value как float

    Raises:
        InvalidInput: Если value не число, NaN/Inf, отрицательное,
            не представимо как float, или ceil(value) > limit
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise InvalidInput(f"target must be a real number, got {value!r}")

    try:
        value = float(value)
    except OverflowError as e:
        raise InvalidInput(f"target {value!r} is out of float range") from e

    if not is_valid_float(value):
        raise InvalidInput(f"target must be finite (not NaN/Inf), got {value}")

    if value < 0:
        raise InvalidInput(f"target must be non-negative, got {value}")

    if math.ceil(value) > limit:
        raise InvalidInput(
            f"target integer part must fit in unsigned limit {limit}, got {value}"
        )

    return value
