"""
Errors — Иерархия исключений поиска рационального приближения

Все ошибки невосстановимы в рамках одного вызова: без retry, без частичного
результата. Верхний уровень (CLI) перехватывает FareyError и завершает
процесс с ненулевым кодом.

Виды ошибок:
- DivisionByZero: Fraction со знаменателем 0
- ArithmeticOverflow: сумма числителей/знаменателей вышла за u64
- InvalidInput: target отрицательный, NaN/Inf или целая часть > u64
- NonConvergence: превышен лимит итераций поиска
"""

from typing import Optional


class FareyError(Exception):
    """Базовое исключение для всех ошибок farey_approx."""

    pass


class DivisionByZero(FareyError, ZeroDivisionError):
    """
    Попытка построить Fraction с нулевым знаменателем.

    Возникает только в Fraction.new (и транзитивно в mediant).
    """

    def __init__(self, numerator: Optional[int] = None):
        self.numerator = numerator
        super().__init__("division by zero: denominator cannot be zero")


class ArithmeticOverflow(FareyError, OverflowError):
    """
    Результат целочисленной операции не помещается в беззнаковый диапазон.

    Заменяет молчаливое переполнение (wraparound): повреждённая Fraction
    никогда не создаётся.
    """

    def __init__(self, operation: str, value: int, limit: int):
        self.operation = operation
        self.value = value
        self.limit = limit
        super().__init__(
            f"arithmetic overflow: {operation} = {value} exceeds "
            f"unsigned limit {limit}"
        )


class InvalidInput(FareyError, ValueError):
    """Target не является конечным неотрицательным числом в диапазоне u64."""

    pass


class NonConvergence(FareyError):
    """
    Поиск не сошёлся за max_iterations шагов.

    Хранит последние границы (left, right) для диагностики.
    """

    def __init__(self, target: float, max_iterations: int, left=None, right=None):
        self.target = target
        self.max_iterations = max_iterations
        self.left = left
        self.right = right
        bounds = ""
        if left is not None and right is not None:
            bounds = f" (last bounds {left} .. {right})"
        super().__init__(
            f"no convergence for {target!r} after {max_iterations} iterations{bounds}"
        )
