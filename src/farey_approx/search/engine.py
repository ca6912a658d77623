"""Mediant Search Engine — бинарный поиск по дереву Штерна-Броко.

Алгоритм:
1. left = floor(x)/1, right = ceil(x)/1
2. candidate = mediant(left, right)
3. |x - candidate| < eps → CONVERGED, возвращаем candidate
4. candidate > x → right = candidate (ищем в левой половине)
5. иначе → left = candidate (ищем в правой половине)
6. повторяем до сходимости или до max_iterations

Сходимость не гарантирована для всех входов: лимит итераций превращает
бесконечный цикл в NonConvergence, checked-сложение превращает
переполнение в ArithmeticOverflow.
"""

import logging
import math
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Final, Optional

from farey_approx.core.domain.fraction import Fraction
from farey_approx.core.errors import ArithmeticOverflow, NonConvergence
from farey_approx.core.math.numerical_safeguards import (
    MACHINE_EPSILON,
    U64_MAX,
    compare_float,
    is_within_epsilon,
    validate_target,
)

logger = logging.getLogger(__name__)


# =============================================================================
# CONSTANTS
# =============================================================================

# Лимит итераций по умолчанию. Число шагов равно сумме неполных частных
# цепной дроби target (0.001 → ~1000 шагов), а не ширине мантиссы.
DEFAULT_MAX_ITERATIONS: Final[int] = 10_000_000


# =============================================================================
# ENUMS
# =============================================================================


class SearchState(str, Enum):
    """Состояние поиска. SEARCHING — начальное и единственное нетерминальное."""

    SEARCHING = "SEARCHING"
    CONVERGED = "CONVERGED"


class BisectionDecision(str, Enum):
    """Решение, принятое на итерации."""

    CONVERGED = "converged"
    NARROW_RIGHT = "narrow_right"  # candidate > target → right = candidate
    NARROW_LEFT = "narrow_left"  # candidate <= target → left = candidate


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class SearchConfig:
    """Конфигурация поиска.

    integer_limit ниже U64_MAX эмулирует более узкое беззнаковое целое
    для числителя и знаменателя.
    """

    max_iterations: int = DEFAULT_MAX_ITERATIONS
    epsilon: float = MACHINE_EPSILON
    integer_limit: int = U64_MAX

    def __post_init__(self):
        if self.max_iterations <= 0:
            raise ValueError(f"max_iterations must be positive, got {self.max_iterations}")
        if not (self.epsilon > 0 and math.isfinite(self.epsilon)):
            raise ValueError(f"epsilon must be positive and finite, got {self.epsilon}")
        if not 0 < self.integer_limit <= U64_MAX:
            raise ValueError(
                f"integer_limit must be in (0, {U64_MAX}], got {self.integer_limit}"
            )


# =============================================================================
# RESULTS
# =============================================================================


@dataclass(frozen=True)
class TraceRecord:
    """Диагностическая запись одной итерации."""

    iteration: int
    left: Fraction
    candidate: Fraction
    candidate_value: float
    right: Fraction
    decision: BisectionDecision


@dataclass(frozen=True)
class SearchResult:
    """Результат успешного поиска."""

    fraction: Fraction
    target: float
    iterations: int
    error: float  # |target - fraction.value()|
    state: SearchState = SearchState.CONVERGED


TraceSink = Callable[[TraceRecord], None]


# =============================================================================
# ENGINE
# =============================================================================


class MediantSearchEngine:
    """Поиск рационального приближения методом mediant-бисекции.

    Trace записи передаются в sink (если задан) строго по порядку итераций,
    по одной на итерацию. Без sink поиск не выполняет I/O.
    """

    def __init__(
        self,
        config: Optional[SearchConfig] = None,
        sink: Optional[TraceSink] = None,
    ):
        """
        Args:
            config: конфигурация поиска (опционально, используется default)
            sink: получатель TraceRecord для каждой итерации
        """
        self.config = config or SearchConfig()
        self.sink = sink

    def search(self, target: float, sink: Optional[TraceSink] = None) -> SearchResult:
        """Приближение target дробью.

        Args:
            target: конечное неотрицательное число, ceil(target) <= integer_limit
            sink: переопределяет sink движка для этого вызова

        Returns:
            SearchResult со сошедшейся дробью

        Raises:
            InvalidInput: target отрицательный, NaN/Inf или вне диапазона
            ArithmeticOverflow: сумма в mediant вышла за integer_limit
            NonConvergence: превышен max_iterations
        """
        emit = sink if sink is not None else self.sink
        limit = self.config.integer_limit
        eps = self.config.epsilon

        target = validate_target(target, limit)
        logger.debug(
            "Searching for %r (max_iterations=%d, epsilon=%r, integer_limit=%d)",
            target, self.config.max_iterations, eps, limit,
        )

        left = Fraction.new(math.floor(target), 1, limit)
        right = Fraction.new(math.ceil(target), 1, limit)

        for iteration in range(1, self.config.max_iterations + 1):
            if left == right:
                # Целый target: mediant(n/1, n/1) = 2n/2 имеет то же значение
                candidate = left
            else:
                try:
                    candidate = left.mediant(right, limit)
                except ArithmeticOverflow:
                    logger.warning(
                        "Overflow at iteration %d between %s and %s", iteration, left, right
                    )
                    raise
            candidate_value = candidate.value()

            if is_within_epsilon(target, candidate_value, eps):
                decision = BisectionDecision.CONVERGED
            elif compare_float(candidate_value, target) > 0:
                decision = BisectionDecision.NARROW_RIGHT
            else:
                decision = BisectionDecision.NARROW_LEFT

            if emit is not None:
                emit(
                    TraceRecord(
                        iteration=iteration,
                        left=left,
                        candidate=candidate,
                        candidate_value=candidate_value,
                        right=right,
                        decision=decision,
                    )
                )

            if decision == BisectionDecision.CONVERGED:
                logger.info(
                    "Converged on %s for %r after %d iterations", candidate, target, iteration
                )
                return SearchResult(
                    fraction=candidate,
                    target=target,
                    iterations=iteration,
                    error=abs(target - candidate_value),
                )

            if decision == BisectionDecision.NARROW_RIGHT:
                right = candidate
            else:
                left = candidate

        logger.warning(
            "No convergence for %r after %d iterations", target, self.config.max_iterations
        )
        raise NonConvergence(target, self.config.max_iterations, left, right)


def search(
    target: float,
    config: Optional[SearchConfig] = None,
    sink: Optional[TraceSink] = None,
) -> SearchResult:
    """Однократный поиск с новым движком.

    Examples:
        >>> search(0.5).fraction
        Fraction(numerator=1, denominator=2)
    """
    return MediantSearchEngine(config, sink).search(target)
