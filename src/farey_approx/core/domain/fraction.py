"""
Fraction — Неотрицательная рациональная дробь с u64 компонентами

Immutable Pydantic модель: числитель и знаменатель — беззнаковые 64-битные
целые. Знаменатель никогда не равен нулю (проверяется при создании).

Создание:
- Fraction.new(numerator, denominator) — единственная точка валидации
- fraction.mediant(other) — сложение числителей и знаменателей двух дробей

Mediant для a/b и c/d равен (a+c)/(b+d). Это НЕ среднее арифметическое:
если a/b < c/d, то a/b < mediant < c/d. Повторное применение обходит
дерево Штерна-Броко, которое содержит каждое положительное рациональное
число ровно один раз.
"""

from pydantic import BaseModel, Field, field_validator

from farey_approx.core.errors import DivisionByZero
from farey_approx.core.math.numerical_safeguards import (
    U64_MAX,
    checked_add,
    validate_unsigned,
)


class Fraction(BaseModel):
    """
    Дробь numerator/denominator.

    Immutable модель (frozen=True): новые дроби создаются через new() или
    mediant(), существующие никогда не изменяются.
    """

    numerator: int = Field(..., description="Числитель (u64)")
    denominator: int = Field(..., description="Знаменатель (u64, != 0)")

    model_config = {"frozen": True}

    @field_validator("numerator")
    @classmethod
    def validate_numerator_range(cls, v: int) -> int:
        """Числитель в диапазоне [0, U64_MAX]"""
        if v < 0 or v > U64_MAX:
            raise ValueError(f"numerator {v} outside unsigned 64-bit range")
        return v

    @field_validator("denominator")
    @classmethod
    def validate_denominator_range(cls, v: int) -> int:
        """Знаменатель в диапазоне [1, U64_MAX]"""
        if v == 0:
            raise ValueError("denominator cannot be zero")
        if v < 0 or v > U64_MAX:
            raise ValueError(f"denominator {v} outside unsigned 64-bit range")
        return v

    @classmethod
    def new(cls, numerator: int, denominator: int, limit: int = U64_MAX) -> "Fraction":
        """
        Создание дроби с валидацией.

        Args:
            numerator: Числитель
            denominator: Знаменатель
            limit: Верхняя граница для обоих компонентов (default: U64_MAX).
                Меньшее значение эмулирует более узкое беззнаковое целое.

        Returns:
            Новая Fraction

        Raises:
            DivisionByZero: Если denominator == 0
            ArithmeticOverflow: Если компонент > limit
            InvalidInput: Если компонент отрицательный

        Examples:
            >>> Fraction.new(1, 2)
            Fraction(numerator=1, denominator=2)
        """
        if denominator == 0:
            raise DivisionByZero(numerator)
        validate_unsigned(numerator, "numerator", limit)
        validate_unsigned(denominator, "denominator", limit)
        return cls(numerator=numerator, denominator=denominator)

    def value(self) -> float:
        """
        Десятичное значение дроби как float64.

        Оба компонента сначала приводятся к float, затем делятся.
        Используется только для сравнения и форматирования.
        """
        return float(self.numerator) / float(self.denominator)

    def mediant(self, other: "Fraction", limit: int = U64_MAX) -> "Fraction":
        """
        Mediant двух дробей: (a+c)/(b+d).

        Суммы вычисляются с checked-сложением: выход за limit даёт
        ArithmeticOverflow вместо повреждённой дроби.

        Examples:
            >>> Fraction.new(0, 1).mediant(Fraction.new(1, 3))
            Fraction(numerator=1, denominator=4)

        Raises:
            ArithmeticOverflow: Если сумма числителей или знаменателей > limit
            DivisionByZero: Пробрасывается из new() (недостижимо при валидных дробях)
        """
        return Fraction.new(
            checked_add(self.numerator, other.numerator, "numerator sum", limit),
            checked_add(self.denominator, other.denominator, "denominator sum", limit),
            limit,
        )

    def __str__(self) -> str:
        return f"{self.numerator}/{self.denominator}"
