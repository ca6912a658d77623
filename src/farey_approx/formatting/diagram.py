"""
Diagram — Текстовое представление дроби и trace-строк

Формат результата:

                          22
    3.142857142857143 ≈ ----
                           7

    $ 3.142857142857143 ≈ frac(22,7) $

Числитель и знаменатель выровнены вправо по правому краю разделителя.
"""

from decimal import Decimal
from typing import Final

from farey_approx.core.domain.fraction import Fraction
from farey_approx.search.engine import TraceRecord

# Количество знаков после запятой до удаления хвостовых нулей
VALUE_DECIMALS: Final[int] = 15

# Символ приближённого равенства
APPROX_SIGN: Final[str] = "≈"


def format_value(value: float) -> str:
    """
    Десятичное значение с 15 знаками без хвостовых нулей и точки.

    Examples:
        >>> format_value(0.5)
        '0.5'
        >>> format_value(4.0)
        '4'
        >>> format_value(1 / 3)
        '0.333333333333333'
    """
    return f"{value:.{VALUE_DECIMALS}f}".rstrip("0").rstrip(".")


def format_float_plain(value: float) -> str:
    """
    Кратчайшее round-trip представление float без экспоненты.

    Examples:
        >>> format_float_plain(0.5)
        '0.5'
        >>> format_float_plain(4.0)
        '4'
        >>> format_float_plain(1e-07)
        '0.0000001'
    """
    text = format(Decimal(repr(value)), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def format_diagram(fraction: Fraction) -> str:
    """
    Многострочная "столбиковая" запись дроби с десятичным значением.

    Args:
        fraction: Дробь для отображения

    Returns:
        Блок текста: пустая строка, числитель, значение ≈ разделитель,
        знаменатель, пустая строка, строка frac(...)
    """
    numerator = fraction.numerator
    denominator = fraction.denominator
    value_str = format_value(fraction.value())

    frac_width = len(str(max(numerator, denominator)))
    sep_width = frac_width + 2
    # Правый край числителя/знаменателя совпадает с правым краем разделителя
    pad = len(value_str) + 3 + sep_width

    return "\n".join(
        [
            "",
            f"{numerator:>{pad}}",
            f"{value_str} {APPROX_SIGN} {'-' * sep_width}",
            f"{denominator:>{pad}}",
            "",
            f"$ {value_str} {APPROX_SIGN} frac({numerator},{denominator}) $",
        ]
    )


def format_trace_line(record: TraceRecord) -> str:
    """Строка trace: $ frac(Ln,Ld) <- M -> frac(Rn,Rd) $"""
    left = record.left
    right = record.right
    return (
        f"$ frac({left.numerator},{left.denominator}) "
        f"<- {format_float_plain(record.candidate_value)} -> "
        f"frac({right.numerator},{right.denominator}) $"
    )
