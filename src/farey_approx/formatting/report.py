"""
Report — Машиночитаемый отчёт о результате поиска

Соответствует схеме contracts/schema/approximation_report.json.
"""

from typing import Any, Dict

from farey_approx.formatting.diagram import format_value
from farey_approx.search.engine import SearchResult


def build_report(result: SearchResult) -> Dict[str, Any]:
    """
    Отчёт о результате поиска как JSON-совместимый dict.

    Args:
        result: Результат MediantSearchEngine.search

    Returns:
        dict с полями target, numerator, denominator, value, value_text,
        error, iterations, state
    """
    fraction = result.fraction
    value = fraction.value()
    return {
        "target": result.target,
        "numerator": fraction.numerator,
        "denominator": fraction.denominator,
        "value": value,
        "value_text": format_value(value),
        "error": result.error,
        "iterations": result.iterations,
        "state": result.state.value,
    }
