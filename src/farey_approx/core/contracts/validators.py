"""
Approximation Report Contract

Валидация JSON отчёта (вывод CLI --json) против схемы
schema/approximation_report.json, поставляемой внутри пакета.
"""

import json
from pathlib import Path
from typing import Any, Dict, Optional

from jsonschema import Draft202012Validator

REPORT_SCHEMA_PATH = Path(__file__).parent / "schema" / "approximation_report.json"

_report_validator: Optional[Draft202012Validator] = None


def _get_report_validator() -> Draft202012Validator:
    """Валидатор строится при первом вызове; схема проходит meta-validation."""
    global _report_validator
    if _report_validator is None:
        with open(REPORT_SCHEMA_PATH, "r", encoding="utf-8") as f:
            schema = json.load(f)
        Draft202012Validator.check_schema(schema)
        _report_validator = Draft202012Validator(schema)
    return _report_validator


def validate_approximation_report(data: Dict[str, Any]) -> None:
    """
    Валидация approximation_report данных.

    Raises:
        jsonschema.ValidationError: Если данные не соответствуют схеме
        jsonschema.SchemaError: Если сама схема невалидна
    """
    _get_report_validator().validate(data)
