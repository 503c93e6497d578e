"""
Serialisation helpers for engine results.

Convert the dataclasses in `hotel_capital.services.types` into JSON-friendly
dictionaries for REST payloads and the CLI.
"""

from __future__ import annotations

from dataclasses import is_dataclass
from typing import Any, Dict

from hotel_capital.services.types import ComplianceCheckResult, ScoreBreakdown


def _serialize(obj: Any) -> Any:
    """Recursively serialise dataclasses (slots included) into primitives."""
    if is_dataclass(obj) and not isinstance(obj, type):
        return {key: _serialize(getattr(obj, key)) for key in obj.__dataclass_fields__}
    if isinstance(obj, dict):
        return {key: _serialize(value) for key, value in obj.items()}
    if isinstance(obj, (list, tuple)):
        return [_serialize(item) for item in obj]
    return obj


def serialize_compliance_result(result: ComplianceCheckResult) -> Dict[str, Any]:
    """Compliance result including the derived `passed` flag."""

    payload = _serialize(result)
    payload["passed"] = result.passed
    return payload


def serialize_score(breakdown: ScoreBreakdown) -> Dict[str, Any]:
    return breakdown.as_dict()


def serialize(obj: Any) -> Any:
    return _serialize(obj)


__all__ = ["serialize", "serialize_compliance_result", "serialize_score"]
