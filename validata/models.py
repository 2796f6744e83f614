"""
Canonical data models for the validation pipeline.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable

from pydantic import BaseModel, Field


# ─── Enums ──────────────────────────────────────────────────────────────────

class TypeTag(str, Enum):
    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    ARRAY = "array"
    OBJECT = "object"
    FILE = "file"
    NULLISH = "nullish"


SIZED_TYPES = frozenset({TypeTag.STRING, TypeTag.NUMBER, TypeTag.ARRAY, TypeTag.FILE})


# ─── Pipeline values ─────────────────────────────────────────────────────────

@dataclass(frozen=True)
class NormalizedValue:
    type: TypeTag
    value: Any = None

    @property
    def is_nullish(self) -> bool:
        return self.type == TypeTag.NULLISH

    def to_dict(self) -> dict:
        return {"type": self.type.value, "value": self.value}


@dataclass(frozen=True)
class RuleResult:
    passed: bool
    message: str = ""


Evaluator = Callable[[NormalizedValue], RuleResult]


# ─── Report ──────────────────────────────────────────────────────────────────

class ValidationResult(BaseModel):
    """Outcome of one validation call: one message per failing field."""

    model_config = {"frozen": True}

    valid: bool = True
    errors: dict[str, str] = Field(default_factory=dict)
