# domain/steps/base.py
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List


class StepType(str, Enum):
    ACTION = "action"
    VALIDATION = "validation"


class FieldType(str, Enum):
    STRING = "string"
    NUMERIC = "numeric"
    MAP = "map"
    ANYSCALAR = "anyscalar"


class Optionality(str, Enum):
    REQUIRED = "required"
    OPTIONAL = "optional"


@dataclass(frozen=True)
class FieldDefinition:
    key: str
    type: FieldType
    description: str = ""
    optionality: Optionality = Optionality.REQUIRED


@dataclass(frozen=True)
class RecordDefinition:
    id: str
    fields: List[FieldDefinition] = field(default_factory=list)
    dynamic_fields: bool = False
    type: str = "keyvalue"


@dataclass(frozen=True)
class StepDefinition:
    step_id: str
    name: str
    expression: str
    type: StepType
    expected_fields: List[FieldDefinition] = field(default_factory=list)
    expected_records: List[RecordDefinition] = field(default_factory=list)

    def required_keys(self) -> List[str]:
        return [f.key for f in self.expected_fields if f.optionality is Optionality.REQUIRED]

    def missing_keys(self, data: Dict[str, Any]) -> List[str]:
        # 空文字も未指定扱い
        return [k for k in self.required_keys() if data.get(k) is None or data.get(k) == ""]



@dataclass(frozen=True)
class Step:
    """One invocation of a step, as handed over by the host."""
    step_id: str
    data: Dict[str, Any] = field(default_factory=dict)

    @property
    def order(self) -> int:
        try:
            return int(self.data.get("__stepOrder") or 1)
        except (TypeError, ValueError):
            return 1
