from domain.steps.base import (
    FieldDefinition,
    FieldType,
    Optionality,
    RecordDefinition,
    Step,
    StepDefinition,
    StepType,
)
from domain.steps.registrant import CREATE_REGISTRANT, DELETE_REGISTRANT, REGISTRANT_FIELD_EQUALS

__all__ = [
    "Step",
    "StepDefinition",
    "StepType",
    "FieldDefinition",
    "FieldType",
    "Optionality",
    "RecordDefinition",
    "CREATE_REGISTRANT",
    "DELETE_REGISTRANT",
    "REGISTRANT_FIELD_EQUALS",
]
