# application/outcome.py
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Sequence


class OutcomeStatus(str, Enum):
    PASSED = "passed"
    FAILED = "failed"
    ERROR = "error"


@dataclass(frozen=True)
class StepRecord:
    id: str
    name: str
    key_value: Dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class StepOutcome:
    status: OutcomeStatus
    message_format: str = ""
    message_args: Sequence[Any] = ()
    records: List[StepRecord] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.status is OutcomeStatus.PASSED

    @property
    def message(self) -> str:
        if not self.message_args:
            return self.message_format
        try:
            return self.message_format % tuple(self.message_args)
        except (TypeError, ValueError):
            # provider description に % が含まれていた場合など
            return " ".join([self.message_format, *map(str, self.message_args)])

    @classmethod
    def passed(cls, message: str, args: Sequence[Any] = (), records: List[StepRecord] | None = None) -> "StepOutcome":
        return cls(OutcomeStatus.PASSED, message, tuple(args), list(records or []))

    @classmethod
    def failed(cls, message: str, args: Sequence[Any] = (), records: List[StepRecord] | None = None) -> "StepOutcome":
        return cls(OutcomeStatus.FAILED, message, tuple(args), list(records or []))

    @classmethod
    def error(cls, message: str, args: Sequence[Any] = (), records: List[StepRecord] | None = None) -> "StepOutcome":
        return cls(OutcomeStatus.ERROR, message, tuple(args), list(records or []))
