# application/handlers/base.py
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Dict, Optional

from application.outcome import StepOutcome, StepRecord
from domain.registrant_key import RegistrantKeySource, extract_registrant_key, registrant_key_from_join_url
from domain.steps.base import Step, StepDefinition

if TYPE_CHECKING:
    from application.services.execution_deps import ExecutionDeps


class StepHandler(ABC):
    definition: StepDefinition

    def supports(self, step: Step) -> bool:
        return step.step_id == self.definition.step_id

    @abstractmethod
    def handle(self, step: Step, deps: "ExecutionDeps") -> StepOutcome: ...

    @staticmethod
    def key_value(record_id: str, name: str, data: Dict[str, Any]) -> StepRecord:
        return StepRecord(id=record_id, name=name, key_value=dict(data))

    @staticmethod
    def registrant_key(payload: Dict[str, Any], deps: "ExecutionDeps") -> Optional[Any]:
        source = deps.registrant_key_source
        if source is RegistrantKeySource.JOIN_URL and registrant_key_from_join_url(payload.get("joinUrl")) is None:
            # レスポンス形式が変わった可能性
            deps.logger.warning(
                "registrant.key_fallback",
                join_url=payload.get("joinUrl"),
                fallback_field="registrantKey",
            )
        return extract_registrant_key(payload, source=source)
