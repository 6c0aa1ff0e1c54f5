# application/executor/handler_registry.py
from __future__ import annotations

from typing import List

from application.handlers.base import StepHandler
from domain.steps.base import Step, StepDefinition


class HandlerRegistry:
    def __init__(self, handlers: List[StepHandler]):
        self._handlers = handlers

    def get_handler(self, step: Step) -> StepHandler:
        for h in self._handlers:
            if h.supports(step):
                return h
        raise RuntimeError(f"No handler found for step: {step.step_id}")

    def definitions(self) -> List[StepDefinition]:
        return [h.definition for h in self._handlers]

    @classmethod
    def default(cls) -> "HandlerRegistry":
        from application.handlers.registrant_create_handler import CreateRegistrantHandler
        from application.handlers.registrant_delete_handler import DeleteRegistrantHandler
        from application.handlers.registrant_field_equals_handler import RegistrantFieldEqualsHandler

        return cls([
            CreateRegistrantHandler(),
            DeleteRegistrantHandler(),
            RegistrantFieldEqualsHandler(),
        ])
