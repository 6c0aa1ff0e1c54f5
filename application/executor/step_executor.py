# application/executor/step_executor.py
from __future__ import annotations

import time

from application.executor.handler_registry import HandlerRegistry
from application.outcome import StepOutcome
from application.services.execution_deps import ExecutionDeps
from domain.steps.base import Step


class StepExecutor:
    def __init__(self, registry: HandlerRegistry):
        self._registry = registry

    def execute(self, step: Step, deps: ExecutionDeps) -> StepOutcome:
        # 以後のログに step_id を自動付与
        deps = deps.with_logger(deps.logger.bind(step_id=step.step_id))

        handler = self._registry.get_handler(step)
        deps.logger.info("step.start", handler=type(handler).__name__)
        t0 = time.perf_counter()

        # 必須入力が欠けていれば通信前に弾く
        missing = handler.definition.missing_keys(step.data)
        if missing:
            deps.logger.warning("step.missing_fields", fields=missing)
            outcome = StepOutcome.error("Missing required field(s): %s", [", ".join(missing)])
        else:
            outcome = self._handle(handler, step, deps)

        if outcome is None:
            raise RuntimeError(f"Handler returned None: handler={type(handler).__name__}, step={step.step_id}")

        deps.logger.info(
            "step.end",
            outcome=outcome.status.value,
            elapsed_ms=int((time.perf_counter() - t0) * 1000),
        )
        return outcome

    @staticmethod
    def _handle(handler, step: Step, deps: ExecutionDeps) -> StepOutcome:
        try:
            return handler.handle(step, deps)
        except Exception as e:
            # ホストには例外を投げない
            deps.logger.error("step.unhandled_exception", error=str(e), error_type=type(e).__name__)
            return StepOutcome.error("There was an error running the step: %s", [str(e)])
