# tests/application/executor/test_handler_registry.py
import pytest

from application.executor.handler_registry import HandlerRegistry
from application.handlers.base import StepHandler
from application.handlers.registrant_field_equals_handler import RegistrantFieldEqualsHandler
from application.outcome import StepOutcome
from domain.steps.base import Step, StepDefinition, StepType

DUMMY = StepDefinition(step_id="DummyStep", name="Dummy", expression="dummy", type=StepType.ACTION)


class DummyHandler(StepHandler):
    definition = DUMMY

    def __init__(self):
        self.call_count = 0

    def handle(self, step, deps):
        self.call_count += 1
        return StepOutcome.passed("ok")


class TestHandlerRegistry:
    def test_get_handler_for_supported_step(self):
        handler = DummyHandler()
        registry = HandlerRegistry(handlers=[handler])

        result = registry.get_handler(Step(step_id="DummyStep"))

        assert result is handler

    def test_get_handler_returns_first_matching_handler(self):
        handler1 = DummyHandler()
        handler2 = DummyHandler()
        registry = HandlerRegistry(handlers=[handler1, handler2])

        assert registry.get_handler(Step(step_id="DummyStep")) is handler1

    def test_get_handler_raises_error_for_unsupported_step(self):
        registry = HandlerRegistry(handlers=[DummyHandler()])

        with pytest.raises(RuntimeError, match="No handler found"):
            registry.get_handler(Step(step_id="UnknownStep"))

    def test_get_handler_empty_registry_raises_error(self):
        registry = HandlerRegistry(handlers=[])

        with pytest.raises(RuntimeError, match="No handler found"):
            registry.get_handler(Step(step_id="DummyStep"))

    def test_default_registry_knows_registrant_steps(self):
        registry = HandlerRegistry.default()

        ids = [d.step_id for d in registry.definitions()]

        assert ids == ["CreateRegistrantStep", "DeleteRegistrantStep", "RegistrantFieldEqualsStep"]
        assert isinstance(registry.get_handler(Step(step_id="RegistrantFieldEqualsStep")), RegistrantFieldEqualsHandler)
