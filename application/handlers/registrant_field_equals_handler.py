# application/handlers/registrant_field_equals_handler.py
from __future__ import annotations

import json
from typing import Any, Dict

from application.client.errors import ProviderHttpError
from application.handlers.base import StepHandler
from application.outcome import StepOutcome, StepRecord
from application.services.execution_deps import ExecutionDeps
from application.services.raw_json import decode_object
from domain.exceptions import InvalidOperandError, UnknownOperatorError
from domain.operators import BASE_OPERATORS, requires_expectation
from domain.steps.base import Step
from domain.steps.registrant import REGISTRANT_FIELD_EQUALS


class RegistrantFieldEqualsHandler(StepHandler):
    definition = REGISTRANT_FIELD_EQUALS

    def handle(self, step: Step, deps: ExecutionDeps) -> StepOutcome:
        expectation = step.data.get("expectation")
        organizer_key = str(step.data.get("organizerKey"))
        webinar_key = str(step.data.get("webinarKey"))
        registrant_key = str(step.data.get("registrantKey"))
        operator: str = step.data.get("operator") or "be"
        field: str = step.data.get("field")

        # 通信前に弾く
        if expectation is None and requires_expectation(operator):
            return StepOutcome.error("The operator '%s' requires an expected value. Please provide one.", [operator])

        try:
            resp = deps.client.get_registrant_by_registrant_key(registrant_key, webinar_key, organizer_key)
            data = decode_object(resp.text)
            if "joinUrl" in data or "registrantKey" in data:
                data["registrantKey"] = self.registrant_key(data, deps)

            if field not in data:
                return StepOutcome.failed(
                    "Found the registrant with key %s, but there was no %s field.",
                    [registrant_key, field],
                    [self._record(data)],
                )

            verdict = deps.evaluator.evaluate(operator, data[field], expectation, field)
            deps.logger.info("registrant.field_checked", field=field, operator=operator, valid=verdict.valid)

            if verdict.valid:
                return StepOutcome.passed(verdict.message, records=[self._record(data)])
            return StepOutcome.failed(verdict.message, records=[self._record(data)])

        except UnknownOperatorError as e:
            return StepOutcome.error("%s Please provide one of: %s", [str(e), ", ".join(BASE_OPERATORS)])
        except InvalidOperandError as e:
            return StepOutcome.error(str(e))
        except ProviderHttpError as e:
            deps.logger.error("registrant.get_failed", status=e.status)
            if e.status == 404:
                return StepOutcome.error(
                    f"{e.description}: %s",
                    [json.dumps({
                        "webinarKey": webinar_key,
                        "organizerKey": organizer_key,
                        "registrantKey": registrant_key,
                    })],
                )
            return StepOutcome.error("There was an error during validation of registrant field: %s", [str(e)])
        except Exception as e:
            deps.logger.error("registrant.get_failed", error=str(e))
            return StepOutcome.error("There was an error during validation of registrant field: %s", [str(e)])

    def _record(self, registrant: Dict[str, Any]) -> StepRecord:
        return self.key_value("registrant", "Checked Registrant", registrant)
