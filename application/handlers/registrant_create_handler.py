# application/handlers/registrant_create_handler.py
from __future__ import annotations

import json
from typing import Any, Dict

from application.client.errors import ProviderHttpError
from application.handlers.base import StepHandler
from application.outcome import StepOutcome
from application.services.execution_deps import ExecutionDeps
from application.services.raw_json import decode_object
from domain.steps.base import Step
from domain.steps.registrant import CREATE_REGISTRANT


class CreateRegistrantHandler(StepHandler):
    definition = CREATE_REGISTRANT

    def handle(self, step: Step, deps: ExecutionDeps) -> StepOutcome:
        organizer_key = str(step.data.get("organizerKey"))
        webinar_key = str(step.data.get("webinarKey"))
        registrant: Dict[str, Any] = dict(step.data.get("registrant") or {})

        try:
            resp = deps.client.create_registrant(registrant, webinar_key, organizer_key)
            created = decode_object(resp.text)

            record = dict(registrant)
            record["registrantKey"] = self.registrant_key(created, deps)
            record["joinUrl"] = created.get("joinUrl")
            deps.logger.info(
                "registrant.created",
                webinar_key=webinar_key,
                registrant_key=record["registrantKey"],
            )

            return StepOutcome.passed(
                "Successfully created GoTo Webinar registrant",
                records=[
                    self.key_value("registrant", "Created Registrant", record),
                    self.key_value(
                        f"registrant.{step.order}",
                        f"Created Registrant from Step {step.order}",
                        record,
                    ),
                ],
            )
        except ProviderHttpError as e:
            deps.logger.error("registrant.create_failed", status=e.status)
            if e.status == 404:
                return StepOutcome.error(
                    f"{e.description}: %s",
                    [json.dumps({"webinarKey": webinar_key, "organizerKey": organizer_key})],
                )
            if e.status == 409:
                return StepOutcome.error(
                    "Registrant %s is already registered in webinar with id %s",
                    [registrant.get("email"), webinar_key],
                )
            return StepOutcome.error("There was an error creating the registrant in GoTo Webinar: %s", [str(e)])
        except Exception as e:
            deps.logger.error("registrant.create_failed", error=str(e))
            return StepOutcome.error("There was an error creating the registrant in GoTo Webinar: %s", [str(e)])
