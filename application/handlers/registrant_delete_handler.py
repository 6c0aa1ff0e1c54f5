# application/handlers/registrant_delete_handler.py
from __future__ import annotations

import json

from application.client.errors import ProviderHttpError
from application.handlers.base import StepHandler
from application.outcome import StepOutcome
from application.services.execution_deps import ExecutionDeps
from domain.steps.base import Step
from domain.steps.registrant import DELETE_REGISTRANT


class DeleteRegistrantHandler(StepHandler):
    definition = DELETE_REGISTRANT

    def handle(self, step: Step, deps: ExecutionDeps) -> StepOutcome:
        organizer_key = str(step.data.get("organizerKey"))
        webinar_key = str(step.data.get("webinarKey"))
        registrant_key = str(step.data.get("registrantKey"))

        try:
            deps.client.delete_registrant(registrant_key, webinar_key, organizer_key)
        except ProviderHttpError as e:
            deps.logger.error("registrant.delete_failed", status=e.status)
            if e.status == 404:
                return StepOutcome.error(
                    f"{e.description}: %s",
                    [json.dumps({
                        "webinarKey": webinar_key,
                        "organizerKey": organizer_key,
                        "registrantKey": registrant_key,
                    })],
                )
            return StepOutcome.error("There was an error deleting the registrant in GoTo Webinar: %s", [str(e)])
        except Exception as e:
            deps.logger.error("registrant.delete_failed", error=str(e))
            return StepOutcome.error("There was an error deleting the registrant in GoTo Webinar: %s", [str(e)])

        deps.logger.info("registrant.deleted", webinar_key=webinar_key, registrant_key=registrant_key)
        return StepOutcome.passed("Successfully deleted GoTo Webinar registrant")
