# application/services/execution_deps.py
from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Dict, Protocol

from application.ports.http_client import HttpResponse
from application.ports.logger import LoggerPort
from domain.operators import OperatorEvaluator
from domain.registrant_key import RegistrantKeySource


class CredentialProviderPort(Protocol):
    def get(self) -> Dict[str, Any]:
        ...


class RegistrantClientPort(Protocol):
    def create_registrant(self, registrant: Dict[str, Any], webinar_key: str, organizer_key: str) -> HttpResponse:
        ...

    def delete_registrant(self, registrant_key: str, webinar_key: str, organizer_key: str) -> HttpResponse:
        ...

    def get_registrant_by_registrant_key(self, registrant_key: str, webinar_key: str, organizer_key: str) -> HttpResponse:
        ...


@dataclass(frozen=True)
class ExecutionDeps:
    client: RegistrantClientPort
    logger: LoggerPort
    registrant_key_source: RegistrantKeySource = RegistrantKeySource.JOIN_URL
    evaluator: OperatorEvaluator = field(default_factory=OperatorEvaluator)

    # logger 差し替えのためのコピー生成
    def with_logger(self, logger: LoggerPort) -> "ExecutionDeps":
        return replace(self, logger=logger)
