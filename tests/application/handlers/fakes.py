# tests/application/handlers/fakes.py
from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from application.client.errors import ProviderHttpError
from application.ports.http_client import HttpResponse
from application.services.execution_deps import ExecutionDeps
from domain.registrant_key import RegistrantKeySource


@dataclass
class DummyLogger:
    events: List[Tuple[str, Dict[str, Any]]] = field(default_factory=list)

    def info(self, message: str, **kwargs) -> None:
        self.events.append((message, kwargs))

    def warning(self, message: str, **kwargs) -> None:
        self.events.append((message, kwargs))

    def error(self, message: str, **kwargs) -> None:
        self.events.append((message, kwargs))

    def debug(self, message: str, **kwargs) -> None:
        self.events.append((message, kwargs))

    def bind(self, **_kwargs) -> "DummyLogger":
        return self


def response(payload: Any, status: int = 200) -> HttpResponse:
    text = payload if isinstance(payload, str) else json.dumps(payload)
    return HttpResponse(status=status, url="https://api.example.com", text=text)


def http_error(status: int, payload: Any) -> ProviderHttpError:
    return ProviderHttpError(response(payload, status=status))


class StubClient:
    """Records calls; returns ``result`` or raises it when it is an exception."""

    def __init__(self, result: Any = None):
        self.result = result
        self.calls: List[Tuple[str, tuple]] = []

    def _answer(self, name: str, *args) -> HttpResponse:
        self.calls.append((name, args))
        if isinstance(self.result, BaseException):
            raise self.result
        return self.result

    def create_registrant(self, registrant, webinar_key, organizer_key):
        return self._answer("create_registrant", registrant, webinar_key, organizer_key)

    def delete_registrant(self, registrant_key, webinar_key, organizer_key):
        return self._answer("delete_registrant", registrant_key, webinar_key, organizer_key)

    def get_registrant_by_registrant_key(self, registrant_key, webinar_key, organizer_key):
        return self._answer("get_registrant_by_registrant_key", registrant_key, webinar_key, organizer_key)


def deps(client: StubClient, source: Optional[RegistrantKeySource] = None) -> ExecutionDeps:
    return ExecutionDeps(
        client=client,
        logger=DummyLogger(),
        registrant_key_source=source or RegistrantKeySource.JOIN_URL,
    )
