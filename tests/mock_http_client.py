# tests/mock_http_client.py
"""
Mock HTTP client for testing the webinar client without network access.
Returns scripted responses keyed by method + URL suffix and records every call.
"""
from __future__ import annotations

import json
import threading
from dataclasses import dataclass
from typing import Any, Dict, List, Tuple, Optional

from application.ports.http_client import HttpClientPort, HttpResponse

TOKEN_URL = "https://authentication.logmeininc.com/oauth/token"
API_BASE = "https://api.getgo.com/G2W/rest/v2"


@dataclass(frozen=True)
class RecordedCall:
    method: str
    url: str
    headers: Dict[str, str]
    form_list: Optional[List[Tuple[str, str]]]
    json_body: Optional[Any]


def json_response(status: int, payload: Any, url: str = "") -> HttpResponse:
    text = payload if isinstance(payload, str) else json.dumps(payload)
    return HttpResponse(status=status, url=url, text=text, headers={"Content-Type": "application/json"})


class MockHttpClient(HttpClientPort):
    """
    Mock HTTP client that returns predefined responses.

    - POST <token url> -> {"access_token": "anyToken"} unless overridden
    - anything unscripted -> 404 {"description": "Not Found"}
    """

    def __init__(self, token_response: Optional[HttpResponse] = None):
        self.calls: List[RecordedCall] = []
        self._routes: Dict[Tuple[str, str], HttpResponse] = {}
        self._errors: Dict[Tuple[str, str], Exception] = {}
        self._lock = threading.Lock()
        self.route("POST", TOKEN_URL, token_response or json_response(200, {"access_token": "anyToken"}))

    def route(self, method: str, url_suffix: str, response: HttpResponse) -> "MockHttpClient":
        self._routes[(method.upper(), url_suffix)] = response
        return self

    def fail(self, method: str, url_suffix: str, error: Exception) -> "MockHttpClient":
        self._errors[(method.upper(), url_suffix)] = error
        return self

    def request(
        self,
        method: str,
        url: str,
        headers: Optional[Dict[str, str]] = None,
        form_list: Optional[List[Tuple[str, str]]] = None,
        json_body: Optional[Any] = None,
    ) -> HttpResponse:
        with self._lock:
            self.calls.append(RecordedCall(method.upper(), url, dict(headers or {}), form_list, json_body))

        for (m, suffix), error in self._errors.items():
            if m == method.upper() and url.endswith(suffix):
                raise error
        for (m, suffix), response in self._routes.items():
            if m == method.upper() and url.endswith(suffix):
                return response

        return json_response(404, {"description": "Not Found"}, url=url)

    def resource_calls(self) -> List[RecordedCall]:
        return [c for c in self.calls if c.url != TOKEN_URL]
