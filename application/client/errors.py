# application/client/errors.py
from __future__ import annotations

import json
from typing import Optional

from application.ports.http_client import HttpResponse


class ProviderHttpError(Exception):
    """A resource call answered with a 4xx/5xx status."""

    def __init__(self, response: HttpResponse):
        self.response = response
        super().__init__(f"Request failed with status code {response.status}: {response.text}")

    @property
    def status(self) -> int:
        return self.response.status

    @property
    def body(self) -> str:
        return self.response.text

    @property
    def description(self) -> str:
        parsed = _try_parse(self.response.text)
        if isinstance(parsed, dict):
            desc = parsed.get("description") or parsed.get("errorDescription") or parsed.get("error_description")
            if desc:
                return str(desc)
        return self.response.text or f"HTTP {self.response.status}"


def _try_parse(text: str) -> Optional[object]:
    try:
        return json.loads(text)
    except (TypeError, ValueError):
        return None
