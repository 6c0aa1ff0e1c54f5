# application/client/api_session.py
from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, Mapping


@dataclass(frozen=True)
class ApiSession:
    """
    Result of a successful token exchange: base URL plus the default
    headers every resource call carries. Created once, never mutated.
    """
    base_url: str
    access_token: str = field(repr=False)
    content_types: Mapping[str, str] = field(
        default_factory=lambda: MappingProxyType(
            {
                "GET": "application/json",
                "POST": "application/x-www-form-urlencoded",
            }
        )
    )

    def url(self, path: str) -> str:
        return self.base_url.rstrip("/") + "/" + path.lstrip("/")

    def headers_for(self, method: str) -> Dict[str, str]:
        headers = {"Authorization": f"Bearer {self.access_token}"}
        ctype = self.content_types.get(method.upper())
        if ctype:
            headers["Content-Type"] = ctype
        return headers
