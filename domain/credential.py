# domain/credential.py
from __future__ import annotations

import base64
from dataclasses import dataclass, field
from typing import Any, Dict


@dataclass(frozen=True)
class Credential:
    client_id: str = ""
    client_secret: str = field(default="", repr=False)
    refresh_token: str = field(default="", repr=False)

    @classmethod
    def from_dict(cls, raw: Dict[str, Any]) -> "Credential":
        """
        clientId / clientSecret / refreshToken (host style) と
        client_id / client_secret / refresh_token の両方を受け付ける
        """
        def pick(*keys: str) -> str:
            for k in keys:
                v = raw.get(k)
                if v is not None:
                    return str(v)
            return ""

        return cls(
            client_id=pick("clientId", "client_id"),
            client_secret=pick("clientSecret", "client_secret"),
            refresh_token=pick("refreshToken", "refresh_token"),
        )

    def is_complete(self) -> bool:
        return bool(self.client_id and self.client_secret and self.refresh_token)

    def basic_auth_token(self) -> str:
        raw = f"{self.client_id}:{self.client_secret}".encode("utf-8")
        return base64.b64encode(raw).decode("ascii")
