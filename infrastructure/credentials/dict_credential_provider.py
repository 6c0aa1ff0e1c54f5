# infrastructure/credentials/dict_credential_provider.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict


@dataclass(frozen=True)
class DictCredentialProvider:
    credentials: Dict[str, Any]

    def get(self) -> Dict[str, Any]:
        return dict(self.credentials)
