# infrastructure/credentials/env_credential_provider.py
from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Dict

from dotenv import dotenv_values

_env_path = Path(__file__).parent.parent.parent / ".env"

ENV_KEYS = {
    "clientId": "GOTO_CLIENT_ID",
    "clientSecret": "GOTO_CLIENT_SECRET",
    "refreshToken": "GOTO_REFRESH_TOKEN",
}


class EnvCredentialProvider:
    """
    環境変数と .env ファイルから GoTo Webinar の認証情報を提供する

    環境変数が .env の値より優先される。未設定の項目は返さない
    （Credential 側で不足として扱われる）。
    """

    def __init__(self, env_path: Path = _env_path):
        self._env_vars: Dict[str, Any] = dict(dotenv_values(env_path)) if env_path.exists() else {}
        for key in ENV_KEYS.values():
            if key in os.environ:
                self._env_vars[key] = os.environ[key]

    def get(self) -> Dict[str, Any]:
        return {
            name: self._env_vars[env_key]
            for name, env_key in ENV_KEYS.items()
            if self._env_vars.get(env_key)
        }
