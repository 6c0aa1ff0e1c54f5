# infrastructure/config/provider_settings.py
from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

from dotenv import dotenv_values

from application.client.webinar_client import DEFAULT_API_BASE_URL, DEFAULT_TOKEN_URL
from domain.exceptions import ConfigurationError
from domain.registrant_key import RegistrantKeySource

# プロジェクトルートの .env
ENV_PATH = Path(__file__).parent.parent.parent / ".env"


@dataclass(frozen=True)
class ProviderSettings:
    token_url: str = DEFAULT_TOKEN_URL
    api_base_url: str = DEFAULT_API_BASE_URL
    registrant_key_source: RegistrantKeySource = RegistrantKeySource.JOIN_URL
    timeout_sec: float = 20.0

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None, env_path: Path = ENV_PATH) -> "ProviderSettings":
        """
        環境変数（.env より優先）から設定を組み立てる

        WEBINAR_TOKEN_URL / WEBINAR_API_BASE_URL /
        WEBINAR_REGISTRANT_KEY_SOURCE / WEBINAR_HTTP_TIMEOUT_SEC
        """
        values = dict(dotenv_values(env_path)) if env_path.exists() else {}
        values.update(os.environ if environ is None else environ)

        try:
            key_source = RegistrantKeySource.parse(values.get("WEBINAR_REGISTRANT_KEY_SOURCE"))
        except ValueError as e:
            raise ConfigurationError(str(e)) from e

        raw_timeout = values.get("WEBINAR_HTTP_TIMEOUT_SEC")
        try:
            timeout = float(raw_timeout) if raw_timeout else cls.timeout_sec
        except ValueError as e:
            raise ConfigurationError(f"WEBINAR_HTTP_TIMEOUT_SEC must be a number: {raw_timeout}") from e

        return cls(
            token_url=values.get("WEBINAR_TOKEN_URL") or DEFAULT_TOKEN_URL,
            api_base_url=values.get("WEBINAR_API_BASE_URL") or DEFAULT_API_BASE_URL,
            registrant_key_source=key_source,
            timeout_sec=timeout,
        )
