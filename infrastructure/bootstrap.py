# infrastructure/bootstrap.py
from __future__ import annotations

from typing import Any, Dict, Optional

from application.client.webinar_client import WebinarClient
from application.ports.http_client import HttpClientPort
from application.ports.logger import LoggerPort
from application.ports.requests_client import RequestsSessionHttpClient
from application.services.execution_deps import ExecutionDeps
from domain.credential import Credential
from infrastructure.config.provider_settings import ProviderSettings


def build_execution_deps(
    credentials: Dict[str, Any],
    logger: LoggerPort,
    settings: Optional[ProviderSettings] = None,
    http_client: Optional[HttpClientPort] = None,
) -> ExecutionDeps:
    """
    One client per execution context: the token exchange starts here and the
    client is dropped together with the returned deps.
    """
    settings = settings or ProviderSettings.from_env()
    http = http_client or RequestsSessionHttpClient(timeout_sec=settings.timeout_sec)

    client = WebinarClient(
        Credential.from_dict(credentials),
        http,
        logger,
        token_url=settings.token_url,
        api_base_url=settings.api_base_url,
        ready_timeout_sec=settings.timeout_sec,
    )
    return ExecutionDeps(
        client=client,
        logger=logger,
        registrant_key_source=settings.registrant_key_source,
    )
