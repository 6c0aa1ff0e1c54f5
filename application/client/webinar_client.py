# application/client/webinar_client.py
from __future__ import annotations

import json
from concurrent.futures import Future, ThreadPoolExecutor
from concurrent.futures import TimeoutError as FutureTimeoutError
from typing import Any, Dict, Optional

from application.client.api_session import ApiSession
from application.client.registrant_operations import RegistrantOperations
from application.ports.http_client import HttpClientPort, HttpResponse
from application.ports.logger import LoggerPort
from domain.credential import Credential
from domain.exceptions import AuthenticationError, ConfigurationError

DEFAULT_TOKEN_URL = "https://authentication.logmeininc.com/oauth/token"
DEFAULT_API_BASE_URL = "https://api.getgo.com/G2W/rest/v2"

MISSING_CREDENTIAL_MESSAGE = (
    "Refresh Token was not provided. Try reconnecting to your GoTo Webinar account."
)
NO_ACCESS_TOKEN_MESSAGE = "Access Token was not retrieved. Please try to reconnect."
TOKEN_TIMEOUT_MESSAGE = "Access Token was not retrieved within %s seconds. Please try again."


class WebinarClient:
    """
    Authenticated client for the GoTo Webinar REST API.

    The refresh token is exchanged as soon as the client is built. The
    outcome is kept in a one-shot readiness future: every resource call
    waits on it, and a failed exchange makes every call raise the same
    exception. A new credential means a new client.
    """

    def __init__(
        self,
        credential: Credential,
        http_client: HttpClientPort,
        logger: LoggerPort,
        token_url: str = DEFAULT_TOKEN_URL,
        api_base_url: str = DEFAULT_API_BASE_URL,
        ready_timeout_sec: Optional[float] = None,
    ):
        self._http = http_client
        self._logger = logger.bind(component="webinar_client")
        self._token_url = token_url
        self._api_base_url = api_base_url
        self._ready_timeout_sec = ready_timeout_sec
        self._readiness: Future = self.initialize(credential)
        self.registrants = RegistrantOperations(self._http, self.ready, self._logger)

    @property
    def readiness(self) -> Future:
        return self._readiness

    def initialize(self, credential: Credential) -> Future:
        if not credential.is_complete():
            self._logger.error("client.token_exchange.skipped", reason="missing_credential")
            future: Future = Future()
            future.set_exception(ConfigurationError(MISSING_CREDENTIAL_MESSAGE))
            return future

        executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="webinar-auth")
        try:
            return executor.submit(self._exchange_token, credential)
        finally:
            # 投入済みのタスクは完了まで走る
            executor.shutdown(wait=False)

    def ready(self) -> ApiSession:
        try:
            return self._readiness.result(timeout=self._ready_timeout_sec)
        except FutureTimeoutError as e:
            self._logger.error("client.token_exchange.timeout", timeout_sec=self._ready_timeout_sec)
            raise AuthenticationError(TOKEN_TIMEOUT_MESSAGE % self._ready_timeout_sec) from e

    def create_registrant(self, registrant: Dict[str, Any], webinar_key: str, organizer_key: str) -> HttpResponse:
        return self.registrants.create(registrant, webinar_key, organizer_key)

    def delete_registrant(self, registrant_key: str, webinar_key: str, organizer_key: str) -> HttpResponse:
        return self.registrants.delete(registrant_key, webinar_key, organizer_key)

    def get_registrant_by_registrant_key(self, registrant_key: str, webinar_key: str, organizer_key: str) -> HttpResponse:
        return self.registrants.get(registrant_key, webinar_key, organizer_key)

    def _exchange_token(self, credential: Credential) -> ApiSession:
        self._logger.info("client.token_exchange.start", url=self._token_url)
        try:
            resp = self._http.request(
                method="POST",
                url=self._token_url,
                headers={
                    "Authorization": f"Basic {credential.basic_auth_token()}",
                    "Content-Type": "application/x-www-form-urlencoded",
                },
                form_list=[
                    ("grant_type", "refresh_token"),
                    ("refresh_token", credential.refresh_token),
                ],
            )
        except Exception as e:
            self._logger.error("client.token_exchange.failed", error=str(e))
            raise AuthenticationError(str(e) or NO_ACCESS_TOKEN_MESSAGE) from e

        if resp.status >= 400:
            self._logger.error("client.token_exchange.failed", status=resp.status)
            raise AuthenticationError(resp.text or NO_ACCESS_TOKEN_MESSAGE)

        token = _access_token(resp.text)
        if not token:
            self._logger.error("client.token_exchange.failed", status=resp.status, reason="no_access_token")
            raise AuthenticationError(NO_ACCESS_TOKEN_MESSAGE)

        self._logger.info("client.token_exchange.succeeded", base_url=self._api_base_url)
        return ApiSession(base_url=self._api_base_url, access_token=token)


def _access_token(text: str) -> Optional[str]:
    try:
        payload = json.loads(text)
    except (TypeError, ValueError):
        return None
    if not isinstance(payload, dict):
        return None
    token = payload.get("access_token")
    return str(token) if token else None
