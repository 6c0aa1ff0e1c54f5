# application/client/registrant_operations.py
from __future__ import annotations

from typing import Any, Callable, Dict, Optional
from urllib.parse import quote

from application.client.api_session import ApiSession
from application.client.errors import ProviderHttpError
from application.ports.http_client import HttpClientPort, HttpResponse
from application.ports.logger import LoggerPort


def _seg(value: Any) -> str:
    return quote(str(value), safe="")


class RegistrantOperations:
    """
    Registrant endpoints of the webinar API.

    Every call waits on ``ready`` first, so nothing is sent before the token
    exchange finished; a failed exchange re-raises here unchanged.
    Responses come back as raw text (registrant keys exceed float precision).
    """

    def __init__(self, http: HttpClientPort, ready: Callable[[], ApiSession], logger: LoggerPort):
        self._http = http
        self._ready = ready
        self._logger = logger

    def create(self, registrant: Dict[str, Any], webinar_key: str, organizer_key: str) -> HttpResponse:
        path = f"/organizers/{_seg(organizer_key)}/webinars/{_seg(webinar_key)}/registrants"
        # 登録者は JSON で送る（既定の POST Content-Type は form）
        return self._send("POST", path, json_body=registrant, headers={"Content-Type": "application/json"})

    def delete(self, registrant_key: str, webinar_key: str, organizer_key: str) -> HttpResponse:
        path = (
            f"/organizers/{_seg(organizer_key)}/webinars/{_seg(webinar_key)}"
            f"/registrants/{_seg(registrant_key)}"
        )
        return self._send("DELETE", path)

    def get(self, registrant_key: str, webinar_key: str, organizer_key: str) -> HttpResponse:
        path = (
            f"/organizers/{_seg(organizer_key)}/webinars/{_seg(webinar_key)}"
            f"/registrants/{_seg(registrant_key)}"
        )
        return self._send("GET", path)

    def _send(
        self,
        method: str,
        path: str,
        json_body: Optional[Any] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> HttpResponse:
        session = self._ready()

        merged = session.headers_for(method)
        if headers:
            merged.update(headers)

        url = session.url(path)
        self._logger.debug("registrant.request", method=method, url=url)

        resp = self._http.request(method=method, url=url, headers=merged, json_body=json_body)

        self._logger.info("registrant.response", method=method, url=url, status=resp.status)
        if resp.status >= 400:
            raise ProviderHttpError(resp)
        return resp
