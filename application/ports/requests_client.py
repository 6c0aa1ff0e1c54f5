# application/ports/requests_client.py
from __future__ import annotations

import json

import requests
from typing import Any, Dict, List, Tuple, Optional

from application.ports.http_client import HttpClientPort, HttpResponse


class RequestsSessionHttpClient(HttpClientPort):
    def __init__(self, base_headers: Optional[Dict[str, str]] = None, timeout_sec: float = 20):
        self._session = requests.Session()
        self._base_headers = base_headers or {}
        self._timeout = timeout_sec

    def request(
        self,
        method: str,
        url: str,
        headers: Optional[Dict[str, str]] = None,
        form_list: Optional[List[Tuple[str, str]]] = None,
        json_body: Optional[Any] = None,
    ) -> HttpResponse:
        merged = dict(self._base_headers)
        if headers:
            merged.update(headers)

        data: Any = form_list
        if json_body is not None:
            # Content-Type は呼び出し側のヘッダに従う（requests の json= は使わない）
            data = json.dumps(json_body, ensure_ascii=False).encode("utf-8")

        resp = self._session.request(
            method=method.upper(),
            url=url,
            headers=merged,
            data=data,
            timeout=self._timeout,
        )

        return HttpResponse(
            status=resp.status_code,
            url=str(resp.url),
            text=resp.text,
            headers=dict(resp.headers),
        )

