# domain/registrant_key.py
from __future__ import annotations

from enum import Enum
from typing import Any, Dict, Optional


class RegistrantKeySource(str, Enum):
    # joinUrl: https://global.gotowebinar.com/join/{webinarKey}/{registrantKey}
    JOIN_URL = "join_url"
    RESPONSE = "response"

    @classmethod
    def parse(cls, raw: Optional[str]) -> "RegistrantKeySource":
        if not raw:
            return cls.JOIN_URL
        try:
            return cls(raw.strip().lower())
        except ValueError:
            valid = ", ".join(s.value for s in cls)
            raise ValueError(f"Unknown registrant key source: {raw} (expected one of: {valid})")


def registrant_key_from_join_url(join_url: Any) -> Optional[str]:
    if not isinstance(join_url, str) or "/join/" not in join_url:
        return None
    segments = join_url.split("/join/", 1)[1].split("/")
    if len(segments) < 2 or not segments[1]:
        return None
    # クエリ文字列が付くことがある
    return segments[1].split("?", 1)[0].split("#", 1)[0] or None


def extract_registrant_key(
    payload: Dict[str, Any],
    fallback_field: str = "registrantKey",
    source: RegistrantKeySource = RegistrantKeySource.JOIN_URL,
) -> Optional[Any]:
    """
    Resolve the registrant key from a create/get response.

    The create endpoint returns a registrantKey that does not match the one
    the other endpoints accept; the usable key is the last segment of the
    joinUrl. With ``RESPONSE`` the returned field is used verbatim.
    """
    if source is RegistrantKeySource.JOIN_URL:
        from_url = registrant_key_from_join_url(payload.get("joinUrl"))
        if from_url is not None:
            return from_url
    return payload.get(fallback_field)
