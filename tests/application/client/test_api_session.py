# tests/application/client/test_api_session.py
import pytest

from application.client.api_session import ApiSession


def test_url_joins_base_and_path():
    session = ApiSession(base_url="https://api.example.com/G2W/rest/v2/", access_token="t")
    assert session.url("/organizers/O1") == "https://api.example.com/G2W/rest/v2/organizers/O1"


def test_headers_per_method():
    session = ApiSession(base_url="https://api.example.com", access_token="t")
    assert session.headers_for("get") == {"Authorization": "Bearer t", "Content-Type": "application/json"}
    assert session.headers_for("POST")["Content-Type"] == "application/x-www-form-urlencoded"
    assert session.headers_for("DELETE") == {"Authorization": "Bearer t"}


def test_session_is_immutable():
    session = ApiSession(base_url="https://api.example.com", access_token="t")
    with pytest.raises(Exception):  # FrozenInstanceError
        session.access_token = "other"
    with pytest.raises(TypeError):
        session.content_types["GET"] = "text/plain"


def test_repr_hides_token():
    assert "secret-token" not in repr(ApiSession(base_url="https://x", access_token="secret-token"))
