# tests/infrastructure/test_env_credential_provider.py
from infrastructure.credentials.dict_credential_provider import DictCredentialProvider
from infrastructure.credentials.env_credential_provider import EnvCredentialProvider


def test_get_returns_credentials_from_env(monkeypatch, tmp_path):
    monkeypatch.setenv("GOTO_CLIENT_ID", "anyId")
    monkeypatch.setenv("GOTO_CLIENT_SECRET", "anySecret")
    monkeypatch.setenv("GOTO_REFRESH_TOKEN", "anyToken")

    provider = EnvCredentialProvider(env_path=tmp_path / ".env")

    assert provider.get() == {
        "clientId": "anyId",
        "clientSecret": "anySecret",
        "refreshToken": "anyToken",
    }


def test_env_overrides_dotenv_file(monkeypatch, tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text("GOTO_CLIENT_ID=fileId\nGOTO_CLIENT_SECRET=fileSecret\n", encoding="utf-8")
    monkeypatch.setenv("GOTO_CLIENT_ID", "envId")
    monkeypatch.delenv("GOTO_CLIENT_SECRET", raising=False)
    monkeypatch.delenv("GOTO_REFRESH_TOKEN", raising=False)

    provider = EnvCredentialProvider(env_path=env_file)

    assert provider.get() == {"clientId": "envId", "clientSecret": "fileSecret"}


def test_dict_provider_returns_copy():
    source = {"clientId": "anyId"}
    provider = DictCredentialProvider(source)

    result = provider.get()
    result["clientId"] = "changed"

    assert provider.get() == {"clientId": "anyId"}
