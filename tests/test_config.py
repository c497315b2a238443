import pytest

from mercadopago import ClientConfig, ClientParameters, ConfigError, load_client_config
from mercadopago.core.environment import build_environment, load_env_file


def test_defaults_without_environment():
    config = load_client_config(env_file=None, base={})

    assert config == ClientConfig()
    assert config.api_base_url == "https://api.mercadolibre.com"
    assert config.timeout_seconds == 30
    assert config.sandbox is False


def test_env_file_fills_missing_values(tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text(
        "# credentials\n"
        "MP_CLIENT_ID=file-id\n"
        "export MP_CLIENT_SECRET='file-secret'\n"
        "MP_SANDBOX=yes\n",
        encoding="utf-8",
    )

    config = load_client_config(env_file=str(env_file), base={"MP_CLIENT_ID": "env-id"})

    assert config.client_id == "env-id"
    assert config.client_secret == "file-secret"
    assert config.sandbox is True


def test_keyword_parameters_win_over_overrides():
    config = load_client_config(
        env_file=None,
        base={"MP_CLIENT_ID": "env-id"},
        overrides={"MP_CLIENT_ID": "override-id", "MP_TIMEOUT_SECONDS": "5"},
        client_id="kw-id",
        sandbox=True,
        api_base_url="https://api.example.test/",
    )

    assert config.client_id == "kw-id"
    assert config.sandbox is True
    assert config.timeout_seconds == 5
    assert config.api_base_url == "https://api.example.test"


def test_parameter_bundle():
    parameters = ClientParameters(client_id="id", client_secret="secret", timeout_seconds=12)

    assert parameters.as_overrides() == {
        "MP_CLIENT_ID": "id",
        "MP_CLIENT_SECRET": "secret",
        "MP_TIMEOUT_SECONDS": "12",
    }
    config = load_client_config(env_file=None, base={}, parameters=parameters)
    assert config.require_credentials() == ("id", "secret")


@pytest.mark.parametrize(
    "values, message",
    [
        ({"MP_SANDBOX": "maybe"}, "MP_SANDBOX"),
        ({"MP_TIMEOUT_SECONDS": "soon"}, "MP_TIMEOUT_SECONDS"),
        ({"MP_TIMEOUT_SECONDS": "0"}, "MP_TIMEOUT_SECONDS"),
        ({"MP_API_BASE_URL": "ftp://example"}, "MP_API_BASE_URL"),
    ],
)
def test_invalid_values(values, message):
    with pytest.raises(ConfigError, match=message):
        ClientConfig.from_mapping(values)


def test_require_credentials():
    with pytest.raises(ConfigError, match="MP_CLIENT_ID"):
        ClientConfig().require_credentials()
    with pytest.raises(ConfigError, match="MP_CLIENT_SECRET"):
        ClientConfig(client_id="id").require_credentials()


def test_url_prefixes_sandbox():
    config = ClientConfig(api_base_url="https://api.example.test")

    assert config.url("/collections/1") == "https://api.example.test/collections/1"
    assert config.url("collections/1", sandbox=True) == "https://api.example.test/sandbox/collections/1"


def test_repr_hides_secret():
    assert "s3cret" not in repr(ClientConfig(client_id="id", client_secret="s3cret"))


def test_load_env_file_preserves_existing(tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text("MP_CLIENT_ID=file-id\nMP_CLIENT_SECRET=file-secret\n", encoding="utf-8")
    environ = {"MP_CLIENT_ID": "existing"}

    merged = load_env_file(str(env_file), environ=environ)

    assert merged == {"MP_CLIENT_ID": "existing", "MP_CLIENT_SECRET": "file-secret"}


def test_build_environment_missing_file(tmp_path):
    environment = build_environment(
        env_file=str(tmp_path / "missing.env"),
        base={"MP_SANDBOX": "true"},
    )

    assert environment.get("MP_SANDBOX") == "true"
    assert environment.get("MP_CLIENT_ID") is None


def test_env_file_only_strips_matching_quotes(tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text(
        'MP_CLIENT_ID="quoted-id"\n'
        'MP_CLIENT_SECRET=abc"\n'
        "MP_API_BASE_URL='https://api.example.test\"\n",
        encoding="utf-8",
    )

    environment = build_environment(env_file=str(env_file), base={})

    assert environment.get("MP_CLIENT_ID") == "quoted-id"
    assert environment.get("MP_CLIENT_SECRET") == 'abc"'
    assert environment.get("MP_API_BASE_URL") == "'https://api.example.test\""
