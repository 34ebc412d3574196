from networth.config import Settings


def test_defaults_point_at_zapper(monkeypatch):
    """Without overrides the public GraphQL endpoint is used with no timeout."""

    monkeypatch.delenv('ZAPPER_GRAPHQL_URL', raising=False)
    monkeypatch.delenv('REQUEST_TIMEOUT_SECONDS', raising=False)

    settings = Settings(_env_file=None)

    assert settings.zapper_graphql_url == 'https://zapper.xyz/z/graphql'
    assert settings.request_timeout_seconds is None
    assert settings.balance_threshold == 0.0
    assert settings.enable_zapper is True


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv('ZAPPER_GRAPHQL_URL', 'http://localhost:9999/graphql')
    monkeypatch.setenv('REQUEST_TIMEOUT_SECONDS', '12.5')
    monkeypatch.setenv('BALANCE_THRESHOLD', '25')
    monkeypatch.setenv('DATA_FOLDER', '/tmp/snapshots')

    settings = Settings(_env_file=None)

    assert settings.zapper_graphql_url == 'http://localhost:9999/graphql'
    assert settings.request_timeout_seconds == 12.5
    assert settings.balance_threshold == 25.0
    assert settings.data_folder == '/tmp/snapshots'


def test_zapper_api_key_alias(monkeypatch):
    """Zapper API key should load from the short alias when present."""

    monkeypatch.delenv('ZAPPER_API_KEY', raising=False)
    monkeypatch.setenv('ZAPPER_KEY', 'alias-key')

    settings = Settings(_env_file=None)

    assert settings.zapper_api_key == 'alias-key'
    assert settings.has_zapper_api_key


def test_cookie_flag(monkeypatch):
    monkeypatch.setenv('ZAPPER_COOKIE', 'session=abc')

    settings = Settings(_env_file=None)

    assert settings.has_zapper_cookie
    assert settings.zapper_cookie == 'session=abc'
