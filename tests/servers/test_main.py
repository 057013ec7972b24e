import json
import sys

import pytest

from dataforseo_mcp.servers import local, main, remote


@pytest.fixture
def clean_env(monkeypatch):
    for key in ("DATAFORSEO_LOGIN", "DATAFORSEO_PASSWORD", "ENABLED_MODULES", "ENABLED_TOOLS"):
        monkeypatch.delenv(key, raising=False)
    monkeypatch.setattr("dataforseo_mcp.config.load_dotenv", lambda *args, **kwargs: None)


@pytest.fixture
def credentials(clean_env, monkeypatch):
    monkeypatch.setenv("DATAFORSEO_LOGIN", "test-login")
    monkeypatch.setenv("DATAFORSEO_PASSWORD", "test-password")


def test_config_snippets():
    installed, module = main.build_config_snippets()

    server = installed["mcpServers"]["dataforseo"]
    assert server["command"] == "dataforseo-mcp"
    assert server["args"] == ["--transport", "stdio"]
    assert set(server["env"]) == {"DATAFORSEO_LOGIN", "DATAFORSEO_PASSWORD"}

    server = module["mcpServers"]["dataforseo"]
    assert server["command"] == sys.executable
    assert server["args"] == ["-m", "dataforseo_mcp.servers.local"]


def test_config_snippet_flag_prints_and_exits(clean_env, capsys):
    assert main.main(["--config-snippet"]) == 0

    out = capsys.readouterr().out
    assert "MCP CLIENT CONFIGURATION" in out
    assert json.dumps(main.build_config_snippets()[0], indent=2) in out


def test_missing_credentials(clean_env):
    assert main.main([]) == 1


def test_http_transport(credentials, monkeypatch):
    calls = []
    monkeypatch.setattr(remote, "serve", lambda *args: calls.append(args))

    assert main.main(["--transport", "http", "--port", "9000", "--metrics-port", "0"]) == 0

    settings, host, port = calls[0]
    assert settings.dataforseo_login == "test-login"
    assert settings.metrics_port == 0
    assert host is None
    assert port == 9000


def test_stdio_is_the_default(credentials, monkeypatch):
    calls = []
    monkeypatch.setattr(local, "main", lambda settings: calls.append(settings))

    assert main.main([]) == 0
    assert calls[0].dataforseo_password == "test-password"
