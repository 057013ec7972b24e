from dataforseo_mcp.clients import (
    ApiMethod,
    DataForSeoClient,
    LocalFalconClient,
    create_clients,
)


def test_dataforseo_client_from_settings(make_settings):
    clients = create_clients(
        make_settings(
            DATAFORSEO_API_URL="https://sandbox.dataforseo.com/v3",
            DATAFORSEO_TIMEOUT="15",
        )
    )

    assert isinstance(clients.dataforseo, DataForSeoClient)
    assert clients.dataforseo.login == "test-login"
    assert clients.dataforseo.password == "test-password"
    assert clients.dataforseo.base_url == "https://sandbox.dataforseo.com/v3"
    assert clients.dataforseo.timeout == 15.0
    assert clients.localfalcon is None


def test_localfalcon_client_needs_a_key(make_settings):
    clients = create_clients(
        make_settings(LOCALFALCON_API_KEY="lf-key", LOCALFALCON_TIMEOUT="5")
    )

    assert isinstance(clients.localfalcon, LocalFalconClient)
    assert clients.localfalcon.api_key == "lf-key"
    assert clients.localfalcon.base_url == "https://api.localfalcon.com"
    assert clients.localfalcon.timeout == 5.0


def test_task_path_segments():
    assert [method.value for method in ApiMethod] == [
        "task_post",
        "tasks_ready",
        "task_get",
    ]
