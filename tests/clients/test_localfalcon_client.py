from urllib.parse import parse_qs

import pytest

from dataforseo_mcp.clients import LocalFalconClient, ProviderError


def form_of(request):
    return {key: values[0] for key, values in parse_qs(request.content.decode()).items()}


def test_api_key_is_required():
    with pytest.raises(ValueError):
        LocalFalconClient("")


@pytest.mark.asyncio
async def test_post_sends_form_with_api_key(provider, localfalcon_client):
    provider.route(
        "POST",
        "/v1/run-scan/",
        {"code": 200, "success": True, "message": "", "data": {"report_key": "abc"}},
    )

    data = await localfalcon_client.post(
        "/v1/run-scan/",
        {"place_id": "ChIJ", "grid_size": "7", "ai_analysis": True, "platform": None},
    )

    assert data == {"report_key": "abc"}
    request = provider.last_request
    assert request.headers["content-type"] == "application/x-www-form-urlencoded"
    assert form_of(request) == {
        "api_key": "test-key",
        "place_id": "ChIJ",
        "grid_size": "7",
        "ai_analysis": "true",
    }


@pytest.mark.asyncio
async def test_get_sends_api_key_as_query(provider, localfalcon_client):
    provider.route("GET", "/v1/account/", {"success": True, "data": {"credits": 10}})

    assert await localfalcon_client.get("/v1/account/") == {"credits": 10}
    assert provider.last_request.url.params["api_key"] == "test-key"


@pytest.mark.asyncio
async def test_unsuccessful_envelope_is_raised(provider, localfalcon_client):
    envelope = {"code": 401, "success": False, "message": "Invalid API key"}
    provider.route("POST", "/v1/locations/", envelope)

    with pytest.raises(ProviderError) as excinfo:
        await localfalcon_client.post("/v1/locations/", {})

    assert str(excinfo.value) == "Local Falcon API error: Invalid API key"
    assert excinfo.value.status_code == 401
    assert excinfo.value.payload == envelope


@pytest.mark.asyncio
async def test_body_without_envelope_is_returned_as_is(provider, localfalcon_client):
    provider.route("POST", "/v1/locations/", [{"place_id": "ChIJ"}])

    assert await localfalcon_client.post("/v1/locations/", {}) == [{"place_id": "ChIJ"}]
