import pytest

from dataforseo_mcp.config import (
    DEFAULT_METRICS_PORT,
    DEFAULT_PORT,
    ConfigurationError,
    load_settings,
    parse_enabled_modules,
    parse_enabled_tools,
)


class TestParseEnabledModules:
    def test_unset_or_empty_means_no_filter(self):
        assert parse_enabled_modules(None) is None
        assert parse_enabled_modules("") is None
        assert parse_enabled_modules(" , ") is None

    def test_single_module(self):
        assert parse_enabled_modules("SERP") == {"SERP"}

    def test_multiple_modules(self):
        assert parse_enabled_modules("SERP,BUSINESS_DATA,LABS") == {
            "SERP",
            "BUSINESS_DATA",
            "LABS",
        }

    def test_upper_cases_and_trims(self):
        assert parse_enabled_modules("  serp  ,  business_data  ") == {
            "SERP",
            "BUSINESS_DATA",
        }


class TestParseEnabledTools:
    def test_unset_or_empty_means_no_filter(self):
        assert parse_enabled_tools(None) is None
        assert parse_enabled_tools("") is None

    def test_lower_cases_and_trims(self):
        assert parse_enabled_tools(
            "  SERP_Google_Maps_Live  ,  business_data_google_my_business_info  "
        ) == {"serp_google_maps_live", "business_data_google_my_business_info"}


def test_missing_credentials_is_fatal():
    with pytest.raises(ConfigurationError, match="DATAFORSEO_LOGIN"):
        load_settings({})
    with pytest.raises(ConfigurationError):
        load_settings({"DATAFORSEO_LOGIN": "user", "DATAFORSEO_PASSWORD": "  "})


def test_defaults():
    settings = load_settings({"DATAFORSEO_LOGIN": "u", "DATAFORSEO_PASSWORD": "p"})

    assert settings.dataforseo_login == "u"
    assert settings.dataforseo_password == "p"
    assert settings.port == DEFAULT_PORT
    assert settings.metrics_port == DEFAULT_METRICS_PORT
    assert settings.dataforseo_timeout == 60.0
    assert settings.enabled_modules is None
    assert settings.enabled_tools is None
    assert not settings.localfalcon_enabled


def test_optional_values(make_settings):
    settings = make_settings(
        LOCALFALCON_API_KEY="lf-key",
        LOCALFALCON_API_URL="https://lf.example.com",
        DATAFORSEO_TIMEOUT="12.5",
        PORT="9000",
        METRICS_PORT="0",
        ENABLED_MODULES="serp",
        ENABLED_TOOLS="Backlinks_Summary",
    )

    assert settings.localfalcon_enabled
    assert settings.localfalcon_api_url == "https://lf.example.com"
    assert settings.dataforseo_timeout == 12.5
    assert settings.port == 9000
    assert settings.metrics_port == 0
    assert settings.enabled_modules == {"SERP"}
    assert settings.enabled_tools == {"backlinks_summary"}


def test_invalid_number_is_a_configuration_error(make_settings):
    with pytest.raises(ConfigurationError, match="PORT"):
        make_settings(PORT="eighty")
