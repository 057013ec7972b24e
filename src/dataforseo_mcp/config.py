import os
from dataclasses import dataclass
from typing import Mapping, Optional, FrozenSet

from dotenv import load_dotenv


DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 8080
DEFAULT_METRICS_PORT = 9091
DEFAULT_TIMEOUT = 60.0


class ConfigurationError(ValueError):
    """Raised when required settings are missing or malformed"""


def parse_enabled_modules(value: Optional[str]) -> Optional[FrozenSet[str]]:
    """Parse ENABLED_MODULES into an upper-cased set, or None when unset"""
    if not value:
        return None
    modules = frozenset(m.strip().upper() for m in value.split(",") if m.strip())
    return modules or None


def parse_enabled_tools(value: Optional[str]) -> Optional[FrozenSet[str]]:
    """Parse ENABLED_TOOLS into a lower-cased set, or None when unset"""
    if not value:
        return None
    tools = frozenset(t.strip().lower() for t in value.split(",") if t.strip())
    return tools or None


@dataclass(frozen=True)
class Settings:
    dataforseo_login: str
    dataforseo_password: str
    dataforseo_api_url: Optional[str] = None
    dataforseo_timeout: float = DEFAULT_TIMEOUT
    localfalcon_api_key: Optional[str] = None
    localfalcon_api_url: Optional[str] = None
    localfalcon_timeout: float = DEFAULT_TIMEOUT
    enabled_modules: Optional[FrozenSet[str]] = None
    enabled_tools: Optional[FrozenSet[str]] = None
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    metrics_port: int = DEFAULT_METRICS_PORT

    @property
    def localfalcon_enabled(self) -> bool:
        return bool(self.localfalcon_api_key)


def _number(environ: Mapping[str, str], key: str, default, cast):
    raw = environ.get(key)
    if raw is None or raw.strip() == "":
        return default
    try:
        return cast(raw.strip())
    except ValueError:
        raise ConfigurationError(f"Invalid value for {key}: {raw!r}")


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """
    Build Settings from the environment

    Args:
        environ: Mapping to read from. Defaults to os.environ after loading a .env file.

    Raises:
        ConfigurationError: If DataForSEO credentials are missing or a value is malformed
    """
    if environ is None:
        load_dotenv()
        environ = os.environ

    login = environ.get("DATAFORSEO_LOGIN", "").strip()
    password = environ.get("DATAFORSEO_PASSWORD", "").strip()
    if not login or not password:
        raise ConfigurationError(
            "DataForSEO API credentials not provided. "
            "Please set DATAFORSEO_LOGIN and DATAFORSEO_PASSWORD environment variables"
        )

    return Settings(
        dataforseo_login=login,
        dataforseo_password=password,
        dataforseo_api_url=environ.get("DATAFORSEO_API_URL") or None,
        dataforseo_timeout=_number(
            environ, "DATAFORSEO_TIMEOUT", DEFAULT_TIMEOUT, float
        ),
        localfalcon_api_key=environ.get("LOCALFALCON_API_KEY") or None,
        localfalcon_api_url=environ.get("LOCALFALCON_API_URL") or None,
        localfalcon_timeout=_number(
            environ, "LOCALFALCON_TIMEOUT", DEFAULT_TIMEOUT, float
        ),
        enabled_modules=parse_enabled_modules(environ.get("ENABLED_MODULES")),
        enabled_tools=parse_enabled_tools(environ.get("ENABLED_TOOLS")),
        host=environ.get("HOST") or DEFAULT_HOST,
        port=_number(environ, "PORT", DEFAULT_PORT, int),
        metrics_port=_number(environ, "METRICS_PORT", DEFAULT_METRICS_PORT, int),
    )
