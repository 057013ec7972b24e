import logging
from dataclasses import dataclass
from typing import Optional

from ..config import Settings
from .dataforseo import DataForSeoClient
from .localfalcon import LocalFalconClient

logger = logging.getLogger("client-factory")


@dataclass(frozen=True)
class ProviderClients:
    dataforseo: DataForSeoClient
    localfalcon: Optional[LocalFalconClient] = None


def create_clients(settings: Settings) -> ProviderClients:
    """
    Create one client per configured provider

    The DataForSEO client is always created. The Local Falcon client only exists
    when LOCALFALCON_API_KEY is set.
    """
    dataforseo = DataForSeoClient(
        settings.dataforseo_login,
        settings.dataforseo_password,
        base_url=settings.dataforseo_api_url,
        timeout=settings.dataforseo_timeout,
    )

    localfalcon = None
    if settings.localfalcon_enabled:
        logger.info("Local Falcon API key found - Local Falcon client enabled")
        localfalcon = LocalFalconClient(
            settings.localfalcon_api_key,
            base_url=settings.localfalcon_api_url,
            timeout=settings.localfalcon_timeout,
        )
    else:
        logger.info(
            "Local Falcon API key not found - skipping Local Falcon integration. "
            "To enable, set the LOCALFALCON_API_KEY environment variable"
        )

    return ProviderClients(dataforseo=dataforseo, localfalcon=localfalcon)
