from .base import BaseProviderClient, ProviderError
from .dataforseo import ApiMethod, DataForSeoClient, StatusCode
from .localfalcon import LocalFalconClient
from .factory import ProviderClients, create_clients

__all__ = [
    "ApiMethod",
    "BaseProviderClient",
    "DataForSeoClient",
    "LocalFalconClient",
    "ProviderClients",
    "ProviderError",
    "StatusCode",
    "create_clients",
]
