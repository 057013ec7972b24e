from enum import Enum, IntEnum
from typing import Any, Dict, Optional

import httpx

from .base import BaseProviderClient, ProviderError

DATAFORSEO_API_URL = "https://api.dataforseo.com/v3"


class StatusCode(IntEnum):
    """Status codes found in the DataForSEO response envelope"""

    SUCCESS = 20000
    TASK_CREATED = 20100
    NO_RESULTS = 20011
    ERROR = 40000
    AUTH_ERROR = 40100
    INVALID_PARAMETERS = 40200


class ApiMethod(str, Enum):
    """Path segments of the DataForSEO task calling convention"""

    TASK_POST = "task_post"
    TASKS_READY = "tasks_ready"
    TASK_GET = "task_get"


def is_success_status(code: Any) -> bool:
    """2xxxx codes are successes (20000 ok, 20100 task created, 20011 no results)"""
    return isinstance(code, int) and 20000 <= code < 30000


class DataForSeoClient(BaseProviderClient):
    """
    Client for the DataForSEO v3 REST API.

    Authenticates with HTTP basic auth. Responses are returned as decoded JSON;
    an envelope whose top-level status_code is not a success is raised as a
    ProviderError carrying the whole envelope as payload.
    """

    provider_name = "DataForSEO"

    def __init__(
        self,
        login: str,
        password: str,
        base_url: Optional[str] = None,
        timeout: float = 60.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        super().__init__(base_url or DATAFORSEO_API_URL, timeout, transport)
        self.login = login
        self.password = password

    def client_options(self) -> Dict[str, Any]:
        return {
            "auth": (self.login, self.password),
            "headers": {"Content-Type": "application/json"},
        }

    def unwrap(self, method: str, path: str, body: Any) -> Any:
        if isinstance(body, dict) and "status_code" in body:
            code = body["status_code"]
            if not is_success_status(code):
                message = body.get("status_message") or "Unknown error"
                raise ProviderError(
                    f"DataForSEO API error {code}: {message}",
                    status_code=code,
                    payload=body,
                )
        return body
