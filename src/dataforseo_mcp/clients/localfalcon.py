from typing import Any, Dict, Optional

import httpx

from .base import BaseProviderClient, ProviderError

LOCALFALCON_API_URL = "https://api.localfalcon.com"


class LocalFalconClient(BaseProviderClient):
    """
    Client for the Local Falcon API.

    The API key travels as the ``api_key`` parameter: in the query string for GET
    and as a form field for POST. Responses use a ``{code, success, message, data}``
    envelope which is unwrapped to ``data``.
    """

    provider_name = "Local Falcon"

    def __init__(
        self,
        api_key: str,
        base_url: Optional[str] = None,
        timeout: float = 60.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        if not api_key:
            raise ValueError("Local Falcon API key is required")
        super().__init__(base_url or LOCALFALCON_API_URL, timeout, transport)
        self.api_key = api_key

    def client_options(self) -> Dict[str, Any]:
        return {"headers": {"Accept": "application/json"}}

    def request_options(self, method: str, body: Any) -> Dict[str, Any]:
        if method == "POST":
            form = {"api_key": self.api_key}
            for key, value in (body or {}).items():
                if value is None:
                    continue
                if isinstance(value, bool):
                    value = "true" if value else "false"
                form[key] = str(value)
            return {"data": form}
        return {"params": {"api_key": self.api_key}}

    def unwrap(self, method: str, path: str, body: Any) -> Any:
        if not isinstance(body, dict) or "success" not in body:
            return body
        if not body["success"]:
            raise ProviderError(
                f"Local Falcon API error: {body.get('message') or 'Unknown error'}",
                status_code=body.get("code"),
                payload=body,
            )
        return body.get("data")
