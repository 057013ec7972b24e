import abc
import logging
from typing import Any, Dict, Optional

import httpx

logger = logging.getLogger("provider-client")


class ProviderError(ValueError):
    """
    Failure reported by an upstream provider or by the transport to it.

    Attributes:
        status_code: HTTP status (or provider status code) when one is known
        payload: Structured error body returned by the provider, if any
    """

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        payload: Any = None,
    ):
        super().__init__(message)
        self.status_code = status_code
        self.payload = payload


class BaseProviderClient(abc.ABC):
    """
    Abstract base class for upstream API clients.

    A client is bound to one base URL and one set of credentials. It is shared by
    every tool handler that needs it and never mutated after construction.
    """

    provider_name = "Provider"

    def __init__(
        self,
        base_url: str,
        timeout: float = 60.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._transport = transport

    @abc.abstractmethod
    def client_options(self) -> Dict[str, Any]:
        """Extra keyword arguments (auth, headers) for httpx.AsyncClient"""
        pass

    @abc.abstractmethod
    def unwrap(self, method: str, path: str, body: Any) -> Any:
        """
        Turn a decoded response body into the payload handed to tool handlers

        Raises:
            ProviderError: If the body reports a provider-level failure
        """
        pass

    def request_options(self, method: str, body: Any) -> Dict[str, Any]:
        """Keyword arguments for a single request (json body, params, ...)"""
        if method == "POST":
            return {"json": body}
        return {}

    async def get(self, path: str) -> Any:
        return await self._request("GET", path)

    async def post(self, path: str, body: Any = None) -> Any:
        return await self._request("POST", path, body)

    async def _request(self, method: str, path: str, body: Any = None) -> Any:
        try:
            async with httpx.AsyncClient(
                base_url=self.base_url,
                timeout=self.timeout,
                transport=self._transport,
                **self.client_options(),
            ) as client:
                response = await client.request(
                    method, path, **self.request_options(method, body)
                )
                response.raise_for_status()
                try:
                    decoded = response.json()
                except ValueError:
                    raise ProviderError(
                        f"{self.provider_name} API returned a non-JSON response",
                        status_code=response.status_code,
                        payload=response.text,
                    )
            return self.unwrap(method, path, decoded)
        except httpx.HTTPStatusError as e:
            payload = _error_payload(e.response)
            error = ProviderError(
                f"{self.provider_name} API error: {e.response.status_code}",
                status_code=e.response.status_code,
                payload=payload,
            )
            self._log_error(method, path, error, str(e))
            raise error from e
        except httpx.HTTPError as e:
            error = ProviderError(
                f"Error communicating with {self.provider_name} API: {str(e)}"
            )
            self._log_error(method, path, error, str(e))
            raise error from e
        except ProviderError as e:
            self._log_error(method, path, e, str(e))
            raise

    def _log_error(self, method, path, error: ProviderError, raw_message: str):
        prefix = f"{self.provider_name} API {method} error ({path}):"
        if error.payload:
            logger.error(f"{prefix} {error.payload}")
        else:
            logger.error(f"{prefix} {raw_message}")


def _error_payload(response: httpx.Response) -> Any:
    try:
        return response.json()
    except ValueError:
        return response.text or None
