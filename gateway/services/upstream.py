"""Base class for clients of the Shopify-backed product/order service"""

import logging
from typing import Any, Optional

import httpx

from ..config import UpstreamConfig
from ..exceptions import UpstreamUnavailableError

logger = logging.getLogger(__name__)


class UpstreamClient:
    """
    Thin wrapper around a shared ``httpx.AsyncClient``.

    The client is owned by the application lifespan and reused across
    requests. Each call is attempted once; timeouts and transport errors
    become ``UpstreamUnavailableError``. Cancelling the calling task (for
    instance when the inbound request is dropped) cancels the call.
    """

    service_name = "upstream"

    def __init__(self, client: httpx.AsyncClient, config: UpstreamConfig):
        self.client = client
        self.config = config

    def _url(self, path: str) -> str:
        return f"{self.config.base_url}/{path.lstrip('/')}"

    async def _request(self, method: str, path: str, **kwargs: Any) -> httpx.Response:
        url = self._url(path)
        try:
            response = await self.client.request(method, url, timeout=self.config.timeout, **kwargs)
        except httpx.TimeoutException as e:
            logger.error(f"⏱️ {self.service_name} timed out after {self.config.timeout}s: {method} {url} ({e})")
            raise UpstreamUnavailableError() from e
        except httpx.HTTPError as e:
            logger.error(f"❌ {self.service_name} request failed: {method} {url} ({e})")
            raise UpstreamUnavailableError() from e

        logger.debug(f"{self.service_name} {method} {url} -> {response.status_code}")
        return response

    async def _get(self, path: str, params: Optional[dict[str, Any]] = None) -> httpx.Response:
        return await self._request("GET", path, params=params)

    async def _post(self, path: str, payload: Any) -> httpx.Response:
        return await self._request("POST", path, json=payload)

    @staticmethod
    def _upstream_message(response: httpx.Response, default: str) -> str:
        """The `message` field of an upstream error body, if there is one"""
        try:
            body = response.json()
        except ValueError:
            return default
        if isinstance(body, dict) and isinstance(body.get("message"), str):
            return body["message"]
        return default

    def _raise_for_unavailable(self, response: httpx.Response) -> None:
        """Any non-2xx that the caller did not handle itself"""
        if response.is_success:
            return
        logger.error(
            f"❌ {self.service_name} error {response.status_code} for "
            f"{response.request.method} {response.request.url}: {response.text[:200]}"
        )
        raise UpstreamUnavailableError()

    @staticmethod
    def _json(response: httpx.Response) -> Any:
        try:
            return response.json()
        except ValueError as e:
            logger.error(f"❌ Upstream returned invalid JSON: {e}")
            raise UpstreamUnavailableError() from e
