import logging
from typing import Any, Dict, Mapping, Optional, Protocol

import httpx

from ..error import DeliveryError

__all__ = ["DeliverySink", "HttpDeliverySink"]

logger = logging.getLogger(__name__)


class DeliverySink(Protocol):
    """Pushes subscription results to callback URLs.

    A failed push must be reported by raising a
    :class:`~graphql_webhooks.error.DeliveryError`.
    """

    async def deliver(self, url: str, payload: Dict[str, Any]) -> None:
        ...  # pragma: no cover


class HttpDeliverySink:
    """Delivery sink posting every payload as JSON body to the callback URL.

    An ``httpx.AsyncClient`` can be passed in, otherwise one is created on first use
    and closed by :meth:`aclose`. Responses with an error status count as failed
    deliveries.
    """

    default_timeout = 10.0

    def __init__(
        self,
        client: Optional[httpx.AsyncClient] = None,
        timeout: Optional[float] = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> None:
        self._client = client
        self._owns_client = client is None
        self.timeout = self.default_timeout if timeout is None else timeout
        self.headers = dict(headers or {})

    @property
    def client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=self.timeout, headers=self.headers)
        return self._client

    async def deliver(self, url: str, payload: Dict[str, Any]) -> None:
        """Post the payload to the given URL."""
        try:
            response = await self.client.post(url, json=payload)
            response.raise_for_status()
        except (httpx.HTTPError, httpx.InvalidURL) as error:
            raise DeliveryError(url, error) from error
        logger.debug("Delivered payload to %s (%d).", url, response.status_code)

    async def aclose(self) -> None:
        """Close the HTTP client if it was created by the sink."""
        if not self._owns_client or self._client is None:
            return
        client, self._client = self._client, None
        await client.aclose()

    async def __aenter__(self) -> "HttpDeliverySink":
        return self

    async def __aexit__(self, *_exc_info: Any) -> None:
        await self.aclose()
