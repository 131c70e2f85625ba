"""Data Dragon client for static game data."""
import logging
from typing import Any, Optional
import httpx

from config import ClientConfig
from domain.exceptions import MalformedResponse, RequestTimeout, TransportFailure, UnexpectedStatus

logger = logging.getLogger(__name__)


class DataDragonClient:
    """
    Asynchronous client for Riot's static Data Dragon CDN.

    The CDN needs no API key and is not rate limited, so requests go out
    directly. Errors map onto the same ``RiotAPIError`` types as the API client.
    """

    def __init__(self, config: ClientConfig, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.config  = config
        self.session: Optional[httpx.AsyncClient] = None
        self._transport = transport

    async def __aenter__(self):
        self.session = httpx.AsyncClient(
            base_url=self.config.ddragon_url,
            timeout=self.config.request_timeout,
            transport=self._transport,
        )
        return self

    async def __aexit__(self, *_):
        if self.session:
            await self.session.aclose()
            self.session = None

    async def _get_json(self, path: str) -> Any:
        if self.session is None:
            raise RuntimeError("DataDragonClient must be used as an async context manager")

        try:
            response = await self.session.get(path)
        except httpx.TimeoutException as exc:
            logger.warning(f"Timeout for {path}: {exc}")
            raise RequestTimeout(url=path) from exc
        except httpx.HTTPError as exc:
            logger.error(f"Network error for {path}: {exc}")
            raise TransportFailure(url=path) from exc

        if response.status_code != 200:
            logger.warning(f"HTTP {response.status_code} for {path}")
            raise UnexpectedStatus(response.status_code, url=path)
        try:
            return response.json()
        except ValueError as exc:
            raise MalformedResponse(url=path) from exc

    async def get_realm(self, realm: str) -> Any:
        """Current data versions of a realm such as ``na`` or ``euw``."""
        return await self._get_json(f"/realms/{realm}.json")

    async def get_champions(self, version: str, locale: str) -> Any:
        return await self._get_json(f"/cdn/{version}/data/{locale}/champion.json")
