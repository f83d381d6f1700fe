from __future__ import annotations

from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Callable, List, Optional, Protocol

import httpx

from la_events.config import Settings
from la_events.domain.models import Event
from la_events.infra.logging import get_logger

logger = get_logger(__name__)

# Payload-shape problems raised while walking a provider response
MAPPING_ERRORS = (KeyError, TypeError, ValueError, AttributeError)


class EventsProvider(Protocol):
    """Contract for external event providers."""

    name: str

    async def fetch_events(self) -> List[Event]:
        """Return normalized events; an empty list when the source is unavailable.

        Implementations never raise for configuration or upstream problems.
        """
        raise NotImplementedError


class HttpEventsProvider:
    """Shared plumbing for providers backed by a JSON HTTP API.

    Subclasses set ``name``, implement ``_fetch`` and map raw items with
    ``_map_items``. A missing API key, a failed call or an unexpected payload
    all degrade to an empty list.
    """

    name: str = ""
    api_key_env: str = ""

    def __init__(
        self,
        api_key: Optional[str] = None,
        *,
        settings: Optional[Settings] = None,
        client: Optional[httpx.AsyncClient] = None,
        timeout: Optional[float] = None,
    ) -> None:
        if not self.name:
            raise ValueError("Provider subclass must set 'name'")
        self.settings = settings or Settings.from_env()
        self.api_key = api_key if api_key is not None else self._configured_key(self.settings)
        self.timeout = timeout if timeout is not None else self.settings.http_timeout
        self._client = client
        self._missing_key_logged = False

    def _configured_key(self, settings: Settings) -> Optional[str]:
        raise NotImplementedError

    @property
    def configured(self) -> bool:
        return bool(self.api_key)

    async def fetch_events(self) -> List[Event]:
        if not self.api_key:
            if not self._missing_key_logged:
                logger.info("provider_not_configured", provider=self.name, env_var=self.api_key_env)
                self._missing_key_logged = True
            return []
        try:
            async with self._session() as client:
                events = await self._fetch(client)
        except httpx.HTTPError as exc:
            logger.warning("provider_http_error", provider=self.name, error=str(exc))
            return []
        except MAPPING_ERRORS as exc:
            logger.warning("provider_bad_payload", provider=self.name, error=repr(exc))
            return []
        logger.info("provider_fetched", provider=self.name, count=len(events))
        return events

    async def _fetch(self, client: httpx.AsyncClient) -> List[Event]:
        raise NotImplementedError

    @asynccontextmanager
    async def _session(self) -> AsyncIterator[httpx.AsyncClient]:
        if self._client is not None:
            yield self._client
            return
        async with httpx.AsyncClient(timeout=self.timeout) as client:
            yield client

    async def _get_json(
        self,
        client: httpx.AsyncClient,
        url: str,
        *,
        params: dict,
        headers: Optional[dict] = None,
        label: Optional[str] = None,
    ) -> Optional[dict]:
        """GET ``url`` and decode a JSON object; ``None`` on any failure."""
        try:
            resp = await client.get(url, params=params, headers=headers)
        except httpx.HTTPError as exc:
            logger.warning("provider_request_failed", provider=self.name, query=label, error=str(exc))
            return None
        if resp.status_code < 200 or resp.status_code >= 300:
            logger.warning("provider_bad_status", provider=self.name, query=label, status=resp.status_code)
            return None
        try:
            data = resp.json()
        except ValueError:
            logger.warning("provider_invalid_json", provider=self.name, query=label)
            return None
        if not isinstance(data, dict):
            logger.warning("provider_unexpected_shape", provider=self.name, query=label)
            return None
        return data

    def _map_items(self, items: Any, mapper: Callable[[dict], Event]) -> List[Event]:
        if not isinstance(items, list):
            return []
        mapped: List[Event] = []
        skipped = 0
        for item in items:
            try:
                mapped.append(mapper(item))
            except MAPPING_ERRORS:
                skipped += 1
        if skipped:
            logger.debug("provider_items_skipped", provider=self.name, skipped=skipped)
        return mapped

    def _bearer_headers(self) -> dict:
        return {"Authorization": f"Bearer {self.api_key}"}
