"""REST client for the Asterix API.

Endpoints (relative to api_url + api_prefix, default "/api/asterix"):

    GET    /characters/page-data      -> CharactersPageData
    GET    /villages/page-data        -> VillagesPageData
    POST   /characters/add            CharacterInput -> Character
    PUT    /characters/update/{id}    CharacterInput -> Character
    DELETE /characters/remove         {"id": ...}
    POST   /villages/add              VillageInput -> Village
    PUT    /villages/update/{id}      VillageInput -> Village
    DELETE /villages/remove           {"id": ...}

Every public method returns Ok(value) or Err(error). Transport problems
become NetworkFailure, response bodies that do not validate become
ShapeMismatch. Nothing is raised to the caller. A successful remove carries
no payload; the response body is not inspected.

Tests can pass an httpx transport (e.g. httpx.ASGITransport wrapping the
FastAPI app) instead of going over the network.
"""

from __future__ import annotations

import logging
from typing import Any, TypeVar

import httpx
from pydantic import BaseModel

from asterix_client.errors import Err, NetworkFailure, Ok, Result, ShapeMismatch
from asterix_client.models import (
    Character,
    CharacterInput,
    CharactersPageData,
    EntityId,
    Village,
    VillageInput,
    VillagesPageData,
)
from asterix_client.validation import decode

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)


class AsterixClient:
    """Async HTTP client for the Asterix API.

    Args:
        api_url:    Base URL of the server, e.g. "http://localhost:13013".
        api_prefix: Path prefix of the Asterix routes.
        timeout:    HTTP timeout in seconds.
        transport:  Optional httpx transport, used instead of the network.
    """

    def __init__(
        self,
        api_url: str,
        api_prefix: str = "/api/asterix",
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._base_url = api_url.rstrip("/") + "/" + api_prefix.strip("/")
        self._timeout = timeout
        self._transport = transport

    @classmethod
    def from_config(cls, config: dict[str, Any]) -> AsterixClient:
        return cls(
            api_url=config["api_url"],
            api_prefix=config["api_prefix"],
            timeout=config["timeout"],
        )

    # ------------------------------------------------------------------
    # Page snapshots
    # ------------------------------------------------------------------

    async def characters_page(self) -> Result[CharactersPageData]:
        return await self._call(CharactersPageData, "GET", "characters/page-data")

    async def villages_page(self) -> Result[VillagesPageData]:
        return await self._call(VillagesPageData, "GET", "villages/page-data")

    # ------------------------------------------------------------------
    # Characters
    # ------------------------------------------------------------------

    async def add_character(self, payload: CharacterInput) -> Result[Character]:
        return await self._call(Character, "POST", "characters/add", payload)

    async def update_character(self, character_id: str, payload: CharacterInput) -> Result[Character]:
        return await self._call(Character, "PUT", f"characters/update/{character_id}", payload)

    async def remove_character(self, character_id: str) -> Result[None]:
        return await self._call(None, "DELETE", "characters/remove", EntityId(id=character_id))

    # ------------------------------------------------------------------
    # Villages
    # ------------------------------------------------------------------

    async def add_village(self, payload: VillageInput) -> Result[Village]:
        return await self._call(Village, "POST", "villages/add", payload)

    async def update_village(self, village_id: str, payload: VillageInput) -> Result[Village]:
        return await self._call(Village, "PUT", f"villages/update/{village_id}", payload)

    async def remove_village(self, village_id: str) -> Result[None]:
        return await self._call(None, "DELETE", "villages/remove", EntityId(id=village_id))

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    async def _call(
        self,
        model: type[M] | None,
        method: str,
        path: str,
        body: BaseModel | None = None,
    ) -> Result[Any]:
        try:
            resp = await self._request(method, path, body)
        except NetworkFailure as e:
            logger.warning("%s %s failed: %s", method, path, e)
            return Err(e)
        if model is None:
            return Ok(None)
        try:
            data = resp.json()
        except ValueError as e:
            logger.warning("%s %s returned a non-JSON body", method, path)
            return Err(ShapeMismatch(model.__name__, [{"type": "json_invalid", "msg": str(e)}]))
        return decode(model, data)

    async def _request(self, method: str, path: str, body: BaseModel | None) -> httpx.Response:
        url = f"{self._base_url}/{path}"
        json_body = body.model_dump(by_alias=True) if body is not None else None
        logger.debug("asterix call %s %s", method, url)

        try:
            async with httpx.AsyncClient(timeout=self._timeout, transport=self._transport) as client:
                resp = await client.request(method, url, json=json_body)
                resp.raise_for_status()
        except httpx.ConnectError as e:
            raise NetworkFailure(f"Cannot connect to Asterix API at {self._base_url}") from e
        except httpx.HTTPStatusError as e:
            raise NetworkFailure(
                f"Asterix API returned HTTP {e.response.status_code}"
            ) from e
        except httpx.TimeoutException as e:
            raise NetworkFailure(f"Asterix API timed out after {self._timeout}s") from e
        except httpx.TransportError as e:
            raise NetworkFailure(f"Request to Asterix API failed: {e}") from e

        logger.debug("asterix response %s %s status=%d", method, url, resp.status_code)
        return resp
