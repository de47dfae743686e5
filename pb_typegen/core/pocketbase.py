from __future__ import annotations
import logging
import httpx
from dataclasses import dataclass
from typing import List, Optional
from pb_typegen.core.config import Settings
from pb_typegen.core.workflow import TypegenStage
from pb_typegen.schemas.collections import CollectionDescriptor

log = logging.getLogger(__name__)


class PocketBaseError(RuntimeError):
    """Raised when the PocketBase server answers with an unusable payload."""


@dataclass
class PocketBaseClient:
    url: str
    auth_collection: str = "_superusers"
    timeout: Optional[float] = None
    transport: Optional[httpx.AsyncBaseTransport] = None
    token: Optional[str] = None

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=self.url.rstrip("/"),
            timeout=self.timeout,
            transport=self.transport,
        )

    def _headers(self) -> dict:
        if not self.token:
            return {}
        return {"Authorization": self.token}

    async def auth_with_password(self, identity: str, password: str) -> dict:
        path = f"/api/collections/{self.auth_collection}/auth-with-password"
        async with self._client() as client:
            r = await client.post(path, json={"identity": identity, "password": password})
            r.raise_for_status()
            data = r.json()
        token = data.get("token")
        if not token:
            raise PocketBaseError(f"No token in auth response from {self.auth_collection}")
        self.token = token
        return data

    async def get_full_collection_list(self, per_page: int = 500) -> List[CollectionDescriptor]:
        collections: List[CollectionDescriptor] = []
        page = 1
        async with self._client() as client:
            while True:
                r = await client.get(
                    "/api/collections",
                    params={"page": page, "perPage": per_page},
                    headers=self._headers(),
                )
                r.raise_for_status()
                data = r.json()
                items = data.get("items")
                if items is None:
                    raise PocketBaseError("Collections response has no items")
                collections.extend(CollectionDescriptor.model_validate(item) for item in items)
                if not items or page >= data.get("totalPages", page):
                    break
                page += 1
        return collections


async def fetch_collections(
    settings: Settings,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> List[CollectionDescriptor]:
    """Authenticate against PocketBase and fetch the full collection list."""
    extra = {"stage": TypegenStage.FETCH_SCHEMA.value}
    client = PocketBaseClient(
        url=settings.url,
        auth_collection=settings.auth_collection,
        timeout=settings.request_timeout,
        transport=transport,
    )
    log.info("Authenticating against %s", settings.url, extra=extra)
    await client.auth_with_password(settings.username, settings.password)
    collections = await client.get_full_collection_list(per_page=settings.page_size)
    log.info("Fetched %d collections", len(collections), extra=extra)
    return collections
