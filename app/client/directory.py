"""Async client for the directory API, as used by the staff UI.

It owns the search cache: repeated searches with the same (canonical) filters
are answered locally, and every successful clinic creation empties the cache.
"""
import logging
from collections.abc import Mapping
from typing import Any, Optional

import httpx

from app.client.cache import ClinicCache, as_filters, filter_key
from app.schemas.clinic import ClinicSearchFilters

logger = logging.getLogger(__name__)


class DirectoryAPIError(Exception):
    def __init__(self, status_code: int, detail: str, errors: Optional[dict] = None):
        super().__init__(f"HTTP {status_code}: {detail}")
        self.status_code = status_code
        self.detail = detail
        self.errors = errors or {}


class DirectoryClient:
    def __init__(self, http: httpx.AsyncClient, cache: Optional[ClinicCache] = None):
        self.http = http
        self.cache = cache if cache is not None else ClinicCache()

    async def _request(self, method: str, path: str, **kwargs) -> Any:
        r = await self.http.request(method, path, **kwargs)
        if r.status_code >= 400:
            try:
                body = r.json()
            except ValueError:
                body = {}
            detail = body.get("detail") if isinstance(body, dict) else None
            raise DirectoryAPIError(
                r.status_code,
                detail if isinstance(detail, str) else r.reason_phrase,
                body.get("errors") if isinstance(body, dict) else None,
            )
        return r.json()

    # ---------- catálogo ----------
    async def list_services(self) -> list[dict]:
        return await self._request("GET", "/services")

    async def list_clinics(self) -> list[dict]:
        clinics = await self._request("GET", "/clinics")
        logger.info("loaded %d clinics", len(clinics))
        return clinics

    async def get_clinic(self, clinic_id: str) -> dict:
        return await self._request("GET", f"/clinics/{clinic_id}")

    async def search_clinics(self, filters: ClinicSearchFilters | Mapping[str, Any] | None = None) -> list[dict]:
        f = as_filters(filters)
        key = filter_key(f)
        cached = self.cache.get(key)
        if cached is not None:
            logger.debug("cache hit for %s", key)
            return cached

        logger.debug("cache miss for %s", key)
        params = _search_params(f)
        result = await self._request("GET", "/clinics/search", params=params)
        self.cache.put(key, result)
        return result

    async def create_clinic(self, payload: Mapping[str, Any]) -> dict:
        created = await self._request("POST", "/clinics", json=dict(payload))
        self.cache.clear()
        logger.info("clinic %s created, search cache cleared", created.get("id"))
        return created

    async def refresh(self) -> list[dict]:
        self.cache.clear()
        return await self.list_clinics()

    def cache_stats(self) -> dict[str, Any]:
        return self.cache.stats()

    # ---------- logs ----------
    async def list_logs(self, type: Optional[str] = None, priority: Optional[str] = None,
                        limit: Optional[int] = None) -> list[dict]:
        params = {k: v for k, v in {"type": type, "priority": priority, "limit": limit}.items() if v is not None}
        return await self._request("GET", "/logs", params=params)

    async def clear_logs(self) -> dict:
        return await self._request("DELETE", "/logs")

    async def health(self) -> dict:
        return await self._request("GET", "/health")


def _search_params(filters: ClinicSearchFilters) -> dict[str, Any]:
    # filtros ya normalizados; se mandan con su mayúscula/minúscula original
    params: dict[str, Any] = {}
    if filters.city:
        params["city"] = filters.city
    if filters.state:
        params["state"] = filters.state
    if filters.search_term:
        params["searchTerm"] = filters.search_term
    if filters.service_ids:
        params["services"] = filters.service_ids
    return params
