"""Session-scoped cache of search results, keyed by a canonical filter key."""
import json
from collections.abc import Mapping
from typing import Any

from app.schemas.clinic import ClinicSearchFilters


def as_filters(filters: ClinicSearchFilters | Mapping[str, Any] | None) -> ClinicSearchFilters:
    """Normalized filters as the caller wrote them: trimmed, blanks dropped, case kept."""
    if filters is None:
        filters = ClinicSearchFilters()
    elif not isinstance(filters, ClinicSearchFilters):
        data = dict(filters)
        if "services" in data:   # forma del formulario de búsqueda
            data.setdefault("service_ids", data.pop("services"))
        filters = ClinicSearchFilters.model_validate(data)
    return filters.normalized()


def filter_key(filters: ClinicSearchFilters | Mapping[str, Any] | None) -> str:
    """Canonical key for a filter set.

    Blank fields are dropped, text is trimmed and lower-cased (matching is
    case-insensitive anyway) and service ids are de-duplicated and sorted, so
    logically identical filters always land on the same entry. Only used for
    lookups; requests are built from `as_filters`.
    """
    f = as_filters(filters)

    canonical: dict[str, Any] = {}
    for name in ("city", "state", "search_term"):
        value = getattr(f, name)
        if value:
            canonical[name] = value.lower()
    if f.service_ids:
        canonical["service_ids"] = sorted(set(f.service_ids))
    return json.dumps(canonical, sort_keys=True, separators=(",", ":"))


class ClinicCache:
    """No eviction, no TTL, no size bound. Do not share across sessions.

    Entries are stored and handed out as shallow copies of the result list,
    so reordering what `get` returns does not touch the cached entry. The
    clinic dicts inside are shared.
    """

    def __init__(self) -> None:
        self._entries: dict[str, list[dict]] = {}
        self.hits = 0
        self.misses = 0

    def get(self, key: str) -> list[dict] | None:
        if key in self._entries:
            self.hits += 1
            return list(self._entries[key])
        self.misses += 1
        return None

    def put(self, key: str, result: list[dict]) -> None:
        self._entries[key] = list(result)

    def clear(self) -> None:
        self._entries.clear()

    def stats(self) -> dict[str, Any]:
        return {
            "size": len(self._entries),
            "keys": list(self._entries),
            "hits": self.hits,
            "misses": self.misses,
        }

    def __len__(self) -> int:
        return len(self._entries)
