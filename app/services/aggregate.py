from collections.abc import Iterable, Mapping
from typing import Any

_CLINIC_FIELDS = (
    "clinic_name", "business_name", "street_address", "city", "state",
    "country", "zip_code", "latitude", "longitude", "date_created",
)


def fold_clinic_rows(rows: Iterable[Mapping[str, Any]]) -> list[dict[str, Any]]:
    """Fold flat clinic x service rows into one dict per clinic.

    A clinic's position is fixed by the first row carrying its id, and its
    services keep row order. Rows whose ``service_id`` is null (clinic with no
    offerings) add the clinic but no service entry.
    """
    clinics: dict[str, dict[str, Any]] = {}

    for row in rows:
        cid = row["clinic_id"]
        clinic = clinics.get(cid)
        if clinic is None:
            clinic = {"id": cid, **{k: row[k] for k in _CLINIC_FIELDS}, "services": []}
            clinics[cid] = clinic

        if row["service_id"] is None:
            continue
        clinic["services"].append({
            "service_id": row["service_id"],
            "service_name": row["service_name"],
            "service_code": row["service_code"],
            "description": row["service_description"],
            "price": row["service_price"],
            "is_active": bool(row["service_is_active"]),
        })

    return list(clinics.values())
