from pydantic import Field, field_validator
from typing import Optional
from datetime import datetime

from app.schemas.common import CamelModel


class ClinicServiceIn(CamelModel):
    service_id: str
    price: Optional[float] = Field(None, ge=0)   # None -> average_price del catálogo
    is_active: bool = True


class ClinicCreate(CamelModel):
    # todo opcional acá: los obligatorios los valida services.catalog y responde 400
    clinic_name: str = ""
    business_name: str = ""
    street_address: str = ""
    city: str = ""
    state: str = ""
    country: str = "United States"
    zip_code: str = ""
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    services: list[ClinicServiceIn] = []

    @field_validator("clinic_name", "business_name", "street_address", "city", "state", "country", "zip_code")
    @classmethod
    def _strip(cls, v: str) -> str:
        return v.strip()


class ClinicServiceOut(CamelModel):
    service_id: str
    service_name: str
    service_code: str
    description: Optional[str] = None
    price: float
    is_active: bool


class ClinicOut(CamelModel):
    id: str
    clinic_name: str
    business_name: str
    street_address: str
    city: str
    state: str
    country: str
    zip_code: str
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    date_created: datetime
    services: list[ClinicServiceOut] = []


class ClinicSearchFilters(CamelModel):
    city: Optional[str] = None
    state: Optional[str] = None
    search_term: Optional[str] = None
    service_ids: list[str] = []

    def normalized(self) -> "ClinicSearchFilters":
        """Blank text counts as absent; service ids trimmed and de-duplicated in order."""
        def clean(v: Optional[str]) -> Optional[str]:
            v = (v or "").strip()
            return v or None

        seen: list[str] = []
        for sid in self.service_ids:
            sid = sid.strip()
            if sid and sid not in seen:
                seen.append(sid)
        return ClinicSearchFilters(
            city=clean(self.city),
            state=clean(self.state),
            search_term=clean(self.search_term),
            service_ids=seen,
        )

    def is_empty(self) -> bool:
        n = self.normalized()
        return not (n.city or n.state or n.search_term or n.service_ids)
