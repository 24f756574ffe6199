"""Builds the clinic listing/search statements.

Every statement returns one row per clinic x service pair (outer joined, so a
clinic without services still yields a single row with null service columns).
The row labels are the contract with :mod:`app.services.aggregate`.
"""
from sqlalchemy import Select, select

from app.models.clinic import Clinic
from app.models.links import ClinicService
from app.models.service import Service
from app.schemas.clinic import ClinicSearchFilters


def clinic_rows() -> Select:
    return (
        select(
            Clinic.id.label("clinic_id"),
            Clinic.clinic_name,
            Clinic.business_name,
            Clinic.street_address,
            Clinic.city,
            Clinic.state,
            Clinic.country,
            Clinic.zip_code,
            Clinic.latitude,
            Clinic.longitude,
            Clinic.date_created,
            Service.id.label("service_id"),
            Service.name.label("service_name"),
            Service.code.label("service_code"),
            Service.description.label("service_description"),
            ClinicService.price.label("service_price"),
            ClinicService.is_active.label("service_is_active"),
        )
        .select_from(Clinic)
        .outerjoin(ClinicService, ClinicService.clinic_id == Clinic.id)
        .outerjoin(Service, Service.id == ClinicService.service_id)
    )


def _ordered(q: Select) -> Select:
    return q.order_by(Clinic.date_created.desc(), Clinic.id.desc(), Service.name.asc())


def build_listing() -> Select:
    return _ordered(clinic_rows())


def build_clinic(clinic_id: str) -> Select:
    return _ordered(clinic_rows().where(Clinic.id == clinic_id))


def build_search(filters: ClinicSearchFilters) -> Select:
    f = filters.normalized()
    q = clinic_rows()

    if f.city:
        q = q.where(Clinic.city.icontains(f.city, autoescape=True))
    if f.state:
        q = q.where(Clinic.state.icontains(f.state, autoescape=True))
    if f.search_term:
        q = q.where(
            Clinic.clinic_name.icontains(f.search_term, autoescape=True)
            | Clinic.business_name.icontains(f.search_term, autoescape=True)
        )
    if f.service_ids:
        # al menos uno de los servicios pedidos, no el conjunto exacto
        offering = select(ClinicService.clinic_id).where(ClinicService.service_id.in_(f.service_ids))
        q = q.where(Clinic.id.in_(offering))

    return _ordered(q)
