from fastapi import APIRouter, Depends, Query
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import get_activity_log, get_clinic_id_factory
from app.core.config import settings
from app.core.db import get_db
from app.core.errors import StoreError
from app.models.system_log import LogPriority
from app.schemas.clinic import ClinicCreate, ClinicOut, ClinicSearchFilters
from app.services import catalog
from app.services.activity_log import ActivityLog
from app.services.ids import ClinicIdFactory

router = APIRouter(prefix="/clinics", tags=["clinics"])

ORIGIN = "ClinicsAPI"


# ---------- helpers ----------
def _split_service_ids(raw: list[str] | None) -> list[str]:
    # acepta ?services=SRV001&services=SRV003 y también ?services=SRV001,SRV003
    out: list[str] = []
    for item in raw or []:
        out.extend(part.strip() for part in item.split(",") if part.strip())
    return out


# ---------- list ----------
@router.get("", response_model=list[ClinicOut])
async def list_clinics(
    db: AsyncSession = Depends(get_db),
    log: ActivityLog = Depends(get_activity_log),
):
    await log.append("Fetching all clinics", origin=(ORIGIN, "list_clinics"))
    try:
        return await catalog.list_clinics(db)
    except SQLAlchemyError as exc:
        raise StoreError("Failed to fetch clinics", cause=exc, origin=(ORIGIN, "list_clinics")) from exc


# ---------- search (antes de /{clinic_id}) ----------
@router.get("/search", response_model=list[ClinicOut])
async def search_clinics(
    city: str | None = Query(None),
    state: str | None = Query(None),
    services: list[str] | None = Query(None),
    search_term: str | None = Query(None, alias="searchTerm"),
    db: AsyncSession = Depends(get_db),
    log: ActivityLog = Depends(get_activity_log),
):
    filters = ClinicSearchFilters(
        city=city, state=state, search_term=search_term,
        service_ids=_split_service_ids(services),
    ).normalized()
    await log.append(
        f"Searching clinics with filters: {filters.model_dump_json(by_alias=True, exclude_none=True)}",
        origin=(ORIGIN, "search_clinics"),
    )
    try:
        return await catalog.search_clinics(db, filters)
    except SQLAlchemyError as exc:
        raise StoreError("Failed to search clinics", cause=exc, origin=(ORIGIN, "search_clinics")) from exc


@router.get("/{clinic_id}", response_model=ClinicOut)
async def get_clinic(clinic_id: str, db: AsyncSession = Depends(get_db)):
    try:
        return await catalog.get_clinic(db, clinic_id)
    except SQLAlchemyError as exc:
        raise StoreError("Failed to fetch clinic", cause=exc, origin=(ORIGIN, "get_clinic")) from exc


# ---------- create ----------
@router.post("", response_model=ClinicOut, status_code=201)
async def create_clinic(
    payload: ClinicCreate,
    db: AsyncSession = Depends(get_db),
    log: ActivityLog = Depends(get_activity_log),
    id_factory: ClinicIdFactory = Depends(get_clinic_id_factory),
):
    await log.append(f"Creating new clinic: {payload.clinic_name}", LogPriority.Medium,
                     origin=(ORIGIN, "create_clinic"))

    clinic_id = await catalog.create_clinic(
        db, payload, id_factory=id_factory, max_id_attempts=settings.CLINIC_ID_MAX_ATTEMPTS,
    )
    await log.append(f"Clinic created successfully: {clinic_id}", origin=(ORIGIN, "create_clinic"))

    try:
        return await catalog.get_clinic(db, clinic_id)
    except SQLAlchemyError as exc:
        raise StoreError("Failed to fetch clinic", cause=exc, origin=(ORIGIN, "create_clinic")) from exc
