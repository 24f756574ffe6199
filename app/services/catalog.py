"""Catalog store: services, clinics and their per-clinic pricing."""
import logging
import re
from datetime import datetime, timezone

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.errors import NotFoundError, StoreError, ValidationError
from app.models.clinic import Clinic
from app.models.links import ClinicService
from app.models.service import Service
from app.schemas.clinic import ClinicCreate, ClinicSearchFilters
from app.services.aggregate import fold_clinic_rows
from app.services.ids import ClinicIdFactory, gen_clinic_id
from app.services.search import build_clinic, build_listing, build_search

logger = logging.getLogger(__name__)

ORIGIN_CREATE = ("ClinicsService", "create_clinic")

REQUIRED_FIELDS = {
    "clinic_name": "Clinic name is required",
    "business_name": "Business name is required",
    "street_address": "Street address is required",
    "city": "City is required",
    "state": "State is required",
    "country": "Country is required",
    "zip_code": "ZIP code is required",
}
ZIP_RE = re.compile(r"^\d{5}(-\d{4})?$")


# ---------- lecturas ----------
async def list_services(db: AsyncSession) -> list[Service]:
    q = select(Service).where(Service.is_active.is_(True)).order_by(Service.id)
    return list((await db.execute(q)).scalars().all())


async def list_clinics(db: AsyncSession) -> list[dict]:
    rows = (await db.execute(build_listing())).mappings().all()
    return fold_clinic_rows(rows)


async def search_clinics(db: AsyncSession, filters: ClinicSearchFilters) -> list[dict]:
    rows = (await db.execute(build_search(filters))).mappings().all()
    return fold_clinic_rows(rows)


async def get_clinic(db: AsyncSession, clinic_id: str) -> dict:
    rows = (await db.execute(build_clinic(clinic_id))).mappings().all()
    found = fold_clinic_rows(rows)
    if not found:
        raise NotFoundError(f"Clinic not found: {clinic_id}", origin=("ClinicsService", "get_clinic"))
    return found[0]


# ---------- validación ----------
def validate_clinic(payload: ClinicCreate) -> None:
    errors: dict[str, str] = {}
    for field, msg in REQUIRED_FIELDS.items():
        if not getattr(payload, field):
            errors[field] = msg
    if payload.zip_code and not ZIP_RE.match(payload.zip_code):
        errors["zip_code"] = "Invalid ZIP code format"

    if not payload.services:
        errors["services"] = "At least one service must be provided"
    else:
        ids = [line.service_id for line in payload.services]
        dupes = sorted({sid for sid in ids if ids.count(sid) > 1})
        if dupes:
            errors["services"] = f"Duplicate services: {', '.join(dupes)}"

    if errors:
        if set(errors) == {"services"}:
            message = errors["services"]
        else:
            message = "Missing or invalid required fields"
        raise ValidationError(message, errors=errors, origin=ORIGIN_CREATE)


async def _catalog_prices(db: AsyncSession, service_ids: list[str]) -> dict[str, float]:
    q = select(Service.id, Service.average_price).where(
        Service.id.in_(service_ids), Service.is_active.is_(True)
    )
    prices = {sid: price for sid, price in (await db.execute(q)).all()}
    unknown = [sid for sid in service_ids if sid not in prices]
    if unknown:
        raise ValidationError(
            f"Unknown or inactive services: {', '.join(unknown)}",
            errors={"services": f"Unknown or inactive services: {', '.join(unknown)}"},
            origin=ORIGIN_CREATE,
        )
    return prices


async def _id_taken(db: AsyncSession, clinic_id: str) -> bool:
    found = (await db.execute(select(Clinic.id).where(Clinic.id == clinic_id))).scalar_one_or_none()
    return found is not None


async def _insert_clinic(db: AsyncSession, payload: ClinicCreate, id_factory: ClinicIdFactory, attempts: int) -> str:
    """Insert the clinic row under a fresh id, drawing again on any id collision.

    The clinic is the first write of the transaction, so a conflicting insert
    can be rolled back without losing anything.
    """
    for _ in range(attempts):
        candidate = id_factory()
        if await _id_taken(db, candidate):
            logger.info("clinic id %s already taken, drawing another", candidate)
            continue

        db.add(Clinic(
            id=candidate,
            clinic_name=payload.clinic_name,
            business_name=payload.business_name,
            street_address=payload.street_address,
            city=payload.city,
            state=payload.state,
            country=payload.country,
            zip_code=payload.zip_code,
            latitude=payload.latitude,
            longitude=payload.longitude,
            date_created=datetime.now(tz=timezone.utc),
        ))
        try:
            await db.flush()
        except IntegrityError:
            await db.rollback()
            # otro alta se quedó con el id entre el chequeo y el insert
            if not await _id_taken(db, candidate):
                raise
            logger.info("clinic id %s taken concurrently, drawing another", candidate)
            continue
        return candidate
    raise StoreError("Failed to allocate a clinic id", origin=ORIGIN_CREATE)


# ---------- alta ----------
async def create_clinic(
    db: AsyncSession,
    payload: ClinicCreate,
    *,
    id_factory: ClinicIdFactory = gen_clinic_id,
    max_id_attempts: int = 10,
) -> str:
    """Insert the clinic and all of its service rows in a single transaction.

    Returns the new clinic id. Nothing is left behind if any insert fails.
    """
    validate_clinic(payload)

    try:
        prices = await _catalog_prices(db, [line.service_id for line in payload.services])
        clinic_id = await _insert_clinic(db, payload, id_factory, max_id_attempts)

        db.add_all([
            ClinicService(
                clinic_id=clinic_id,
                service_id=line.service_id,
                price=line.price if line.price is not None else prices[line.service_id],
                is_active=line.is_active,
            )
            for line in payload.services
        ])
        await db.flush()
        await db.commit()
    except (ValidationError, StoreError):
        await db.rollback()
        raise
    except SQLAlchemyError as exc:
        await db.rollback()
        raise StoreError("Failed to create clinic", cause=exc, origin=ORIGIN_CREATE) from exc

    return clinic_id


# ---------- datos iniciales ----------
MASTER_SERVICES = [
    ("SRV001", "General Consultation", "CONSULT", "General medical consultation with certified doctors", 150),
    ("SRV002", "X-Ray Imaging", "XRAY", "Digital X-ray imaging and diagnostic services", 200),
    ("SRV003", "Blood Test", "BLOOD", "Comprehensive blood testing and laboratory analysis", 100),
    ("SRV004", "COVID-19 Test", "COVID", "RT-PCR and rapid antigen testing for COVID-19", 75),
    ("SRV005", "MRI Scan", "MRI", "Magnetic Resonance Imaging for detailed diagnostics", 800),
]

SAMPLE_CLINICS = [
    ("CL202200001", "HealthFirst Medical Center", "HealthFirst LLC", "123 Medical Plaza Drive",
     "Los Angeles", "California", "United States", "90210", 34.0522, -118.2437, datetime(2022, 1, 10, 9, 0)),
    ("CL202200002", "Metropolitan Diagnostic Center", "Metro Health Solutions Inc.", "456 Healthcare Boulevard",
     "New York", "New York", "United States", "10001", 40.7128, -74.0060, datetime(2022, 2, 14, 9, 0)),
    ("CL202200003", "Community Care Clinic", "Community Health Partners", "789 Wellness Street",
     "Chicago", "Illinois", "United States", "60601", 41.8781, -87.6298, datetime(2022, 3, 21, 9, 0)),
]

SAMPLE_PRICING = [
    ("CL202200001", "SRV001", 150),
    ("CL202200001", "SRV003", 100),
    ("CL202200002", "SRV002", 200),
    ("CL202200002", "SRV005", 800),
    ("CL202200003", "SRV001", 120),
    ("CL202200003", "SRV004", 75),
]


async def seed_catalog(db: AsyncSession) -> int:
    """Insert-if-absent of the master catalog and the sample clinics. Returns rows added."""
    added = 0

    existing = set((await db.execute(select(Service.id))).scalars().all())
    codes = set((await db.execute(select(Service.code))).scalars().all())
    for sid, name, code, description, price in MASTER_SERVICES:
        if sid in existing or code in codes:
            continue
        db.add(Service(id=sid, name=name, code=code, description=description,
                       average_price=price, is_active=True))
        added += 1
    await db.flush()

    existing = set((await db.execute(select(Clinic.id))).scalars().all())
    for cid, name, business, street, city, state, country, zip_code, lat, lng, created in SAMPLE_CLINICS:
        if cid in existing:
            continue
        db.add(Clinic(id=cid, clinic_name=name, business_name=business, street_address=street,
                      city=city, state=state, country=country, zip_code=zip_code,
                      latitude=lat, longitude=lng, date_created=created.replace(tzinfo=timezone.utc)))
        added += 1
    await db.flush()

    q = select(ClinicService.clinic_id, ClinicService.service_id)
    pairs = {tuple(row) for row in (await db.execute(q)).all()}
    for cid, sid, price in SAMPLE_PRICING:
        if (cid, sid) in pairs:
            continue
        db.add(ClinicService(clinic_id=cid, service_id=sid, price=price, is_active=True))
        added += 1

    await db.commit()
    if added:
        logger.info("seeded %d catalog rows", added)
    return added
