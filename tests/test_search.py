from datetime import datetime, timezone

from sqlalchemy import select

from app.models.clinic import Clinic
from app.schemas.clinic import ClinicSearchFilters
from app.services import catalog
from app.services.search import build_search


async def _ids(db, **filters):
    found = await catalog.search_clinics(db, ClinicSearchFilters(**filters))
    return [c["id"] for c in found]


async def test_city_filter_matches_seeded_clinic(db):
    found = await catalog.search_clinics(db, ClinicSearchFilters(city="Los Angeles"))

    assert [c["id"] for c in found] == ["CL202200001"]
    services = found[0]["services"]
    # ordenados por nombre: "Blood Test" < "General Consultation"
    assert [(s["service_code"], s["price"]) for s in services] == [("BLOOD", 100), ("CONSULT", 150)]


async def test_unknown_city_returns_nothing(db):
    assert await _ids(db, city="Nowhere") == []


async def test_text_filters_are_case_insensitive_substrings(db):
    assert await _ids(db, city="los ANG") == ["CL202200001"]
    assert await _ids(db, state="new") == ["CL202200002"]


async def test_search_term_matches_clinic_or_business_name(db):
    assert await _ids(db, search_term="metro") == ["CL202200002"]
    assert await _ids(db, search_term="partners") == ["CL202200003"]


async def test_like_wildcards_in_input_are_literal(db):
    assert await _ids(db, search_term="%") == []
    assert await _ids(db, city="_") == []


async def test_service_filter_is_membership_not_exact_set(db):
    # SRV001 lo ofrecen la 1 y la 3; la 3 sale primero por ser más nueva
    assert await _ids(db, service_ids=["SRV001"]) == ["CL202200003", "CL202200001"]
    assert await _ids(db, service_ids=["SRV004", "SRV005"]) == ["CL202200003", "CL202200002"]


async def test_service_filter_keeps_all_services_of_matching_clinic(db):
    [clinic] = await catalog.search_clinics(db, ClinicSearchFilters(service_ids=["SRV004"]))

    assert clinic["id"] == "CL202200003"
    assert {s["service_id"] for s in clinic["services"]} == {"SRV001", "SRV004"}


async def test_filters_combine_with_and(db):
    assert await _ids(db, state="new", service_ids=["SRV005"]) == ["CL202200002"]
    assert await _ids(db, state="new", service_ids=["SRV001"]) == []


async def test_no_filters_equals_listing(db):
    listing = await catalog.list_clinics(db)
    searched = await catalog.search_clinics(db, ClinicSearchFilters())

    assert searched == listing
    assert [c["id"] for c in listing] == ["CL202200003", "CL202200002", "CL202200001"]


async def test_blank_filters_count_as_absent(db):
    blank = ClinicSearchFilters(city="  ", state="", search_term=None, service_ids=[" "])

    assert blank.is_empty()
    assert await _ids(db, city="  ", state="") == await _ids(db)


async def test_search_is_repeatable(db):
    filters = ClinicSearchFilters(search_term="health", service_ids=["SRV001", "SRV002"])

    first = await catalog.search_clinics(db, filters)
    second = await catalog.search_clinics(db, filters)

    assert first == second


async def test_clinic_without_services_is_listed(db):
    db.add(Clinic(
        id="CL202499999", clinic_name="Empty Clinic", business_name="Nobody Inc.",
        street_address="0 Nowhere Rd", city="Boise", state="Idaho", country="United States",
        zip_code="83702", date_created=datetime.now(tz=timezone.utc),
    ))
    await db.commit()

    listing = await catalog.list_clinics(db)
    assert listing[0]["id"] == "CL202499999"
    assert listing[0]["services"] == []

    assert "CL202499999" not in await _ids(db, service_ids=["SRV001"])


def test_build_search_uses_bound_parameters():
    q = build_search(ClinicSearchFilters(city="Robert'); DROP TABLE clinics;--"))
    compiled = q.compile()

    assert "DROP TABLE" not in str(compiled)
    assert any("DROP TABLE" in str(v) for v in compiled.params.values())


async def test_seed_rows_exist(db):
    ids = (await db.execute(select(Clinic.id).order_by(Clinic.id))).scalars().all()
    assert ids == ["CL202200001", "CL202200002", "CL202200003"]
