from app.services.aggregate import fold_clinic_rows

from factories import joined_row


def test_groups_rows_by_clinic_in_first_seen_order():
    rows = [
        joined_row("CL1", "SRV002"),
        joined_row("CL2", "SRV001"),
        joined_row("CL1", "SRV001"),
    ]

    clinics = fold_clinic_rows(rows)

    assert [c["id"] for c in clinics] == ["CL1", "CL2"]
    assert [s["service_id"] for s in clinics[0]["services"]] == ["SRV002", "SRV001"]
    assert [s["service_id"] for s in clinics[1]["services"]] == ["SRV001"]


def test_clinic_without_services_gets_empty_list():
    clinics = fold_clinic_rows([joined_row("CL9")])

    assert len(clinics) == 1
    assert clinics[0]["services"] == []
    assert clinics[0]["clinic_name"] == "Clinic CL9"


def test_service_entry_shape():
    [clinic] = fold_clinic_rows([joined_row("CL1", "SRV003", service_price=99.5, service_is_active=0)])

    assert clinic["services"] == [{
        "service_id": "SRV003",
        "service_name": "Service SRV003",
        "service_code": "srv003",
        "description": None,
        "price": 99.5,
        "is_active": False,
    }]


def test_empty_input():
    assert fold_clinic_rows([]) == []


def test_does_not_mutate_rows():
    rows = [joined_row("CL1", "SRV001"), joined_row("CL1", "SRV002")]
    snapshot = [dict(r) for r in rows]

    fold_clinic_rows(rows)

    assert rows == snapshot
