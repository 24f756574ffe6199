from __future__ import annotations

from datetime import datetime


def clinic_payload(**overrides):
    body = {
        "clinicName": "Sunset Family Practice",
        "businessName": "Sunset Health Group",
        "streetAddress": "42 Ocean Avenue",
        "city": "Los Angeles",
        "state": "California",
        "country": "United States",
        "zipCode": "90401",
        "latitude": 34.01,
        "longitude": -118.49,
        "services": [
            {"serviceId": "SRV001", "price": 135, "isActive": True},
            {"serviceId": "SRV004", "price": 60, "isActive": False},
        ],
    }
    body.update(overrides)
    return body


def joined_row(clinic_id, service_id=None, **overrides):
    """One flat clinic x service row as produced by app.services.search."""
    row = {
        "clinic_id": clinic_id,
        "clinic_name": f"Clinic {clinic_id}",
        "business_name": f"Business {clinic_id}",
        "street_address": "1 Main St",
        "city": "Springfield",
        "state": "Illinois",
        "country": "United States",
        "zip_code": "62701",
        "latitude": None,
        "longitude": None,
        "date_created": datetime(2024, 5, 1, 12, 0),
        "service_id": service_id,
        "service_name": f"Service {service_id}" if service_id else None,
        "service_code": service_id.lower() if service_id else None,
        "service_description": None,
        "service_price": 10.0 if service_id else None,
        "service_is_active": 1 if service_id else None,
    }
    row.update(overrides)
    return row
