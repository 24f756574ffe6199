import secrets
from datetime import datetime, timezone
from typing import Callable

# generador de ids de clínica, inyectable (ver deps.get_clinic_id_factory)
ClinicIdFactory = Callable[[], str]


def gen_clinic_id() -> str:
    """CL + año actual + sufijo aleatorio de 5 dígitos, p.ej. CL202400731."""
    year = datetime.now(tz=timezone.utc).year
    return f"CL{year}{secrets.randbelow(100_000):05d}"
