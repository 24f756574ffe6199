from app.services.activity_log import ActivityLog, activity_log
from app.services.ids import ClinicIdFactory, gen_clinic_id


# --- overridables vía app.dependency_overrides (tests, otros esquemas de id) ---
def get_clinic_id_factory() -> ClinicIdFactory:
    return gen_clinic_id


def get_activity_log() -> ActivityLog:
    return activity_log
