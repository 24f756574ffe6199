from app.models.service import Service
from app.models.clinic import Clinic
from app.models.links import ClinicService
from app.models.system_log import SystemLog, LogPriority, LogType
