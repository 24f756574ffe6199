from typing import Optional
from datetime import datetime

from app.schemas.common import CamelModel

class ServiceOut(CamelModel):
    id: str
    name: str
    code: str
    description: Optional[str] = None
    average_price: float
    is_active: bool
    created_at: Optional[datetime] = None
