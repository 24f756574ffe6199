from sqlalchemy import String, Integer, Boolean, Numeric, ForeignKey, UniqueConstraint, CheckConstraint, Index
from sqlalchemy.orm import Mapped, mapped_column
from app.core.db import Base

class ClinicService(Base):
    """Per-clinic price/availability override for a catalog service."""

    __tablename__ = "clinic_services"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    clinic_id: Mapped[str] = mapped_column(String(16), ForeignKey("clinics.id"))
    service_id: Mapped[str] = mapped_column(String(16), ForeignKey("services.id"))
    price: Mapped[float] = mapped_column(Numeric(10, 2, asdecimal=False))
    is_active: Mapped[bool] = mapped_column(Boolean, default=True)

    __table_args__ = (
        UniqueConstraint("clinic_id", "service_id", name="uq_clinic_service"),
        CheckConstraint("price >= 0", name="ck_clinic_service_price"),
        Index("ix_clinic_service_clinic", "clinic_id"),
        Index("ix_clinic_service_service", "service_id"),
    )
