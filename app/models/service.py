from datetime import datetime, timezone
from sqlalchemy import String, Text, Boolean, Numeric, DateTime, CheckConstraint
from sqlalchemy.orm import Mapped, mapped_column
from app.core.db import Base


class Service(Base):
    """Master catalog entry. Seeded, never edited or deleted from the API."""

    __tablename__ = "services"

    id: Mapped[str] = mapped_column(String(16), primary_key=True)   # p.ej. "SRV001"
    name: Mapped[str] = mapped_column(String(255), index=True)
    code: Mapped[str] = mapped_column(String(32), unique=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    average_price: Mapped[float] = mapped_column(Numeric(10, 2, asdecimal=False))
    is_active: Mapped[bool] = mapped_column(Boolean, default=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=lambda: datetime.now(tz=timezone.utc)
    )

    __table_args__ = (
        CheckConstraint("average_price >= 0", name="ck_service_average_price"),
    )
