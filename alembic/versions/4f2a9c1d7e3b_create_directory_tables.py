"""create directory tables

Revision ID: 4f2a9c1d7e3b
Revises:
Create Date: 2025-11-03 18:12:40.512934

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '4f2a9c1d7e3b'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "services",
        sa.Column("id", sa.String(16), primary_key=True),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("code", sa.String(32), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("average_price", sa.Numeric(10, 2), nullable=False),
        sa.Column("is_active", sa.Boolean(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.UniqueConstraint("code"),
        sa.CheckConstraint("average_price >= 0", name="ck_service_average_price"),
    )
    op.create_index("ix_services_name", "services", ["name"])

    op.create_table(
        "clinics",
        sa.Column("id", sa.String(16), primary_key=True),
        sa.Column("clinic_name", sa.String(255), nullable=False),
        sa.Column("business_name", sa.String(255), nullable=False),
        sa.Column("street_address", sa.String(255), nullable=False),
        sa.Column("city", sa.String(255), nullable=False),
        sa.Column("state", sa.String(255), nullable=False),
        sa.Column("country", sa.String(255), nullable=False),
        sa.Column("zip_code", sa.String(10), nullable=False),
        sa.Column("latitude", sa.Float(), nullable=True),
        sa.Column("longitude", sa.Float(), nullable=True),
        sa.Column("date_created", sa.DateTime(timezone=True), nullable=False),
    )
    # filtros de búsqueda y orden del listado
    op.create_index("ix_clinics_clinic_name", "clinics", ["clinic_name"])
    op.create_index("ix_clinics_city", "clinics", ["city"])
    op.create_index("ix_clinics_state", "clinics", ["state"])
    op.create_index("ix_clinics_date_created", "clinics", ["date_created"])

    op.create_table(
        "clinic_services",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("clinic_id", sa.String(16), sa.ForeignKey("clinics.id"), nullable=False),
        sa.Column("service_id", sa.String(16), sa.ForeignKey("services.id"), nullable=False),
        sa.Column("price", sa.Numeric(10, 2), nullable=False),
        sa.Column("is_active", sa.Boolean(), nullable=False),
        sa.UniqueConstraint("clinic_id", "service_id", name="uq_clinic_service"),
        sa.CheckConstraint("price >= 0", name="ck_clinic_service_price"),
    )
    op.create_index("ix_clinic_service_clinic", "clinic_services", ["clinic_id"])
    op.create_index("ix_clinic_service_service", "clinic_services", ["service_id"])

    op.create_table(
        "system_logs",
        sa.Column("id", sa.String(36), primary_key=True),
        sa.Column("message", sa.Text(), nullable=False),
        sa.Column("priority", sa.Enum("Critical", "High", "Medium", "Low", name="log_priority"), nullable=False),
        sa.Column("type", sa.Enum("Info", "Warning", "Error", name="log_type"), nullable=False),
        sa.Column("timestamp", sa.DateTime(timezone=True), nullable=False),
        sa.Column("project", sa.String(64), nullable=False),
        sa.Column("class_name", sa.String(128), nullable=False),
        sa.Column("method", sa.String(128), nullable=False),
    )
    op.create_index("ix_system_logs_priority", "system_logs", ["priority"])
    op.create_index("ix_system_logs_type", "system_logs", ["type"])
    op.create_index("ix_system_logs_timestamp", "system_logs", ["timestamp"])


def downgrade() -> None:
    # orden inverso por las FKs
    op.drop_index("ix_system_logs_timestamp", table_name="system_logs")
    op.drop_index("ix_system_logs_type", table_name="system_logs")
    op.drop_index("ix_system_logs_priority", table_name="system_logs")
    op.drop_table("system_logs")

    op.drop_index("ix_clinic_service_service", table_name="clinic_services")
    op.drop_index("ix_clinic_service_clinic", table_name="clinic_services")
    op.drop_table("clinic_services")

    op.drop_index("ix_clinics_date_created", table_name="clinics")
    op.drop_index("ix_clinics_state", table_name="clinics")
    op.drop_index("ix_clinics_city", table_name="clinics")
    op.drop_index("ix_clinics_clinic_name", table_name="clinics")
    op.drop_table("clinics")

    op.drop_index("ix_services_name", table_name="services")
    op.drop_table("services")
