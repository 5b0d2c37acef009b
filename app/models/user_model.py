"""User and Credential SQLAlchemy models.

The password hash lives in its own table so that no query on `users` can
ever carry it into a response.
"""
import uuid
from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import DateTime, ForeignKey, String, Text
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import Mapped, mapped_column

from app.core.domain_types import AccountType, UserRole, UserStatus, ValidationStatus
from app.database import Base


class User(Base):
    __tablename__ = "users"

    id: Mapped[uuid.UUID] = mapped_column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    name: Mapped[str] = mapped_column(String(150))
    email: Mapped[str] = mapped_column(String(255), unique=True, index=True, comment="Stored lower-cased")
    phone: Mapped[Optional[str]] = mapped_column(String(30))

    account_type: Mapped[str] = mapped_column(String(20), default=AccountType.PARTICULAR.value)
    role: Mapped[str] = mapped_column(String(10), default=UserRole.USER.value)
    status: Mapped[str] = mapped_column(String(10), default=UserStatus.ACTIVE.value, index=True)
    validation_status: Mapped[str] = mapped_column(String(20), default=ValidationStatus.NOT_SUBMITTED.value)

    # Professional data (corretor / imobiliaria)
    creci_number: Mapped[Optional[str]] = mapped_column(String(30))
    creci_state: Mapped[Optional[str]] = mapped_column(String(2), comment="UF, e.g. SP, RJ")
    company_name: Mapped[Optional[str]] = mapped_column(String(200), comment="Razão social")
    cnpj: Mapped[Optional[str]] = mapped_column(String(20))
    document_type: Mapped[Optional[str]] = mapped_column(String(30), comment="creci_fisico, creci_juridico, cnpj, outro")
    document_number: Mapped[Optional[str]] = mapped_column(String(50))
    document_url: Mapped[Optional[str]] = mapped_column(String(2048))
    proof_of_address_url: Mapped[Optional[str]] = mapped_column(String(2048))
    years_of_experience: Mapped[Optional[str]] = mapped_column(String(10))
    service_regions: Mapped[Optional[str]] = mapped_column(Text)
    specialties: Mapped[Optional[str]] = mapped_column(Text)
    professional_website: Mapped[Optional[str]] = mapped_column(String(2048))
    contact_preference: Mapped[Optional[str]] = mapped_column(String(20), comment="email, telefone, whatsapp")
    preferred_contact_time: Mapped[Optional[str]] = mapped_column(String(100))
    additional_notes: Mapped[Optional[str]] = mapped_column(Text)
    team_size: Mapped[Optional[str]] = mapped_column(String(10))

    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
    )

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN

    def __repr__(self) -> str:
        return f"<User(id={self.id}, email='{self.email}', role={self.role})>"


class Credential(Base):
    __tablename__ = "credentials"

    user_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"),
        primary_key=True,
    )
    password_hash: Mapped[str] = mapped_column(String(255))
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
    )

    def __repr__(self) -> str:
        return f"<Credential(user_id={self.user_id})>"
