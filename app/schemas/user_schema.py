"""Pydantic schemas for users, authentication and professional validation."""
from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, EmailStr, Field

from app.core.domain_types import AccountType, UserRole, UserStatus, ValidationStatus


class ProfessionalFields(BaseModel):
    """Data a corretor/imobiliaria submits for validation."""
    creci_number: Optional[str] = None
    creci_state: Optional[str] = Field(None, max_length=2)
    company_name: Optional[str] = None
    cnpj: Optional[str] = None
    document_type: Optional[str] = Field(None, pattern="^(creci_fisico|creci_juridico|cnpj|outro)$")
    document_number: Optional[str] = None
    document_url: Optional[str] = None
    proof_of_address_url: Optional[str] = None
    years_of_experience: Optional[str] = None
    service_regions: Optional[str] = None
    specialties: Optional[str] = None
    professional_website: Optional[str] = None
    contact_preference: Optional[str] = Field(None, pattern="^(email|telefone|whatsapp)$")
    preferred_contact_time: Optional[str] = None
    additional_notes: Optional[str] = None
    team_size: Optional[str] = None


class UserRead(ProfessionalFields):
    """Public user projection — the only shape a user ever leaves the API in."""
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    name: str
    email: str
    phone: Optional[str] = None
    account_type: AccountType
    role: UserRole
    status: UserStatus
    validation_status: ValidationStatus
    created_at: datetime


class UserAdminRead(UserRead):
    """User row for the admin back-office."""
    property_count: int = 0


class RegisterRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=150)
    email: EmailStr
    password: str = Field(..., min_length=1)
    account_type: AccountType = AccountType.PARTICULAR


class LoginRequest(BaseModel):
    email: str
    password: str


class PasswordResetRequest(BaseModel):
    email: str


class SessionRead(BaseModel):
    """Signed token plus the display projection a client may cache."""
    access_token: str
    token_type: str = "bearer"
    user: UserRead


class ProfileUpdate(ProfessionalFields):
    """Self-service profile changes; role, status, e-mail and validation are not writable."""
    name: Optional[str] = Field(None, min_length=1, max_length=150)
    phone: Optional[str] = None


class ValidationSubmission(ProfessionalFields):
    phone: Optional[str] = None


class AdminUserUpdate(ProfileUpdate):
    """Admin edits of any account."""
    account_type: Optional[AccountType] = None
    role: Optional[UserRole] = None


class UserStatusUpdate(BaseModel):
    status: UserStatus


class ValidationDecision(BaseModel):
    validation_status: ValidationStatus = Field(
        ...,
        description="approved or rejected",
    )
