"""Auth service — credentials, registration, profile and professional validation.

Password hashes stay inside this module; every method returns the User
row, which carries no secret.
"""
import uuid
from datetime import datetime, timezone
from typing import Any, Dict, Optional
from uuid import UUID

from app.core.domain_types import (
    PROFESSIONAL_ACCOUNT_TYPES,
    AccountType,
    UserRole,
    UserStatus,
    ValidationStatus,
)
from app.core.exceptions import (
    AccountBlockedError,
    DuplicateEmailError,
    InvalidCredentialsError,
    InvalidTransitionError,
    NotFoundError,
    PermissionDeniedError,
    ValidationError,
)
from app.core.logging import get_logger
from app.core.repository_protocols import CredentialRepository, UserRepository
from app.core.security import get_password_hash, normalize_email, verify_password
from app.core.validation import missing_professional_fields
from app.models.user_model import User

logger = get_logger(__name__)

PROFILE_FIELDS = frozenset({
    "name", "phone",
    "creci_number", "creci_state", "company_name", "cnpj",
    "document_type", "document_number", "document_url", "proof_of_address_url",
    "years_of_experience", "service_regions", "specialties", "professional_website",
    "contact_preference", "preferred_contact_time", "additional_notes", "team_size",
})


class AuthService:
    def __init__(self, users: UserRepository, credentials: CredentialRepository):
        self.users = users
        self.credentials = credentials

    async def register(
        self,
        name: str,
        email: str,
        password: str,
        account_type: AccountType = AccountType.PARTICULAR,
        role: UserRole = UserRole.USER,
        **extra: Any,
    ) -> User:
        email = normalize_email(email)
        if await self.users.get_by_email(email):
            raise DuplicateEmailError(email)

        now = datetime.now(timezone.utc)
        fields = {k: v for k, v in extra.items() if k in PROFILE_FIELDS}
        fields["validation_status"] = ValidationStatus(
            extra.get("validation_status", ValidationStatus.NOT_SUBMITTED)
        ).value
        user = User(
            id=uuid.uuid4(),
            name=name,
            email=email,
            account_type=AccountType(account_type).value,
            role=UserRole(role).value,
            status=UserStatus.ACTIVE.value,
            created_at=now,
            updated_at=now,
            **fields,
        )
        user = await self.users.add(user)
        await self.credentials.set_hash(user.id, get_password_hash(password))
        logger.info("User registered", extra={"user_id": user.id})
        return user

    async def login(self, email: str, password: str) -> User:
        user = await self.users.get_by_email(normalize_email(email))
        if user is None or not verify_password(password, await self.credentials.get_hash(user.id)):
            raise InvalidCredentialsError()
        if user.status == UserStatus.BLOCKED:
            logger.info("Blocked user tried to log in", extra={"user_id": user.id})
            raise AccountBlockedError()
        return user

    async def request_password_reset(self, email: str) -> bool:
        """Always reports success, whether or not the e-mail exists."""
        user = await self.users.get_by_email(normalize_email(email))
        # TODO: enviar e-mail com link de redefinição quando houver serviço de e-mail
        logger.info(
            "Password reset requested",
            extra={"user_id": user.id if user else "unknown"},
        )
        return True

    async def get_user(self, user_id: UUID) -> Optional[User]:
        return await self.users.get(user_id)

    async def require_user(self, user_id: UUID) -> User:
        user = await self.users.get(user_id)
        if user is None:
            raise NotFoundError(f"User {user_id} not found")
        return user

    async def update_profile(self, user_id: UUID, fields: Dict[str, Any]) -> User:
        """Merge self-service profile fields into the stored user."""
        rejected = sorted(set(fields) - PROFILE_FIELDS)
        if rejected:
            raise ValidationError({f: "Campo não pode ser alterado pelo próprio usuário." for f in rejected})
        if "name" in fields and not (fields["name"] or "").strip():
            raise ValidationError({"name": "Nome é obrigatório."})
        user = await self.users.update(user_id, fields)
        if user is None:
            raise NotFoundError(f"User {user_id} not found")
        return user

    async def submit_validation(self, user: User, fields: Dict[str, Any]) -> User:
        """Send professional data for review; the account becomes `pending`."""
        if AccountType(user.account_type) not in PROFESSIONAL_ACCOUNT_TYPES:
            raise PermissionDeniedError("Validação disponível apenas para corretores e imobiliárias.")
        if user.validation_status in (ValidationStatus.PENDING, ValidationStatus.APPROVED):
            raise InvalidTransitionError(
                "Cadastro já enviado para análise.",
                detail={"validation_status": user.validation_status},
            )

        merged = {field: getattr(user, field) for field in PROFILE_FIELDS}
        merged.update(fields)
        missing = missing_professional_fields(user.account_type, merged)
        if missing:
            raise ValidationError(missing, "Preencha todos os campos obrigatórios antes de enviar.")

        changes = {k: v for k, v in fields.items() if k in PROFILE_FIELDS}
        changes["validation_status"] = ValidationStatus.PENDING.value
        updated = await self.users.update(user.id, changes)
        logger.info("Professional validation submitted", extra={"user_id": user.id})
        return updated
