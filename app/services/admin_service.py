"""Admin back-office — account management, validation decisions and dashboard stats."""
from decimal import Decimal
from typing import Any, Dict, List, Tuple
from uuid import UUID

from app.core.domain_types import PropertyStatus, UserStatus, ValidationStatus
from app.core.exceptions import InvalidTransitionError, NotFoundError, ValidationError
from app.core.logging import get_logger
from app.core.repository_protocols import PropertyRepository, SettingsRepository, UserRepository
from app.models.user_model import User
from app.services.auth_service import PROFILE_FIELDS

logger = get_logger(__name__)

_ADMIN_EDITABLE_FIELDS = PROFILE_FIELDS | {"account_type", "role"}


class AdminService:
    def __init__(
        self,
        users: UserRepository,
        properties: PropertyRepository,
        settings: SettingsRepository,
    ):
        self.users = users
        self.properties = properties
        self.settings = settings

    async def _require_user(self, user_id: UUID) -> User:
        user = await self.users.get(user_id)
        if user is None:
            raise NotFoundError(f"User {user_id} not found")
        return user

    async def list_users(self) -> List[Tuple[User, int]]:
        """Every account with the number of listings it owns."""
        counts = await self.properties.count_by_owner()
        return [(user, counts.get(user.id, 0)) for user in await self.users.list_all()]

    async def update_user(self, user_id: UUID, fields: Dict[str, Any]) -> User:
        await self._require_user(user_id)
        rejected = sorted(set(fields) - _ADMIN_EDITABLE_FIELDS)
        if rejected:
            raise ValidationError({f: "Campo não pode ser alterado." for f in rejected})
        # name, account_type and role are NOT NULL; an explicit null means "leave as is"
        changes = {
            k: getattr(v, "value", v) for k, v in fields.items()
            if v is not None or k not in ("name", "account_type", "role")
        }
        return await self.users.update(user_id, changes)

    async def update_user_status(self, user_id: UUID, status: UserStatus) -> User:
        await self._require_user(user_id)
        user = await self.users.update(user_id, {"status": UserStatus(status).value})
        if status == UserStatus.BLOCKED:
            logger.info("User blocked", extra={"user_id": user_id})
        else:
            logger.info("User unblocked", extra={"user_id": user_id})
        return user

    async def decide_validation(self, user_id: UUID, decision: ValidationStatus) -> User:
        decision = ValidationStatus(decision)
        if decision not in (ValidationStatus.APPROVED, ValidationStatus.REJECTED):
            raise ValidationError({"validation_status": "Use approved ou rejected."})
        user = await self._require_user(user_id)
        if user.validation_status != ValidationStatus.PENDING:
            raise InvalidTransitionError(
                "Não há validação pendente para este usuário.",
                detail={"validation_status": user.validation_status},
            )
        user = await self.users.update(user_id, {"validation_status": decision.value})
        logger.info("Professional validation decided", extra={"user_id": user_id, "status": decision.value})
        return user

    async def stats(self) -> Dict[str, Any]:
        by_status = await self.properties.count_by_status()
        system_settings = await self.settings.get()
        active = by_status.get(PropertyStatus.ACTIVE.value, 0)
        return {
            "users": await self.users.count(),
            "pending_approval": by_status.get(PropertyStatus.PENDING_APPROVAL.value, 0),
            "pending_payment": by_status.get(PropertyStatus.PENDING_PAYMENT.value, 0),
            "active": active,
            "rejected": by_status.get(PropertyStatus.REJECTED.value, 0),
            "revenue": Decimal(active) * Decimal(system_settings.listing_price),
        }
