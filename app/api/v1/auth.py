"""Auth API router — register, login, password reset and the current user's profile.
/api/v1/auth"""
from fastapi import APIRouter, Depends, Request

from app.api.deps import CurrentUser, ProfessionalUser, get_auth_service
from app.api.responses import ok
from app.core.security import create_access_token
from app.models.user_model import User
from app.schemas.base_schema import ApiResponse
from app.schemas.user_schema import (
    LoginRequest,
    PasswordResetRequest,
    ProfileUpdate,
    RegisterRequest,
    SessionRead,
    UserRead,
    ValidationSubmission,
)
from app.services.auth_service import AuthService

router = APIRouter()


def _session(user: User) -> SessionRead:
    return SessionRead(access_token=create_access_token(user.id), user=UserRead.model_validate(user))


@router.post("/register", response_model=ApiResponse[SessionRead], status_code=201)
async def register(
    payload: RegisterRequest,
    request: Request,
    service: AuthService = Depends(get_auth_service),
):
    user = await service.register(payload.name, payload.email, payload.password, payload.account_type)
    return ok(_session(user), "Conta criada", request)


@router.post("/login", response_model=ApiResponse[SessionRead])
async def login(
    payload: LoginRequest,
    request: Request,
    service: AuthService = Depends(get_auth_service),
):
    user = await service.login(payload.email, payload.password)
    return ok(_session(user), "Login efetuado", request)


@router.post("/password-reset", response_model=ApiResponse[None])
async def request_password_reset(
    payload: PasswordResetRequest,
    request: Request,
    service: AuthService = Depends(get_auth_service),
):
    """Sempre responde sucesso, para não revelar quais e-mails estão registados."""
    await service.request_password_reset(payload.email)
    return ok(None, "Se o e-mail estiver cadastrado, você receberá as instruções de redefinição.", request)


@router.get("/me", response_model=ApiResponse[UserRead])
async def get_me(request: Request, user: CurrentUser):
    return ok(UserRead.model_validate(user), "Utilizador atual", request)


@router.patch("/me", response_model=ApiResponse[UserRead])
async def update_me(
    payload: ProfileUpdate,
    request: Request,
    user: CurrentUser,
    service: AuthService = Depends(get_auth_service),
):
    updated = await service.update_profile(user.id, payload.model_dump(exclude_unset=True))
    return ok(UserRead.model_validate(updated), "Perfil atualizado", request)


@router.post("/me/validation", response_model=ApiResponse[UserRead])
async def submit_validation(
    payload: ValidationSubmission,
    request: Request,
    user: ProfessionalUser,
    service: AuthService = Depends(get_auth_service),
):
    updated = await service.submit_validation(user, payload.model_dump(exclude_unset=True))
    return ok(UserRead.model_validate(updated), "Cadastro enviado para análise", request)
