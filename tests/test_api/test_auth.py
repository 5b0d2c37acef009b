"""Tests for Auth API endpoints."""
import pytest
from httpx import AsyncClient

from app.core.domain_types import AccountType, ValidationStatus
from tests.conftest import auth_headers, create_user


@pytest.mark.asyncio
async def test_register_returns_token_and_public_user(client: AsyncClient):
    """POST /api/v1/auth/register creates an active, unvalidated account."""
    resp = await client.post(
        "/api/v1/auth/register",
        json={"name": "Nova Pessoa", "email": "Nova@Email.com", "password": "segredo1", "account_type": "particular"},
    )
    assert resp.status_code == 201
    data = resp.json()["data"]
    assert data["access_token"]
    assert data["token_type"] == "bearer"
    user = data["user"]
    assert user["email"] == "nova@email.com"
    assert user["role"] == "user"
    assert user["status"] == "active"
    assert user["validation_status"] == "not_submitted"
    assert "password" not in user
    assert "password_hash" not in user


@pytest.mark.asyncio
async def test_register_duplicate_email(client: AsyncClient, owner):
    """Registering an existing e-mail fails with 409, whatever its casing."""
    resp = await client.post(
        "/api/v1/auth/register",
        json={"name": "x", "email": "ANA@email.com", "password": "pw", "account_type": "particular"},
    )
    assert resp.status_code == 409
    body = resp.json()
    assert body["success"] is False
    assert body["message"] == "Email já está em uso."


@pytest.mark.asyncio
async def test_login_approved_broker(client: AsyncClient, db_session):
    await create_user(
        db_session,
        "bruno@email.com",
        name="Bruno Lima",
        account_type=AccountType.CORRETOR,
        validation_status=ValidationStatus.APPROVED,
    )
    resp = await client.post("/api/v1/auth/login", json={"email": "bruno@email.com", "password": "password123"})
    assert resp.status_code == 200
    user = resp.json()["data"]["user"]
    assert user["name"] == "Bruno Lima"
    assert user["validation_status"] == "approved"


@pytest.mark.asyncio
async def test_login_wrong_password(client: AsyncClient, owner):
    resp = await client.post("/api/v1/auth/login", json={"email": "ana@email.com", "password": "wrong"})
    assert resp.status_code == 401
    assert resp.json()["message"] == "Email ou senha inválidos."


@pytest.mark.asyncio
async def test_login_unknown_email(client: AsyncClient):
    resp = await client.post("/api/v1/auth/login", json={"email": "ninguem@email.com", "password": "x"})
    assert resp.status_code == 401


@pytest.mark.asyncio
async def test_login_blocked_account(client: AsyncClient, owner, admin):
    block = await client.patch(
        f"/api/v1/admin/users/{owner.id}/status", json={"status": "blocked"}, headers=auth_headers(admin)
    )
    assert block.status_code == 200

    resp = await client.post("/api/v1/auth/login", json={"email": "ana@email.com", "password": "password123"})
    assert resp.status_code == 403
    assert resp.json()["message"] == "Sua conta foi bloqueada."


@pytest.mark.asyncio
async def test_blocked_user_token_stops_working(client: AsyncClient, owner, admin):
    """Status changes apply to existing sessions immediately."""
    headers = auth_headers(owner)
    assert (await client.get("/api/v1/auth/me", headers=headers)).status_code == 200

    await client.patch(f"/api/v1/admin/users/{owner.id}/status", json={"status": "blocked"}, headers=auth_headers(admin))

    assert (await client.get("/api/v1/auth/me", headers=headers)).status_code == 403


@pytest.mark.asyncio
async def test_password_reset_always_succeeds(client: AsyncClient, owner):
    known = await client.post("/api/v1/auth/password-reset", json={"email": "ana@email.com"})
    unknown = await client.post("/api/v1/auth/password-reset", json={"email": "ninguem@email.com"})
    assert known.status_code == 200
    assert unknown.status_code == 200
    assert known.json()["message"] == unknown.json()["message"]


@pytest.mark.asyncio
async def test_me_requires_token(client: AsyncClient):
    resp = await client.get("/api/v1/auth/me")
    assert resp.status_code == 401
    assert resp.json()["success"] is False


@pytest.mark.asyncio
async def test_me_rejects_garbage_token(client: AsyncClient):
    resp = await client.get("/api/v1/auth/me", headers={"Authorization": "Bearer not-a-token"})
    assert resp.status_code == 401


@pytest.mark.asyncio
async def test_update_profile(client: AsyncClient, owner):
    resp = await client.patch(
        "/api/v1/auth/me", json={"name": "Ana C.", "phone": "11900000000"}, headers=auth_headers(owner)
    )
    assert resp.status_code == 200
    data = resp.json()["data"]
    assert data["name"] == "Ana C."
    assert data["phone"] == "11900000000"
    assert data["role"] == "user"


@pytest.mark.asyncio
async def test_update_profile_ignores_privileged_fields(client: AsyncClient, owner):
    """role/status are not part of the profile schema, so they never reach the store."""
    resp = await client.patch(
        "/api/v1/auth/me", json={"role": "admin", "status": "blocked"}, headers=auth_headers(owner)
    )
    assert resp.status_code == 200
    data = resp.json()["data"]
    assert data["role"] == "user"
    assert data["status"] == "active"


@pytest.mark.asyncio
async def test_submit_validation_missing_fields(client: AsyncClient, broker):
    resp = await client.post("/api/v1/auth/me/validation", json={"creci_number": "999-F"}, headers=auth_headers(broker))
    assert resp.status_code == 422
    errors = resp.json()["errors"]
    assert "phone" in errors
    assert "creci_state" in errors
    assert "creci_number" not in errors


@pytest.mark.asyncio
async def test_submit_validation_and_admin_approval(client: AsyncClient, broker, admin):
    payload = {
        "phone": "21912345678",
        "creci_number": "12345-F",
        "creci_state": "RJ",
        "document_type": "creci_fisico",
        "document_number": "12345-F",
        "document_url": "https://docs.exemplo.com/creci-fisico.pdf",
        "proof_of_address_url": "https://docs.exemplo.com/comprovante.pdf",
        "years_of_experience": "8",
        "service_regions": "Zona Sul - RJ",
        "specialties": "Residencial",
        "contact_preference": "whatsapp",
    }
    resp = await client.post("/api/v1/auth/me/validation", json=payload, headers=auth_headers(broker))
    assert resp.status_code == 200
    assert resp.json()["data"]["validation_status"] == "pending"

    again = await client.post("/api/v1/auth/me/validation", json=payload, headers=auth_headers(broker))
    assert again.status_code == 409

    decision = await client.patch(
        f"/api/v1/admin/users/{broker.id}/validation",
        json={"validation_status": "approved"},
        headers=auth_headers(admin),
    )
    assert decision.status_code == 200
    assert decision.json()["data"]["validation_status"] == "approved"


@pytest.mark.asyncio
async def test_submit_validation_particular_forbidden(client: AsyncClient, owner):
    resp = await client.post("/api/v1/auth/me/validation", json={}, headers=auth_headers(owner))
    assert resp.status_code == 403
    assert resp.json()["message"] == "Disponível apenas para corretores e imobiliárias."
