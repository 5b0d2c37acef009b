"""Tests for the property type catalog endpoints."""
import pytest
from httpx import AsyncClient

from tests.conftest import auth_headers, make_property_payload


@pytest.mark.asyncio
async def test_list_property_types_is_public(client: AsyncClient):
    resp = await client.get("/api/v1/property-types")
    assert resp.status_code == 200
    assert [t["name"] for t in resp.json()["data"]] == ["Apartment", "House", "Land"]


@pytest.mark.asyncio
async def test_create_property_type(client: AsyncClient, admin, owner):
    resp = await client.post("/api/v1/property-types", json={"name": "Studio"}, headers=auth_headers(admin))
    assert resp.status_code == 201
    assert resp.json()["data"]["name"] == "Studio"

    # the new type is immediately accepted on listings
    listing = await client.post(
        "/api/v1/properties", json=make_property_payload(type="Studio"), headers=auth_headers(owner)
    )
    assert listing.status_code == 201


@pytest.mark.asyncio
async def test_create_duplicate_property_type(client: AsyncClient, admin):
    resp = await client.post("/api/v1/property-types", json={"name": "House"}, headers=auth_headers(admin))
    assert resp.status_code == 409


@pytest.mark.asyncio
async def test_create_property_type_requires_admin(client: AsyncClient, owner):
    resp = await client.post("/api/v1/property-types", json={"name": "Studio"}, headers=auth_headers(owner))
    assert resp.status_code == 403


@pytest.mark.asyncio
async def test_rename_and_delete_property_type(client: AsyncClient, admin):
    types = (await client.get("/api/v1/property-types")).json()["data"]
    land = next(t for t in types if t["name"] == "Land")

    renamed = await client.patch(
        f"/api/v1/property-types/{land['id']}", json={"name": "Terreno"}, headers=auth_headers(admin)
    )
    assert renamed.status_code == 200
    assert renamed.json()["data"]["name"] == "Terreno"

    deleted = await client.delete(f"/api/v1/property-types/{land['id']}", headers=auth_headers(admin))
    assert deleted.status_code == 200

    again = await client.delete(f"/api/v1/property-types/{land['id']}", headers=auth_headers(admin))
    assert again.status_code == 404


@pytest.mark.asyncio
async def test_rename_to_existing_name(client: AsyncClient, admin):
    types = (await client.get("/api/v1/property-types")).json()["data"]
    land = next(t for t in types if t["name"] == "Land")
    resp = await client.patch(
        f"/api/v1/property-types/{land['id']}", json={"name": "House"}, headers=auth_headers(admin)
    )
    assert resp.status_code == 409
