"""Tests for GET /whoami."""

import pytest
from httpx import AsyncClient

from tests.unit.api.caller_data import STUDENT1_ID, STUDENT1_TOKEN, TEACHER1_ID, TEACHER1_TOKEN, bearer


@pytest.mark.asyncio
async def test_whoami_student(client: AsyncClient, identity_resolver):
    identity_resolver.emails[STUDENT1_TOKEN] = "ryan@hei.school"
    r = await client.get("/whoami", headers=bearer(STUDENT1_TOKEN))
    assert r.status_code == 200
    assert r.json() == {"id": STUDENT1_ID, "email": "ryan@hei.school", "role": "STUDENT"}


@pytest.mark.asyncio
async def test_whoami_teacher(client: AsyncClient, identity_resolver):
    identity_resolver.emails[TEACHER1_TOKEN] = "teacher1@hei.school"
    r = await client.get("/whoami", headers=bearer(TEACHER1_TOKEN))
    assert r.status_code == 200
    assert r.json()["id"] == TEACHER1_ID
    assert r.json()["role"] == "TEACHER"


@pytest.mark.asyncio
async def test_whoami_without_token_is_forbidden_not_unauthorized(client: AsyncClient):
    r = await client.get("/whoami")
    assert r.status_code == 403
    assert r.json()["type"] == "FORBIDDEN"
