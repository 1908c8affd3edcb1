"""Identity resolution: bearer parsing, userInfo call through httpx, caller lookup."""

import httpx
import pytest

from app.domain.models.user import Role, User
from app.security.exceptions import InvalidCredentialsError
from app.security.identity import CallerProvider, OAuth2IdentityResolver, extract_bearer

USERINFO_URL = "https://auth.test/oauth2/userInfo"


def _resolver(handler):
    client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return OAuth2IdentityResolver(userinfo_url=USERINFO_URL, client=client)


def test_extract_bearer():
    assert extract_bearer("Bearer abc.def") == "abc.def"


@pytest.mark.parametrize("header", [None, "", "Basic abc", "Bearer ", "bearer abc"])
def test_extract_bearer_rejects(header):
    with pytest.raises(InvalidCredentialsError):
        extract_bearer(header)


@pytest.mark.asyncio
async def test_resolve_email_sends_token():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["authorization"] = request.headers["Authorization"]
        return httpx.Response(200, json={"email": "ryan@hei.school"})

    assert await _resolver(handler).resolve_email("tok") == "ryan@hei.school"
    assert seen["authorization"] == "Bearer tok"


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "response",
    [
        httpx.Response(401, json={"error": "invalid_token"}),
        httpx.Response(200, json={"sub": "no-email"}),
        httpx.Response(200, json={"email": 123}),
        httpx.Response(200, json={"email": ["ryan@hei.school"]}),
        httpx.Response(200, json={"email": ""}),
        httpx.Response(200, json=["not", "an", "object"]),
        httpx.Response(200, text="not json"),
    ],
)
async def test_resolve_email_rejections(response):
    with pytest.raises(InvalidCredentialsError):
        await _resolver(lambda request: response).resolve_email("tok")


@pytest.mark.asyncio
async def test_resolve_email_transport_error_is_invalid_credentials():
    def handler(request):
        raise httpx.ConnectError("refused", request=request)

    with pytest.raises(InvalidCredentialsError):
        await _resolver(handler).resolve_email("tok")


class _Resolver:
    async def resolve_email(self, bearer):
        return "teacher1@hei.school"


class _Users:
    def __init__(self, user):
        self._user = user

    async def find_by_email(self, email):
        return self._user if self._user and self._user.email == email else None


@pytest.mark.asyncio
async def test_caller_provider_builds_caller():
    user = User(id="t1", ref="TCR1", email="teacher1@hei.school", first_name="Teacher", last_name="One", role=Role.TEACHER)
    caller = await CallerProvider(_Resolver(), _Users(user)).from_authorization("Bearer tok")
    assert caller.user_id == "t1"
    assert caller.role is Role.TEACHER


@pytest.mark.asyncio
async def test_caller_provider_unknown_email():
    with pytest.raises(InvalidCredentialsError):
        await CallerProvider(_Resolver(), _Users(None)).from_authorization("Bearer tok")
