"""
Tests for FirebaseIdentityClient - Identity Toolkit REST client.

Uses respx to mock httpx calls and verifies:
- Sign-up / sign-in payloads and API key parameter
- Identity built from localId/email
- Session persisted on success, cleared on sign-out
- Error messages passed through verbatim, no retry
"""

import json

import httpx
import pytest
import respx

from applab.adapters.firebase.identity_client import FirebaseIdentityClient
from applab.adapters.firebase.session_store import SessionStore
from applab.core.entities.user import Identity
from applab.core.exceptions import AuthenticationFailed, IdentityServiceError
from applab.core.ports.identity import IIdentityService
from applab.services.auth import AuthService
from tests.fixtures.fakes import InMemoryDocumentStore
from tests.fixtures.firebase_responses import (
    EMAIL_EXISTS_RESPONSE,
    INVALID_CREDENTIALS_RESPONSE,
    SIGN_IN_RESPONSE,
    SIGN_UP_RESPONSE,
)

SIGN_UP_URL = "https://identitytoolkit.googleapis.com/v1/accounts:signUp"
SIGN_IN_URL = "https://identitytoolkit.googleapis.com/v1/accounts:signInWithPassword"


@pytest.fixture
async def identity_client(session_store: SessionStore):
    """FirebaseIdentityClient with a temporary session store."""
    client = FirebaseIdentityClient(api_key="test-api-key", sessions=session_store)
    yield client
    await client.close()


class TestFirebaseIdentityClientInterface:
    """Test FirebaseIdentityClient implements IIdentityService."""

    def test_implements_interface(self, session_store: SessionStore):
        client = FirebaseIdentityClient(api_key="test-api-key", sessions=session_store)
        assert isinstance(client, IIdentityService)


class TestCreateCredential:
    """Tests for create_credential()."""

    @pytest.mark.asyncio
    @respx.mock
    async def test_create_credential_returns_identity(
        self, identity_client: FirebaseIdentityClient
    ):
        route = respx.post(SIGN_UP_URL).mock(
            return_value=httpx.Response(200, json=SIGN_UP_RESPONSE)
        )

        identity = await identity_client.create_credential("ann@example.com", "secret1")

        assert identity == Identity(uid="u1AbCdEf", email="ann@example.com")
        request = route.calls.last.request
        assert request.url.params["key"] == "test-api-key"
        assert json.loads(request.content) == {
            "email": "ann@example.com",
            "password": "secret1",
            "returnSecureToken": True,
        }

    @pytest.mark.asyncio
    @respx.mock
    async def test_create_credential_opens_session(
        self, identity_client: FirebaseIdentityClient, session_store: SessionStore
    ):
        respx.post(SIGN_UP_URL).mock(return_value=httpx.Response(200, json=SIGN_UP_RESPONSE))

        await identity_client.create_credential("ann@example.com", "secret1")

        session = await session_store.load()
        assert session.id_token == SIGN_UP_RESPONSE["idToken"]
        assert session.refresh_token == SIGN_UP_RESPONSE["refreshToken"]
        assert session.expires_in == 3600
        assert await identity_client.current_identity() == session.identity

    @pytest.mark.asyncio
    @respx.mock
    async def test_email_exists_is_passed_through(
        self, identity_client: FirebaseIdentityClient, session_store: SessionStore
    ):
        route = respx.post(SIGN_UP_URL).mock(
            return_value=httpx.Response(400, json=EMAIL_EXISTS_RESPONSE)
        )

        with pytest.raises(IdentityServiceError) as exc_info:
            await identity_client.create_credential("ann@example.com", "secret1")

        assert exc_info.value.message == "EMAIL_EXISTS"
        assert route.call_count == 1
        assert await session_store.load() is None


class TestVerifyCredential:
    """Tests for verify_credential()."""

    @pytest.mark.asyncio
    @respx.mock
    async def test_verify_credential_returns_identity(
        self, identity_client: FirebaseIdentityClient
    ):
        respx.post(SIGN_IN_URL).mock(return_value=httpx.Response(200, json=SIGN_IN_RESPONSE))

        identity = await identity_client.verify_credential("ann@example.com", "secret1")

        assert identity.uid == "u1AbCdEf"
        assert identity.email == "ann@example.com"

    @pytest.mark.asyncio
    @respx.mock
    async def test_invalid_credentials_are_not_retried(
        self, identity_client: FirebaseIdentityClient
    ):
        route = respx.post(SIGN_IN_URL).mock(
            return_value=httpx.Response(400, json=INVALID_CREDENTIALS_RESPONSE)
        )

        with pytest.raises(IdentityServiceError) as exc_info:
            await identity_client.verify_credential("ann@example.com", "wrong-pass")

        assert exc_info.value.message == "INVALID_LOGIN_CREDENTIALS"
        assert route.call_count == 1

    @pytest.mark.asyncio
    @respx.mock
    async def test_network_error_becomes_identity_error(
        self, identity_client: FirebaseIdentityClient
    ):
        respx.post(SIGN_IN_URL).mock(side_effect=httpx.ConnectError("Connection refused"))

        with pytest.raises(IdentityServiceError) as exc_info:
            await identity_client.verify_credential("ann@example.com", "secret1")

        assert exc_info.value.message == "Connection refused"

    @pytest.mark.asyncio
    @respx.mock
    async def test_non_json_body_becomes_identity_error(
        self, identity_client: FirebaseIdentityClient, session_store: SessionStore
    ):
        """A 200 page that is not JSON is an identity error and opens no session."""
        respx.post(SIGN_IN_URL).mock(
            return_value=httpx.Response(200, content=b"<html>maintenance</html>")
        )

        with pytest.raises(IdentityServiceError) as exc_info:
            await identity_client.verify_credential("ann@example.com", "secret1")

        assert "HTTP 200" in exc_info.value.message
        assert await session_store.load() is None

    @pytest.mark.asyncio
    @respx.mock
    async def test_missing_token_becomes_identity_error(
        self, identity_client: FirebaseIdentityClient, session_store: SessionStore
    ):
        """A success body without localId/idToken is an identity error."""
        respx.post(SIGN_UP_URL).mock(
            return_value=httpx.Response(200, json={"email": "ann@example.com"})
        )

        with pytest.raises(IdentityServiceError):
            await identity_client.create_credential("ann@example.com", "secret1")

        assert await session_store.load() is None

    @pytest.mark.asyncio
    @respx.mock
    async def test_malformed_sign_in_fails_login_flow(
        self, identity_client: FirebaseIdentityClient
    ):
        """AuthService.login() turns the malformed reply into AuthenticationFailed."""
        respx.post(SIGN_IN_URL).mock(return_value=httpx.Response(200, json=["unexpected"]))
        service = AuthService(identity_client, InMemoryDocumentStore())

        with pytest.raises(AuthenticationFailed):
            await service.login("ann@example.com", "secret1")


class TestSession:
    """Tests for current_identity() and sign_out()."""

    @pytest.mark.asyncio
    async def test_no_identity_without_session(self, identity_client: FirebaseIdentityClient):
        assert await identity_client.current_identity() is None

    @pytest.mark.asyncio
    @respx.mock
    async def test_sign_out_clears_session(self, identity_client: FirebaseIdentityClient):
        respx.post(SIGN_IN_URL).mock(return_value=httpx.Response(200, json=SIGN_IN_RESPONSE))
        await identity_client.verify_credential("ann@example.com", "secret1")

        await identity_client.sign_out()

        assert await identity_client.current_identity() is None

    @pytest.mark.asyncio
    async def test_missing_api_key_raises(self, session_store: SessionStore):
        client = FirebaseIdentityClient(api_key=None, sessions=session_store)

        with pytest.raises(IdentityServiceError):
            await client.verify_credential("ann@example.com", "secret1")
