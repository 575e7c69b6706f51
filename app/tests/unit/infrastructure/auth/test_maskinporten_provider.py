"""Unit tests for MaskinportenTokenProvider and JWK loading."""

import base64
from urllib.parse import parse_qs

import httpx
import jwt
import pytest

from altinn_correspondence.infrastructure.auth import (
    MaskinportenTokenProvider,
    TokenAcquisitionError,
    load_encoded_jwk,
)
from altinn_correspondence.infrastructure.auth.providers import (
    JWT_BEARER_GRANT_TYPE,
)
from altinn_correspondence.infrastructure.configuration import (
    ConfigurationError,
    MaskinportenSettings,
)
from tests.factories.auth import encode_jwk, make_rsa_jwk, make_token_response
from tests.factories.backend import ScriptedBackend


@pytest.fixture(scope="module")
def rsa_jwk():
    return make_rsa_jwk()


@pytest.fixture
def maskinporten_settings(rsa_jwk):
    jwk, _ = rsa_jwk
    return MaskinportenSettings(client_id="test-client-id", encoded_jwk=encode_jwk(jwk))


@pytest.fixture
def clock():
    class Clock:
        now = 1_700_000_000.0

        def __call__(self) -> float:
            return self.now

    return Clock()


@pytest.fixture
def token_endpoint():
    return ScriptedBackend((200, make_token_response()))


@pytest.fixture
def provider_factory(maskinporten_settings, token_endpoint, clock):
    def _factory(**overrides):
        settings = overrides.pop("settings", maskinporten_settings)
        http_client = httpx.AsyncClient(transport=httpx.MockTransport(token_endpoint))
        return MaskinportenTokenProvider(settings, http_client=http_client, clock=clock)

    return _factory


@pytest.mark.unit
class TestLoadEncodedJwk:
    def test_decodes_padded_value(self, rsa_jwk):
        jwk, _ = rsa_jwk

        assert load_encoded_jwk(encode_jwk(jwk))["kty"] == "RSA"

    def test_decodes_unpadded_value(self, rsa_jwk):
        jwk, _ = rsa_jwk

        assert load_encoded_jwk(encode_jwk(jwk, strip_padding=True))["kid"] == "test-kid"

    def test_rejects_non_base64(self):
        with pytest.raises(ConfigurationError):
            load_encoded_jwk("not base64 at all!")

    def test_rejects_json_without_key_type(self):
        encoded = base64.b64encode(b'{"foo": "bar"}').decode()

        with pytest.raises(ConfigurationError, match="JSON Web Key"):
            load_encoded_jwk(encoded)


@pytest.mark.unit
class TestMaskinportenTokenProviderConstruction:
    def test_requires_client_id(self, rsa_jwk):
        jwk, _ = rsa_jwk
        settings = MaskinportenSettings(encoded_jwk=encode_jwk(jwk))

        with pytest.raises(ConfigurationError, match="ClientId"):
            MaskinportenTokenProvider(settings)

    def test_requires_key_material(self):
        settings = MaskinportenSettings(client_id="test-client-id")

        with pytest.raises(ConfigurationError, match="EncodedJwk"):
            MaskinportenTokenProvider(settings)


@pytest.mark.unit
class TestCreateGrant:
    def test_grant_claims(self, provider_factory, rsa_jwk, clock):
        _, private_key = rsa_jwk
        provider = provider_factory()

        grant = provider.create_grant()
        claims = jwt.decode(
            grant,
            private_key.public_key(),
            algorithms=["RS256"],
            audience="https://test.maskinporten.no/",
            options={"verify_exp": False, "verify_iat": False},
        )

        assert claims["iss"] == "test-client-id"
        assert claims["scope"] == "altinn:serviceowner altinn:correspondence.write"
        assert claims["iat"] == int(clock.now)
        assert claims["exp"] == int(clock.now) + 120
        assert claims["jti"]

    def test_grant_header_carries_kid(self, provider_factory):
        header = jwt.get_unverified_header(provider_factory().create_grant())

        assert header["kid"] == "test-kid"
        assert header["alg"] == "RS256"


@pytest.mark.unit
@pytest.mark.asyncio
class TestGetAccessToken:
    async def test_posts_jwt_bearer_grant(self, provider_factory, token_endpoint):
        provider = provider_factory()

        token = await provider.get_access_token()

        request = token_endpoint.requests[0]
        form = parse_qs(request.content.decode())
        assert token == "maskinporten-token"
        assert str(request.url) == "https://test.maskinporten.no/token"
        assert form["grant_type"] == [JWT_BEARER_GRANT_TYPE]
        assert form["assertion"][0].count(".") == 2

    async def test_token_is_cached_until_near_expiry(
        self, provider_factory, token_endpoint, clock
    ):
        token_endpoint.script(
            (200, make_token_response("first", expires_in=120)),
            (200, make_token_response("second", expires_in=120)),
        )
        provider = provider_factory()

        assert await provider.get_access_token() == "first"
        clock.now += 60
        assert await provider.get_access_token() == "first"
        clock.now += 31
        assert await provider.get_access_token() == "second"
        assert token_endpoint.call_count == 2

    async def test_rejected_grant_raises(self, provider_factory, token_endpoint):
        token_endpoint.script((400, {"error": "invalid_grant"}))
        provider = provider_factory()

        with pytest.raises(TokenAcquisitionError, match="HTTP 400"):
            await provider.get_access_token()

    async def test_unreadable_response_raises(self, provider_factory, token_endpoint):
        token_endpoint.script((200, {"token_type": "Bearer"}))
        provider = provider_factory()

        with pytest.raises(TokenAcquisitionError, match="unreadable"):
            await provider.get_access_token()

    async def test_network_failure_raises(self, provider_factory, token_endpoint):
        token_endpoint.script(httpx.ConnectError("unreachable"))
        provider = provider_factory()

        with pytest.raises(TokenAcquisitionError, match="unreachable"):
            await provider.get_access_token()
