"""Unit tests for the Settings aggregate and fail-fast validation."""

import pytest

from altinn_correspondence.infrastructure.configuration import (
    AltinnSettings,
    ConfigurationError,
    MaskinportenEnvironment,
    MaskinportenSettings,
    RetrySettings,
    Settings,
    get_settings,
    validate_settings,
)


@pytest.mark.unit
class TestSettings:
    def test_sub_settings_are_created(self):
        settings = Settings()

        assert isinstance(settings.altinn, AltinnSettings)
        assert isinstance(settings.maskinporten, MaskinportenSettings)
        assert isinstance(settings.retry, RetrySettings)

    def test_overrides_are_kept(self):
        altinn = AltinnSettings(resource_id="override")

        assert Settings(altinn=altinn).altinn.resource_id == "override"

    def test_get_settings_is_cached(self):
        assert get_settings() is get_settings()

    def test_retry_settings_from_environment(self, monkeypatch):
        monkeypatch.setenv("RETRY_MAX_RETRIES", "5")
        monkeypatch.setenv("RETRY_BACKOFF_BASE", "1.5")

        retry = RetrySettings()

        assert retry.max_retries == 5
        assert retry.backoff_base == 1.5


@pytest.mark.unit
class TestMaskinportenSettings:
    def test_defaults(self):
        settings = MaskinportenSettings()

        assert settings.scope == "altinn:serviceowner altinn:correspondence.write"
        assert settings.environment == MaskinportenEnvironment.TEST
        assert settings.token_endpoint == "https://test.maskinporten.no/token"

    def test_production_issuer(self):
        settings = MaskinportenSettings(environment=MaskinportenEnvironment.PROD)

        assert settings.issuer == "https://maskinporten.no/"


@pytest.mark.unit
class TestValidateSettings:
    def test_missing_resource_id_fails_first(self, settings_factory):
        settings = settings_factory(altinn=AltinnSettings())

        with pytest.raises(ConfigurationError, match="resourceId"):
            validate_settings(settings)

    def test_missing_client_id(self, settings_factory):
        with pytest.raises(ConfigurationError, match="ClientId"):
            validate_settings(settings_factory())

    def test_missing_key_material(self, settings_factory):
        settings = settings_factory(
            maskinporten=MaskinportenSettings(client_id="client")
        )

        with pytest.raises(ConfigurationError, match="EncodedJwk"):
            validate_settings(settings)

    def test_maskinporten_can_be_skipped(self, settings_factory):
        settings = settings_factory()

        assert validate_settings(settings, require_maskinporten=False) is settings
