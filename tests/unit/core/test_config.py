"""Unit tests for GoogleAnalyticsSettings."""

import pytest
from pydantic import ValidationError

from gabridge.core.config import GoogleAnalyticsSettings, HitType, Transport


class TestDefaults:
    def test_schema_defaults(self):
        settings = GoogleAnalyticsSettings()

        assert settings.disable_page_tracking is False
        assert settings.disable_event_tracking is False
        assert settings.additional_account_names == []
        assert settings.enhanced_ecommerce is False
        assert settings.transport is None
        assert settings.user_id is None

    def test_default_hit_types(self):
        settings = GoogleAnalyticsSettings()

        assert settings.should_copy(HitType.PAGEVIEW.value) is True
        assert settings.should_copy(HitType.EVENT.value) is True
        assert settings.should_copy(HitType.EXCEPTION.value) is False
        assert settings.should_copy(HitType.TIMING.value) is False
        assert settings.should_copy(HitType.SET_USER_PROPERTIES.value) is False
        assert settings.should_copy("userId") is False

    def test_absent_hit_type_means_no_copy(self):
        settings = GoogleAnalyticsSettings()

        assert settings.should_copy(HitType.ECOMMERCE_SEND.value) is False

    def test_instances_do_not_share_mutable_defaults(self):
        a = GoogleAnalyticsSettings()
        b = GoogleAnalyticsSettings()

        a.additional_account_names.append("foo")
        a.additional_account_hit_types["event"] = False

        assert b.additional_account_names == []
        assert b.should_copy("event") is True


class TestEnvLoading:
    def test_reads_prefixed_env_vars(self, monkeypatch):
        monkeypatch.setenv("GA_ADDITIONAL_ACCOUNT_NAMES", '["foo", "bar"]')
        monkeypatch.setenv("GA_TRANSPORT", "beacon")
        monkeypatch.setenv("GA_ENHANCED_ECOMMERCE", "true")

        settings = GoogleAnalyticsSettings()

        assert settings.additional_account_names == ["foo", "bar"]
        assert settings.transport is Transport.BEACON
        assert settings.enhanced_ecommerce is True

    def test_hit_types_from_json(self, monkeypatch):
        monkeypatch.setenv("GA_ADDITIONAL_ACCOUNT_HIT_TYPES", '{"timing": true}')

        settings = GoogleAnalyticsSettings()

        assert settings.additional_account_hit_types == {"timing": True}


class TestMutation:
    def test_assignment_is_validated(self):
        settings = GoogleAnalyticsSettings()

        settings.transport = "xhr"

        assert settings.transport is Transport.XHR

    def test_invalid_transport_rejected(self):
        settings = GoogleAnalyticsSettings()

        with pytest.raises(ValidationError):
            settings.transport = "pigeon"

    def test_none_account_names_become_empty(self):
        settings = GoogleAnalyticsSettings()

        settings.additional_account_names = None

        assert settings.additional_account_names == []

