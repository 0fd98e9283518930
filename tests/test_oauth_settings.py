from urllib.parse import parse_qs, urlsplit

import pytest

from stayhub.auth.oauth import build_authorization_url
from stayhub.config.settings import Settings
from stayhub.core.exceptions import ConfigurationError


def make_settings(**overrides) -> Settings:
    return Settings(_env_file=None, **overrides)


class TestAuthorizationUrl:

    def test_requires_client_id(self):
        with pytest.raises(ConfigurationError) as exc_info:
            build_authorization_url(make_settings(OAUTH_REDIRECT_URI="http://localhost/callback"))

        assert exc_info.value.details["setting"] == "OAUTH_CLIENT_ID"

    def test_requires_redirect_uri(self):
        with pytest.raises(ConfigurationError):
            build_authorization_url(make_settings(OAUTH_CLIENT_ID="client-1"))

    def test_query_parameters(self):
        app_settings = make_settings(
            OAUTH_CLIENT_ID="client-1",
            OAUTH_REDIRECT_URI="http://localhost/callback",
        )

        url = build_authorization_url(app_settings, state="xyz")

        parts = urlsplit(url)
        query = parse_qs(parts.query)
        assert f"{parts.scheme}://{parts.netloc}{parts.path}" == "https://accounts.google.com/o/oauth2/v2/auth"
        assert query == {
            "client_id": ["client-1"],
            "redirect_uri": ["http://localhost/callback"],
            "response_type": ["code"],
            "scope": ["openid email profile"],
            "state": ["xyz"],
        }

    def test_state_is_generated(self):
        app_settings = make_settings(OAUTH_CLIENT_ID="c", OAUTH_REDIRECT_URI="http://localhost/cb")

        first = parse_qs(urlsplit(build_authorization_url(app_settings)).query)["state"][0]
        second = parse_qs(urlsplit(build_authorization_url(app_settings)).query)["state"][0]

        assert first and first != second


class TestSettings:

    def test_scopes_from_string(self):
        assert make_settings(OAUTH_SCOPES="openid, email").OAUTH_SCOPES == ["openid", "email"]
        assert make_settings(OAUTH_SCOPES='["openid"]').OAUTH_SCOPES == ["openid"]

    def test_base_url_trailing_slash_is_stripped(self):
        assert make_settings(API_BASE_URL="http://api.test/api/").API_BASE_URL == "http://api.test/api"

    def test_log_level_is_normalized(self):
        assert make_settings(LOG_LEVEL="debug").LOG_LEVEL == "DEBUG"

    def test_unknown_log_format_is_rejected(self):
        with pytest.raises(ValueError):
            make_settings(LOG_FORMAT="xml")
