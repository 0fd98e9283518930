"""Third-party (OAuth 2.0) sign-in URL."""

import secrets
from typing import Optional
from urllib.parse import urlencode

from stayhub.config.settings import Settings, settings as default_settings
from stayhub.core.exceptions import ConfigurationError


def generate_state() -> str:
    return secrets.token_urlsafe(24)


def build_authorization_url(app_settings: Optional[Settings] = None, state: Optional[str] = None) -> str:
    """
    Build the authorization-code URL the user is sent to for sign-in.

    Args:
        app_settings: Settings holding the OAuth client configuration
        state: Anti-forgery state echoed back on the redirect; generated when omitted

    Raises:
        ConfigurationError: When no client id or redirect uri is configured
    """
    app_settings = app_settings or default_settings
    if not app_settings.OAUTH_CLIENT_ID:
        raise ConfigurationError("OAuth client id is not configured", setting="OAUTH_CLIENT_ID")
    if not app_settings.OAUTH_REDIRECT_URI:
        raise ConfigurationError("OAuth redirect uri is not configured", setting="OAUTH_REDIRECT_URI")

    query = {
        "client_id": app_settings.OAUTH_CLIENT_ID,
        "redirect_uri": app_settings.OAUTH_REDIRECT_URI,
        "response_type": "code",
        "scope": " ".join(app_settings.OAUTH_SCOPES),
        "state": state or generate_state(),
    }
    return f"{app_settings.OAUTH_AUTHORIZE_URL}?{urlencode(query)}"
