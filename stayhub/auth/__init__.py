from stayhub.auth.oauth import build_authorization_url
from stayhub.auth.session import SessionManager

__all__ = ["SessionManager", "build_authorization_url"]
