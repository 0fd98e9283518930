"""
StayHub client SDK.

Async client for the StayHub hotel booking backend: typed REST wrappers,
the login session, booking/payment flows and the route table of the
application shell.
"""

from stayhub.client import StayHubClient
from stayhub.core.exceptions import ApiError, BaseAppException

__version__ = "1.0.0"

__all__ = ["StayHubClient", "ApiError", "BaseAppException", "__version__"]
