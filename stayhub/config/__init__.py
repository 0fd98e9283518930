"""
Configuration package for the StayHub client SDK.
"""
from stayhub.config.settings import Settings, get_settings, settings

__all__ = ["Settings", "get_settings", "settings"]
