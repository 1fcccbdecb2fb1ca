from .field import SettingsField
from .settings import CheckerSettings, get_settings
from .struct import AppSettings

__all__ = ("AppSettings", "CheckerSettings", "SettingsField", "get_settings")
