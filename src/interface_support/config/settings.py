from functools import lru_cache

from loguru import logger

from .._error import ConfigurationError
from .field import SettingsField
from .struct import AppSettings


class CheckerSettings(AppSettings):
	"""environment-driven knobs for the conformance checker"""

	IFACE_LOG_ISSUES: bool = SettingsField(default=False)
	IFACE_LOG_LEVEL: str = SettingsField(default="DEBUG")

	def __init__(self, *args, **kwargs) -> None:
		super().__init__(*args, **kwargs)
		try:
			logger.level(self.IFACE_LOG_LEVEL)
		except ValueError as e:
			raise ConfigurationError(f"IFACE_LOG_LEVEL={self.IFACE_LOG_LEVEL!r} is not a loguru level") from e


@lru_cache
def get_settings() -> CheckerSettings:
	return CheckerSettings()
