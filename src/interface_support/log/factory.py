from __future__ import annotations

from functools import lru_cache
from typing import TYPE_CHECKING

from loguru import logger

if TYPE_CHECKING:
	from loguru import Logger


@lru_cache
def get_logger(logger_name: str | None = None) -> Logger:
	"""

	Return a cached loguru Logger optionally bound with a humanized name.

	The library never adds sinks of its own. Records are emitted through the global
	loguru logger and reach whatever sinks the application configured.

	**Parameters:**

	- `logger_name`: Dotted logger name (e.g., "interface_support.checker"). If None, return the global logger.

	**Returns:**

	A cached loguru Logger with extra["logger_name"] bound as " interface_support -> checker ".

	"""

	return logger if logger_name is None else logger.bind(logger_name=f" {logger_name.replace('.', ' -> ')} ")
