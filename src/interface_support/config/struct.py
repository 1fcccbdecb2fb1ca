from __future__ import annotations

import inspect
import re
from os import PathLike, getenv
from types import NoneType, UnionType
from typing import TYPE_CHECKING, Any, get_args

from dotenv import dotenv_values

from interface_support.log import get_logger

from .field import AllowedTypes, SettingsField

if TYPE_CHECKING:
	from loguru import Logger

_TRUTHY = ("yes", "true", "1", "y", "on")


class AppSettings:
	"""

	Base class for reading typed settings from environment variables.

	Declare attributes with type annotations and assign SettingsField(...) to each.
	On initialization values are resolved from the environment (then an optional .env file),
	then from default or factory, or set to None if nullable.

	**Example:**

		>>> class MySettings(AppSettings):
		...	 IFACE_LOG_ISSUES: bool = SettingsField(default=False)
		...	 IFACE_LOG_LEVEL: str = SettingsField(default="DEBUG")

		>>> settings = MySettings()

	"""

	def __init__(
		self,
		dotenv_path: str | PathLike[str] | None = None,
		logger: Logger | None = None,
		explicit_format: bool = True,
	) -> None:
		"""

		**Parameters:**

		- `dotenv_path`: Optional .env file, the fallback for variables missing from the environment.
		  Parsed with python-dotenv, never written into os.environ. If None, no file is read.
		- `logger`: Optional loguru logger, defaults to the "interface_support.config" logger.
		- `explicit_format`: If True, attribute names must be UPPER_SNAKE_CASE.

		**Raises:**

		- `AttributeError`: If an attribute name violates the explicit_format constraint.
		- `TypeError`: If a resolved value is not one of AllowedTypes.
		- `ValueError`: If a required field (nullable=False, no default/factory) is missing in the environment.

		"""

		dotenv = {} if dotenv_path is None else dotenv_values(dotenv_path)

		self.__log = get_logger("interface_support.config") if logger is None else logger

		annotations = {}
		for base in reversed(self.__class__.__mro__):
			annotations.update(inspect.get_annotations(base))

		fields: dict[str, SettingsField] = {
			attr: val
			for base in reversed(self.__class__.__mro__)
			for attr, val in vars(base).items()
			if isinstance(val, SettingsField)
		}

		for attr, settings_field in fields.items():
			if explicit_format and not re.fullmatch(r"[A-Z][A-Z0-9_]*", attr):
				raise AttributeError("AppSettings attributes should contain only capital letters and underscores")

			raw = getenv(attr, dotenv.get(attr))
			if raw is None:
				setattr(self, attr, self.__fallback(attr, settings_field))
				continue

			setattr(self, attr, self.__validate(self.__evaluate(annotations.get(attr, str), raw)))
			self.__log.debug(f"evaluated {attr} from environment")

	def __fallback(self, attr: str, settings_field: SettingsField) -> Any:
		if settings_field.default is not None:
			self.__log.debug(f"evaluated {attr} from default")
			return self.__validate(settings_field.default)

		if settings_field.factory is not None:
			if not callable(settings_field.factory):
				raise TypeError(f"unknown type for a factory: {type(settings_field.factory)}")
			self.__log.debug(f"evaluated {attr} from factory")
			return self.__validate(settings_field.factory())

		if settings_field.nullable:
			self.__log.debug(f"evaluated {attr} as None (nullable)")
			return None

		raise ValueError(f"reqd field {attr} was not found in environment")

	@staticmethod
	def __evaluate(typ: Any, raw: str) -> Any:
		if isinstance(typ, str):
			# postponed annotation, e.g. "bool"
			typ = {"int": int, "float": float, "str": str, "bool": bool}.get(typ, str)
		if isinstance(typ, UnionType):
			args = [a for a in get_args(typ) if a is not NoneType]
			typ = args[0] if args else NoneType
		if typ is NoneType:
			return None
		if typ is bool:
			return raw.lower() in _TRUTHY
		return typ(raw)

	@staticmethod
	def __validate[T](val: T) -> T:
		if type(val) not in get_args(AllowedTypes.__value__):
			raise TypeError(f"{type(val)} is not an allowed immutable type")
		return val
