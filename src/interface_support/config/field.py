from collections.abc import Callable
from dataclasses import dataclass

type AllowedTypes = int | float | str | bool | None


@dataclass(init=True, slots=True, frozen=True)
class SettingsField[T: AllowedTypes]:
	"""

	Typed field declaration for AppSettings.

	**Attributes:**

	- `default`: Fallback value when the environment variable is missing.
	- `factory`: A callable producing the fallback value, evaluated only when the variable is missing and no default is set.
	- `nullable`: Whether None is accepted when neither the environment, the default nor the factory provides a value.

	"""

	default: T | None = None
	factory: Callable[[], T] | None = None
	nullable: bool = False
