from collections.abc import Sequence
from typing import Any

from ._issue import Issue


class InterfaceSupportError(Exception):
	"""base for every fault raised by interface_support"""


class ConfigurationError(InterfaceSupportError, ValueError):
	"""a setting read from the environment holds a value the library cannot use"""


class NotAnInterfaceError(InterfaceSupportError, TypeError):
	declaration: Any

	def __init__(self, declaration: Any, *args):
		super().__init__(f"interface must be marked as an interface but {_name(declaration)} is not", *args)
		self.declaration = declaration


class InterfaceNotImplementedError(InterfaceSupportError):
	issues: list[Issue]
	interface: type
	target: type

	def __init__(self, issues: Sequence[Issue], interface: type, failed: type, *args):
		super().__init__(*args)
		self.issues = list(issues)
		self.interface = interface
		self.target = failed

	@property
	def violations(self) -> list[str]:
		return [issue.message for issue in self.issues]

	def __repr__(self) -> str:
		return (
			(
				f"InterfaceNotImplementedError<type=`{_name(self.target)}` "
				f"fails to implement interface=`{_name(self.interface)}`>"
				"\n(violations="
				'\n... "'
			)
			+ '"\n... "'.join(self.violations)
			+ '")'
		)

	__str__ = __repr__


def _name(obj: Any) -> str:
	return getattr(obj, "__name__", None) or repr(obj)
