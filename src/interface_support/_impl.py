from functools import partial
from typing import Any

from ._checkers import compare_methods
from ._error import InterfaceNotImplementedError, NotAnInterfaceError
from ._extr import required_methods, resolve_method
from ._issue import Issue
from ._marker import is_interface
from .config import CheckerSettings, get_settings
from .log import get_logger

_log = get_logger("interface_support.checker")


def _tname(typ: Any) -> str:
	return str(typ) if not hasattr(typ, "__name__") else typ.__name__


def assert_interface(declaration: Any) -> None:
	"""
	Raises:
		NotAnInterfaceError: if `declaration` was not marked, directly or through a base, as an interface.
	"""
	if not is_interface(declaration):
		raise NotAnInterfaceError(declaration)


def check(obj: Any, interface: type) -> list[Issue]:
	"""
	list every way `obj` fails to implement `interface`, empty if it conforms.

	Methods are examined in declaration order and, per method, parameters by position.
	A non-conforming object is reported as data, never raised.

	Raises:
		NotAnInterfaceError: if `interface` is not an interface.
		ConfigurationError: if the checker settings in the environment are invalid.
	"""
	assert_interface(interface)
	settings = get_settings()

	required = required_methods(interface)
	type_name, interface_name = _tname(type(obj)), _tname(interface)
	_log.debug(f"checking `{type_name}` against `{interface_name}` ({len(required)} required methods)")

	issues = compare_methods(required, partial(resolve_method, obj), type_name, interface_name)
	if issues:
		_report(issues, type_name, interface_name, settings)

	return issues


def _report(issues: list[Issue], type_name: str, interface_name: str, settings: CheckerSettings) -> None:
	_log.debug(f"`{type_name}` fails to implement `{interface_name}`: {len(issues)} issue(s)")

	if not settings.IFACE_LOG_ISSUES:
		return
	for issue in issues:
		_log.log(settings.IFACE_LOG_LEVEL, f"{issue.kind}: {issue.message}")


def implements(obj: Any, interface: type) -> bool:
	"""
	test whether `obj`'s class implements all of `interface`'s methods.

	Raises:
		NotAnInterfaceError: if `interface` is not an interface.
		ConfigurationError: if the checker settings in the environment are invalid.
	"""
	return not check(obj, interface)


def assert_implements(obj: Any, interface: type) -> None:
	"""
	assertion failing unless `obj`'s class implements all of `interface`'s methods.

	Raises:
		NotAnInterfaceError: if `interface` is not an interface.
		ConfigurationError: if the checker settings in the environment are invalid.
		InterfaceNotImplementedError: carrying every issue found, if `obj` does not conform.
	"""
	issues = check(obj, interface)
	if issues:
		raise InterfaceNotImplementedError(issues, interface, type(obj))
