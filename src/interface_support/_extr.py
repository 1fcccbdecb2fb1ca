import inspect
import typing
from collections.abc import Callable
from inspect import Parameter

from ._descr import MethodDescriptor, ParamDescriptor
from ._marker import Interface
from .log import get_logger

type MethodKind = typing.Literal["method", "static", "classmethod", "property"]

_log = get_logger("interface_support.extr")

# methods every object answers to; never required from a candidate.
_universal = frozenset(dir(object))

# class machinery rather than behaviour a candidate could provide.
_special_names = frozenset(
	{
		"__class_getitem__",
		"__set_name__",
		"__mro_entries__",
		"__annotate__",
		"__annotate_func__",
	}
)

_skip_names = _universal | _special_names

_skip_bases = frozenset({object, typing.Protocol, typing.Generic, Interface})

_variadic = frozenset({Parameter.VAR_POSITIONAL, Parameter.VAR_KEYWORD})

_positional = frozenset({Parameter.POSITIONAL_ONLY, Parameter.POSITIONAL_OR_KEYWORD})


def _is_public(name: str) -> bool:
	return not name.startswith("_") or (name.startswith("__") and name.endswith("__"))


def _unwrap_method(obj: typing.Any) -> tuple[typing.Any, MethodKind]:
	if isinstance(obj, staticmethod):
		return obj.__func__, "static"
	if isinstance(obj, classmethod):
		return obj.__func__, "classmethod"
	if isinstance(obj, property):
		return obj.fget, "property"
	return obj, "method"


def _param(param: Parameter) -> ParamDescriptor:
	return ParamDescriptor(
		name=param.name,
		required=param.default is Parameter.empty and param.kind not in _variadic,
	)


def describe(name: str, func: Callable, *, drop_receiver: bool = False) -> MethodDescriptor:
	"""
	build the MethodDescriptor of `func` exposed as method `name`.

	Args:
		name: the method name the descriptor is reported under.
		func: any callable accepted by `inspect.signature`.
		drop_receiver: strip the leading positional parameter (`self` / `cls`) of an unbound function.
	"""
	try:
		sig = inspect.signature(func)
	except (ValueError, TypeError) as e:
		_log.debug(f"no signature for method `{name}` ({e}), only its presence is checked")
		return MethodDescriptor(name, None)

	params = list(sig.parameters.values())
	if drop_receiver and params and params[0].kind in _positional:
		params = params[1:]

	return MethodDescriptor(name, tuple(_param(p) for p in params))


def required_methods(interface: type) -> list[MethodDescriptor]:
	"""
	flatten `interface` and its bases into the ordered list of methods a candidate must provide.

	Bases come first, in reverse mro order; a redefinition keeps the position of the
	first declaration and takes the most derived signature. Properties, data attributes,
	private names and anything `object` already provides are not required.
	"""
	methods: dict[str, MethodDescriptor] = {}
	for base in reversed(interface.__mro__):
		if base in _skip_bases:
			continue
		for name, raw in vars(base).items():
			if name in _skip_names or not _is_public(name):
				continue
			func, kind = _unwrap_method(raw)
			if kind == "property" or not inspect.isroutine(func):
				# overriding a method with a non-method withdraws the requirement
				methods.pop(name, None)
				continue
			methods[name] = describe(name, func, drop_receiver=kind != "static")

	return list(methods.values())


_not_found = object()


def _get_raw(cls: type, name: str) -> typing.Any:
	"""get the raw descriptor from mro bypassing __get__"""
	for base in cls.__mro__:
		if name in base.__dict__:
			return base.__dict__[name]
	return _not_found


def _instance_dict(obj: typing.Any) -> dict:
	try:
		return object.__getattribute__(obj, "__dict__")
	except AttributeError:
		return {}


def resolve_method(obj: typing.Any, name: str) -> MethodDescriptor | None:
	"""
	descriptor of `obj`'s publicly invocable member `name`, None if it has none.

	Members are read raw, never through attribute access, so no property getter,
	`__getattr__` or other descriptor code of the candidate runs during a check.
	"""
	if not _is_public(name):
		return None

	# callable instance attributes shadow non-data class members and are never bound
	raw = _get_raw(type(obj), name)
	own = _instance_dict(obj)
	if name in own and not inspect.isdatadescriptor(raw):
		member = own[name]
		return describe(name, member) if callable(member) else None

	if raw is _not_found:
		return None

	func, kind = _unwrap_method(raw)
	if kind == "property" or inspect.isdatadescriptor(raw):
		return None
	if kind == "static":
		return describe(name, func)
	if kind == "classmethod" or inspect.isfunction(raw) or (inspect.ismethoddescriptor(raw) and callable(raw)):
		return describe(name, func, drop_receiver=True)
	# plain callable objects stored on the class are not bound by attribute access
	return describe(name, raw) if callable(raw) else None
