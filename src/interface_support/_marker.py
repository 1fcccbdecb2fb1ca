from typing import Any

_MARK = "__interface__"


def mark[T: type](declaration: T) -> T:
	"""
	tag `declaration` as an interface and return it, so it doubles as a class decorator.

	The tag is an ordinary class attribute: classes deriving from a marked class
	inherit it, which is what makes composed interfaces recognizable.

	Raises:
		TypeError: if `declaration` is not a class or does not accept attributes.
	"""
	if not isinstance(declaration, type):
		raise TypeError(f"only classes can be marked as interfaces, found {type(declaration).__name__}")
	setattr(declaration, _MARK, True)
	return declaration


def is_interface(declaration: Any) -> bool:
	return isinstance(declaration, type) and getattr(declaration, _MARK, False) is True


@mark
class Interface:
	"""
	base for interface declarations. Subclasses are interfaces without an explicit `mark()`.

	>>> class SimpleCall(Interface):
	...	 def simple_call(self): ...
	"""

	__slots__ = ()
