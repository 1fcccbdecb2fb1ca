from dataclasses import dataclass


@dataclass(slots=True, frozen=True)
class ParamDescriptor:
	name: str
	required: bool

	@property
	def requiredness(self) -> str:
		return "required" if self.required else "optional"


@dataclass(slots=True, frozen=True)
class MethodDescriptor:
	"""
	checkable shape of a method: its name and ordered parameters.

	The receiver (`self` / `cls`) is never part of `params`. `params` is None when
	the signature cannot be introspected, in which case only presence is checked.
	"""

	name: str
	params: tuple[ParamDescriptor, ...] | None = ()

	@property
	def arity(self) -> int | None:
		return None if self.params is None else len(self.params)
