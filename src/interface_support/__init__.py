"""runtime structural interfaces: declare a method set, check any object against it"""

from ._checkers import compare_methods, compare_signature
from ._descr import MethodDescriptor, ParamDescriptor
from ._error import ConfigurationError, InterfaceNotImplementedError, InterfaceSupportError, NotAnInterfaceError
from ._extr import describe, required_methods, resolve_method
from ._impl import assert_implements, assert_interface, check, implements
from ._issue import Issue, IssueKind
from ._marker import Interface, is_interface, mark

__all__ = (
	"ConfigurationError",
	"Interface",
	"InterfaceNotImplementedError",
	"InterfaceSupportError",
	"Issue",
	"IssueKind",
	"MethodDescriptor",
	"NotAnInterfaceError",
	"ParamDescriptor",
	"assert_implements",
	"assert_interface",
	"check",
	"compare_methods",
	"compare_signature",
	"describe",
	"implements",
	"is_interface",
	"mark",
	"required_methods",
	"resolve_method",
)


def __dir__():
	return __all__
