from collections.abc import Callable, Iterable

from ._descr import MethodDescriptor, ParamDescriptor
from ._issue import Issue, IssueKind

type Resolver = Callable[[str], MethodDescriptor | None]


def compare_methods(
	required: Iterable[MethodDescriptor],
	resolve: Resolver,
	type_name: str,
	interface_name: str,
) -> list[Issue]:
	"""
	compare each required method against what `resolve` returns for its name.

	Args:
		required: the interface's methods, in the order issues should be reported.
		resolve: maps a method name to the candidate's descriptor, or None when it has no such method.
		type_name: candidate type name used in messages.
		interface_name: interface name used in messages.
	"""
	issues = []
	for expected in required:
		actual = resolve(expected.name)

		# --- missing ---
		if actual is None:
			issues.append(
				Issue(
					kind=IssueKind.MISSING_METHOD,
					method=expected.name,
					message=f"`{type_name}` does not implement `{interface_name}`'s method `{expected.name}`",
				)
			)
			continue

		issues.extend(compare_signature(expected, actual, type_name))

	return issues


def compare_signature(expected: MethodDescriptor, actual: MethodDescriptor, type_name: str) -> list[Issue]:
	if expected.params is None or actual.params is None:
		return []

	# --- arity ---
	if expected.arity != actual.arity:
		return [
			Issue(
				kind=IssueKind.ARITY_MISMATCH,
				method=expected.name,
				message=(
					f"`{type_name}`'s method `{expected.name}` expected to define "
					f"{expected.arity} parameters but defines {actual.arity}"
				),
				expected=expected.arity,
				actual=actual.arity,
			)
		]

	# --- parameters, positionally ---
	issues = []
	for i, (want, have) in enumerate(zip(expected.params, actual.params, strict=True)):
		if issue := _check_param(expected.name, i, want, have, type_name):
			issues.append(issue)
	return issues


def _check_param(method: str, i: int, want: ParamDescriptor, have: ParamDescriptor, type_name: str) -> Issue | None:
	if want.name != have.name:
		return Issue(
			kind=IssueKind.PARAM_NAME_MISMATCH,
			method=method,
			message=f"`{type_name}`'s method `{method}` expected parameter {i} to be `{want.name}` but got `{have.name}`",
			index=i,
			expected=want.name,
			actual=have.name,
		)

	if want.required != have.required:
		return Issue(
			kind=IssueKind.PARAM_REQUIREDNESS_MISMATCH,
			method=method,
			message=(
				f"`{type_name}`'s method `{method}` parameter {i} (`{have.name}`) "
				f"expected to be {want.requiredness} but is {have.requiredness}"
			),
			index=i,
			expected=want.required,
			actual=have.required,
		)

	return None
