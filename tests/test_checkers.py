from interface_support import IssueKind, MethodDescriptor, ParamDescriptor, compare_methods, compare_signature

REQ_A = ParamDescriptor("a", True)
OPT_A = ParamDescriptor("a", False)
REQ_B = ParamDescriptor("b", True)
OPT_B = ParamDescriptor("b", False)


def _fake(*methods: MethodDescriptor):
	"""resolver backed by hand-built descriptors instead of a live object"""
	table = {m.name: m for m in methods}
	return table.get


class TestCompareSignature:
	def test_identical(self):
		m = MethodDescriptor("m", (REQ_A, OPT_B))

		assert compare_signature(m, m, "Fake") == []

	def test_unknown_signature_is_skipped(self):
		expected = MethodDescriptor("m", (REQ_A,))

		assert compare_signature(expected, MethodDescriptor("m", None), "Fake") == []
		assert compare_signature(MethodDescriptor("m", None), expected, "Fake") == []

	def test_arity(self):
		issues = compare_signature(MethodDescriptor("m", (REQ_A, REQ_B)), MethodDescriptor("m", (OPT_B,)), "Fake")

		assert len(issues) == 1
		assert issues[0].kind is IssueKind.ARITY_MISMATCH
		assert (issues[0].expected, issues[0].actual) == (2, 1)
		assert issues[0].index is None

	def test_name_then_requiredness_per_index(self):
		issues = compare_signature(
			MethodDescriptor("m", (REQ_A, OPT_B)),
			MethodDescriptor("m", (REQ_B, REQ_B)),
			"Fake",
		)

		assert [(i.kind, i.index) for i in issues] == [
			(IssueKind.PARAM_NAME_MISMATCH, 0),
			(IssueKind.PARAM_REQUIREDNESS_MISMATCH, 1),
		]

	def test_name_mismatch_short_circuits(self):
		issues = compare_signature(MethodDescriptor("m", (OPT_A,)), MethodDescriptor("m", (REQ_B,)), "Fake")

		assert [i.kind for i in issues] == [IssueKind.PARAM_NAME_MISMATCH]

	def test_issue_str_is_message(self):
		(issue,) = compare_signature(MethodDescriptor("m", (OPT_A,)), MethodDescriptor("m", (REQ_A,)), "Fake")

		assert str(issue) == "`Fake`'s method `m` parameter 0 (`a`) expected to be optional but is required"


class TestCompareMethods:
	def test_empty_requirements(self):
		assert compare_methods([], _fake(), "Fake", "Empty") == []

	def test_missing_is_not_signature_checked(self):
		required = [MethodDescriptor("gone", (REQ_A,))]

		issues = compare_methods(required, _fake(), "Fake", "Iface")

		assert [(i.kind, i.method) for i in issues] == [(IssueKind.MISSING_METHOD, "gone")]
		assert issues[0].message == "`Fake` does not implement `Iface`'s method `gone`"

	def test_order_follows_required(self):
		required = [
			MethodDescriptor("one", (REQ_A,)),
			MethodDescriptor("two"),
			MethodDescriptor("three", (REQ_A, OPT_B)),
		]
		resolve = _fake(
			MethodDescriptor("three", (REQ_A, REQ_B)),
			MethodDescriptor("one", ()),
		)

		issues = compare_methods(required, resolve, "Fake", "Iface")

		assert [(i.kind, i.method) for i in issues] == [
			(IssueKind.ARITY_MISMATCH, "one"),
			(IssueKind.MISSING_METHOD, "two"),
			(IssueKind.PARAM_REQUIREDNESS_MISMATCH, "three"),
		]

	def test_repeatable(self):
		required = [MethodDescriptor("one", (REQ_A,))]
		resolve = _fake(MethodDescriptor("one", (OPT_A,)))

		assert compare_methods(required, resolve, "Fake", "Iface") == compare_methods(
			required, resolve, "Fake", "Iface"
		)
