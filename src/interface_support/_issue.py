from collections.abc import Sequence
from dataclasses import dataclass
from enum import StrEnum, auto
from typing import Any


class IssueKind(StrEnum):
	@staticmethod
	def _generate_next_value_(name: str, start: int, count: int, last_values: Sequence) -> str:  # noqa
		return name.upper()

	MISSING_METHOD = auto()
	ARITY_MISMATCH = auto()
	PARAM_NAME_MISMATCH = auto()
	PARAM_REQUIREDNESS_MISMATCH = auto()


@dataclass(slots=True, frozen=True)
class Issue:
	"""one itemized conformance mismatch, rendered in `message`"""

	kind: IssueKind
	method: str
	message: str
	index: int | None = None
	expected: Any = None
	actual: Any = None

	def __str__(self) -> str:
		return self.message
