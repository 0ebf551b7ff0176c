"""
Frontmatter value model.

Frontmatter trees are built from plain Python objects. ``ValueKind``
names the closed set of shapes a value may take so that consumers can
branch on the kind explicitly instead of probing with ``isinstance``.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict, List, Union

Value = Union[None, bool, int, float, str, List[Any], Dict[str, Any]]
Tree = Dict[str, Any]


class ValueKind(str, Enum):
	"""Shape of a frontmatter value."""

	NULL = "null"
	BOOLEAN = "boolean"
	INTEGER = "integer"
	FLOAT = "float"
	STRING = "string"
	SEQUENCE = "sequence"
	MAPPING = "mapping"

	@classmethod
	def of(cls, value: Any) -> "ValueKind":
		"""
		Classify a value.

		``bool`` is checked before ``int`` since it is a subclass of it.

		Parameters:
			value: A node of a frontmatter tree.

		Returns:
			The matching kind.

		Raises:
			TypeError: If the value is not one of the supported shapes.
		"""
		if value is None:
			return cls.NULL
		if isinstance(value, bool):
			return cls.BOOLEAN
		if isinstance(value, int):
			return cls.INTEGER
		if isinstance(value, float):
			return cls.FLOAT
		if isinstance(value, str):
			return cls.STRING
		if isinstance(value, list):
			return cls.SEQUENCE
		if isinstance(value, dict):
			return cls.MAPPING
		raise TypeError(
		    f"unsupported frontmatter value type: {type(value).__name__}")

	@property
	def is_collection(self) -> bool:
		return self in (ValueKind.SEQUENCE, ValueKind.MAPPING)


__all__ = ["Value", "Tree", "ValueKind"]
