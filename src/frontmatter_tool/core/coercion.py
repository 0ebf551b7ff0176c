"""
Typed values from command-line literals.

``coerce_value`` turns the right-hand side of ``key=value`` into a
frontmatter value. The order of attempts is fixed: integer, float,
boolean, bracketed list or map, then string.
"""

from __future__ import annotations

import json
import re

import yaml

from frontmatter_tool.core.serializer import load_yaml, normalize
from frontmatter_tool.core.tree import KeyPath, parse_path
from frontmatter_tool.errors import ArgumentError
from frontmatter_tool.models.value import Value, ValueKind

INT_RE = re.compile(r"[+-]?[0-9]+")
FLOAT_RE = re.compile(r"[+-]?(?:[0-9]+\.[0-9]*|\.[0-9]+|[0-9]+)"
                      r"(?:[eE][+-]?[0-9]+)?")
TRUE_WORDS = frozenset({"true", "True", "TRUE"})
FALSE_WORDS = frozenset({"false", "False", "FALSE"})


def strip_quotes(literal: str) -> str:
	"""Remove one pair of surrounding double quotes, if present."""
	if len(literal) >= 2 and literal[0] == '"' and literal[-1] == '"':
		return literal[1:-1]
	return literal


def _decode_collection(literal: str) -> Value | None:
	"""Decode ``[...]`` or ``{...}`` text, or return None on failure."""
	if literal.startswith("{"):
		try:
			decoded = json.loads(literal)
		except ValueError:
			pass
		else:
			if isinstance(decoded, dict):
				return normalize(decoded)
	try:
		decoded = load_yaml(literal)
	except (yaml.YAMLError, TypeError):
		return None
	expected = ValueKind.MAPPING if literal.startswith(
	    "{") else ValueKind.SEQUENCE
	if ValueKind.of(decoded) is not expected:
		return None
	return decoded


def coerce_value(literal: str) -> Value:
	"""
	Infer a typed value from a raw literal.

	Parameters:
		literal: Text given after ``=`` on the command line.

	Returns:
		An int, float, bool, list, dict or str. Strings lose one layer
		of surrounding double quotes. Bracketed text that fails to
		decode is kept as a string.
	"""
	if INT_RE.fullmatch(literal):
		return int(literal)
	if FLOAT_RE.fullmatch(literal):
		return float(literal)
	if literal in TRUE_WORDS:
		return True
	if literal in FALSE_WORDS:
		return False
	if (literal.startswith("[") and literal.endswith("]")) or (
	    literal.startswith("{") and literal.endswith("}")):
		decoded = _decode_collection(literal)
		if decoded is not None:
			return decoded
	return strip_quotes(literal)


def parse_assignment(arg: str) -> tuple[KeyPath, Value]:
	"""
	Split a ``key=value`` argument into a path and a typed value.

	Only the first ``=`` separates key from value.

	Raises:
		ArgumentError: If there is no ``=`` or the key is empty.
	"""
	key, sep, literal = arg.partition("=")
	if not sep:
		raise ArgumentError(f"invalid key=value format: {arg}")
	if not key:
		raise ArgumentError(f"missing key in assignment: {arg}")
	return parse_path(key), coerce_value(literal)


__all__ = ["coerce_value", "parse_assignment", "strip_quotes"]
