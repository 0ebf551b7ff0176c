"""
YAML encode/decode for frontmatter trees.

Wraps PyYAML with a loader/dumper pair tuned for hand-edited
frontmatter:

- timestamps are not resolved, so ``date: 2023-01-01`` stays a string
  and is written back unquoted;
- only ``true``/``false`` (any of the three casings) are booleans, so
  ``yes``, ``no``, ``on`` and ``off`` stay strings;
- mapping keys are the key text exactly as written in the source;
- nested sequences are indented under their parent key;
- simple keys that PyYAML would quote (``"123":``) are emitted plain.
"""

from __future__ import annotations

import re
from typing import Any

import yaml

from frontmatter_tool.errors import FrontmatterParseError
from frontmatter_tool.models.value import Tree, Value, ValueKind

STR_TAG = "tag:yaml.org,2002:str"
BOOL_TAG = "tag:yaml.org,2002:bool"
TIMESTAMP_TAG = "tag:yaml.org,2002:timestamp"
BOOL_RE = re.compile(r"^(?:true|True|TRUE|false|False|FALSE)$")
SIMPLE_KEY_RE = re.compile(r"[A-Za-z0-9_-]+")


def _restrict_resolvers(resolvers: dict) -> dict:
	"""
	Narrow PyYAML's YAML 1.1 implicit resolvers.

	Timestamps are dropped and the boolean resolver is replaced by one
	that only accepts the ``true``/``false`` spellings.
	"""
	table = {
	    first: [(tag, regexp)
	            for tag, regexp in entries
	            if tag not in (TIMESTAMP_TAG, BOOL_TAG)]
	    for first, entries in resolvers.items()
	}
	for first in "tTfF":
		table.setdefault(first, []).append((BOOL_TAG, BOOL_RE))
	return table


class FrontmatterLoader(yaml.SafeLoader):
	"""SafeLoader keeping timestamps, yes/no words and key text as strings."""

	def construct_mapping(self, node, deep=False):
		if not isinstance(node, yaml.MappingNode):
			raise yaml.constructor.ConstructorError(
			    None, None, f"expected a mapping node, but found {node.id}",
			    node.start_mark)
		self.flatten_mapping(node)
		mapping = {}
		for key_node, value_node in node.value:
			if not isinstance(key_node, yaml.ScalarNode):
				raise yaml.constructor.ConstructorError(
				    "while constructing a mapping", node.start_mark,
				    "found a non-scalar key", key_node.start_mark)
			mapping[key_node.value] = self.construct_object(value_node,
			                                                deep=deep)
		return mapping


FrontmatterLoader.yaml_implicit_resolvers = _restrict_resolvers(
    yaml.SafeLoader.yaml_implicit_resolvers)
FrontmatterLoader.add_constructor(TIMESTAMP_TAG,
                                  yaml.SafeLoader.construct_yaml_str)


def normalize(value: Any) -> Value:
	"""
	Rebuild a decoded YAML value as a tree of supported kinds.

	The result shares no objects with the input, which also expands YAML
	aliases.

	Raises:
		TypeError: If any node is not a supported kind, or a mapping key
			is not a string.
	"""
	kind = ValueKind.of(value)
	if kind is ValueKind.MAPPING:
		result = {}
		for key, item in value.items():
			if not isinstance(key, str):
				raise TypeError(f"unsupported mapping key: {key!r}")
			result[key] = normalize(item)
		return result
	if kind is ValueKind.SEQUENCE:
		return [normalize(item) for item in value]
	return value


def load_yaml(text: str) -> Value:
	"""
	Decode YAML text into a normalized value.

	Raises:
		yaml.YAMLError: If the text is not valid YAML.
		TypeError: If the text decodes to an unsupported kind.
	"""
	return normalize(yaml.load(text, Loader=FrontmatterLoader))


def parse_frontmatter(text: str) -> Tree:
	"""
	Parse raw frontmatter text into a mapping.

	Blank text (or text holding only comments) is an empty mapping.

	Parameters:
		text: The raw text between the delimiters.

	Returns:
		The decoded mapping.

	Raises:
		FrontmatterParseError: If the text is not YAML or not a mapping.
	"""
	if not text.strip():
		return {}
	try:
		data = load_yaml(text)
	except yaml.YAMLError as exc:
		raise FrontmatterParseError(f"invalid YAML frontmatter: {exc}") from exc
	except TypeError as exc:
		raise FrontmatterParseError(f"unsupported frontmatter: {exc}") from exc
	if data is None:
		return {}
	kind = ValueKind.of(data)
	if kind is not ValueKind.MAPPING:
		raise FrontmatterParseError(
		    f"frontmatter must be a mapping, got {kind.value}")
	return data


class FrontmatterDumper(yaml.SafeDumper):
	"""SafeDumper producing block-style YAML with unquoted simple keys."""

	def ignore_aliases(self, data: Any) -> bool:
		return True

	def increase_indent(self, flow: bool = False,
	                    indentless: bool = False) -> None:
		return super().increase_indent(flow, False)

	def represent_mapping(self, tag, mapping, flow_style=None):
		node = super().represent_mapping(tag, mapping, flow_style)
		for key_node, _ in node.value:
			self._plain_key(key_node)
		return node

	def _plain_key(self, node: yaml.Node) -> None:
		"""
		Let a simple string key be emitted without quotes.

		PyYAML quotes a string whose plain form resolves to another
		type. Keys load back as their source text whatever they resolve
		to, so retagging the node with that type is lossless and makes
		the emitter print it plain.
		"""
		if not isinstance(node, yaml.ScalarNode) or node.tag != STR_TAG:
			return
		if not SIMPLE_KEY_RE.fullmatch(node.value):
			return
		resolved = self.resolve(yaml.ScalarNode, node.value, (True, False))
		if resolved != STR_TAG:
			node.tag = resolved
			node.style = None


FrontmatterDumper.yaml_implicit_resolvers = _restrict_resolvers(
    yaml.SafeDumper.yaml_implicit_resolvers)


def dump_yaml(value: Value, indent: int = 2) -> str:
	"""Encode a value as block-style YAML without line wrapping."""
	return yaml.dump(
	    value,
	    Dumper=FrontmatterDumper,
	    indent=indent,
	    default_flow_style=False,
	    sort_keys=False,
	    allow_unicode=True,
	    width=float("inf"),
	)


def serialize_frontmatter(tree: Tree, indent: int = 2) -> str:
	"""
	Serialize a mapping to frontmatter text.

	Parameters:
		tree: The frontmatter mapping.
		indent: Indentation width for nested structures.

	Returns:
		YAML text ending in a newline, or an empty string for an empty
		mapping (meaning no frontmatter block at all).
	"""
	if not tree:
		return ""
	return dump_yaml(tree, indent)


def render_value(value: Value, indent: int = 2) -> str:
	"""
	Render a single value for display.

	Scalars print as their bare YAML spelling; collections as block
	YAML. The result always ends in a newline.
	"""
	kind = ValueKind.of(value)
	if kind.is_collection:
		return dump_yaml(value, indent)
	if kind is ValueKind.NULL:
		return "null\n"
	if kind is ValueKind.BOOLEAN:
		return ("true" if value else "false") + "\n"
	return f"{value}\n"


__all__ = [
    "FrontmatterLoader",
    "FrontmatterDumper",
    "normalize",
    "load_yaml",
    "dump_yaml",
    "parse_frontmatter",
    "serialize_frontmatter",
    "render_value",
]
