"""
Dotted-path access to a frontmatter tree.

A path such as ``config.database.host`` is split on ``.`` into key
segments and walked through nested mappings. An empty segment in the
middle of a path is the literal key ``""``; the empty path is the root.
"""

from __future__ import annotations

from typing import Tuple

from frontmatter_tool.models.value import Tree, Value, ValueKind

KeyPath = Tuple[str, ...]


def parse_path(key: str) -> KeyPath:
	"""Split a dotted key into path segments. ``""`` is the root path."""
	if key == "":
		return ()
	return tuple(key.split("."))


def format_path(path: KeyPath) -> str:
	return ".".join(path)


def get_path(root: Tree, path: KeyPath) -> tuple[Value, bool]:
	"""
	Look up the value at a path.

	Parameters:
		root: The frontmatter mapping.
		path: Key segments to follow.

	Returns:
		``(value, True)`` when found, ``(None, False)`` when any segment
		is missing or passes through a non-mapping value.
	"""
	current: Value = root
	for segment in path:
		if ValueKind.of(current) is not ValueKind.MAPPING:
			return None, False
		if segment not in current:
			return None, False
		current = current[segment]
	return current, True


def set_path(root: Tree, path: KeyPath, value: Value) -> None:
	"""
	Set the value at a path, creating intermediate mappings.

	An intermediate segment holding anything other than a mapping is
	replaced by an empty mapping, so ``a.b=x`` discards a scalar ``a``.

	Parameters:
		root: The frontmatter mapping, modified in place.
		path: Key segments; must not be empty.
		value: Value stored at the final segment.

	Raises:
		ValueError: If the path is empty.
	"""
	if not path:
		raise ValueError("cannot set the root of the frontmatter")
	current = root
	for segment in path[:-1]:
		child = current.get(segment)
		if child is None or ValueKind.of(child) is not ValueKind.MAPPING:
			child = {}
			current[segment] = child
		current = child
	current[path[-1]] = value


def delete_path(root: Tree, path: KeyPath) -> bool:
	"""
	Remove the value at a path.

	Mappings emptied by the removal are left in place.

	Returns:
		True if the key existed and was removed.
	"""
	if not path:
		return False
	parent, found = get_path(root, path[:-1])
	if not found or ValueKind.of(parent) is not ValueKind.MAPPING:
		return False
	if path[-1] not in parent:
		return False
	del parent[path[-1]]
	return True


__all__ = [
    "KeyPath",
    "parse_path",
    "format_path",
    "get_path",
    "set_path",
    "delete_path",
]
