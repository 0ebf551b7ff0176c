"""Core frontmatter logic.

This subpackage contains the value inference, path tree, YAML
serialization and document writing used by the get/set/delete
operations.

Key modules:
    - operations: get/set/delete entry points returning an Outcome
    - coercion: Typed values from ``key=value`` literals
    - tree: Dotted-path get/set/delete on nested mappings
    - serializer: PyYAML loader/dumper for frontmatter
    - writer: Document composition and atomic file replacement
"""

from frontmatter_tool.core.operations import (
    get_frontmatter,
    set_frontmatter,
    delete_frontmatter,
)
from frontmatter_tool.core.coercion import coerce_value, parse_assignment
from frontmatter_tool.core.tree import (
    KeyPath,
    parse_path,
    get_path,
    set_path,
    delete_path,
)
from frontmatter_tool.core.serializer import (
    parse_frontmatter,
    serialize_frontmatter,
    render_value,
)
from frontmatter_tool.core.writer import compose_document, write_atomic

__all__ = [
    # operations
    "get_frontmatter",
    "set_frontmatter",
    "delete_frontmatter",
    # coercion
    "coerce_value",
    "parse_assignment",
    # tree
    "KeyPath",
    "parse_path",
    "get_path",
    "set_path",
    "delete_path",
    # serializer
    "parse_frontmatter",
    "serialize_frontmatter",
    "render_value",
    # writer
    "compose_document",
    "write_atomic",
]
