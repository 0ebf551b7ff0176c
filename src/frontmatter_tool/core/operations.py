"""
Frontmatter get/set/delete operations.

Each operation reads one document, works on its frontmatter tree and
returns an ``Outcome``. Writes go through ``write_atomic`` unless
``dry_run`` is set, in which case the would-be file content is returned
as output instead.
"""

from __future__ import annotations

from pathlib import Path
from typing import Sequence

from frontmatter_tool.core.coercion import parse_assignment
from frontmatter_tool.core.serializer import (
    parse_frontmatter,
    render_value,
    serialize_frontmatter,
)
from frontmatter_tool.core.tree import (
    delete_path,
    format_path,
    get_path,
    parse_path,
    set_path,
)
from frontmatter_tool.core.writer import compose_document, write_atomic
from frontmatter_tool.errors import FrontmatterParseError
from frontmatter_tool.loaders.frontmatter import read_document
from frontmatter_tool.models.config import Config
from frontmatter_tool.models.document import Document
from frontmatter_tool.models.outcome import Outcome
from frontmatter_tool.models.value import Tree
from frontmatter_tool.utils.logging import get_logger

logger = get_logger(__name__)


def _load_tree(document: Document, config: Config) -> Tree:
	"""
	Parse a document's frontmatter for modification.

	Malformed frontmatter is discarded with a warning unless
	``config.strict`` is set.
	"""
	try:
		return parse_frontmatter(document.frontmatter_text)
	except FrontmatterParseError as exc:
		if config.strict:
			raise
		logger.warning(
		    "could not parse existing frontmatter, "
		    "new values will replace it: %s", exc)
		return {}


def _emit(path: Path, tree: Tree, body_text: str, config: Config,
          dry_run: bool) -> Outcome:
	content = compose_document(
	    serialize_frontmatter(tree, config.indent),
	    body_text,
	    config.delimiter,
	)
	if dry_run:
		return Outcome.success(content)
	write_atomic(path, content)
	return Outcome.success()


def get_frontmatter(path: str | Path,
                    key: str | None = None,
                    config: Config | None = None) -> Outcome:
	"""
	Read the whole frontmatter or a single value.

	Parameters:
		path: Document path. A missing file has no frontmatter.
		key: Optional dotted key; None selects the whole block.
		config: Runtime configuration.

	Returns:
		Outcome with the rendered YAML, or a not-found outcome when the
		document has no frontmatter (or only comments) or the key is
		absent.

	Raises:
		FrontmatterParseError: If the frontmatter is not a YAML mapping.
		OSError: If the document cannot be read.
	"""
	config = config or Config()
	document = read_document(path, config.delimiter)
	if document.is_blank:
		return Outcome.not_found("frontmatter not found")

	tree = parse_frontmatter(document.frontmatter_text)
	if not tree:
		return Outcome.not_found("frontmatter not found")
	if key is None:
		return Outcome.success(serialize_frontmatter(tree, config.indent))

	value, found = get_path(tree, parse_path(key))
	if not found:
		return Outcome.not_found(f"field not found: {key}")
	return Outcome.success(render_value(value, config.indent))


def set_frontmatter(path: str | Path,
                    assignments: Sequence[str],
                    config: Config | None = None,
                    dry_run: bool = False) -> Outcome:
	"""
	Set one or more ``key=value`` assignments.

	All assignments are parsed before the document is touched and are
	applied left to right, so a later one wins on the same path.

	Parameters:
		path: Document path; created if missing.
		assignments: Raw ``key=value`` arguments.
		config: Runtime configuration.
		dry_run: Return the new content instead of writing it.

	Raises:
		ArgumentError: If an assignment is malformed.
		OSError: If the document cannot be read or written.
	"""
	config = config or Config()
	parsed = [parse_assignment(arg) for arg in assignments]
	path = Path(path)
	document = read_document(path, config.delimiter)
	tree = _load_tree(document, config)
	for key_path, value in parsed:
		set_path(tree, key_path, value)
		logger.debug("set %s", format_path(key_path))
	return _emit(path, tree, document.body_text, config, dry_run)


def delete_frontmatter(path: str | Path,
                       keys: Sequence[str] = (),
                       config: Config | None = None,
                       dry_run: bool = False) -> Outcome:
	"""
	Delete keys, or the whole frontmatter block when no keys are given.

	Absent keys are ignored. Removing the last key drops the block. A
	missing file is left missing.

	Parameters:
		path: Document path.
		keys: Dotted keys to remove.
		config: Runtime configuration.
		dry_run: Return the new content instead of writing it.

	Raises:
		OSError: If the document cannot be read or written.
	"""
	config = config or Config()
	path = Path(path)
	document = read_document(path, config.delimiter)
	if not path.exists():
		return Outcome.success()

	if not keys:
		if dry_run:
			return Outcome.success(document.body_text)
		write_atomic(path, document.body_text)
		return Outcome.success()

	tree = _load_tree(document, config)
	for key in keys:
		if not delete_path(tree, parse_path(key)):
			logger.debug("nothing to delete at %s", key)
	return _emit(path, tree, document.body_text, config, dry_run)


__all__ = ["get_frontmatter", "set_frontmatter", "delete_frontmatter"]
