"""
Document composition and persistence.

Joins new frontmatter text with the preserved body and replaces the
target file atomically, so readers see either the old or the new
content and never a partial write.
"""

from __future__ import annotations

import os
import stat
import tempfile
from pathlib import Path

from frontmatter_tool.loaders.frontmatter import DEFAULT_DELIMITER
from frontmatter_tool.utils.logging import get_logger

logger = get_logger(__name__)

DEFAULT_FILE_MODE = 0o644


def compose_document(frontmatter_text: str,
                     body_text: str,
                     delimiter: str = DEFAULT_DELIMITER) -> str:
	"""
	Build the final document text.

	Parameters:
		frontmatter_text: Serialized frontmatter; blank means no block.
		body_text: The body, emitted unchanged.
		delimiter: Token written on the lines around the block.

	Returns:
		The delimited block followed by the body, or just the body.
	"""
	if not frontmatter_text.strip():
		return body_text
	parts = [delimiter, "\n", frontmatter_text]
	if not frontmatter_text.endswith("\n"):
		parts.append("\n")
	parts.extend([delimiter, "\n", body_text])
	return "".join(parts)


def write_atomic(path: str | Path, content: str) -> None:
	"""
	Replace a file's content via a temporary file and rename.

	The temporary file lives in the target's directory so the final
	rename stays on one filesystem. An existing target keeps its
	permission bits; a new one gets ``0o644``.

	Parameters:
		path: Destination file path.
		content: Text to write as UTF-8, without newline translation.

	Raises:
		OSError: If the directory is missing or not writable.
	"""
	path = Path(path)
	try:
		mode = stat.S_IMODE(path.stat().st_mode)
	except FileNotFoundError:
		mode = DEFAULT_FILE_MODE

	with tempfile.NamedTemporaryFile(
	    "w",
	    encoding="utf-8",
	    newline="",
	    dir=str(path.parent),
	    prefix=f".{path.name}.",
	    suffix=".tmp",
	    delete=False,
	) as tmp:
		tmp_path = Path(tmp.name)
		try:
			tmp.write(content)
			tmp.flush()
			os.fsync(tmp.fileno())
		except BaseException:
			tmp.close()
			tmp_path.unlink(missing_ok=True)
			raise

	try:
		os.chmod(tmp_path, mode)
		tmp_path.replace(path)
	except BaseException:
		tmp_path.unlink(missing_ok=True)
		raise
	logger.debug("wrote %d characters to %s", len(content), path)


__all__ = ["compose_document", "write_atomic", "DEFAULT_FILE_MODE"]
