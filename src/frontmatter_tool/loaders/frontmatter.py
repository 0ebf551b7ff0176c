"""
Frontmatter block locator.

Splits a document into the raw text between its first two delimiter
lines and the body around them. The YAML inside the block is not
parsed here.
"""

from __future__ import annotations

import re
from pathlib import Path

from frontmatter_tool.models.document import Document

DEFAULT_DELIMITER = "---"
# Lines end at "\n" only, unlike str.splitlines.
LINE_RE = re.compile(r"(?<=\n)")


def split_document(text: str,
                   delimiter: str = DEFAULT_DELIMITER) -> Document:
	"""
	Split frontmatter from the document body.

	Only the first two lines whose trimmed content equals the delimiter
	are structural; any later delimiter line (a markdown horizontal
	rule, say) is ordinary body text. Lines before the opening delimiter
	are kept at the front of the body.

	Parameters:
		text: The full document content.
		delimiter: Token marking the start and end of the block.

	Returns:
		Document with the raw block text and the verbatim body. When
		fewer than two delimiter lines exist the whole text is the body.
	"""
	prefix: list[str] = []
	block: list[str] = []
	rest: list[str] = []
	seen = 0

	for line in LINE_RE.split(text):
		if seen < 2 and line.strip() == delimiter:
			seen += 1
			continue
		if seen == 0:
			prefix.append(line)
		elif seen == 1:
			block.append(line)
		else:
			rest.append(line)

	if seen < 2:
		return Document(has_frontmatter=False, body_text=text)

	return Document(
	    has_frontmatter=True,
	    frontmatter_text="".join(block),
	    body_text="".join(prefix) + "".join(rest),
	)


def read_document(path: str | Path,
                  delimiter: str = DEFAULT_DELIMITER) -> Document:
	"""
	Read and split a document from disk.

	A missing file reads as an empty document. Newline translation is
	disabled so ``\\r\\n`` bodies survive unchanged.

	Parameters:
		path: Path to the document.
		delimiter: Token marking the start and end of the block.

	Returns:
		The split Document.

	Raises:
		OSError: If the path exists but cannot be read as a file.
		UnicodeDecodeError: If the file is not valid UTF-8.
	"""
	try:
		with open(path, "r", encoding="utf-8", newline="") as fh:
			text = fh.read()
	except FileNotFoundError:
		return Document()
	return split_document(text, delimiter)


__all__ = ["split_document", "read_document", "DEFAULT_DELIMITER"]
