"""
Document model.

A document is split into its raw frontmatter text and the body that
follows it. Neither part is parsed here.
"""

from __future__ import annotations

from pydantic import BaseModel


class Document(BaseModel):
	"""
	A text document split around its frontmatter block.

	``body_text`` holds everything outside the block exactly as read,
	including line endings and any later delimiter lines.
	"""

	has_frontmatter: bool = False
	frontmatter_text: str = ""
	body_text: str = ""

	@property
	def is_blank(self) -> bool:
		"""Return True when there is no frontmatter content to parse."""
		return not self.has_frontmatter or not self.frontmatter_text.strip()


__all__ = ["Document"]
