"""File loading utilities.

This subpackage handles reading documents and locating their
frontmatter block.

Key modules:
    - frontmatter: Delimiter-based frontmatter block locator
"""

from .frontmatter import split_document, read_document, DEFAULT_DELIMITER

__all__ = [
    "split_document",
    "read_document",
    "DEFAULT_DELIMITER",
]
