"""
Exception hierarchy.

Every error the command raises on purpose derives from
``FrontmatterToolError``; I/O failures surface as the built-in ``OSError``.
"""

from __future__ import annotations


class FrontmatterToolError(Exception):
	"""Base exception for all frontmatter-tool errors."""


class ArgumentError(FrontmatterToolError):
	"""Raised when command-line arguments are malformed."""


class FrontmatterParseError(FrontmatterToolError):
	"""Raised when existing frontmatter is not a valid YAML mapping."""


__all__ = ["FrontmatterToolError", "ArgumentError", "FrontmatterParseError"]
