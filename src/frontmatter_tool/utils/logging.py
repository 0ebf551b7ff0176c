"""
Logging configuration module.

Provides centralized logging setup for the command. Diagnostics go to
standard error so they never mix with frontmatter printed on standard
output.
"""

from __future__ import annotations

import logging
import sys

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def resolve_level(level: str | int) -> int:
	"""
	Translate a level name such as ``"debug"`` into its numeric value.

	Unknown names fall back to ``logging.WARNING``.

	Parameters:
		level: Level name (any case) or an already numeric level.

	Returns:
		Numeric logging level.
	"""
	if isinstance(level, int):
		return level
	return logging._nameToLevel.get(level.upper(), logging.WARNING)


def configure_logging(level: str | int = "warning") -> None:
	"""
	Configure basic logging with level and format on standard error.

	Repeated calls only adjust the root level.

	Parameters:
		level: Log level string (e.g., "info", "debug", "warning").
	"""
	lvl = resolve_level(level)
	logging.basicConfig(level=lvl, format=LOG_FORMAT, stream=sys.stderr)
	logging.getLogger().setLevel(lvl)


def get_logger(name: str) -> logging.Logger:
	"""
	Get a logger for the specified module.

	Parameters:
		name: The logger name, typically __name__.

	Returns:
		Configured logger instance.
	"""
	return logging.getLogger(name)


__all__ = ["configure_logging", "get_logger", "resolve_level", "LOG_FORMAT"]
