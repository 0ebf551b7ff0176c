"""
Command outcome model.

Operations report their result as an ``Outcome`` carrying the exit code,
the text destined for standard output and an optional message for
standard error. Only the CLI entrypoint turns it into a process exit.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_NOT_FOUND = 2


class Outcome(BaseModel):
	"""Result of a get/set/delete operation."""

	exit_code: int = Field(default=EXIT_OK, ge=0)
	output: str = Field(default="", description="Text for standard output.")
	message: str | None = Field(
	    default=None,
	    description="Diagnostic for standard error.",
	)

	@classmethod
	def success(cls, output: str = "") -> "Outcome":
		return cls(exit_code=EXIT_OK, output=output)

	@classmethod
	def not_found(cls, message: str | None = None) -> "Outcome":
		"""Outcome for an absent block or key. Nothing is printed."""
		return cls(exit_code=EXIT_NOT_FOUND, message=message)

	@classmethod
	def failure(cls, message: str) -> "Outcome":
		return cls(exit_code=EXIT_FAILURE, message=message)

	@property
	def ok(self) -> bool:
		return self.exit_code == EXIT_OK


__all__ = ["Outcome", "EXIT_OK", "EXIT_FAILURE", "EXIT_NOT_FOUND"]
