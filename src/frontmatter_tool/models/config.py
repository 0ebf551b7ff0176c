from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import Field, field_validator
from pydantic_core.core_schema import ValidationInfo
from pydantic_settings import BaseSettings, SettingsConfigDict
from dotenv import load_dotenv


def load_env(env_file: str | Path | None = None) -> None:
	"""Load environment variables from an `.env` file if present."""
	env_path = Path(env_file) if env_file else Path(".env")
	if env_path.exists():
		load_dotenv(env_path)


class Config(BaseSettings):
	"""Runtime configuration loaded from environment variables."""

	model_config = SettingsConfigDict(env_prefix="",
	                                  case_sensitive=False,
	                                  populate_by_name=True)

	delimiter: str = Field(
	    "---",
	    alias="FRONTMATTER_DELIMITER",
	    description="Line token opening and closing the frontmatter block",
	)
	indent: int = Field(
	    2,
	    alias="FRONTMATTER_INDENT",
	    description="Indentation width of nested YAML structures",
	)
	strict: bool = Field(
	    False,
	    alias="FRONTMATTER_STRICT",
	    description=
	    "Fail instead of discarding malformed frontmatter on set/delete",
	)
	log_level: str = Field("warning", alias="FRONTMATTER_LOG_LEVEL",
	                       description="Log level for diagnostics on stderr")

	@field_validator("delimiter")
	@classmethod
	def validate_delimiter(cls, v: str) -> str:
		if not v or v != v.strip() or any(ch.isspace() for ch in v):
			raise ValueError("delimiter must be non-empty without whitespace")
		return v

	@field_validator("indent")
	@classmethod
	def validate_indent(cls, v: Any, info: "ValidationInfo") -> Any:
		# PyYAML silently ignores indents outside 2..9
		if not 2 <= int(v) <= 9:
			raise ValueError(f"{info.field_name} must be between 2 and 9")
		return v


__all__ = ["Config", "load_env"]
