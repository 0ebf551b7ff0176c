"""
Frontmatter Tool models.

This subpackage contains the data structures shared by the loaders,
the core operations and the CLI.

Key models:
    - Config: Application configuration loaded from environment
    - Document: A document split around its frontmatter block
    - Outcome: Exit code and output of a command
    - ValueKind: Shapes a frontmatter value may take
"""

from .config import Config, load_env
from .document import Document
from .outcome import Outcome, EXIT_OK, EXIT_FAILURE, EXIT_NOT_FOUND
from .value import Value, Tree, ValueKind

__all__ = [
    "Config",
    "load_env",
    "Document",
    "Outcome",
    "EXIT_OK",
    "EXIT_FAILURE",
    "EXIT_NOT_FOUND",
    "Value",
    "Tree",
    "ValueKind",
]
