"""
Frontmatter Tool - edit YAML frontmatter without touching the document body.

This package reads, sets and deletes keys in the ``---`` delimited YAML
block at the top of text documents, addressing nested keys by dotted path.

Main entry points:
    - frontmatter_tool.main: CLI entrypoint
    - frontmatter_tool.core.operations: get/set/delete returning an Outcome
    - frontmatter_tool.models.config: Config and load_env()
"""
