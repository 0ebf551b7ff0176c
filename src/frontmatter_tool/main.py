from __future__ import annotations

import sys

import click
import typer
from pydantic import ValidationError
from typer.main import get_command

from frontmatter_tool.core.operations import (
    delete_frontmatter,
    get_frontmatter,
    set_frontmatter,
)
from frontmatter_tool.errors import ArgumentError, FrontmatterToolError
from frontmatter_tool.models.config import Config, load_env
from frontmatter_tool.models.outcome import EXIT_FAILURE, EXIT_OK, Outcome
from frontmatter_tool.utils.logging import configure_logging

cli = typer.Typer(add_completion=False, no_args_is_help=True)

DRY_RUN_HELP = "Print the result instead of writing the file"


@cli.callback()
def root(
    ctx: typer.Context,
    dry_run: bool = typer.Option(False, "--dry-run", help=DRY_RUN_HELP),
) -> None:
	"""
	Read and edit YAML frontmatter in text documents.

	Keys may be dotted paths into nested mappings (object.field).
	"""
	ctx.obj = {"dry_run": dry_run}


def _load_config() -> Config:
	load_env()
	config = Config()
	configure_logging(config.log_level)
	return config


def _split_file(args: list[str] | None, command: str) -> tuple[list[str], str]:
	"""Separate the trailing FILE argument from the keys before it."""
	args = list(args or [])
	if not args:
		raise ArgumentError(f"no file specified for {command}")
	return args[:-1], args[-1]


def _dry_run(ctx: typer.Context, dry_run: bool) -> bool:
	return dry_run or bool((ctx.obj or {}).get("dry_run"))


def get_impl(args: list[str], dry_run: bool = False) -> Outcome:
	"""
	Print the whole frontmatter or the value of one key.

	Parameters:
		args: Optional key followed by the file path.
		dry_run: Accepted for symmetry; get never writes.
	"""
	keys, file_path = _split_file(args, "get")
	if len(keys) > 1:
		raise ArgumentError("get accepts at most one key")
	config = _load_config()
	return get_frontmatter(file_path, keys[0] if keys else None, config)


def set_impl(args: list[str], dry_run: bool = False) -> Outcome:
	"""
	Apply key=value assignments to a file's frontmatter.

	Parameters:
		args: One or more key=value pairs followed by the file path.
		dry_run: Print the resulting document instead of writing it.
	"""
	assignments, file_path = _split_file(args, "set")
	if not assignments:
		raise ArgumentError(
		    "at least one key=value pair and a file must be specified for set")
	config = _load_config()
	return set_frontmatter(file_path, assignments, config, dry_run=dry_run)


def delete_impl(args: list[str], dry_run: bool = False) -> Outcome:
	"""
	Delete keys, or the whole frontmatter block when no key is given.

	Parameters:
		args: Zero or more keys followed by the file path.
		dry_run: Print the resulting document instead of writing it.
	"""
	keys, file_path = _split_file(args, "delete")
	config = _load_config()
	return delete_frontmatter(file_path, keys, config, dry_run=dry_run)


@cli.command()
def get(
    ctx: typer.Context,
    args: list[str] = typer.Argument(None, metavar="[KEY] FILE"),
    dry_run: bool = typer.Option(False, "--dry-run", help=DRY_RUN_HELP),
) -> Outcome:
	"""Print the frontmatter, or the value at KEY. Exits 2 if absent."""
	return get_impl(args, _dry_run(ctx, dry_run))


@cli.command("set")
def set_(
    ctx: typer.Context,
    args: list[str] = typer.Argument(None, metavar="KEY=VALUE... FILE"),
    dry_run: bool = typer.Option(False, "--dry-run", help=DRY_RUN_HELP),
    delete_all: bool = typer.Option(False, "--delete", hidden=True),
) -> Outcome:
	"""Set one or more KEY=VALUE pairs, creating the file if needed."""
	if delete_all:
		return delete_impl(args, _dry_run(ctx, dry_run))
	return set_impl(args, _dry_run(ctx, dry_run))


@cli.command()
def delete(
    ctx: typer.Context,
    args: list[str] = typer.Argument(None, metavar="[KEY...] FILE"),
    dry_run: bool = typer.Option(False, "--dry-run", help=DRY_RUN_HELP),
) -> Outcome:
	"""Delete KEYs, or the whole frontmatter block when none are given."""
	return delete_impl(args, _dry_run(ctx, dry_run))


def _finish(outcome: Outcome) -> int:
	"""Write an outcome to stdout/stderr and return its exit code."""
	if outcome.output:
		typer.echo(outcome.output, nl=False)
	if outcome.exit_code == EXIT_FAILURE and outcome.message:
		typer.echo(f"Error: {outcome.message}", err=True)
	return outcome.exit_code


def dispatch(args: list[str]) -> int:
	"""
	Run the CLI on a list of arguments and return the exit code.

	This is the only place where errors and outcomes become exit codes:
	usage errors, tool errors and I/O errors map to 1, a not-found
	outcome keeps its 2.

	Parameters:
		args: Command-line arguments without the program name.

	Returns:
		Process exit code.
	"""
	_click_app = get_command(cli)
	try:
		result = _click_app.main(
		    args=args,
		    prog_name="frontmatter",
		    standalone_mode=False,
		)
	except click.ClickException as exc:
		exc.show()
		return EXIT_FAILURE
	except click.Abort:
		typer.echo("Aborted!", err=True)
		return EXIT_FAILURE
	except (FrontmatterToolError, ValidationError) as exc:
		return _finish(Outcome.failure(str(exc)))
	except (OSError, UnicodeDecodeError) as exc:
		return _finish(Outcome.failure(str(exc)))

	if isinstance(result, Outcome):
		return _finish(result)
	# --help and other eager exits return their code directly
	return result if isinstance(result, int) else EXIT_OK


def entrypoint(argv=None, *, standalone_mode: bool = True):
	"""
	Console script entrypoint.

	Parameters:
		argv: Command-line arguments. Defaults to sys.argv[1:].
		standalone_mode: If True, exit the process with the result code;
			otherwise return it.

	Returns:
		The exit code when not in standalone mode.
	"""
	args = sys.argv[1:] if argv is None else list(argv)
	code = dispatch(args)
	if standalone_mode:
		sys.exit(code)
	return code


if __name__ == "__main__":
	entrypoint()
