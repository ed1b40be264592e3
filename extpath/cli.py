"""CLI interface for extpath using Click."""

import json
import logging
import sys
from pathlib import Path

import click

from extpath import __version__
from extpath.config import ConfigFileError, build_config, load_file_config
from extpath.host import PathOperations
from extpath.separators import PRESET_NAMES, SeparatorConfigError, preset_name
from extpath.types import Paths

logger = logging.getLogger(__name__)


def _collect_explicit_args(ctx: click.Context, **kwargs: object) -> dict[str, object]:
    """Return only the kwargs whose values were explicitly set on the command line."""
    explicit: dict[str, object] = {}
    for param_name, value in kwargs.items():
        source = ctx.get_parameter_source(param_name)
        if source is click.core.ParameterSource.COMMANDLINE:
            if param_name == "separator":
                explicit["recognized_separators"] = tuple(value)
            else:
                explicit[param_name] = value
    return explicit


def _read_stdin_paths() -> Paths:
    """Read one path per line from stdin, keeping empty lines as empty paths."""
    return tuple(line.rstrip("\r\n") for line in sys.stdin)


def _write_human(results: list[tuple[str, str | None]]) -> None:
    for _, result in results:
        click.echo(result)


def _write_json(results: list[tuple[str, str | None]], dialect: str) -> None:
    data = {
        "dialect": dialect,
        "results": [{"path": p, "result": r} for p, r in results],
        "total": len(results),
    }
    click.echo(json.dumps(data, indent=2))


@click.command()
@click.version_option(version=__version__, prog_name="extpath")
@click.argument("paths", nargs=-1)
@click.option(
    "--ext",
    "new_extension",
    default=None,
    help="New extension, with or without a leading dot. Omit to strip the extension.",
)
@click.option(
    "--dialect",
    type=click.Choice(PRESET_NAMES, case_sensitive=False),
    default="current",
    show_default=True,
    help="Separator dialect used to find the final path segment.",
)
@click.option(
    "--separator",
    multiple=True,
    help="Character recognized as a directory separator (repeatable).",
)
@click.option(
    "--preferred-separator",
    "preferred_separator",
    default=None,
    help="Preferred separator of a custom dialect.",
)
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="pyproject.toml to read [tool.extpath] from.",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["human", "json"]),
    default="human",
    show_default=True,
    help="Output format.",
)
@click.option("-v", "--verbose", is_flag=True, help="Log debug output to stderr.")
@click.pass_context
def main(
    ctx,
    paths,
    new_extension,
    dialect,
    separator,
    preferred_separator,
    config_path,
    output_format,
    verbose,
):
    """Change or strip the extension of each PATH.

    Paths are treated as text under the chosen dialect; nothing on disk is
    touched. Reads one path per line from stdin if no PATHS are given.
    Put ``--`` before PATHS that may start with a dash, e.g.
    ``extpath --ext md -- -notes.txt``.
    """
    if verbose:
        logging.basicConfig(level=logging.DEBUG, stream=sys.stderr)

    cli_overrides = _collect_explicit_args(
        ctx,
        dialect=dialect,
        separator=separator,
        preferred_separator=preferred_separator,
    )

    try:
        file_config = load_file_config(config_path)
        config = build_config(cli_overrides, file_config)
    except (ConfigFileError, SeparatorConfigError) as exc:
        raise click.ClickException(str(exc)) from None

    if not paths:
        paths = _read_stdin_paths()

    ops = PathOperations(config)
    results = [(p, ops.change_extension(p, new_extension)) for p in paths]
    logger.debug("Rewrote %d path(s) with %r", len(results), config)

    if output_format == "json":
        _write_json(results, preset_name(config) or "custom")
    else:
        _write_human(results)
