import logging
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path
from typing import Any, Optional

import click
import yaml  # type: ignore
from dotenv import load_dotenv

from inlinestyle.config import CONFIG_ENV_VAR, ConfigError, load_options
from inlinestyle.html_tree import style_html
from inlinestyle.json_utils import json_dumps
from inlinestyle.styling import (
    StylingOptions,
    match_annotation,
    parse_annotation,
)

try:
    __version__ = version("inlinestyle")
except PackageNotFoundError:
    __version__ = "0.0.1-dev"


@click.group()
@click.option("--debug/--no-debug", default=False)
@click.option("--trace/--no-trace", default=False)
@click.option(
    "--log-file",
    type=click.Path(file_okay=True, dir_okay=False),
    envvar="INLINESTYLE_LOG_FILE",
)
@click.version_option(__version__, prog_name="inlinestyle")
def cli(debug: bool, trace: bool, log_file: Optional[str] = None) -> None:
    """Configure logging and load environment variables.

    Args:
        debug: Toggle debug logging.
        trace: Toggle trace logging.
        log_file: Optional path to the log file.
    """
    if trace:
        level = 1
    elif debug:
        level = logging.DEBUG
    else:
        level = logging.INFO

    logging.basicConfig(
        filename=log_file,
        level=level,
        format="[%(levelname)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    if trace:
        logging.debug("Trace mode is on")
    if debug:
        logging.debug("Debug mode is on")
    load_dotenv()


def _options(
    config_path: Optional[str], overrides: Optional[dict[str, Any]] = None
) -> StylingOptions:
    """Load styling options, reporting problems as usage errors.

    Args:
        config_path: Configuration file given on the command line.
        overrides: Option values given on the command line.

    Returns:
        The resulting options.

    Throws:
        click.BadParameter: If the configuration is invalid.
    """

    try:
        return load_options(
            Path(config_path) if config_path else None, overrides
        )
    except ConfigError as exc:
        raise click.BadParameter(
            str(exc), param_hint=f"--config / {CONFIG_ENV_VAR}"
        ) from exc


config_option = click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, file_okay=True, dir_okay=False),
    default=None,
    help="YAML or JSON file with styling options.",
)


@cli.command("apply")
@click.argument(
    "input_path",
    type=click.Path(exists=True, dir_okay=False, allow_dash=True),
)
@click.option(
    "--output",
    "output_path",
    type=click.Path(file_okay=True, dir_okay=True),
    default=None,
    help="Write output to FILE or DIRECTORY instead of the console.",
)
@config_option
@click.option(
    "--open", "open_delimiter", default=None, help="Open delimiter."
)
@click.option(
    "--close", "close_delimiter", default=None, help="Close delimiter."
)
@click.option(
    "--explicit-style-wins/--faithful-style",
    default=None,
    help="Keep explicit style= tokens over accumulated declarations.",
)
def apply_command(
    input_path: str,
    output_path: Optional[str] = None,
    config_path: Optional[str] = None,
    open_delimiter: Optional[str] = None,
    close_delimiter: Optional[str] = None,
    explicit_style_wins: Optional[bool] = None,
) -> None:
    """Apply inline annotations found in an HTML file.

    Args:
        input_path: HTML file to read; ``-`` reads standard input.
        output_path: Optional file or directory for the styled markup.
            If a directory is provided, the input file name is reused.
        config_path: Optional configuration file.
        open_delimiter: Overrides the configured open delimiter.
        close_delimiter: Overrides the configured close delimiter.
        explicit_style_wins: Overrides the configured style precedence.
    """

    options = _options(
        config_path,
        {
            "open_delimiter": open_delimiter,
            "close_delimiter": close_delimiter,
            "explicit_style_wins": explicit_style_wins,
        },
    )

    if input_path == "-":
        html = click.get_text_stream("stdin").read()
    else:
        html = Path(input_path).read_text(encoding="utf-8")

    content = style_html(html, options)

    if not output_path:
        click.echo(content, nl=False)
        return

    final_path = Path(output_path)

    # If the provided path is a directory, build the file path inside it.
    if final_path.is_dir():
        if input_path == "-":
            raise click.UsageError(
                "Output file name is required when reading standard input."
            )
        final_path = final_path / Path(input_path).name

    final_path.write_text(content, encoding="utf-8")
    logging.info(f"Wrote styled markup to {final_path}")


@cli.command("parse")
@click.argument("annotation")
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["json", "yaml"]),
    default="json",
    help="Output format.",
)
@config_option
def parse_command(
    annotation: str,
    output_format: str = "json",
    config_path: Optional[str] = None,
) -> None:
    """Show how the annotation at the start of a text is parsed.

    Args:
        annotation: Text starting with an annotation.
        output_format: Format of the printed structure.
        config_path: Optional configuration file.
    """

    options = _options(config_path)

    match = match_annotation(annotation, options)
    if match is None:
        raise click.ClickException(
            "Text does not start with a terminated annotation."
        )

    data = parse_annotation(match.group(1), options).to_dict()
    if output_format == "json":
        click.echo(json_dumps(data, pretty=True))
    else:
        click.echo(yaml.safe_dump(data, allow_unicode=True, sort_keys=False))
