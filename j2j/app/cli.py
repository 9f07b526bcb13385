from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from typing import NoReturn

import click

from j2j import __version__
from j2j.config.options import DEFAULT_INDENT, DEFAULT_TIMEOUT, resolve_options
from j2j.config.source import read_source_file, read_source_stream
from j2j.core.pipeline import write
from j2j.errors import J2JError
from j2j.evaluators import evaluator_names

logger = logging.getLogger("j2j")

EXAMPLES = """\b
Examples:
  echo "{foo: 'bar'}" | j2j -i 0   Stringify JS object w/o indentation to STDOUT
  j2j "{foo: 'bar'}" -i 0          Equivalent to above
  j2j "{foo: 2+2}"                 Evaluate, stringify, indent & output to STDOUT
  j2j -f bar.js -o bar.json        Parse JS file & output to bar.json.  Good luck!
"""


def _fail(ctx: click.Context, message: str) -> NoReturn:
    click.secho(message, fg="red", bold=True, err=True)
    ctx.exit(1)


@click.command(context_settings={"help_option_names": ["-h", "--help"]}, epilog=EXAMPLES)
@click.argument("source", required=False)
@click.option("-f", "--file", "file", type=click.Path(exists=True, dir_okay=False, path_type=Path), help="Read file for input.")
@click.option("-o", "--output", type=click.Path(dir_okay=False, path_type=Path), default=None, help="Output file; if not specified, STDOUT is used.")
@click.option("-C", "--no-color", "no_color", is_flag=True, default=False, help="Do not output color.")
@click.option("-i", "--indent", type=click.IntRange(min=0), default=DEFAULT_INDENT, show_default=True, help="Indentation (0 for none).")
@click.option("-l", "--line-nos", "line_nos", is_flag=True, default=False, help="Display line numbers.")
@click.option("-t", "--timeout", type=click.FloatRange(min=0, min_open=True), default=DEFAULT_TIMEOUT, show_default=True, help="Seconds the evaluation may run.")
@click.option("--engine", type=click.Choice(evaluator_names()), default="quickjs", show_default=True, help="Evaluator backend.")
@click.option("--debug", is_flag=True, default=False, help="Debug mode.")
@click.version_option(__version__, "-v", "--version")
@click.pass_context
def main(
    ctx: click.Context,
    source: str | None,
    file: Path | None,
    output: Path | None,
    no_color: bool,
    indent: int,
    line_nos: bool,
    timeout: float,
    engine: str,
    debug: bool,
) -> None:
    """Convert JavaScript to JSON.

    SOURCE is a JavaScript expression; with neither SOURCE nor --file the
    expression is read from STDIN. Bare words are variable references, so
    quote them to get strings.
    """
    logging.basicConfig(level=logging.INFO, format="[%(levelname)s] %(message)s")
    logging.captureWarnings(True)

    if source is not None and file is not None:
        raise click.UsageError("SOURCE and --file are mutually exclusive.")

    try:
        if file is not None:
            text = read_source_file(file)
        elif source is not None:
            text = source
        else:
            text = read_source_stream(click.get_text_stream("stdin"))
    except (OSError, UnicodeDecodeError) as exc:
        _fail(ctx, f"cannot read input: {exc}")

    # colors are on in CLI mode unless asked otherwise
    opts = resolve_options(
        {
            "indent": indent,
            "colorize": not no_color,
            "line_numbers": line_nos,
            "debug": debug,
            "output": output,
            "engine": engine,
            "timeout": timeout,
        }
    )

    try:
        asyncio.run(write(text, opts))
    except J2JError as exc:
        _fail(ctx, str(exc))
    except OSError as exc:
        _fail(ctx, f"cannot write output: {exc}")


if __name__ == "__main__":
    main()
