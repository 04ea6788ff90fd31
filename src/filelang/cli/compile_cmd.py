"""Compile command: show what a pattern compiles to, optionally evaluate it."""

import json
from pathlib import Path

import click

from filelang.exchange import FileExchange
from filelang.expressions import ExpressionEvaluationError, FileLanguage
from filelang.expressions.dateformat import DateFormatError


@click.command("compile")
@click.argument("pattern")
@click.option(
    "--file",
    "file_path",
    default=None,
    type=click.Path(path_type=Path),
    help="Evaluate the compiled expression against this file.",
)
@click.option(
    "--header",
    "headers",
    multiple=True,
    metavar="KEY=VALUE",
    help="Message header for evaluation (repeatable).",
)
@click.option("--json", "as_json", is_flag=True, default=False, help="Print JSON.")
def compile_cmd(pattern: str, file_path: Path | None, headers: tuple[str, ...], as_json: bool):
    """Compile PATTERN and print the resulting expression."""
    result = FileLanguage().compile(pattern)

    if not result.ok:
        if as_json:
            click.echo(json.dumps(result.to_dict()))
        else:
            click.echo(click.style(str(result.error), fg="red"), err=True)
        raise SystemExit(1)

    output = result.to_dict()

    if file_path is not None:
        exchange = FileExchange(file=file_path, headers=_parse_headers(headers))
        try:
            output["value"] = result.unwrap().evaluate(exchange)
        except (ExpressionEvaluationError, DateFormatError) as e:
            click.echo(click.style(f"Evaluation failed: {e}", fg="red"), err=True)
            raise SystemExit(1)

    if as_json:
        click.echo(json.dumps(output, default=str))
        return

    click.echo(f"{output['type']}: {output['expression']}")
    if "value" in output:
        click.echo(f"  = {output['value']}")


def _parse_headers(headers: tuple[str, ...]) -> dict[str, str]:
    parsed: dict[str, str] = {}
    for item in headers:
        key, sep, value = item.partition("=")
        if not sep:
            raise click.BadParameter(f"Expected KEY=VALUE, got '{item}'", param_hint="--header")
        parsed[key] = value
    return parsed
