"""Rules CLI commands: validate and list rules files."""

from pathlib import Path

import click

from filelang.config import LanguageConfig
from filelang.rules import load_rules


def _resolve_rules_path(config: LanguageConfig, target_path: Path | None) -> Path:
    path = target_path or config.rules_path
    if not path.exists():
        click.echo(f"Error: Rules file not found at {path}", err=True)
        raise SystemExit(1)
    return path


@click.group()
def rules():
    """Rules file commands."""
    pass


@rules.command()
@click.option(
    "--strict",
    is_flag=True,
    default=False,
    help="Treat warnings as errors.",
)
@click.option(
    "--path",
    "target_path",
    default=None,
    type=click.Path(path_type=Path),
    help="Rules file to validate (default: FILELANG_RULES_PATH or ./rules.yaml).",
)
@click.pass_obj
def validate(config: LanguageConfig, strict: bool, target_path: Path | None):
    """Validate a rules file and compile every pattern in it."""
    path = _resolve_rules_path(config, target_path)
    rule_set = load_rules(path)

    for issue in rule_set.issues:
        colour = "red" if issue.severity == "error" else "yellow"
        click.echo(click.style(str(issue), fg=colour))

    errors = rule_set.errors
    warnings = rule_set.warnings

    if errors or (strict and warnings):
        click.echo(
            click.style(
                f"\n{len(errors)} error(s) found"
                + (f", {len(warnings)} warning(s)" if warnings else ""),
                fg="red",
                bold=True,
            )
        )
        raise SystemExit(1)

    if warnings:
        click.echo(click.style(f"{len(warnings)} warning(s) found.", fg="yellow"))

    click.echo(f"\nCompiled {len(rule_set.rules)} rule(s):")
    for name, rule in rule_set.rules.items():
        click.echo(f"  ✓ {name} ({type(rule.expression).__name__})")

    click.echo(click.style("\nAll rules are valid.", fg="green", bold=True))


@rules.command("list")
@click.option(
    "--path",
    "target_path",
    default=None,
    type=click.Path(path_type=Path),
    help="Rules file to list (default: FILELANG_RULES_PATH or ./rules.yaml).",
)
@click.pass_obj
def list_cmd(config: LanguageConfig, target_path: Path | None):
    """List the rules that compile, with their patterns."""
    path = _resolve_rules_path(config, target_path)
    rule_set = load_rules(path)

    if not rule_set.rules:
        click.echo("No rules.")
        return

    for name, rule in rule_set.rules.items():
        line = f"{name}: {rule.pattern}"
        if rule.description:
            line += f"  # {rule.description}"
        click.echo(line)
