"""CLI commands: featurecss build / operations -- render feature-gated rules."""

from __future__ import annotations

import sys

import click

from featurecss.config import SelectorConfig
from featurecss.errors import FeatureSelectorError
from featurecss.selectors import OPERATIONS, Polarity
from featurecss.selectors import build as build_rule
from featurecss.stylesheet import Stylesheet


@click.command()
@click.argument("operation", type=click.Choice(sorted(OPERATIONS)))
@click.argument("features", nargs=-1)
@click.option(
    "-c",
    "--context",
    "contexts",
    multiple=True,
    help="Enclosing selector, e.g. '.my-selector'. Repeat for one rule per selector.",
)
@click.option("-b", "--body", default="", help="Declarations, e.g. 'opacity: 1; color: red'.")
@click.option("--negation-prefix", default="no-", show_default=True)
@click.option("--no-script-class", default="no-js", show_default=True)
def build(
    operation: str,
    features: tuple[str, ...],
    contexts: tuple[str, ...],
    body: str,
    negation_prefix: str,
    no_script_class: str,
) -> None:
    """Render OPERATION (yep, nope, any, neither) for FEATURES as CSS rules.

    One rule is emitted per --context. Exits with code 1 if a rule cannot be built.
    """
    config = SelectorConfig(
        negation_prefix=negation_prefix, no_script_class=no_script_class
    )
    polarity, disjunctive = OPERATIONS[operation]
    sheet = Stylesheet()
    try:
        for context in contexts or ("",):
            build_rule(
                context, polarity, disjunctive, features, body, config, operation, sheet
            )
    except FeatureSelectorError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)
    click.echo(sheet.to_css(config.indent))


@click.command()
def operations() -> None:
    """List the available operations."""
    for name, (polarity, disjunctive) in OPERATIONS.items():
        supported = "supported" if polarity is Polarity.SUPPORTED else "unsupported"
        mode = "any" if disjunctive else "all"
        fallback = " (or no script)" if polarity is Polarity.UNSUPPORTED else ""
        click.echo(f"{name:<8} {mode} features {supported}{fallback}")
