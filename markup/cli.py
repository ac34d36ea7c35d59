"""markup-styles CLI: inspect and re-render style attributes of HTML documents."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Dict, Tuple

import click

from markup import __version__
from markup.attributes import MergeMode, default_merge_mode
from markup.config import RenderConfig
from markup.css import iter_declarations
from markup.dom import ElementNode
from markup.errors import MarkupError
from markup.html import parse_html
from markup.render import render as render_html

merge_option = click.option(
    "--merge",
    "merges",
    multiple=True,
    metavar="NAME=MODE",
    help="How repeated NAME attributes on one tag combine: append, replace or ignore.",
)


def parse_merge_options(merges: Tuple[str, ...]) -> Dict[str, MergeMode]:
    modes: Dict[str, MergeMode] = {}
    for item in merges:
        name, sep, mode = item.partition("=")
        if not sep or not name:
            raise click.BadParameter(f"expected NAME=MODE, got {item!r}", param_hint="--merge")
        name = name.strip().lower()
        modes[name] = MergeMode.parse(mode.strip(), default_merge_mode(name).separator)
    return modes


def _load(htmlfile: str, merges: Tuple[str, ...]) -> ElementNode:
    try:
        modes = parse_merge_options(merges)
    except MarkupError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)
    return parse_html(Path(htmlfile).read_text(encoding="utf-8"), modes)


@click.group()
@click.version_option(version=__version__, prog_name="markup-styles")
@click.option("-v", "--verbose", is_flag=True, help="Log parser and merge details.")
def cli(verbose: bool) -> None:
    """Inspect and re-render inline style attributes of HTML documents."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@cli.command()
@click.argument("htmlfile", type=click.Path(exists=True, dir_okay=False))
@merge_option
def inspect(htmlfile: str, merges: Tuple[str, ...]) -> None:
    """List the style declarations of every element, in document order."""
    dom = _load(htmlfile, merges)

    found = 0
    for el in dom.iter_elements():
        pairs = el.style_pairs()
        if pairs is None:
            continue
        found += 1
        click.echo(f"<{el.tag}>")
        for key, value in pairs:
            click.echo(f"  {key}: {value}")

    if not found:
        click.echo("No style attributes found.")


@cli.command()
@click.argument("htmlfile", type=click.Path(exists=True, dir_okay=False))
@merge_option
@click.option("--separator", default=";", show_default=True, help="Text placed between style declarations.")
@click.option("--keep-empty-style", is_flag=True, help='Keep style="" when no declarations survive.')
def render(htmlfile: str, merges: Tuple[str, ...], separator: str, keep_empty_style: bool) -> None:
    """Parse an HTML file and print it re-rendered."""
    dom = _load(htmlfile, merges)
    config = RenderConfig(style_separator=separator, drop_empty_style=not keep_empty_style)

    # the parser wraps everything in a synthetic <html> root
    click.echo("".join(render_html(child, config) for child in dom.children))


@cli.command()
@click.argument("declarations")
def pairs(declarations: str) -> None:
    """Print the key/value pairs of a CSS declaration string."""
    for key, value in iter_declarations(declarations):
        click.echo(f"{key}: {value}")