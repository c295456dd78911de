"""CLI entry point for flowchart-layout."""

import json
import logging
import sys

import click

from flowchart_layout.config import LayoutStyle
from flowchart_layout.errors import InvalidGraphError, LayoutError
from flowchart_layout.layout.engine import layout_with_groups
from flowchart_layout.types import Direction, Graph


def _parse_style(items: tuple[str, ...]) -> dict[str, str]:
    values: dict[str, str] = {}
    for item in items:
        key, sep, value = item.partition("=")
        if not sep or not key:
            raise click.BadParameter(f"expected KEY=VALUE, got '{item}'", param_hint="--style")
        values[key.strip()] = value.strip()
    return values


@click.command()
@click.argument("input", required=False, type=click.Path(exists=True))
@click.option("--direction", "-d", "direction", type=str, default=None, help="Override direction (TB, TD, BT, LR, RL)")
@click.option("--style", "-s", "style_items", multiple=True, help="Layout option as KEY=VALUE (repeatable)")
@click.option("--group-padding", "group_padding", type=float, default=0.0, help="Padding around group boxes")
@click.option("--output", "-o", "output", type=str, default=None, help="Write output to this file instead of stdout")
@click.option("--verbose", "-v", is_flag=True, help="Log pipeline phases to stderr")
def main(
    input: str | None,
    direction: str | None,
    style_items: tuple[str, ...],
    group_padding: float,
    output: str | None,
    verbose: bool,
) -> None:
    """Lay out a flowchart graph (JSON) and print node positions and edge routes as JSON."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s: %(name)s: %(message)s")

    if input:
        try:
            with open(input) as f:
                text = f.read()
        except OSError as e:
            click.echo(f"error: cannot read '{input}': {e}", err=True)
            sys.exit(1)
    else:
        text = sys.stdin.read()

    try:
        document = json.loads(text) if text.strip() else {}
    except json.JSONDecodeError as e:
        click.echo(f"error: invalid JSON: {e}", err=True)
        sys.exit(1)

    try:
        graph = Graph.from_dict(document)
        if direction is not None:
            graph.direction = Direction.parse(direction)
        style = LayoutStyle.from_mapping(_parse_style(style_items))
        groups = document.get("groups") or {}
        if not isinstance(groups, dict):
            raise InvalidGraphError("'groups' must map group names to lists of node ids")
        result = layout_with_groups(graph, groups, style, group_padding)
    except (LayoutError, ValueError) as e:
        click.echo(f"error: {e}", err=True)
        sys.exit(1)

    rendered = json.dumps(result.to_dict(), indent=2) + "\n"

    if output:
        try:
            with open(output, "w") as f:
                f.write(rendered)
        except OSError as e:
            click.echo(f"error: cannot write '{output}': {e}", err=True)
            sys.exit(1)
    else:
        click.echo(rendered, nl=False)


if __name__ == "__main__":
    main()
