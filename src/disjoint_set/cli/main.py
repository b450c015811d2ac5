"""Disjoint set CLI entry point."""

from __future__ import annotations

import json
import logging
from typing import Annotated

import typer

from disjoint_set import ops
from disjoint_set.config import DisjointSetConfig, create_disjoint_set
from disjoint_set.core.base import DisjointSetLike

app = typer.Typer(
    name="dsu",
    help="Disjoint set - build equivalence classes from left=right pairs",
    no_args_is_help=True,
)

PairsArg = Annotated[
    list[str],
    typer.Argument(help="Equivalences as left=right, unioned in order"),
]
BackendOpt = Annotated[
    str,
    typer.Option("--backend", "-b", help="Representation: hash or assoc"),
]
JsonOpt = Annotated[
    bool,
    typer.Option("--json", "-j", help="Output as JSON"),
]


@app.callback()
def main(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable debug logging"),
    ] = False,
) -> None:
    """Disjoint set inspector."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")


def parse_pair(raw: str) -> tuple[str, str]:
    """Split ``left=right`` into its two elements."""
    left, sep, right = raw.partition("=")
    if not sep or not left or not right:
        raise typer.BadParameter(f"expected left=right, got '{raw}'")
    return left, right


def build(pairs: list[str], backend: str) -> DisjointSetLike:
    """Union the parsed pairs with the requested backend."""
    try:
        config = DisjointSetConfig(backend=backend)
    except ValueError as e:
        raise typer.BadParameter(str(e), param_hint="--backend") from None
    return create_disjoint_set([parse_pair(p) for p in pairs], config=config)


@app.command("parents")
def parents_cmd(
    pairs: PairsArg,
    backend: BackendOpt = "hash",
    as_json: JsonOpt = False,
) -> None:
    """Print the raw element -> parent mapping.

    Examples:
        dsu parents a=b b=c
        dsu parents x=y --json
    """
    dset = build(pairs, backend)
    if as_json:
        typer.echo(json.dumps(ops.to_dict(dset), indent=2))
        return
    for element, parent in ops.to_list(dset):
        typer.echo(f"{element} -> {parent}")


@app.command("classes")
def classes_cmd(
    pairs: PairsArg,
    backend: BackendOpt = "hash",
    as_json: JsonOpt = False,
) -> None:
    """Print every equivalence class keyed by its root.

    Examples:
        dsu classes a=b x=y b=y
    """
    classes = ops.groups(build(pairs, backend))
    if as_json:
        typer.echo(json.dumps({root: list(members) for root, members in classes.items()}, indent=2))
        return
    for root, members in classes.items():
        typer.secho(f"{root}", fg=typer.colors.CYAN, bold=True, nl=False)
        typer.echo(f": {', '.join(members)}")


@app.command("find")
def find_cmd(
    element: Annotated[str, typer.Argument(help="Element to resolve")],
    pairs: PairsArg,
    backend: BackendOpt = "hash",
    as_json: JsonOpt = False,
) -> None:
    """Print the root of ELEMENT's class.

    Exits with status 1 when ELEMENT does not occur in any pair.

    Examples:
        dsu find c a=b b=c
    """
    root = ops.find(element, build(pairs, backend))
    if as_json:
        typer.echo(json.dumps({"element": element, "root": root}))
    elif root is not None:
        typer.echo(root)
    else:
        typer.secho(f"Element not found: {element}", fg=typer.colors.RED, err=True)

    if root is None:
        raise typer.Exit(1)


if __name__ == "__main__":
    app()
